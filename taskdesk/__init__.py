"""Tasks, users, availability schedules and the administrator and employee operations on them."""

__version__ = "0.1.0"