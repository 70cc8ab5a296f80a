"""A single task assigned to a user, with its semicolon-separated text form."""

from __future__ import annotations

from dataclasses import dataclass

_FIELD_COUNT = 7


@dataclass
class Task:
    """A task with a deadline, an owner, a creation stamp, a done flag and a priority."""

    title: str
    description: str
    deadline: str
    assigned_to: str
    created_date: str
    status: bool
    priority: str

    @classmethod
    def from_string(cls, line: str) -> "Task":
        """Parse a line of seven ';'-separated fields; missing fields become empty."""
        fields = line.split(";")[:_FIELD_COUNT]
        fields += [""] * (_FIELD_COUNT - len(fields))
        title, description, deadline, assigned_to, created_date, status, priority = fields
        return cls(
            title=title,
            description=description,
            deadline=deadline,
            assigned_to=assigned_to,
            created_date=created_date,
            status=status == "1",
            priority=priority,
        )

    def to_string(self) -> str:
        """Render the task as one ';'-separated line."""
        return ";".join(
            (
                self.title,
                self.description,
                self.deadline,
                self.assigned_to,
                self.created_date,
                "1" if self.status else "0",
                self.priority,
            )
        )