"""Users, their roles, and the in-memory repository of users with their tasks and schedules."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from taskdesk.schedule import Schedule
from taskdesk.task import Task


class LoginTakenError(ValueError):
    """Raised when a new user's login is already in use."""


class User:
    """An account with a login, a hashed password and a role."""

    def __init__(
        self,
        user_id: int,
        login: str,
        password: str,
        role: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> None:
        self.user_id = user_id
        self.login = login
        self.password = password
        self.role = role
        self.first_name = first_name
        self.last_name = last_name
        self.email = email

    def __repr__(self) -> str:
        return f"{type(self).__name__}(user_id={self.user_id!r}, login={self.login!r}, role={self.role!r})"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @staticmethod
    def hash_password(password: str) -> str:
        """Hex SHA-256 digest of the UTF-8 password."""
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    def log(self, login: str, password: str) -> bool:
        """Whether login and plain-text password match this account."""
        return self.login == login and self.password == self.hash_password(password)

    def window_title(self) -> str:
        return "Okno logowania"


@dataclass
class UserAggregate:
    """A user together with their tasks and schedule."""

    user: User | None = None
    tasks: list[Task] = field(default_factory=list)
    schedule: Schedule = field(default_factory=lambda: Schedule(0))


@dataclass
class UserRepository:
    """All user aggregates, keyed by user id."""

    users_map: dict[int, UserAggregate] = field(default_factory=dict)

    def get_user_aggregate(self, user_id: int) -> UserAggregate | None:
        return self.users_map.get(user_id)

    def get_user_tasks(self, user_id: int) -> list[Task] | None:
        aggregate = self.users_map.get(user_id)
        return aggregate.tasks if aggregate else None

    def get_user_schedule(self, user_id: int) -> Schedule | None:
        aggregate = self.users_map.get(user_id)
        return aggregate.schedule if aggregate else None

    def find_user_id_by_login(self, login: str) -> int | None:
        return next(
            (
                user_id
                for user_id, aggregate in self.users_map.items()
                if aggregate.user is not None and aggregate.user.login == login
            ),
            None,
        )

    def get_user_by_id(self, user_id: int) -> User | None:
        aggregate = self.users_map.get(user_id)
        return aggregate.user if aggregate else None

    def update_user(self, user_id: int, aggregate: UserAggregate) -> None:
        self.users_map[user_id] = aggregate


class Admin(User):
    """A user who creates tasks and accounts."""

    def __init__(
        self,
        user_id: int,
        login: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        *,
        repository: UserRepository,
    ) -> None:
        super().__init__(user_id, login, password, "admin", first_name, last_name, email)
        self.repository = repository

    def new_task(
        self,
        assigned_user_id: int,
        title: str,
        description: str,
        deadline: str,
        priority: str,
    ) -> Task:
        """Create an open task for a user, stamped with the current time."""
        aggregate = self.repository.get_user_aggregate(assigned_user_id)
        if aggregate is None:
            raise KeyError(assigned_user_id)
        timestamp = datetime.now().replace(microsecond=0).isoformat()
        task = Task(title, description, deadline, str(assigned_user_id), timestamp, False, priority)
        aggregate.tasks.append(task)
        return task

    def new_user(
        self,
        login: str,
        hashed_password: str,
        role: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> int:
        """Add an account under the next free id and return that id."""
        users = self.repository.users_map
        if any(agg.user is not None and agg.user.login == login for agg in users.values()):
            raise LoginTakenError("Login jest juz zajety.")
        new_id = max([0, *users]) + 1
        user = User(new_id, login, hashed_password, role, first_name, last_name, email)
        users[new_id] = UserAggregate(user=user)
        return new_id

    def window_title(self) -> str:
        return f"Okno administratora: {self.first_name} {self.last_name}"


class Employee(User):
    """A user who completes tasks and declares availability."""

    def __init__(
        self,
        user_id: int,
        login: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        *,
        repository: UserRepository,
    ) -> None:
        super().__init__(user_id, login, password, "employee", first_name, last_name, email)
        self.repository = repository

    def change_task_status(self, timestamp: str, new_status: bool) -> None:
        """Set the status of this employee's first task created at timestamp."""
        tasks = self.repository.get_user_tasks(self.user_id)
        if tasks is None:
            return
        for task in tasks:
            if task.created_date == timestamp:
                task.status = new_status
                break

    def set_availability(self, day: str, hours: Iterable[int]) -> None:
        """Record the hours this employee is available on a day."""
        schedule = self.repository.get_user_schedule(self.user_id)
        if schedule is not None:
            schedule.set_availability(day, hours)

    def window_title(self) -> str:
        return f"Okno pracownika: {self.first_name} {self.last_name}"