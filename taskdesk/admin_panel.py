"""Administrator operations: creating tasks and accounts, browsing tasks and schedules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from taskdesk.task import Task
from taskdesk.users import Admin, User, UserRepository

_EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")

_WEIGHT_HOURS = 1.0
_WEIGHT_TASKS = 0.7
_WEIGHT_PRIORITY = 0.5

_PRIORITIES = {"Wysoki": 3, "Średni": 2, "Niski": 1}

DEADLINE_ASC = "Deadline ↑"
DEADLINE_DESC = "Deadline ↓"
PRIORITY_DESC = "Priorytet ↓"
PRIORITY_ASC = "Priorytet ↑"

NO_DESCRIPTION = "Brak opisu"
SCHEDULE_STEP = 3
SCHEDULE_DAYS = 3


class ValidationError(ValueError):
    """Raised when form input is rejected."""


@dataclass(frozen=True)
class TaskRow:
    """One row of the administrator's task table."""

    title: str
    employee: str
    deadline: str
    created: str
    priority: str
    ready: bool


def priority_value(priority: str) -> int:
    """Numeric weight of a priority name; unknown names weigh 0."""
    return _PRIORITIES.get(priority, 0)


def sort_task_list(tasks: Iterable[Task], sort_option: str) -> list[Task]:
    """Sort tasks by the chosen option, then move finished tasks after open ones."""
    result = list(tasks)
    if sort_option == DEADLINE_ASC:
        result.sort(key=lambda t: t.deadline)
    elif sort_option == DEADLINE_DESC:
        result.sort(key=lambda t: t.deadline, reverse=True)
    elif sort_option == PRIORITY_DESC:
        result.sort(key=lambda t: (-priority_value(t.priority), t.deadline))
    elif sort_option == PRIORITY_ASC:
        result.sort(key=lambda t: (priority_value(t.priority), t.deadline))
    result.sort(key=lambda t: t.status)
    return result


def _parse_iso_day(text: str) -> date:
    """Parse 'yyyy-MM-dd'; anything invalid sorts before every valid day."""
    if _ISO_DAY.fullmatch(text):
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    return date.min


def _reject_semicolons(values: Iterable[str]) -> None:
    if any(";" in value for value in values):
        raise ValidationError("Żadne pole nie może zawierać średnika (;).")


class AdminPanel:
    """The administrator's view of users, tasks and schedules."""

    def __init__(self, admin: Admin, repository: UserRepository | None = None) -> None:
        self.admin = admin
        self.repository = repository if repository is not None else admin.repository
        self.schedule_offset = 0

    def _users(self) -> Iterable[tuple[int, User]]:
        for user_id, aggregate in self.repository.users_map.items():
            if aggregate.user is not None:
                yield user_id, aggregate.user

    def employees(self) -> list[tuple[int, str]]:
        """(id, full name) of every employee, in id order."""
        return [
            (user_id, user.full_name)
            for user_id, user in sorted(self._users(), key=lambda pair: pair[0])
            if user.role == "employee"
        ]

    def suggest_assignee(self, deadline: date, today: date | None = None) -> int | None:
        """The employee with the most free hours and least load up to the deadline."""
        today = today or date.today()
        deadline_key = deadline.isoformat()
        days = [
            (today + timedelta(days=n)).isoformat()
            for n in range((deadline - today).days + 1)
        ]
        best_id: int | None = None
        best_score = float("-inf")
        for user_id, aggregate in sorted(self.repository.users_map.items()):
            if aggregate.user is None or aggregate.user.role != "employee":
                continue
            free_hours = sum(len(aggregate.schedule.get_availability(day)) for day in days)
            same_deadline = [t for t in aggregate.tasks if t.deadline == deadline_key]
            priority_sum = sum(priority_value(t.priority) for t in same_deadline)
            score = (
                _WEIGHT_HOURS * free_hours
                - _WEIGHT_TASKS * len(same_deadline)
                - _WEIGHT_PRIORITY * priority_sum
            )
            if score > best_score:
                best_score = score
                best_id = user_id
        return best_id

    def save_task(
        self,
        title: str,
        description: str,
        deadline: date,
        priority: str,
        assigned_user_id: int,
    ) -> Task:
        """Validate the form and create the task for the chosen user."""
        if not title:
            raise ValidationError("Nazwa zadania nie może być pusta.")
        _reject_semicolons((title, description))
        return self.admin.new_task(
            assigned_user_id, title, description, deadline.isoformat(), priority
        )

    def add_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        login: str,
        password: str,
        role: str,
    ) -> int:
        """Validate the form and create an account; returns the new user's id."""
        fields = (first_name, last_name, email, login, password)
        if not all(fields):
            raise ValidationError("Proszę uzupełnić wszystkie pola")
        if not _EMAIL.fullmatch(email):
            raise ValidationError("Podaj poprawny adres e-mail.")
        _reject_semicolons(fields)
        return self.admin.new_user(
            login, User.hash_password(password), role, first_name, last_name, email
        )

    def search_tasks(self, pattern: str = "", sort_option: str = "") -> list[TaskRow]:
        """Tasks of all users matching a case-insensitive regex, open ones first."""
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise ValidationError(f"Niepoprawne wyrażenie: {exc}") from exc
        rows = []
        for _, user in sorted(self._users(), key=lambda pair: pair[0]):
            aggregate = self.repository.users_map[user.user_id] if user.user_id in self.repository.users_map else None
            tasks = aggregate.tasks if aggregate is not None and aggregate.user is user else []
            if not tasks:
                tasks = next(
                    agg.tasks for agg in self.repository.users_map.values() if agg.user is user
                )
            for task in tasks:
                line = ";".join(
                    (task.title, user.full_name, task.deadline, task.created_date, task.priority)
                )
                if not pattern or regex.search(line):
                    rows.append(
                        TaskRow(
                            task.title,
                            user.full_name,
                            task.deadline,
                            task.created_date,
                            task.priority,
                            task.status,
                        )
                    )
        if sort_option == DEADLINE_ASC:
            rows.sort(key=lambda r: _parse_iso_day(r.deadline))
        elif sort_option == DEADLINE_DESC:
            rows.sort(key=lambda r: _parse_iso_day(r.deadline), reverse=True)
        elif sort_option == PRIORITY_DESC:
            rows.sort(key=lambda r: priority_value(r.priority), reverse=True)
        elif sort_option == PRIORITY_ASC:
            rows.sort(key=lambda r: priority_value(r.priority))
        rows.sort(key=lambda r: r.ready)
        return rows

    def task_description(self, title: str, employee_name: str) -> str:
        """Description of the named employee's task with this title."""
        for aggregate in self.repository.users_map.values():
            if aggregate.user is None or aggregate.user.full_name != employee_name:
                continue
            for task in aggregate.tasks:
                if task.title == title:
                    return task.description
        return NO_DESCRIPTION

    def prev_days(self) -> int:
        """Move the schedule view back, no further than six days before today."""
        if self.schedule_offset >= -SCHEDULE_STEP:
            self.schedule_offset -= SCHEDULE_STEP
        return self.schedule_offset

    def next_days(self) -> int:
        """Move the schedule view forward."""
        self.schedule_offset += SCHEDULE_STEP
        return self.schedule_offset

    def schedule_days(
        self, user_id: int, today: date | None = None
    ) -> list[tuple[date, list[int]]]:
        """The visible days with the user's available hours; empty for an unknown user."""
        aggregate = self.repository.get_user_aggregate(user_id)
        if aggregate is None:
            return []
        today = today or date.today()
        days = [
            today + timedelta(days=self.schedule_offset + n) for n in range(SCHEDULE_DAYS)
        ]
        return [(day, aggregate.schedule.get_availability(day.isoformat())) for day in days]