"""Employee operations: browsing own tasks, marking them done, declaring availability."""

from __future__ import annotations

import re
from datetime import date, time, timedelta
from typing import Iterable, Sequence

from taskdesk.admin_panel import (
    NO_DESCRIPTION,
    SCHEDULE_DAYS,
    SCHEDULE_STEP,
    ValidationError,
    sort_task_list,
)
from taskdesk.task import Task
from taskdesk.users import Employee, UserRepository

HourLike = time | int


def sort_tasks(tasks: Iterable[Task], sort_option: str) -> list[Task]:
    """Sort tasks by the chosen option, then move finished tasks after open ones."""
    return sort_task_list(tasks, sort_option)


def _as_time(value: HourLike) -> time:
    return value if isinstance(value, time) else time(value)


class EmployeePanel:
    """An employee's view of their tasks and their three-day availability window."""

    def __init__(self, employee: Employee, repository: UserRepository | None = None) -> None:
        self.employee = employee
        self.repository = repository if repository is not None else employee.repository
        self.schedule_offset = 0

    def refresh_tasks(self, search_text: str = "", sort_option: str = "") -> list[Task]:
        """The employee's tasks whose title matches a case-insensitive regex, sorted."""
        try:
            regex = re.compile(search_text, re.IGNORECASE)
        except re.error as exc:
            raise ValidationError(f"Niepoprawne wyrażenie: {exc}") from exc
        tasks = self.repository.get_user_tasks(self.employee.user_id)
        if tasks is None:
            return []
        return sort_tasks((task for task in tasks if regex.search(task.title)), sort_option)

    def set_task_status(self, timestamp: str, status: bool) -> None:
        """Mark the employee's task created at timestamp as done or not done."""
        tasks = self.repository.get_user_tasks(self.employee.user_id)
        if tasks is None:
            return
        for task in tasks:
            if task.created_date == timestamp:
                task.status = status
                break

    def visible_days(self, today: date | None = None) -> list[date]:
        """The days currently shown in the schedule window."""
        today = today or date.today()
        return [
            today + timedelta(days=self.schedule_offset + n) for n in range(SCHEDULE_DAYS)
        ]

    def availability_ranges(self, today: date | None = None) -> list[tuple[date, int, int]]:
        """(day, first hour, last hour) for each visible day; (0, 0) when nothing is set."""
        schedule = self.repository.get_user_schedule(self.employee.user_id)
        if schedule is None:
            return []
        ranges = []
        for day in self.visible_days(today):
            hours = schedule.get_availability(day.isoformat())
            if hours:
                ranges.append((day, hours[0], hours[-1]))
            else:
                ranges.append((day, 0, 0))
        return ranges

    def save_schedule(
        self,
        ranges: Sequence[tuple[HourLike, HourLike]],
        today: date | None = None,
    ) -> list[tuple[date, int, int]]:
        """Store a from-to hour range for each visible day; empty or reversed ranges are skipped."""
        days = self.visible_days(today)
        if len(ranges) != len(days):
            raise ValueError(f"expected {len(days)} ranges, got {len(ranges)}")
        schedule = self.repository.get_user_schedule(self.employee.user_id)
        for day, (start, end) in zip(days, ranges):
            start_time, end_time = _as_time(start), _as_time(end)
            if start_time >= end_time or schedule is None:
                continue
            hours = range(start_time.hour, end_time.hour + 1)
            schedule.set_availability(day.isoformat(), hours)
        return self.availability_ranges(today)

    def prev_days(self) -> int:
        """Move the window back, never before today."""
        if self.schedule_offset >= SCHEDULE_STEP:
            self.schedule_offset -= SCHEDULE_STEP
        return self.schedule_offset

    def next_days(self) -> int:
        """Move the window forward."""
        self.schedule_offset += SCHEDULE_STEP
        return self.schedule_offset

    def task_description(self, title: str) -> str:
        """Description of the first task with this title."""
        for aggregate in self.repository.users_map.values():
            for task in aggregate.tasks:
                if task.title == title:
                    return task.description
        return NO_DESCRIPTION