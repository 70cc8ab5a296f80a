"""Per-day hour availability of a single user."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


def _leading_int(text: str) -> int:
    """Read the integer at the start of text, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _parse_day(text: str) -> date | None:
    if not _ISO_DAY.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Schedule:
    """Maps 'yyyy-MM-dd' day keys to the hours a user is available."""

    user_id: int = 0
    _availability: dict[str, list[int]] = field(default_factory=dict, repr=False)

    def set_availability(self, day: str, hours: Iterable[int]) -> None:
        """Replace the available hours for a day."""
        self._availability[day] = list(hours)

    def get_availability(self, day: str) -> list[int]:
        """Return the hours available on a day, or an empty list."""
        return list(self._availability.get(day, []))

    def all_availability(self) -> dict[str, list[int]]:
        """Return every day's hours, ordered by day key."""
        return {day: list(hours) for day, hours in sorted(self._availability.items())}

    @classmethod
    def from_file(cls, user_id: int, file_path: str | Path) -> "Schedule":
        """Load the lines 'id;day;h1,h2,...' belonging to user_id from a file.

        A missing file yields an empty schedule.
        """
        schedule = cls(user_id)
        try:
            text = Path(file_path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return schedule
        for line in text.splitlines():
            parts = line.split(";")
            parts += [""] * (3 - len(parts))
            id_text, day, hours_text = parts[:3]
            if _leading_int(id_text) != user_id:
                continue
            hours = [_leading_int(hour) for hour in hours_text.split(",") if hour]
            schedule.set_availability(day, hours)
        return schedule

    def clear_old_availability(self, days_to_keep: int, today: date | None = None) -> None:
        """Drop days dated more than days_to_keep days before today."""
        threshold = (today or date.today()) - timedelta(days=days_to_keep)
        stale = [
            day
            for day in self._availability
            if (parsed := _parse_day(day)) is not None and parsed < threshold
        ]
        for day in stale:
            del self._availability[day]