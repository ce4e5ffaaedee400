"""
ContactBook - Data Models.

Person records are immutable values. Commands never edit a Person in place;
they build a new one from the old record plus one changed field and hand it
to the Model, which swaps it into the canonical list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime

from contactbook.config import DATETIME_FORMAT

_DATE_TIME_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")
_REMINDER_PATTERN = re.compile(r"^(\d+)\s+(day|hour|minute)s?$")

# Allowed offset range per unit, inclusive
_REMINDER_LIMITS = {
    "day": (1, 7),
    "hour": (1, 23),
    "minute": (1, 59),
}


def parse_date_time(value: str) -> datetime:
    """Parse a `yyyy-MM-dd HHmm` string. Raises ValueError on malformed input.

    Every field must be zero-padded and separated by a single space, so each
    instant has exactly one accepted spelling.
    """
    if not _DATE_TIME_PATTERN.fullmatch(value):
        raise ValueError(f"Date-time {value!r} is not in yyyy-MM-dd HHmm format")
    return datetime.strptime(value, DATETIME_FORMAT)


@dataclass(frozen=True)
class Schedule:
    """An appointment slot with optional free-text notes.

    Only the syntax of `date_time` is checked here. Whether the slot falls
    inside working hours is decided by the schedule command.
    """

    date_time: str    # e.g. "2026-10-19 1000"
    notes: str = ""

    def __post_init__(self) -> None:
        parse_date_time(self.date_time)

    def __str__(self) -> str:
        if self.notes:
            return f"{self.date_time} ({self.notes})"
        return self.date_time


@dataclass(frozen=True)
class Reminder:
    """A reminder that fires some offset before an appointment."""

    appointment_date_time: str
    reminder_time: str    # e.g. "1 day", "2 hours", "30 minutes"

    def __post_init__(self) -> None:
        parse_date_time(self.appointment_date_time)

        match = _REMINDER_PATTERN.match(self.reminder_time.strip())
        if match is None:
            raise ValueError(
                "Reminder time must look like '<N> days', '<N> hours' or '<N> minutes'"
            )
        amount, unit = int(match.group(1)), match.group(2)
        low, high = _REMINDER_LIMITS[unit]
        if not low <= amount <= high:
            raise ValueError(f"Reminder {unit}s must be between {low} and {high}")

    def __str__(self) -> str:
        return f"{self.reminder_time} before {self.appointment_date_time}"


@dataclass(frozen=True)
class Person:
    """A contact in the book. `name` is the key commands look people up by."""

    name: str
    phone: str
    email: str
    address: str
    tags: frozenset[str] = field(default_factory=frozenset)
    schedule: Schedule | None = None
    reminder: Reminder | None = None

    def with_schedule(self, schedule: Schedule) -> Person:
        """Return a copy of this person holding `schedule` instead of the current one."""
        return replace(self, schedule=schedule)

    def with_reminder(self, reminder: Reminder) -> Person:
        """Return a copy of this person holding `reminder` instead of the current one."""
        return replace(self, reminder=reminder)
