"""
ContactBook - Appointment Slot Checker.

Decides whether a date-time is a bookable slot (weekday, on the hour, inside
working hours) and whether someone in the book already holds it.
"""

from __future__ import annotations

import logging
from typing import Iterable

from contactbook.data.models import Person, parse_date_time

logger = logging.getLogger(__name__)

_SATURDAY = 5


def is_on_the_hour(date_time: str) -> bool:
    """True when the minute component is zero."""
    return parse_date_time(date_time).minute == 0


def is_within_working_hours(date_time: str, start_hour: int, end_hour: int) -> bool:
    """True on Monday to Friday with start_hour <= hour < end_hour."""
    dt = parse_date_time(date_time)
    is_weekday = dt.weekday() < _SATURDAY
    return is_weekday and start_hour <= dt.hour < end_hour


def is_valid_slot(date_time: str, start_hour: int = 9, end_hour: int = 17) -> bool:
    """Check every working-hour rule. Any single violation makes the slot invalid."""
    return is_on_the_hour(date_time) and is_within_working_hours(
        date_time, start_hour, end_hour,
    )


def find_slot_holder(persons: Iterable[Person], date_time: str) -> Person | None:
    """Return the first person whose schedule is exactly `date_time`, or None.

    Comparison is on the literal string. Schedules only accept the
    zero-padded spelling, so one instant has one string.
    """
    for person in persons:
        if person.schedule is not None and person.schedule.date_time == date_time:
            return person
    return None


def is_slot_taken(persons: Iterable[Person], date_time: str) -> bool:
    holder = find_slot_holder(persons, date_time)
    if holder is not None:
        logger.debug("Slot %s already held by '%s'", date_time, holder.name)
        return True
    return False
