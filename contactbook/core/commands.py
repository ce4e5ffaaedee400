"""
ContactBook - Commands.

Each command is a typed request produced by the parser. `execute(model)`
checks the command's business rules against the model's current state and,
only if every check passes, performs exactly one replace on the model and
resets the view to show all persons.

Failures are raised as CommandError subclasses before anything is mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from contactbook.config import WORKDAY_END_HOUR, WORKDAY_START_HOUR
from contactbook.core.errors import (
    InvalidReminderError,
    InvalidTimeError,
    NoMatchingAppointmentError,
    PersonNotFoundError,
    SlotTakenError,
)
from contactbook.core.slot_checker import is_slot_taken, is_valid_slot
from contactbook.data.models import Person, Reminder, Schedule, parse_date_time
from contactbook.ports.model_port import PREDICATE_SHOW_ALL_PERSONS, Model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a successful command."""

    feedback: str


def _find_person(model: Model, name: str) -> Person:
    """Return the first person in the filtered view named exactly `name`."""
    index = model.find_person_index(name)
    if index is None:
        logger.info("No person named '%s' in the current view", name)
        raise PersonNotFoundError()
    return model.get_filtered_person_list()[index]


class Command(BaseModel):
    """Base class for executable commands. Equality is structural."""

    model_config = ConfigDict(frozen=True)

    COMMAND_WORD: ClassVar[str] = ""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


class ScheduleCommand(Command):
    """Book an appointment slot for a person.

    The slot must be on the hour, on a weekday, within working hours, and not
    already held by anyone in the book.

    Example:
        schedule Alice Tan d/2026-10-19 1000 note/annual checkup
    """

    COMMAND_WORD: ClassVar[str] = "schedule"
    MESSAGE_USAGE: ClassVar[str] = (
        "schedule: Schedules an appointment for the person with the given name.\n"
        "Parameters: NAME d/yyyy-MM-dd HHmm [note/NOTE]\n"
        "Example: schedule Alice Tan d/2026-10-19 1000 note/annual checkup"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Scheduled %s for %s"

    name: str
    schedule: Schedule

    def execute(self, model: Model) -> CommandResult:
        person = _find_person(model, self.name)
        date_time = self.schedule.date_time

        if not is_valid_slot(
            date_time, WORKDAY_START_HOUR, WORKDAY_END_HOUR,
        ):
            logger.info("Rejected schedule for '%s': %s is outside working hours", self.name, date_time)
            raise InvalidTimeError()

        # Conflicts are checked against everyone, not just the filtered view
        if is_slot_taken(model.get_person_list(), date_time):
            logger.info("Rejected schedule for '%s': %s is taken", self.name, date_time)
            raise SlotTakenError()

        model.set_person(person, person.with_schedule(self.schedule))
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.info("Scheduled '%s' at %s", self.name, date_time)
        return CommandResult(self.MESSAGE_SUCCESS % (self.schedule, self.name))


class ReminderCommand(Command):
    """Attach a reminder to a person's existing appointment.

    Example:
        remind Alice Tan d/2026-10-19 1000 r/1 day
    """

    COMMAND_WORD: ClassVar[str] = "remind"
    MESSAGE_USAGE: ClassVar[str] = (
        "remind: Sets a reminder before the appointment of the person with the given name.\n"
        "Parameters: NAME d/yyyy-MM-dd HHmm r/REMINDER_TIME\n"
        "Example: remind Alice Tan d/2026-10-19 1000 r/1 day"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Reminder set for %s: %s"

    name: str
    appointment_date: str
    reminder_time: str

    @field_validator("appointment_date")
    @classmethod
    def check_appointment_date(cls, v: str) -> str:
        parse_date_time(v)
        return v

    def execute(self, model: Model) -> CommandResult:
        person = _find_person(model, self.name)

        if person.schedule is None or person.schedule.date_time != self.appointment_date:
            logger.info(
                "Rejected reminder for '%s': no appointment at %s", self.name, self.appointment_date,
            )
            raise NoMatchingAppointmentError()

        try:
            reminder = Reminder(self.appointment_date, self.reminder_time)
        except ValueError as exc:
            raise InvalidReminderError(str(exc)) from exc

        model.set_person(person, person.with_reminder(reminder))
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.info("Reminder set for '%s': %s", self.name, reminder)
        return CommandResult(self.MESSAGE_SUCCESS % (self.name, reminder))


class ListCommand(Command):
    """Show every person in the book."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)
