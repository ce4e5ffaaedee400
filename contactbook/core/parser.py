"""
ContactBook - Command Parser.

Turns one line of user text into a typed Command. Parsing is purely
syntactic: a ParseError means the text itself is malformed. Business rules
(working hours, double booking, who exists) are checked later by
`Command.execute`.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from contactbook.core.commands import Command, ListCommand, ReminderCommand, ScheduleCommand
from contactbook.core.errors import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_DATE_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    ParseError,
)
from contactbook.core.tokenizer import PREFIX_DATE, PREFIX_NOTE, PREFIX_REMINDER, tokenize
from contactbook.data.models import Schedule

logger = logging.getLogger(__name__)

MESSAGE_HELP = "Available commands: schedule, remind, list"


def parse_schedule_command(args: str) -> ScheduleCommand:
    """Parse the arguments of a `schedule` command.

    Raises ParseError when the name or date is missing, or when the date
    cannot be read as yyyy-MM-dd HHmm.
    """
    arg_multimap = tokenize(args, PREFIX_DATE, PREFIX_NOTE)
    name = arg_multimap.get_preamble()
    date_time = arg_multimap.get_value(PREFIX_DATE)

    if not name or date_time is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % ScheduleCommand.MESSAGE_USAGE)

    notes = arg_multimap.get_value(PREFIX_NOTE) or ""
    try:
        schedule = Schedule(date_time, notes)
    except ValueError as exc:
        logger.debug("Unparseable schedule date '%s': %s", date_time, exc)
        raise ParseError(MESSAGE_INVALID_DATE_FORMAT) from exc

    return ScheduleCommand(name=name, schedule=schedule)


def parse_reminder_command(args: str) -> ReminderCommand:
    """Parse the arguments of a `remind` command.

    Absent fields default to "". Only an unreadable appointment date is an
    error here; the reminder offset is checked when the command runs.
    """
    arg_multimap = tokenize(args, PREFIX_DATE, PREFIX_REMINDER)
    name = arg_multimap.get_preamble()
    appointment_date = arg_multimap.get_value(PREFIX_DATE) or ""
    reminder_time = arg_multimap.get_value(PREFIX_REMINDER) or ""

    try:
        return ReminderCommand(
            name=name,
            appointment_date=appointment_date,
            reminder_time=reminder_time,
        )
    except ValidationError as exc:
        logger.debug("Unparseable appointment date '%s': %s", appointment_date, exc)
        raise ParseError(MESSAGE_INVALID_DATE_FORMAT) from exc


def parse_command(user_input: str) -> Command:
    """Split off the command word and dispatch to the matching parser."""
    stripped = user_input.strip()
    if not stripped:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_HELP)

    command_word, _, args = stripped.partition(" ")

    if command_word == ScheduleCommand.COMMAND_WORD:
        return parse_schedule_command(args)
    if command_word == ReminderCommand.COMMAND_WORD:
        return parse_reminder_command(args)
    if command_word == ListCommand.COMMAND_WORD:
        return ListCommand()

    logger.warning("Unknown command word: '%s'", command_word)
    raise ParseError(MESSAGE_UNKNOWN_COMMAND)
