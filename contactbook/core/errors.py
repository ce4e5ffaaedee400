"""Error hierarchy for parsing and executing commands.

ParseError is syntactic: the raw text could not be turned into a command.
CommandError subclasses are semantic: a well-formed command was rejected by
a business rule. Each carries the exact message shown to the user.
"""

from __future__ import annotations

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_DATE_FORMAT = "Invalid date format. Please use yyyy-MM-dd HHmm"


class ContactBookError(Exception):
    """Base class for every user-facing error raised by the application."""


class ParseError(ContactBookError):
    """Raised when user input does not conform to the expected format."""


class CommandError(ContactBookError):
    """Raised when a command fails a business rule during execution."""

    message = "Command failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class PersonNotFoundError(CommandError):
    message = "Person not found"


class InvalidTimeError(CommandError):
    # Missing space after "and" is the established user-visible text
    message = "Scheduled time must be a weekday andon the hour between 0900 and 1700"


class SlotTakenError(CommandError):
    message = "The selected time slot is already taken."


class NoMatchingAppointmentError(CommandError):
    message = "No appointment found for this person at the given date"


class InvalidReminderError(CommandError):
    message = "Invalid reminder"
