"""
ContactBook - Logic Manager.

Runs one line of user text end to end: parse, then execute against the
model. Errors propagate to the caller, which shows the message and
re-prompts.
"""

from __future__ import annotations

import logging

from contactbook.core.commands import CommandResult
from contactbook.core.parser import parse_command
from contactbook.ports.model_port import Model

logger = logging.getLogger(__name__)


class LogicManager:
    """Executes user commands against a single Model."""

    def __init__(self, model: Model) -> None:
        self._model = model

    def execute(self, command_text: str) -> CommandResult:
        logger.debug("Executing: %s", command_text)
        command = parse_command(command_text)
        result = command.execute(self._model)
        logger.debug("Result: %s", result.feedback)
        return result
