"""Tests for LogicManager: parse and execute one line end to end."""

import pytest

from contactbook.core.errors import (
    InvalidTimeError,
    ParseError,
    PersonNotFoundError,
    SlotTakenError,
)
from contactbook.core.logic import LogicManager
from contactbook.data.model_manager import ModelManager
from contactbook.data.sample_data import get_sample_persons


@pytest.fixture
def logic(model):
    return LogicManager(model)


class TestLogicManager:
    def test_schedule_then_remind(self, logic, model):
        result = logic.execute("schedule Bob Choo d/2026-10-20 1400 note/review")
        assert result.feedback == "Scheduled 2026-10-20 1400 (review) for Bob Choo"

        result = logic.execute("remind Bob Choo d/2026-10-20 1400 r/1 day")
        assert result.feedback == "Reminder set for Bob Choo: 1 day before 2026-10-20 1400"

        bob = model.get_person_list()[1]
        assert bob.schedule.notes == "review"
        assert bob.reminder.reminder_time == "1 day"

    def test_parse_error_propagates(self, logic):
        with pytest.raises(ParseError):
            logic.execute("schedule Bob Choo d/tomorrow")

    def test_semantic_errors_propagate(self, logic):
        with pytest.raises(PersonNotFoundError):
            logic.execute("schedule Nobody d/2026-10-20 1400")
        with pytest.raises(InvalidTimeError):
            logic.execute("schedule Bob Choo d/2026-10-20 1430")
        with pytest.raises(SlotTakenError):
            logic.execute("schedule Bob Choo d/2026-10-19 1000")

    def test_conflicting_requests_in_sequence(self, logic, model):
        logic.execute("schedule Alice Pauline d/2026-10-21 0900")
        with pytest.raises(SlotTakenError):
            logic.execute("schedule Bob Choo d/2026-10-21 0900")
        holders = [p.name for p in model.get_person_list()
                   if p.schedule and p.schedule.date_time == "2026-10-21 0900"]
        assert holders == ["Alice Pauline"]

    def test_sample_data_book(self):
        logic = LogicManager(ModelManager(get_sample_persons()))
        result = logic.execute("schedule David Li d/2026-10-23 1600")
        assert result.feedback == "Scheduled 2026-10-23 1600 for David Li"
