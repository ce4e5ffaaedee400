"""Shared test fixtures and configuration.

Pins environment variables before any contactbook import so settings are
predictable, and provides a small populated model.
"""

import os

# Patch env vars BEFORE any contactbook imports
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from contactbook.data.model_manager import ModelManager
from contactbook.data.models import Person, Schedule


@pytest.fixture
def alice():
    return Person(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
        tags=frozenset({"friends"}),
    )


@pytest.fixture
def bob():
    return Person(
        name="Bob Choo",
        phone="98765432",
        email="bob@example.com",
        address="Block 123, Bobby Street 3",
    )


@pytest.fixture
def carl():
    """A person who already holds the Monday 10:00 slot."""
    return Person(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
        schedule=Schedule("2026-10-19 1000", "follow-up"),
    )


@pytest.fixture
def model(alice, bob, carl):
    """A ModelManager holding alice, bob and carl, in that order."""
    return ModelManager([alice, bob, carl])
