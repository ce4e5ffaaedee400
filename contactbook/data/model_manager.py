"""
ContactBook - In-memory Model.

Owns the canonical person list and the predicate that defines the current
filtered view. Nothing is persisted; the list lives as long as the process.
"""

from __future__ import annotations

import logging
from typing import Iterable

from contactbook.data.models import Person
from contactbook.ports.model_port import (
    PREDICATE_SHOW_ALL_PERSONS,
    DuplicatePersonError,
    PersonNotInModelError,
    PersonPredicate,
)

logger = logging.getLogger(__name__)


class ModelManager:
    """In-memory implementation of the Model port."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        for person in persons:
            self.add_person(person)

    @property
    def filter_predicate(self) -> PersonPredicate:
        return self._predicate

    def has_person(self, name: str) -> bool:
        """Check whether a person with exactly this name is in the book."""
        return any(p.name == name for p in self._persons)

    def add_person(self, person: Person) -> None:
        """Append a person. Names must be unique within the book."""
        if self.has_person(person.name):
            raise DuplicatePersonError(f"Person already exists: {person.name}")
        self._persons.append(person)
        logger.debug("Person added: '%s'", person.name)

    def get_person_list(self) -> list[Person]:
        """Return a snapshot of the full canonical list."""
        return list(self._persons)

    def get_filtered_person_list(self) -> list[Person]:
        """Return the persons accepted by the current predicate, in list order."""
        return [p for p in self._persons if self._predicate(p)]

    def find_person_index(self, name: str) -> int | None:
        """Index in the filtered view of the first person named exactly `name`."""
        for i, person in enumerate(self.get_filtered_person_list()):
            if person.name == name:
                return i
        return None

    def set_person(self, target: Person, edited_person: Person) -> None:
        """Replace `target` (matched by full record equality) with `edited_person`."""
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotInModelError(f"Person not in book: {target.name}") from None

        if edited_person.name != target.name and self.has_person(edited_person.name):
            raise DuplicatePersonError(f"Person already exists: {edited_person.name}")

        self._persons[index] = edited_person
        logger.debug("Person replaced: '%s'", target.name)

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Set the predicate that defines the filtered view."""
        self._predicate = predicate
