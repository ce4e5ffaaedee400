"""Model port: abstract interface over the canonical person collection.

Commands depend on this protocol, never on a specific implementation.
"""

from __future__ import annotations

from typing import Callable, Protocol

from contactbook.core.errors import ContactBookError
from contactbook.data.models import Person

PersonPredicate = Callable[[Person], bool]


def PREDICATE_SHOW_ALL_PERSONS(person: Person) -> bool:
    """Filter predicate that keeps every person."""
    return True


class DuplicatePersonError(ContactBookError):
    """Raised when adding a person whose name is already in the book."""


class PersonNotInModelError(ContactBookError):
    """Raised when replacing a person record that is not in the book."""


class Model(Protocol):
    """Owning abstraction over the person list and its current filtered view."""

    def get_person_list(self) -> list[Person]: ...

    def get_filtered_person_list(self) -> list[Person]: ...

    def find_person_index(self, name: str) -> int | None: ...

    def set_person(self, target: Person, edited_person: Person) -> None: ...

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None: ...
