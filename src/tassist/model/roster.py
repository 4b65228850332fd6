"""In-memory roster with a filtered view."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from tassist.model.person import Person

PersonPredicate = Callable[[Person], bool]


def SHOW_ALL_PERSONS(person: Person) -> bool:  # noqa: N802
    """Predicate that keeps every person."""
    del person
    return True


class RosterError(RuntimeError):
    """Base error for roster mutations."""


class DuplicatePersonError(RosterError):
    """Raised when a mutation would create two persons with one student id."""


class PersonNotFoundError(RosterError):
    """Raised when a mutation targets a person that is not on the roster."""


class NameContainsKeywordsPredicate(BaseModel):
    """Match persons whose name contains any keyword as a whole word."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {word.lower() for word in person.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


class RosterModel(Protocol):
    """Roster operations consumed by commands."""

    def persons(self) -> tuple[Person, ...]:
        """Return the full roster in insertion order."""

    def filtered_persons(self) -> tuple[Person, ...]:
        """Return the currently visible persons; display indices refer to this."""

    def has_person(self, person: Person) -> bool:
        """Return whether a person with the same student id exists."""

    def add_person(self, person: Person) -> None:
        """Append a new person."""

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``."""

    def delete_person(self, person: Person) -> None:
        """Remove ``person``."""

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Change the filtered view."""

    def clear(self) -> None:
        """Remove every person."""


class Roster:
    """List-backed ``RosterModel`` keeping student ids unique."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        """Create roster seeded with ``persons``.

        Args:
            persons: Initial persons, in display order.

        Raises:
            DuplicatePersonError: If two seeded persons share a student id.
        """
        self._persons: list[Person] = []
        self._predicate: PersonPredicate = SHOW_ALL_PERSONS
        for person in persons:
            self.add_person(person)

    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def filtered_persons(self) -> tuple[Person, ...]:
        return tuple(person for person in self._persons if self._predicate(person))

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(
                f"Student id {person.student_id} is already on the roster."
            )
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace one person, keeping its position.

        Args:
            target: Person currently on the roster.
            edited: Replacement person.

        Raises:
            PersonNotFoundError: If ``target`` is not on the roster.
            DuplicatePersonError: If ``edited`` collides with another person.
        """
        position = self._position_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(
                f"Student id {edited.student_id} is already on the roster."
            )
        self._persons[position] = edited

    def delete_person(self, person: Person) -> None:
        del self._persons[self._position_of(person)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def clear(self) -> None:
        self._persons.clear()

    def _position_of(self, person: Person) -> int:
        for position, existing in enumerate(self._persons):
            if existing == person:
                return position
        raise PersonNotFoundError(f"Person {person.student_id} is not on the roster.")
