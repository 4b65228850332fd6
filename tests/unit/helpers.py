"""Test-only helpers for unit tests. Not part of the tassist API."""

from __future__ import annotations

from collections.abc import Iterable

from tassist.model.person import Person
from tassist.model.roster import Roster
from tassist.model.values import (
    ClassNumber,
    Email,
    Github,
    Name,
    Phone,
    Progress,
    Repository,
    StudentId,
    Tag,
)

DEFAULT_NAME = "Amy Bee"
DEFAULT_PHONE = "85355255"
DEFAULT_EMAIL = "amy@gmail.com"
DEFAULT_CLASS = "T01"
DEFAULT_STUDENT_ID = "A0000000B"
DEFAULT_GITHUB = "https://github.com/default"
DEFAULT_PROGRESS = "0"


class PersonBuilder:
    """Build ``Person`` fixtures with sensible defaults.

    Every ``with_*`` call returns the builder so calls chain.
    """

    def __init__(self, person: Person | None = None) -> None:
        """Start from ``person`` or from the default fixture values."""
        self._fields: dict[str, object]
        if person is not None:
            self._fields = dict(person)
            return
        self._fields = {
            "name": Name(DEFAULT_NAME),
            "phone": Phone(DEFAULT_PHONE),
            "email": Email(DEFAULT_EMAIL),
            "class_number": ClassNumber(DEFAULT_CLASS),
            "student_id": StudentId(DEFAULT_STUDENT_ID),
            "github": Github(DEFAULT_GITHUB),
            "repository": Repository(""),
            "tags": frozenset(),
            "progress": Progress(DEFAULT_PROGRESS),
        }

    def with_name(self, name: str) -> PersonBuilder:
        self._fields["name"] = Name(name)
        return self

    def with_phone(self, phone: str) -> PersonBuilder:
        self._fields["phone"] = Phone(phone)
        return self

    def with_email(self, email: str) -> PersonBuilder:
        self._fields["email"] = Email(email)
        return self

    def with_class(self, class_number: str) -> PersonBuilder:
        self._fields["class_number"] = ClassNumber(class_number)
        return self

    def with_student_id(self, student_id: str) -> PersonBuilder:
        self._fields["student_id"] = StudentId(student_id)
        return self

    def with_github(self, github: str) -> PersonBuilder:
        self._fields["github"] = Github(github)
        return self

    def with_repository(self, repository: str) -> PersonBuilder:
        self._fields["repository"] = Repository(repository)
        return self

    def with_tags(self, *tags: str) -> PersonBuilder:
        self._fields["tags"] = frozenset(Tag(tag) for tag in tags)
        return self

    def with_progress(self, progress: str) -> PersonBuilder:
        self._fields["progress"] = Progress(progress)
        return self

    def build(self) -> Person:
        return Person(**self._fields)


ALICE = (
    PersonBuilder()
    .with_name("Alice Pauline")
    .with_phone("94351253")
    .with_email("alice@example.com")
    .with_student_id("A1111111A")
    .with_github("https://github.com/alice")
    .with_tags("friends")
    .build()
)
BENSON = (
    PersonBuilder()
    .with_name("Benson Meier")
    .with_phone("98765432")
    .with_email("johnd@example.com")
    .with_class("T02")
    .with_student_id("A2222222B")
    .with_github("https://github.com/benson")
    .with_repository("https://github.com/benson/ip")
    .with_tags("owesMoney", "friends")
    .with_progress("40")
    .build()
)
CARL = (
    PersonBuilder()
    .with_name("Carl Kurz")
    .with_phone("95352563")
    .with_email("heinz@example.com")
    .with_student_id("A3333333C")
    .with_github("")
    .build()
)


def typical_persons() -> tuple[Person, ...]:
    return (ALICE, BENSON, CARL)


def build_roster(persons: Iterable[Person] | None = None) -> Roster:
    """Return a roster seeded with ``persons`` or the typical fixtures."""
    return Roster(typical_persons() if persons is None else persons)
