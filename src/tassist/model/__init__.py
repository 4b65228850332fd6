"""Student roster domain model."""

from tassist.model.person import Person
from tassist.model.roster import (
    SHOW_ALL_PERSONS,
    DuplicatePersonError,
    NameContainsKeywordsPredicate,
    PersonNotFoundError,
    PersonPredicate,
    Roster,
    RosterError,
    RosterModel,
)
from tassist.model.values import (
    ClassNumber,
    Email,
    FieldValue,
    Github,
    Name,
    Phone,
    Progress,
    Repository,
    StudentId,
    Tag,
)

__all__ = [
    "SHOW_ALL_PERSONS",
    "ClassNumber",
    "DuplicatePersonError",
    "Email",
    "FieldValue",
    "Github",
    "Name",
    "NameContainsKeywordsPredicate",
    "Person",
    "PersonNotFoundError",
    "PersonPredicate",
    "Phone",
    "Progress",
    "Repository",
    "Roster",
    "RosterError",
    "RosterModel",
    "StudentId",
    "Tag",
]
