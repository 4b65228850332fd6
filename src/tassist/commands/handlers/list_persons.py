"""Handlers for `list` and `find`."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from tassist.commands.messages import (
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    invalid_format,
    person_payload,
)
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.types import CommandResult
from tassist.model.person import Person
from tassist.model.roster import (
    SHOW_ALL_PERSONS,
    NameContainsKeywordsPredicate,
    RosterModel,
)

LIST_COMMAND_WORD = "list"
LIST_USAGE = f"{LIST_COMMAND_WORD}: Lists all persons in the address book."
MESSAGE_LIST_SUCCESS = "Listed all persons"

FIND_COMMAND_WORD = "find"
FIND_USAGE = (
    f"{FIND_COMMAND_WORD}: Finds all persons whose names contain any of "
    "the specified keywords (case-insensitive) and displays them as a list "
    "with index numbers.\n"
    "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
    f"Example: {FIND_COMMAND_WORD} alice bob charlie"
)


def _listing_payload(persons: Sequence[Person]) -> dict[str, object]:
    return {
        "persons": [
            {"index": position, **person_payload(person)}
            for position, person in enumerate(persons, start=1)
        ]
    }


class ListCommand(BaseModel):
    """Show every person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def execute(self, model: RosterModel) -> CommandResult:
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult.ok(
            MESSAGE_LIST_SUCCESS,
            code="persons_listed",
            data=_listing_payload(model.filtered_persons()),
        )


class FindCommand(BaseModel):
    """Filter the view to persons whose names match any keyword."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: RosterModel) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        shown = model.filtered_persons()
        return CommandResult.ok(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=len(shown)),
            code="persons_found",
            data=_listing_payload(shown),
        )


def parse_list(arguments: str) -> ListCommand:
    del arguments
    return ListCommand()


def parse_find(arguments: str) -> FindCommand:
    """Parse `find` keywords.

    Raises:
        CommandParseError: If no keyword is given.
    """
    keywords = tuple(arguments.split())
    if not keywords:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            invalid_format(FIND_USAGE),
        )
    return FindCommand(predicate=NameContainsKeywordsPredicate(keywords=keywords))
