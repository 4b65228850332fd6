"""Handler for `add`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.messages import (
    MESSAGE_DUPLICATE_PERSON,
    format_person,
    invalid_format,
    person_payload,
)
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.parsing import parse_tags, parse_value, require_prefixes
from tassist.commands.syntax import Prefix
from tassist.commands.tokenizer import tokenize
from tassist.commands.types import (
    CommandExecutionError,
    CommandResult,
    ExecutionErrorCode,
)
from tassist.model.person import Person
from tassist.model.roster import SHOW_ALL_PERSONS, RosterModel
from tassist.model.values import (
    ClassNumber,
    Email,
    Github,
    Name,
    Phone,
    Progress,
    StudentId,
)

COMMAND_WORD = "add"
USAGE = (
    f"{COMMAND_WORD}: Adds a person to the address book. "
    "Parameters: n/NAME p/PHONE e/EMAIL s/STUDENT_ID [c/CLASS] [g/GITHUB_URL] "
    "[t/TAG]... [pr/PROGRESS]\n"
    f"Example: {COMMAND_WORD} n/John Doe p/98765432 e/johnd@example.com "
    "s/A0123456B c/T01 t/friends t/owesMoney pr/20"
)
MESSAGE_SUCCESS = "New person added: {person}"

_PREFIXES = (
    Prefix.NAME,
    Prefix.PHONE,
    Prefix.EMAIL,
    Prefix.CLASS,
    Prefix.STUDENT_ID,
    Prefix.GITHUB,
    Prefix.TAG,
    Prefix.PROGRESS,
)


class AddCommand(BaseModel):
    """Add one new person to the roster."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    person: Person

    def execute(self, model: RosterModel) -> CommandResult:
        """Insert the person unless its student id is already taken.

        Uniqueness is checked against the full roster, not the filtered view.

        Args:
            model: Roster to mutate.

        Returns:
            Success envelope naming the added person.

        Raises:
            CommandExecutionError: If the student id is already on the roster.
        """
        if model.has_person(self.person):
            raise CommandExecutionError(
                ExecutionErrorCode.DUPLICATE_PERSON,
                MESSAGE_DUPLICATE_PERSON,
                data={"student_id": self.person.student_id.value},
            )
        model.add_person(self.person)
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult.ok(
            MESSAGE_SUCCESS.format(person=format_person(self.person)),
            code="person_added",
            data={"person": person_payload(self.person)},
        )


def parse(arguments: str) -> AddCommand:
    """Parse `add` arguments.

    Args:
        arguments: Text after the command word.

    Returns:
        Parsed command holding a fully built person.

    Raises:
        CommandParseError: If a required field is missing, repeated or invalid,
            or if text precedes the first prefix.
    """
    args = tokenize(arguments, _PREFIXES)
    require_prefixes(
        args,
        USAGE,
        Prefix.NAME,
        Prefix.PHONE,
        Prefix.STUDENT_ID,
        Prefix.EMAIL,
    )
    if args.preamble.strip():
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, invalid_format(USAGE))
    args.verify_no_duplicate_prefixes_for(
        Prefix.NAME,
        Prefix.PHONE,
        Prefix.EMAIL,
        Prefix.CLASS,
        Prefix.STUDENT_ID,
        Prefix.GITHUB,
        Prefix.PROGRESS,
    )
    person = Person(
        name=parse_value(Name, args.get_value(Prefix.NAME) or ""),
        phone=parse_value(Phone, args.get_value(Prefix.PHONE) or ""),
        email=parse_value(Email, args.get_value(Prefix.EMAIL) or ""),
        class_number=parse_value(
            ClassNumber,
            args.get_value(Prefix.CLASS) or ClassNumber.DEFAULT_CLASS,
        ),
        student_id=parse_value(StudentId, args.get_value(Prefix.STUDENT_ID) or ""),
        github=parse_value(Github, args.get_value(Prefix.GITHUB) or ""),
        tags=parse_tags(args.get_all_values(Prefix.TAG)),
        progress=parse_value(
            Progress,
            args.get_value(Prefix.PROGRESS) or Progress.DEFAULT_PROGRESS,
        ),
    )
    return AddCommand(person=person)
