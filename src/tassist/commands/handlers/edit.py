"""Handler for `edit`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.handlers._roster_support import replace_person
from tassist.commands.messages import format_person, person_payload
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.parsing import (
    parse_tags,
    parse_target,
    parse_value,
    require_preamble,
)
from tassist.commands.syntax import PREFIX_FIELDS, Prefix
from tassist.commands.targets import Target, resolve_target
from tassist.commands.tokenizer import ParsedArguments, tokenize
from tassist.commands.types import CommandResult
from tassist.model.person import Person
from tassist.model.roster import RosterModel
from tassist.model.values import (
    ClassNumber,
    Email,
    FieldValue,
    Github,
    Name,
    Phone,
    Progress,
    StudentId,
    Tag,
)

COMMAND_WORD = "edit"
USAGE = (
    f"{COMMAND_WORD}: Edits the details of the person identified "
    "by the STUDENTID or the index number used in the displayed person list. "
    "Existing values will be overwritten by the input values.\n"
    "Parameters: STUDENTID or INDEX (must be a positive integer) "
    "[n/NAME] [p/PHONE] [e/EMAIL] [c/CLASS] [s/STUDENT_ID] [g/GITHUB_URL] "
    "[t/TAG]... [pr/PROGRESS]\n"
    f"Example: {COMMAND_WORD} 1 p/91234567 e/johndoe@example.com"
)
MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {person}"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

_SINGLE_VALUED: dict[Prefix, type[FieldValue]] = {
    Prefix.NAME: Name,
    Prefix.PHONE: Phone,
    Prefix.EMAIL: Email,
    Prefix.CLASS: ClassNumber,
    Prefix.STUDENT_ID: StudentId,
    Prefix.GITHUB: Github,
    Prefix.PROGRESS: Progress,
}


class EditPersonDescriptor(BaseModel):
    """Fields to overwrite on a person; unset fields stay unchanged."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    class_number: ClassNumber | None = None
    student_id: StudentId | None = None
    github: Github | None = None
    tags: frozenset[Tag] | None = None
    progress: Progress | None = None

    def is_any_field_edited(self) -> bool:
        return bool(self.model_dump(exclude_none=True))

    def apply(self, person: Person) -> Person:
        """Return ``person`` with every set field replaced."""
        updates = {
            field: getattr(self, field)
            for field in type(self).model_fields
            if getattr(self, field) is not None
        }
        return person.model_copy(update=updates)


class EditCommand(BaseModel):
    """Overwrite selected fields of one person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target
    descriptor: EditPersonDescriptor

    def execute(self, model: RosterModel) -> CommandResult:
        """Replace the target with its edited copy.

        Args:
            model: Roster to mutate.

        Returns:
            Success envelope naming the edited person.

        Raises:
            CommandExecutionError: If the target cannot be resolved or the new
                student id belongs to another person.
        """
        person = resolve_target(model, self.target)
        edited = self.descriptor.apply(person)
        replace_person(model, person, edited)
        return CommandResult.ok(
            MESSAGE_EDIT_PERSON_SUCCESS.format(person=format_person(edited)),
            code="person_edited",
            data={"person": person_payload(edited)},
        )


def parse(arguments: str) -> EditCommand:
    """Parse `edit` arguments.

    Args:
        arguments: Text after the command word.

    Returns:
        Parsed command.

    Raises:
        CommandParseError: If the target is invalid, no field is given, or a
            field is repeated or invalid.
    """
    args = tokenize(arguments, (*_SINGLE_VALUED, Prefix.TAG))
    require_preamble(args, USAGE)
    args.verify_no_duplicate_prefixes_for(*_SINGLE_VALUED)

    updates: dict[str, object] = {
        PREFIX_FIELDS[prefix]: parse_value(value_type, args.get_value(prefix) or "")
        for prefix, value_type in _SINGLE_VALUED.items()
        if args.has(prefix)
    }
    tags = _parse_tags_for_edit(args)
    if tags is not None:
        updates[PREFIX_FIELDS[Prefix.TAG]] = tags
    descriptor = EditPersonDescriptor(**updates)
    if not descriptor.is_any_field_edited():
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, MESSAGE_NOT_EDITED)
    return EditCommand(
        target=parse_target(args.preamble, USAGE),
        descriptor=descriptor,
    )


def _parse_tags_for_edit(args: ParsedArguments) -> frozenset[Tag] | None:
    """Parse tags, treating a single empty ``t/`` as "remove all tags".

    Returns:
        ``None`` when no tag prefix was given.
    """
    raw_tags = args.get_all_values(Prefix.TAG)
    if not raw_tags:
        return None
    if raw_tags == ("",):
        return frozenset()
    return parse_tags(raw_tags)
