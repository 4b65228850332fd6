"""Handler for `class`."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from tassist.commands.handlers._roster_support import replace_person
from tassist.commands.messages import format_person, person_payload
from tassist.commands.parsing import (
    parse_target,
    parse_value,
    require_preamble,
    require_prefixes,
)
from tassist.commands.syntax import Prefix
from tassist.commands.targets import Target, resolve_target
from tassist.commands.tokenizer import tokenize
from tassist.commands.types import CommandResult
from tassist.model.roster import RosterModel
from tassist.model.values import ClassNumber

COMMAND_WORD = "class"
USAGE = (
    f"{COMMAND_WORD}: Assigns the person identified by the STUDENTID or INDEX "
    "to a tutorial class. Any existing class will be overwritten.\n"
    "Parameters: STUDENTID or INDEX c/CLASS\n"
    f"Example: {COMMAND_WORD} 1 c/T02\n"
    f"or: {COMMAND_WORD} A0000000B c/T02"
)
MESSAGE_CLASS_SUCCESS = "Updated class of Person: {person}"
MESSAGE_INVALID_CLASS = (
    "Invalid class! A class is one uppercase letter followed by two digits, "
    "e.g. T01."
)

_LOGGER = logging.getLogger(__name__)


class ClassCommand(BaseModel):
    """Move one person to another tutorial class."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target
    class_number: ClassNumber

    def execute(self, model: RosterModel) -> CommandResult:
        """Replace the target's class, keeping every other field.

        Args:
            model: Roster to mutate.

        Returns:
            Success envelope naming the updated person.
        """
        person = resolve_target(model, self.target)
        edited = person.model_copy(update={"class_number": self.class_number})
        replace_person(model, person, edited)
        _LOGGER.debug(
            "class changed for %s: %s -> %s",
            person.student_id,
            person.class_number,
            self.class_number,
        )
        return CommandResult.ok(
            MESSAGE_CLASS_SUCCESS.format(person=format_person(edited)),
            code="class_set",
            data={"person": person_payload(edited)},
        )


def parse(arguments: str) -> ClassCommand:
    """Parse `class` arguments.

    Args:
        arguments: Text after the command word.

    Returns:
        Parsed command.

    Raises:
        CommandParseError: If the target or class is missing or invalid.
    """
    args = tokenize(arguments, (Prefix.CLASS,))
    require_preamble(args, USAGE)
    args.verify_no_duplicate_prefixes_for(Prefix.CLASS)
    require_prefixes(args, USAGE, Prefix.CLASS)
    class_number = parse_value(
        ClassNumber,
        args.get_value(Prefix.CLASS) or "",
        message=MESSAGE_INVALID_CLASS,
    )
    return ClassCommand(
        target=parse_target(args.preamble, USAGE),
        class_number=class_number,
    )
