"""Handler for `progress`."""

from __future__ import annotations

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
from tassist.model.values import Progress

COMMAND_WORD = "progress"
USAGE = (
    f"{COMMAND_WORD}: Sets the progress (0 to 100) of the person identified "
    "by the STUDENTID or INDEX.\n"
    "Parameters: STUDENTID or INDEX pr/PROGRESS\n"
    f"Example: {COMMAND_WORD} 1 pr/75\n"
    f"or: {COMMAND_WORD} A0000000B pr/75"
)
MESSAGE_PROGRESS_SUCCESS = "Updated progress of Person: {person}"


class ProgressCommand(BaseModel):
    """Set the progress of one person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target
    progress: Progress

    def execute(self, model: RosterModel) -> CommandResult:
        person = resolve_target(model, self.target)
        edited = person.model_copy(update={"progress": self.progress})
        replace_person(model, person, edited)
        return CommandResult.ok(
            MESSAGE_PROGRESS_SUCCESS.format(person=format_person(edited)),
            code="progress_set",
            data={"person": person_payload(edited)},
        )


def parse(arguments: str) -> ProgressCommand:
    """Parse `progress` arguments.

    Raises:
        CommandParseError: If the target or progress is missing or invalid.
    """
    args = tokenize(arguments, (Prefix.PROGRESS,))
    require_preamble(args, USAGE)
    require_prefixes(args, USAGE, Prefix.PROGRESS)
    args.verify_no_duplicate_prefixes_for(Prefix.PROGRESS)
    progress = parse_value(Progress, args.get_value(Prefix.PROGRESS) or "")
    return ProgressCommand(
        target=parse_target(args.preamble, USAGE),
        progress=progress,
    )
