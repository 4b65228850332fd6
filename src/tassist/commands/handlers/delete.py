"""Handler for `delete`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.messages import format_person, person_payload
from tassist.commands.parsing import parse_target
from tassist.commands.targets import Target, resolve_target
from tassist.commands.types import CommandResult
from tassist.model.roster import SHOW_ALL_PERSONS, RosterModel

COMMAND_WORD = "delete"
USAGE = (
    f"{COMMAND_WORD}: Deletes the person identified by the STUDENTID or "
    "the index number used in the displayed person list.\n"
    "Parameters: STUDENTID or INDEX (must be a positive integer)\n"
    f"Example: {COMMAND_WORD} 1\n"
    f"or: {COMMAND_WORD} A0000000B"
)
MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {person}"


class DeleteCommand(BaseModel):
    """Remove one person from the roster."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target

    def execute(self, model: RosterModel) -> CommandResult:
        person = resolve_target(model, self.target)
        model.delete_person(person)
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult.ok(
            MESSAGE_DELETE_PERSON_SUCCESS.format(person=format_person(person)),
            code="person_deleted",
            data={"person": person_payload(person)},
        )


def parse(arguments: str) -> DeleteCommand:
    return DeleteCommand(target=parse_target(arguments, USAGE))
