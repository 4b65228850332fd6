"""Handler for `open`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.parsing import parse_target
from tassist.commands.targets import Target, resolve_target
from tassist.commands.types import (
    CommandExecutionError,
    CommandResult,
    ExecutionErrorCode,
)
from tassist.model.roster import RosterModel

COMMAND_WORD = "open"
USAGE = (
    f"{COMMAND_WORD}: Opens the GitHub repository of the person identified by "
    "the STUDENTID or the index number used in the displayed person list "
    "in your browser.\n"
    "Parameters: STUDENTID or INDEX (must be a positive integer)\n"
    f"Example: {COMMAND_WORD} 1"
)
MESSAGE_OPEN_SUCCESS = "Opened repository of {name}: {url}"
MESSAGE_NO_REPOSITORY = (
    "{name} has no repository yet. Record one with `repo` first."
)


class OpenCommand(BaseModel):
    """Ask the caller to open one person's repository in a browser.

    The roster is never changed; the URL travels back in the result.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target

    def execute(self, model: RosterModel) -> CommandResult:
        """Look up the repository URL of the target.

        Args:
            model: Roster to read.

        Returns:
            Success envelope carrying ``open_url``.

        Raises:
            CommandExecutionError: If the target has no repository.
        """
        person = resolve_target(model, self.target)
        if person.repository.is_empty:
            raise CommandExecutionError(
                ExecutionErrorCode.NO_REPOSITORY,
                MESSAGE_NO_REPOSITORY.format(name=person.name),
                data={"student_id": person.student_id.value},
            )
        url = person.repository.value
        return CommandResult.ok(
            MESSAGE_OPEN_SUCCESS.format(name=person.name, url=url),
            code="repository_opened",
            data={"student_id": person.student_id.value, "url": url},
            open_url=url,
        )


def parse(arguments: str) -> OpenCommand:
    return OpenCommand(target=parse_target(arguments, USAGE))
