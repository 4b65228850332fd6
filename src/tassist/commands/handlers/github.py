"""Handler for `github`."""

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
from tassist.model.values import Github

COMMAND_WORD = "github"
USAGE = (
    f"{COMMAND_WORD}: Edits the github of the person identified "
    "by the STUDENTID or INDEX. "
    "Existing github will be overwritten by the input.\n"
    "Parameters: STUDENTID or INDEX , g/[GITHUB_URL]\n"
    f"Example: {COMMAND_WORD} 2 g/https://github.com/tammzz\n"
    f"or: {COMMAND_WORD} AxxxxxxxB g/https://github.com/tammzz"
)
MESSAGE_ADD_GITHUB_SUCCESS = "Added github to Person: {person}"
MESSAGE_DELETE_GITHUB_SUCCESS = "Removed github from Person: {person}"
MESSAGE_INVALID_GITHUB = (
    "Invalid GitHub URL! The correct format is: https://github.com/{username}"
)


class GithubCommand(BaseModel):
    """Set or clear the GitHub profile of one person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target
    github: Github

    def execute(self, model: RosterModel) -> CommandResult:
        """Replace the target's GitHub profile, keeping every other field.

        Args:
            model: Roster to mutate.

        Returns:
            Success envelope; the message says whether GitHub was added or
            removed.
        """
        person = resolve_target(model, self.target)
        edited = person.model_copy(update={"github": self.github})
        replace_person(model, person, edited)
        if self.github.is_empty:
            template, code = MESSAGE_DELETE_GITHUB_SUCCESS, "github_removed"
        else:
            template, code = MESSAGE_ADD_GITHUB_SUCCESS, "github_added"
        return CommandResult.ok(
            template.format(person=format_person(edited)),
            code=code,
            data={"person": person_payload(edited)},
        )


def parse(arguments: str) -> GithubCommand:
    """Parse `github` arguments.

    Args:
        arguments: Text after the command word.

    Returns:
        Parsed command.

    Raises:
        CommandParseError: If the target or GitHub URL is missing or invalid.
    """
    args = tokenize(arguments, (Prefix.GITHUB,))
    require_preamble(args, USAGE)
    require_prefixes(args, USAGE, Prefix.GITHUB)
    args.verify_no_duplicate_prefixes_for(Prefix.GITHUB)
    github = parse_value(
        Github,
        args.get_value(Prefix.GITHUB) or "",
        message=MESSAGE_INVALID_GITHUB,
    )
    return GithubCommand(target=parse_target(args.preamble, USAGE), github=github)
