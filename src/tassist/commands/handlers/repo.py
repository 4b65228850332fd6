"""Handler for `repo`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.handlers._roster_support import replace_person
from tassist.commands.messages import format_person, invalid_format, person_payload
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.parsing import parse_target, require_prefixes
from tassist.commands.syntax import Prefix
from tassist.commands.targets import Target, resolve_target
from tassist.commands.tokenizer import tokenize
from tassist.commands.types import CommandResult
from tassist.model.roster import RosterModel
from tassist.model.values import (
    GITHUB_USERNAME_REGEX,
    REPOSITORY_NAME_REGEX,
    Repository,
)

COMMAND_WORD = "repo"
USAGE = (
    f"{COMMAND_WORD}: Records the GitHub repository of the person identified "
    "by the STUDENTID or INDEX. Any existing repository will be overwritten.\n"
    "Parameters: STUDENTID or INDEX u/USERNAME r/REPOSITORY_NAME\n"
    f"Example: {COMMAND_WORD} 1 u/tammzz r/ip\n"
    f"or: {COMMAND_WORD} A0000000B u/tammzz r/ip"
)
MESSAGE_REPO_SUCCESS = "Added repository {repository} to Person: {person}"
MESSAGE_NO_INDEX_STUDENTID = (
    "Please provide the INDEX or STUDENTID of the person before u/ and r/."
)
MESSAGE_INVALID_USERNAME = (
    "Invalid GitHub username! Usernames may only contain alphanumeric "
    "characters or single hyphens, cannot begin or end with a hyphen, "
    "and are at most 39 characters long."
)
MESSAGE_INVALID_REPOSITORY_NAME = (
    "Invalid repository name! Repository names may only contain alphanumeric "
    "characters, hyphens, underscores and periods."
)


class RepoCommand(BaseModel):
    """Record the repository a person works in."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Target
    repository: Repository

    def execute(self, model: RosterModel) -> CommandResult:
        """Replace the target's repository URL, keeping every other field.

        Args:
            model: Roster to mutate.

        Returns:
            Success envelope naming the repository and person.
        """
        person = resolve_target(model, self.target)
        edited = person.model_copy(update={"repository": self.repository})
        replace_person(model, person, edited)
        return CommandResult.ok(
            MESSAGE_REPO_SUCCESS.format(
                repository=self.repository,
                person=format_person(edited),
            ),
            code="repository_set",
            data={"person": person_payload(edited)},
        )


def parse(arguments: str) -> RepoCommand:
    """Parse `repo` arguments.

    Args:
        arguments: Text after the command word.

    Returns:
        Parsed command.

    Raises:
        CommandParseError: If the target, username or repository name is
            missing or invalid.
    """
    args = tokenize(arguments, (Prefix.USERNAME, Prefix.REPOSITORY_NAME))
    require_prefixes(args, USAGE, Prefix.USERNAME, Prefix.REPOSITORY_NAME)
    args.verify_no_duplicate_prefixes_for(Prefix.USERNAME, Prefix.REPOSITORY_NAME)
    if not args.preamble.strip():
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            MESSAGE_NO_INDEX_STUDENTID,
        )

    username = args.get_value(Prefix.USERNAME) or ""
    repository_name = args.get_value(Prefix.REPOSITORY_NAME) or ""
    if GITHUB_USERNAME_REGEX.fullmatch(username) is None:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            invalid_format(MESSAGE_INVALID_USERNAME),
        )
    if REPOSITORY_NAME_REGEX.fullmatch(repository_name) is None:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            invalid_format(MESSAGE_INVALID_REPOSITORY_NAME),
        )
    return RepoCommand(
        target=parse_target(args.preamble, USAGE),
        repository=Repository.for_repository(username, repository_name),
    )
