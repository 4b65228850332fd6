"""Handlers for `clear`, `help` and `exit`."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tassist.commands.handlers import (
    add,
    class_number,
    delete,
    edit,
    github,
    list_persons,
    open_repository,
    progress,
    repo,
)
from tassist.commands.types import CommandResult
from tassist.model.roster import SHOW_ALL_PERSONS, RosterModel

CLEAR_COMMAND_WORD = "clear"
CLEAR_USAGE = f"{CLEAR_COMMAND_WORD}: Removes every person from the address book."
MESSAGE_CLEAR_SUCCESS = "Address book has been cleared!"

HELP_COMMAND_WORD = "help"
HELP_USAGE = f"{HELP_COMMAND_WORD}: Shows how to use every command."

EXIT_COMMAND_WORD = "exit"
EXIT_USAGE = f"{EXIT_COMMAND_WORD}: Exits the program."
MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting TAssist as requested ..."

COMMAND_USAGES: tuple[str, ...] = (
    add.USAGE,
    edit.USAGE,
    delete.USAGE,
    github.USAGE,
    repo.USAGE,
    class_number.USAGE,
    progress.USAGE,
    open_repository.USAGE,
    list_persons.LIST_USAGE,
    list_persons.FIND_USAGE,
    CLEAR_USAGE,
    HELP_USAGE,
    EXIT_USAGE,
)


class ClearCommand(BaseModel):
    """Remove every person."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def execute(self, model: RosterModel) -> CommandResult:
        model.clear()
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult.ok(MESSAGE_CLEAR_SUCCESS, code="roster_cleared")


class HelpCommand(BaseModel):
    """Show usage of every command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def execute(self, model: RosterModel) -> CommandResult:
        del model
        return CommandResult.ok(
            "\n\n".join(COMMAND_USAGES),
            code="help_shown",
        )


class ExitCommand(BaseModel):
    """Ask the interpreter to stop."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def execute(self, model: RosterModel) -> CommandResult:
        del model
        return CommandResult.ok(
            MESSAGE_EXIT_ACKNOWLEDGEMENT,
            code="exit_requested",
            should_exit=True,
        )


def parse_clear(arguments: str) -> ClearCommand:
    del arguments
    return ClearCommand()


def parse_help(arguments: str) -> HelpCommand:
    del arguments
    return HelpCommand()


def parse_exit(arguments: str) -> ExitCommand:
    del arguments
    return ExitCommand()
