"""Command registry mapping command words to parsers."""

from __future__ import annotations

from collections.abc import Callable

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
    session,
)
from tassist.commands.messages import MESSAGE_UNKNOWN_COMMAND
from tassist.commands.parser import (
    CommandCall,
    CommandParseError,
    ParseErrorCode,
    parse_command_line,
)
from tassist.commands.types import Command

CommandParser = Callable[[str], Command]


class CommandRegistry:
    """Deterministic command-word to parser registry."""

    def __init__(self, *, parsers: dict[str, CommandParser] | None = None) -> None:
        """Construct registry with built-in parsers plus optional overrides.

        Args:
            parsers: Optional custom parsers keyed by command word.
        """
        self._parsers: dict[str, CommandParser] = {
            add.COMMAND_WORD: add.parse,
            edit.COMMAND_WORD: edit.parse,
            delete.COMMAND_WORD: delete.parse,
            github.COMMAND_WORD: github.parse,
            repo.COMMAND_WORD: repo.parse,
            class_number.COMMAND_WORD: class_number.parse,
            progress.COMMAND_WORD: progress.parse,
            open_repository.COMMAND_WORD: open_repository.parse,
            list_persons.LIST_COMMAND_WORD: list_persons.parse_list,
            list_persons.FIND_COMMAND_WORD: list_persons.parse_find,
            session.CLEAR_COMMAND_WORD: session.parse_clear,
            session.HELP_COMMAND_WORD: session.parse_help,
            session.EXIT_COMMAND_WORD: session.parse_exit,
        }
        if parsers:
            self._parsers.update(parsers)

    @property
    def command_words(self) -> tuple[str, ...]:
        return tuple(sorted(self._parsers))

    def parse(self, text: str) -> Command:
        """Parse one raw input line into an executable command.

        Args:
            text: Raw user input line.

        Returns:
            Parsed command.

        Raises:
            CommandParseError: If the line is blank, the command word is
                unknown, or the arguments break the command's grammar.
        """
        call = parse_command_line(text, usage=session.HELP_USAGE)
        return self.parse_call(call)

    def parse_call(self, call: CommandCall) -> Command:
        """Dispatch a split command line to its exact-match parser.

        Args:
            call: Command word plus argument string.

        Returns:
            Parsed command.

        Raises:
            CommandParseError: If the command word is unknown or the
                arguments are invalid.
        """
        parser = self._parsers.get(call.word)
        if parser is None:
            raise CommandParseError(
                ParseErrorCode.UNKNOWN_COMMAND,
                MESSAGE_UNKNOWN_COMMAND,
                data={"command": call.word},
            )
        return parser(call.arguments)
