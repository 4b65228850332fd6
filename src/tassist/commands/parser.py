"""Command-line splitter and parse error contract."""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from tassist.commands.messages import invalid_format

_COMMAND_LINE_RE = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


class ParseErrorCode(StrEnum):
    """Stable parse failure codes."""

    INVALID_FORMAT = "invalid_format"
    DUPLICATE_FIELD = "duplicate_field"
    UNKNOWN_COMMAND = "unknown_command"


class CommandParseError(ValueError):
    """Raised when a command line does not follow its grammar."""

    def __init__(
        self,
        code: ParseErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create parse failure.

        Args:
            code: Stable parse error code.
            message: User-facing error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}


class CommandCall(BaseModel):
    """Command word plus its untouched argument string."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    word: str
    arguments: str = ""
    raw: str


def parse_command_line(text: str, *, usage: str) -> CommandCall:
    """Split one input line into command word and argument string.

    The argument string keeps its leading whitespace so prefix detection
    treats the first argument like any later one.

    Args:
        text: Raw user input line.
        usage: Help text shown when the line is blank.

    Returns:
        Normalized command call.

    Raises:
        CommandParseError: If the line holds no command word.
    """
    match = _COMMAND_LINE_RE.fullmatch(text.strip())
    if match is None:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            invalid_format(usage),
        )
    return CommandCall(
        word=match.group("word"),
        arguments=match.group("arguments"),
        raw=text,
    )
