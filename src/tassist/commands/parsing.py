"""Helpers shared by the per-command parsers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TypeVar

from pydantic import ValidationError

from tassist.commands.messages import MESSAGE_INVALID_INDEX, invalid_format
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.syntax import Prefix
from tassist.commands.targets import ByIndex, ByStudentId, Index
from tassist.commands.tokenizer import ParsedArguments
from tassist.model.values import FieldValue, StudentId, Tag

_UNSIGNED_INTEGER_RE = re.compile(r"[0-9]+")
_MAX_INDEX = 2**31 - 1

ValueT = TypeVar("ValueT", bound=FieldValue)


def parse_index(text: str) -> Index:
    """Parse a 1-based display index.

    Args:
        text: Raw index text; surrounding whitespace is ignored.

    Returns:
        Zero-based index.

    Raises:
        CommandParseError: If the text is not a non-zero unsigned integer.
    """
    trimmed = text.strip()
    if _UNSIGNED_INTEGER_RE.fullmatch(trimmed) is None:
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, MESSAGE_INVALID_INDEX)
    number = int(trimmed)
    if not 0 < number <= _MAX_INDEX:
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, MESSAGE_INVALID_INDEX)
    return Index.from_one_based(number)


def parse_value(
    value_type: type[ValueT],
    text: str,
    *,
    message: str | None = None,
) -> ValueT:
    """Construct one field value from raw text.

    Args:
        value_type: Value class to construct.
        text: Raw text; surrounding whitespace is ignored.
        message: Optional message replacing the value's constraint text.

    Returns:
        Validated value.

    Raises:
        CommandParseError: If the value rejects the text.
    """
    try:
        return value_type(text.strip())
    except ValidationError as exc:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            message or value_type.MESSAGE_CONSTRAINTS,
        ) from exc


def parse_tags(raw_tags: Iterable[str]) -> frozenset[Tag]:
    """Parse every raw tag into a set of ``Tag`` values."""
    return frozenset(parse_value(Tag, raw) for raw in raw_tags)


def require_prefixes(args: ParsedArguments, usage: str, *prefixes: Prefix) -> None:
    """Fail with the command usage unless every prefix is present.

    Raises:
        CommandParseError: If any prefix is missing.
    """
    if not all(args.has(prefix) for prefix in prefixes):
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, invalid_format(usage))


def require_preamble(args: ParsedArguments, usage: str) -> None:
    """Fail with the command usage when no target text precedes the prefixes.

    Raises:
        CommandParseError: If the preamble is blank.
    """
    if not args.preamble.strip():
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, invalid_format(usage))


def parse_target(preamble: str, usage: str) -> ByIndex | ByStudentId:
    """Resolve the addressing token of a targeted command.

    Student-id shaped tokens are tried first. Index tokens are pure digits, so
    the two shapes never overlap and no roster lookup is needed to decide.

    Args:
        preamble: Untagged leading text of the arguments.
        usage: Command usage shown on failure.

    Returns:
        Index- or student-id-addressed target.

    Raises:
        CommandParseError: If the preamble is empty or matches neither shape.
    """
    trimmed = preamble.strip()
    if not trimmed:
        raise CommandParseError(ParseErrorCode.INVALID_FORMAT, invalid_format(usage))
    if StudentId.is_valid(trimmed):
        return ByStudentId(student_id=StudentId(trimmed))
    try:
        return ByIndex(index=parse_index(trimmed))
    except CommandParseError as exc:
        raise CommandParseError(
            ParseErrorCode.INVALID_FORMAT,
            invalid_format(usage),
        ) from exc
