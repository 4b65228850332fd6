"""Split command arguments into a preamble and prefixed values."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from tassist.commands.messages import duplicate_prefixes_message
from tassist.commands.parser import CommandParseError, ParseErrorCode
from tassist.commands.syntax import Prefix


class ParsedArguments(BaseModel):
    """Tokenized arguments of one command.

    ``values`` keeps every occurrence of a prefix in input order. Repeats are
    not collapsed; parsers reject them explicitly where a field is
    single-valued.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    preamble: str = ""
    values: dict[Prefix, tuple[str, ...]] = {}

    def has(self, prefix: Prefix) -> bool:
        """Return whether ``prefix`` occurred at least once."""
        return bool(self.values.get(prefix))

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, if any."""
        occurrences = self.values.get(prefix, ())
        return occurrences[-1] if occurrences else None

    def get_all_values(self, prefix: Prefix) -> tuple[str, ...]:
        """Return every value given for ``prefix`` in input order."""
        return self.values.get(prefix, ())

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Reject repeated occurrences of single-valued prefixes.

        Args:
            *prefixes: Prefixes that may appear at most once.

        Raises:
            CommandParseError: If any listed prefix occurred more than once.
        """
        duplicates = [
            prefix for prefix in prefixes if len(self.values.get(prefix, ())) > 1
        ]
        if duplicates:
            raise CommandParseError(
                ParseErrorCode.DUPLICATE_FIELD,
                duplicate_prefixes_message(duplicates),
                data={"prefixes": sorted({prefix.value for prefix in duplicates})},
            )


def tokenize(args: str, prefixes: Sequence[Prefix]) -> ParsedArguments:
    """Tokenize ``args`` against the declared ``prefixes``.

    A prefix is recognized only at the start of the string or after
    whitespace, so URLs and longer prefixes ending in the same characters are
    left intact. Only declared prefixes split the input.

    Args:
        args: Raw argument string following the command word.
        prefixes: Prefixes this command understands.

    Returns:
        Untrimmed preamble plus trimmed values keyed by prefix.
    """
    if not prefixes:
        return ParsedArguments(preamble=args)
    # Longest first so a prefix is never shadowed by one of its suffixes.
    ordered = sorted(set(prefixes), key=lambda prefix: len(prefix.value), reverse=True)
    pattern = re.compile(
        r"(?<!\S)(" + "|".join(re.escape(prefix.value) for prefix in ordered) + ")"
    )
    matches = list(pattern.finditer(args))
    if not matches:
        return ParsedArguments(preamble=args)

    values: dict[Prefix, list[str]] = {}
    for position, match in enumerate(matches):
        end = matches[position + 1].start() if position + 1 < len(matches) else None
        value = args[match.end() : end].strip()
        values.setdefault(Prefix(match.group(1)), []).append(value)
    return ParsedArguments(
        preamble=args[: matches[0].start()],
        values={prefix: tuple(found) for prefix, found in values.items()},
    )
