"""User-visible message constants and formatting."""

from __future__ import annotations

from collections.abc import Iterable

from tassist.commands.syntax import Prefix
from tassist.model.person import Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
MESSAGE_PERSON_NOT_FOUND = "Person not found: "
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


def invalid_format(usage: str) -> str:
    """Wrap a command usage string in the invalid-format message."""
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)


def duplicate_prefixes_message(prefixes: Iterable[Prefix]) -> str:
    """Return the error message naming repeated single-valued prefixes.

    Args:
        prefixes: Offending prefixes; may contain repeats.

    Returns:
        Message listing each prefix once, sorted.
    """
    names = sorted({prefix.value for prefix in prefixes})
    if not names:
        raise ValueError("At least one duplicate prefix is required.")
    return MESSAGE_DUPLICATE_FIELDS + " ".join(names)


def format_person(person: Person) -> str:
    """Format ``person`` for display to the user."""
    return (
        f"{person.name}"
        f"; Phone: {person.phone}"
        f"; Email: {person.email}"
        f"; Class: {person.class_number}"
        f"; Student ID: {person.student_id}"
        f"; GitHub: {person.github}"
        f"; Progress: {person.progress}"
    )


def person_payload(person: Person) -> dict[str, object]:
    """Return JSON-friendly person fields for structured command results."""
    return person.model_dump(mode="json")
