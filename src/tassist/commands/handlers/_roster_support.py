"""Shared roster mutation helpers for command handlers."""

from __future__ import annotations

from tassist.commands.messages import MESSAGE_DUPLICATE_PERSON
from tassist.commands.types import CommandExecutionError, ExecutionErrorCode
from tassist.model.person import Person
from tassist.model.roster import SHOW_ALL_PERSONS, DuplicatePersonError, RosterModel


def replace_person(model: RosterModel, target: Person, edited: Person) -> None:
    """Swap ``target`` for ``edited`` and show the full roster.

    Args:
        model: Roster to mutate.
        target: Person currently on the roster.
        edited: Replacement built from ``target``.

    Raises:
        CommandExecutionError: If ``edited`` takes another person's student id.
    """
    try:
        model.set_person(target, edited)
    except DuplicatePersonError as exc:
        raise CommandExecutionError(
            ExecutionErrorCode.DUPLICATE_PERSON,
            MESSAGE_DUPLICATE_PERSON,
            data={"student_id": edited.student_id.value},
        ) from exc
    model.update_filtered_person_list(SHOW_ALL_PERSONS)
