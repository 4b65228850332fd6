"""Target addressing by display index or student id."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from tassist.commands.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_FOUND,
)
from tassist.commands.types import CommandExecutionError, ExecutionErrorCode
from tassist.model.person import Person
from tassist.model.roster import RosterModel
from tassist.model.values import StudentId


class Index(BaseModel):
    """Position in the filtered view, stored zero-based."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    zero_based: int = Field(ge=0)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        return cls(zero_based=one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


class ByIndex(BaseModel):
    """Target the person shown at one display index."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["index"] = "index"
    index: Index


class ByStudentId(BaseModel):
    """Target the person with one student id."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["student_id"] = "student_id"
    student_id: StudentId


Target = Annotated[ByIndex | ByStudentId, Field(discriminator="kind")]


def resolve_target(model: RosterModel, target: ByIndex | ByStudentId) -> Person:
    """Resolve ``target`` against the currently filtered view.

    Display indices are relative to the last ``list``/``find`` result, so the
    same index can point at different persons over time.

    Args:
        model: Roster to search.
        target: Index or student id addressing one person.

    Returns:
        The addressed person.

    Raises:
        CommandExecutionError: If the index is out of range or no visible
            person has the student id.
    """
    shown = model.filtered_persons()
    if isinstance(target, ByIndex):
        if target.index.zero_based >= len(shown):
            raise CommandExecutionError(
                ExecutionErrorCode.INVALID_INDEX,
                MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
                data={"index": target.index.one_based, "shown": len(shown)},
            )
        return shown[target.index.zero_based]
    for person in shown:
        if person.student_id == target.student_id:
            return person
    raise CommandExecutionError(
        ExecutionErrorCode.PERSON_NOT_FOUND,
        f"{MESSAGE_PERSON_NOT_FOUND}{target.student_id}",
        data={"student_id": target.student_id.value},
    )
