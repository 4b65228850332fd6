"""Student aggregate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from tassist.model.values import (
    ClassNumber,
    Email,
    Github,
    Name,
    Phone,
    Progress,
    Repository,
    StudentId,
    Tag,
)


class Person(BaseModel):
    """One student on the roster.

    Persons are never edited in place. Commands build a replacement with
    ``model_copy(update=...)`` and hand it to the roster.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Name
    phone: Phone
    email: Email
    class_number: ClassNumber = Field(
        default_factory=lambda: ClassNumber(ClassNumber.DEFAULT_CLASS)
    )
    student_id: StudentId
    github: Github = Field(default_factory=lambda: Github(""))
    repository: Repository = Field(default_factory=lambda: Repository(""))
    tags: frozenset[Tag] = frozenset()
    progress: Progress = Field(
        default_factory=lambda: Progress(Progress.DEFAULT_PROGRESS)
    )

    @field_serializer("tags")
    def _serialize_tags(self, tags: frozenset[Tag]) -> list[str]:
        return sorted(tag.value for tag in tags)

    def is_same_person(self, other: Person) -> bool:
        """Return whether both persons share a student id.

        Args:
            other: Person to compare against.

        Returns:
            ``True`` when the roster must treat them as the same student.
        """
        return self.student_id == other.student_id

    def sorted_tags(self) -> tuple[Tag, ...]:
        """Return tags in a stable display order."""
        return tuple(sorted(self.tags, key=lambda tag: tag.value))
