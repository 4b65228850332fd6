"""Immutable, self-validating student field values."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import ConfigDict, RootModel, field_validator

_GITHUB_USERNAME = r"[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}"
_REPOSITORY_NAME = r"(?!\.{1,2}$)[A-Za-z0-9._-]{1,100}"
_ALNUM = r"[A-Za-z0-9]+"

GITHUB_USERNAME_REGEX = re.compile(_GITHUB_USERNAME)
REPOSITORY_NAME_REGEX = re.compile(_REPOSITORY_NAME)


class FieldValue(RootModel[str]):
    """Base for string values checked against a fixed format on construction.

    Subclasses declare ``VALIDATION_REGEX`` and ``MESSAGE_CONSTRAINTS``. The
    constraint message is what users see when a raw value is rejected.
    """

    model_config = ConfigDict(frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value has an invalid format."
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r".*")

    @field_validator("root")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        """Reject raw values that fail the subclass format check.

        Args:
            value: Raw string value.

        Returns:
            The unchanged value.

        Raises:
            ValueError: If the value does not satisfy the format.
        """
        if not cls.is_valid(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Return whether ``text`` satisfies this value's format."""
        return cls.VALIDATION_REGEX.fullmatch(text) is not None

    @property
    def value(self) -> str:
        """Stored raw value."""
        return self.root

    def __str__(self) -> str:
        return self.root


class Name(FieldValue):
    """Student display name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"[A-Za-z0-9][A-Za-z0-9 ]*"
    )


class Phone(FieldValue):
    """Student phone number."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{3,}")


class Email(FieldValue):
    """Student email address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        "special characters, excluding the parentheses, (+_.-). The local-part may "
        "not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        rf"{_ALNUM}(?:[+_.-]{_ALNUM})*"
        rf"@(?:{_ALNUM}(?:-{_ALNUM})*\.)*"
        rf"[A-Za-z0-9]{{2,}}(?:-{_ALNUM})*"
    )


class StudentId(FieldValue):
    """Matriculation number; the natural key of a student."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "The Student ID must follow the format AXXXXXXXN, where:\n"
        "- A is the uppercase letter 'A'.\n"
        "- X represents seven digits (0-9).\n"
        "- N is any uppercase letter from A to Z.\n"
        "Both 'A' and 'N' must be capitalized."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"A[0-9]{7}[A-Z]")


class ClassNumber(FieldValue):
    """Tutorial class a student attends, e.g. ``T01``."""

    DEFAULT_CLASS: ClassVar[str] = "T00"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Class numbers should be one uppercase letter followed by two digits, "
        "e.g. T01. T00 means the student has not been assigned a class."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z][0-9]{2}")

    @property
    def is_assigned(self) -> bool:
        """Whether this is a real class rather than the unassigned sentinel."""
        return self.root != self.DEFAULT_CLASS


class Github(FieldValue):
    """GitHub profile URL, or empty when the student has none."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "GitHub URLs should be of the format https://github.com/{username}, "
        "or empty to remove the GitHub profile."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        rf"(?:https://github\.com/{_GITHUB_USERNAME})?"
    )

    @property
    def is_empty(self) -> bool:
        return not self.root


class Repository(FieldValue):
    """GitHub repository URL, or empty when none has been recorded."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Repository URLs should be of the format "
        "https://github.com/{username}/{repository}."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        rf"(?:https://github\.com/{_GITHUB_USERNAME}/{_REPOSITORY_NAME})?"
    )

    @classmethod
    def for_repository(cls, username: str, repository_name: str) -> Repository:
        """Build the repository URL for one GitHub user and repository name."""
        return cls(f"https://github.com/{username}/{repository_name}")

    @property
    def is_empty(self) -> bool:
        return not self.root


class Progress(FieldValue):
    """Completion percentage from 0 to 100."""

    DEFAULT_PROGRESS: ClassVar[str] = "0"
    MAX_PROGRESS: ClassVar[int] = 100
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Progress should be a whole number from 0 to 100."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{1,3}")

    @classmethod
    def is_valid(cls, text: str) -> bool:
        if cls.VALIDATION_REGEX.fullmatch(text) is None:
            return False
        return int(text) <= cls.MAX_PROGRESS

    @property
    def percent(self) -> int:
        return int(self.root)


class Tag(FieldValue):
    """Free-form alphanumeric label."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(_ALNUM)
