"""Argument prefix registry shared by command parsers."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class Prefix(StrEnum):
    """Literal markers that introduce a named argument value."""

    NAME = "n/"
    PHONE = "p/"
    EMAIL = "e/"
    CLASS = "c/"
    STUDENT_ID = "s/"
    GITHUB = "g/"
    TAG = "t/"
    PROGRESS = "pr/"
    USERNAME = "u/"
    REPOSITORY_NAME = "r/"


PREFIX_FIELDS: MappingProxyType[Prefix, str] = MappingProxyType(
    {
        Prefix.NAME: "name",
        Prefix.PHONE: "phone",
        Prefix.EMAIL: "email",
        Prefix.CLASS: "class_number",
        Prefix.STUDENT_ID: "student_id",
        Prefix.GITHUB: "github",
        Prefix.TAG: "tags",
        Prefix.PROGRESS: "progress",
        Prefix.USERNAME: "username",
        Prefix.REPOSITORY_NAME: "repository_name",
    }
)
