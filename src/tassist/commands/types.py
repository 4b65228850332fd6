"""Shared command-domain types."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from tassist.model.roster import RosterModel


class CommandStatus(StrEnum):
    """Normalized command execution status."""

    OK = "ok"
    ERROR = "error"


class ExecutionErrorCode(StrEnum):
    """Stable command execution failure codes."""

    INVALID_INDEX = "invalid_index"
    PERSON_NOT_FOUND = "person_not_found"
    DUPLICATE_PERSON = "duplicate_person"
    NO_REPOSITORY = "no_repository"


class CommandExecutionError(RuntimeError):
    """Command failure against the roster with stable code."""

    def __init__(
        self,
        code: ExecutionErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create execution failure.

        Args:
            code: Stable execution error code.
            message: User-facing error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}


class CommandResult(BaseModel):
    """Deterministic command execution result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str
    data: dict[str, Any] | None = None
    should_exit: bool = False
    open_url: str | None = None

    @classmethod
    def ok(  # noqa: PLR0913
        cls,
        message: str,
        *,
        code: str = "ok",
        data: dict[str, Any] | None = None,
        should_exit: bool = False,
        open_url: str | None = None,
    ) -> CommandResult:
        """Construct a successful command result.

        Args:
            message: User-facing output payload.
            code: Stable machine-readable success code.
            data: Optional structured payload for downstream consumers.
            should_exit: Whether the interpreter should stop after this result.
            open_url: URL the caller should open in a browser, if any.

        Returns:
            Successful command result.
        """
        return cls(
            status=CommandStatus.OK,
            code=code,
            message=message,
            data=data,
            should_exit=should_exit,
            open_url=open_url,
        )

    @classmethod
    def error(
        cls,
        message: str,
        *,
        code: str = "error",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct an error command result.

        Args:
            message: User-facing error payload.
            code: Stable machine-readable error code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Error command result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message, data=data)


class Command(Protocol):
    """Protocol implemented by every parsed command."""

    def execute(self, model: RosterModel) -> CommandResult:
        """Apply this command to the roster.

        Args:
            model: Roster to read and mutate.

        Raises:
            CommandExecutionError: If the command cannot be applied.
        """
