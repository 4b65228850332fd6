"""JSON roster file: versioned write, validated read, corrupt-file quarantine.

The file holds one object, ``{"schema_version": 1, "persons": [...]}``, with
persons in display order. Reads reject anything a ``Roster`` could not hold,
including two persons sharing a student id.
"""

from __future__ import annotations

import json
import time
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from tassist.model.person import Person

ROSTER_SCHEMA_VERSION = 1


class RosterStoreError(RuntimeError):
    """Roster file could not be turned back into persons."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{path.name}: {message}")
        self.path = path


class RosterSchemaVersionError(RosterStoreError):
    """Roster file was written under a schema this build cannot read."""


class RosterDecodeError(RosterStoreError):
    """Roster file is not JSON, or its persons fail validation."""


class PersistedRosterV1(BaseModel):
    """On-disk roster, schema version 1."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = ROSTER_SCHEMA_VERSION
    persons: tuple[Person, ...] = ()

    @model_validator(mode="after")
    def _validate_unique_student_ids(self) -> PersistedRosterV1:
        counts = Counter(person.student_id.value for person in self.persons)
        repeated = sorted(student_id for student_id, n in counts.items() if n > 1)
        if repeated:
            raise ValueError(
                f"Duplicate student id in roster: {', '.join(repeated)}"
            )
        return self


def save_roster(persons: Iterable[Person], path: Path) -> None:
    """Write every person to ``path``, replacing the previous file in one step.

    The payload goes to a sibling ``.tmp`` file first, so a crash mid-write
    leaves the old roster readable.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = PersistedRosterV1(persons=tuple(persons))
    temp_path = path.with_name(f"{path.name}.tmp")
    temp_path.write_text(payload.model_dump_json(indent=2) + "\n", encoding="utf-8")
    temp_path.replace(path)


def load_roster(path: Path) -> tuple[Person, ...]:
    """Read persons back from a roster file.

    Args:
        path: Roster file path.

    Returns:
        Persons in display order.

    Raises:
        FileNotFoundError: If no roster has been saved at ``path`` yet.
        RosterDecodeError: If the file is not a valid roster.
        RosterSchemaVersionError: If the file uses another schema version.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RosterDecodeError(f"Invalid roster JSON: {exc}", path=path) from exc

    _check_schema_version(decoded, path)
    try:
        payload = PersistedRosterV1.model_validate(decoded)
    except ValidationError as exc:
        raise RosterDecodeError(f"Invalid roster payload: {exc}", path=path) from exc
    return payload.persons


def recover_corrupt_roster(path: Path) -> Path | None:
    """Rename an unreadable roster to ``<name>.corrupt-<epoch>[-n]``.

    Earlier quarantined copies are never overwritten.

    Returns:
        Quarantine path, or ``None`` when there was nothing to move.
    """
    if not path.exists():
        return None
    stem = f"{path.name}.corrupt-{int(time.time())}"
    backup = path.with_name(stem)
    attempt = 1
    while backup.exists():
        backup = path.with_name(f"{stem}-{attempt}")
        attempt += 1
    path.replace(backup)
    return backup


def _check_schema_version(payload: object, path: Path) -> None:
    if not isinstance(payload, dict):
        raise RosterDecodeError(
            "Invalid roster payload: expected a JSON object.", path=path
        )
    version = payload.get("schema_version")
    if version != ROSTER_SCHEMA_VERSION:
        raise RosterSchemaVersionError(
            f"Unsupported roster schema version: {version!r}. "
            f"Expected {ROSTER_SCHEMA_VERSION}.",
            path=path,
        )
