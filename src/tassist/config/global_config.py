"""Global TAssist config models and loading helpers."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class LogLevel(StrEnum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class RosterSettings(BaseModel):
    """Roster persistence configuration.

    Relative paths resolve against the directory holding the config file.
    """

    model_config = ConfigDict(extra="forbid")

    path: str = "roster.json"


class BrowserSettings(BaseModel):
    """Browser launching configuration for `open`."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True


class LoggingSettings(BaseModel):
    """CLI logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.WARNING


class TAssistConfig(BaseModel):
    """Root global TAssist configuration model."""

    model_config = ConfigDict(extra="forbid")

    roster: RosterSettings = RosterSettings()
    browser: BrowserSettings = BrowserSettings()
    logging: LoggingSettings = LoggingSettings()


class GlobalConfigError(RuntimeError):
    """Raised when global config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode global config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        GlobalConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise GlobalConfigError(f"Invalid global config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise GlobalConfigError(f"Invalid global config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise GlobalConfigError("Invalid global config payload: root must be an object")
    return payload


def load_global_config(path: Path) -> TAssistConfig:
    """Load global TAssist config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        GlobalConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return TAssistConfig()
    payload = _decode_config_payload(path)
    try:
        return TAssistConfig.model_validate(payload)
    except ValidationError as exc:
        raise GlobalConfigError(f"Invalid global config payload: {exc}") from exc
