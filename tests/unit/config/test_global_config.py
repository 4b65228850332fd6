"""Unit tests for global TAssist config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from tassist.config import (
    GlobalConfigError,
    LogLevel,
    TAssistConfig,
    load_global_config,
)


@pytest.mark.unit
def test_load_global_config_defaults_when_missing(tmp_path: Path) -> None:
    """Missing config file should yield deterministic defaults."""
    config = load_global_config(tmp_path / "missing.yaml")

    assert config.roster.path == "roster.json"
    assert config.browser.enabled is True
    assert config.logging.level == LogLevel.WARNING


@pytest.mark.unit
def test_load_global_config_reads_yaml_overrides(tmp_path: Path) -> None:
    """Config loader should parse YAML overrides and keep other defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {"browser": {"enabled": False}, "logging": {"level": "DEBUG"}}
        ),
        encoding="utf-8",
    )

    config = load_global_config(config_path)

    assert config.browser.enabled is False
    assert config.logging.level == LogLevel.DEBUG
    assert config.roster.path == "roster.json"


@pytest.mark.unit
def test_load_global_config_reads_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text('{"roster": {"path": "data/cs2103.json"}}', encoding="utf-8")

    config = load_global_config(config_path)

    assert config.roster.path == "data/cs2103.json"


@pytest.mark.unit
def test_load_global_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_global_config(config_path) == TAssistConfig()


@pytest.mark.unit
def test_load_global_config_round_trips_default_template(tmp_path: Path) -> None:
    """The template written by `init` should load back unchanged."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(TAssistConfig().model_dump(mode="json"), sort_keys=False),
        encoding="utf-8",
    )

    assert load_global_config(config_path) == TAssistConfig()


@pytest.mark.unit
@pytest.mark.parametrize(
    ("file_name", "payload", "message"),
    [
        ("config.yaml", "browser: [unclosed", "Invalid global config YAML"),
        ("config.json", "{broken", "Invalid global config JSON"),
        ("config.yaml", "- just\n- a list\n", "root must be an object"),
        ("config.yaml", "unknown_section: {}\n", "Invalid global config payload"),
        ("config.yaml", "logging:\n  level: LOUD\n", "Invalid global config payload"),
    ],
)
def test_load_global_config_rejects_invalid_payloads(
    tmp_path: Path, file_name: str, payload: str, message: str
) -> None:
    config_path = tmp_path / file_name
    config_path.write_text(payload, encoding="utf-8")

    with pytest.raises(GlobalConfigError, match=message):
        load_global_config(config_path)
