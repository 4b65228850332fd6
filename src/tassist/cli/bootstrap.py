"""CLI bootstrap/runtime lifecycle helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tassist.config import GlobalConfigError, TAssistConfig, load_global_config
from tassist.config.global_config import LogLevel
from tassist.model.roster import DuplicatePersonError, Roster
from tassist.model.store import (
    RosterDecodeError,
    RosterSchemaVersionError,
    load_roster,
    recover_corrupt_roster,
    save_roster,
)
from tassist.runtime.browser import (
    BrowserLauncher,
    DisabledBrowserLauncher,
    WebBrowserLauncher,
)
from tassist.runtime.facade import RuntimeFacade

_LOGGING_CONFIGURED = False
_LOGGER = logging.getLogger(__name__)


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root logging level.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def default_workspace_dir() -> Path:
    """Return the per-directory TAssist workspace.

    Returns:
        Workspace path under the current directory.
    """
    return Path.cwd() / ".tassist"


def default_global_config_file(workspace_dir: Path) -> Path:
    """Return default global config path for one workspace.

    Args:
        workspace_dir: Workspace directory path.

    Returns:
        Existing YAML or JSON config path, else the YAML path.
    """
    yaml_path = workspace_dir / "config.yaml"
    json_path = workspace_dir / "config.json"
    if yaml_path.exists():
        return yaml_path
    if json_path.exists():
        return json_path
    return yaml_path


def load_config(config_file: Path, *, console: Console) -> TAssistConfig:
    """Load config, falling back to defaults with a visible warning.

    Args:
        config_file: Config file path.
        console: Rich console used for warnings.

    Returns:
        Loaded or default config.
    """
    try:
        return load_global_config(config_file)
    except GlobalConfigError as exc:
        console.print(
            f"[yellow]Global config at {config_file} is invalid; "
            "falling back to defaults.[/yellow]"
        )
        console.print(f"[yellow]Reason: {escape(str(exc))}[/yellow]")
        return TAssistConfig()


def resolve_roster_file(
    config: TAssistConfig,
    override: Path | None,
    *,
    config_file: Path,
) -> Path:
    """Return explicit roster path override or configured path.

    Relative configured paths resolve against the config file directory.
    """
    if override is not None:
        return override
    return config_file.parent / config.roster.path


def bootstrap_workspace(
    *,
    workspace_dir: Path,
    config_file: Path | None = None,
    overwrite_config: bool = False,
) -> tuple[Path, Path, tuple[tuple[str, str], ...]]:
    """Bootstrap local TAssist workspace artifacts.

    Args:
        workspace_dir: Workspace directory path.
        config_file: Optional global config path override.
        overwrite_config: Whether to overwrite existing config payload.

    Returns:
        Config file path, roster file path, and action rows.
    """
    actions: list[tuple[str, str]] = []
    existed = workspace_dir.exists()
    workspace_dir.mkdir(parents=True, exist_ok=True)
    actions.append(("workspace_dir", "exists" if existed else "created"))

    effective_config_file = config_file or default_global_config_file(workspace_dir)
    config_existed = effective_config_file.exists()
    if not config_existed or overwrite_config:
        effective_config_file.parent.mkdir(parents=True, exist_ok=True)
        payload = TAssistConfig().model_dump(mode="json")
        if effective_config_file.suffix.lower() == ".json":
            text = json.dumps(payload, indent=2) + "\n"
        else:
            text = yaml.safe_dump(payload, sort_keys=False)
        effective_config_file.write_text(text, encoding="utf-8")
        actions.append(
            (
                "config_file",
                "overwritten" if config_existed and overwrite_config else "created",
            )
        )
    else:
        actions.append(("config_file", "exists"))

    try:
        config = load_global_config(effective_config_file)
    except GlobalConfigError as exc:
        _LOGGER.warning("using default roster path; %s", exc)
        config = TAssistConfig()
    roster_file = resolve_roster_file(config, None, config_file=effective_config_file)
    if roster_file.exists():
        actions.append(("roster_file", "exists"))
    else:
        save_roster((), roster_file)
        actions.append(("roster_file", "created"))
    return effective_config_file, roster_file, tuple(actions)


def build_roster(roster_file: Path, *, console: Console) -> Roster:
    """Load roster from disk, recovering from unreadable files.

    Args:
        roster_file: Roster persistence file path.
        console: Rich console used for warnings.

    Returns:
        Roster loaded from disk, or empty when missing or unreadable.
    """
    try:
        return Roster(load_roster(roster_file))
    except FileNotFoundError:
        _LOGGER.debug("no roster at %s; starting empty", roster_file)
        return Roster()
    except (RosterDecodeError, RosterSchemaVersionError, DuplicatePersonError) as exc:
        backup = recover_corrupt_roster(roster_file)
        if backup is not None:
            console.print(
                f"[yellow]Roster file was invalid. Moved to {backup}.[/yellow]"
            )
        else:
            console.print(
                "[yellow]Roster file was invalid. Starting an empty roster.[/yellow]"
            )
        console.print(f"[yellow]Reason: {escape(str(exc))}[/yellow]")
        return Roster()


def persist_roster(roster: Roster, roster_file: Path, *, console: Console) -> None:
    """Persist roster with best-effort user-visible error reporting.

    Args:
        roster: Roster to persist.
        roster_file: Persistence target path.
        console: Rich console used for errors.
    """
    try:
        save_roster(roster.persons(), roster_file)
    except OSError as exc:
        console.print(
            f"[bold red]Failed to persist roster to {roster_file}: "
            f"{escape(str(exc))}[/bold red]"
        )


def build_browser(config: TAssistConfig) -> BrowserLauncher:
    """Return the browser launcher selected by config."""
    if config.browser.enabled:
        return WebBrowserLauncher()
    return DisabledBrowserLauncher()


def build_runtime(roster: Roster, config: TAssistConfig) -> RuntimeFacade:
    """Build runtime facade over ``roster`` with configured collaborators.

    Args:
        roster: Roster the facade mutates.
        config: Effective global config.

    Returns:
        Runtime facade.
    """
    return RuntimeFacade(roster, browser=build_browser(config))
