"""Typer CLI entrypoint for TAssist."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tassist.cli.bootstrap import (
    bootstrap_workspace,
    build_roster,
    build_runtime,
    configure_logging,
    default_global_config_file,
    default_workspace_dir,
    load_config,
    persist_roster,
    resolve_roster_file,
)
from tassist.cli.rendering import CliRenderer
from tassist.commands.types import CommandStatus
from tassist.config import TAssistConfig

app = typer.Typer(help="TAssist CLI")
_CONSOLE = Console()
_RENDERER = CliRenderer(console=_CONSOLE)

RosterFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to persisted roster JSON file.",
    ),
]
WorkspaceDirOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=False,
        dir_okay=True,
        help="Workspace directory holding the default config.",
    ),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to TAssist config YAML/JSON file.",
    ),
]


def _load_effective_config(
    workspace_dir: Path | None,
    config_file: Path | None,
    roster_file: Path | None,
) -> tuple[TAssistConfig, Path]:
    """Load config, configure logging, and resolve the roster file.

    Args:
        workspace_dir: Optional workspace directory override.
        config_file: Optional config file path override.
        roster_file: Optional roster file path override.

    Returns:
        Effective config and roster file path.
    """
    effective_config_file = config_file or default_global_config_file(
        workspace_dir or default_workspace_dir()
    )
    config = load_config(effective_config_file, console=_CONSOLE)
    configure_logging(config.logging.level)
    roster_path = resolve_roster_file(
        config, roster_file, config_file=effective_config_file
    )
    return config, roster_path


def _execute_once(*, text: str, roster_file: Path, config: TAssistConfig) -> int:
    """Execute one input line through runtime facade.

    Args:
        text: Raw input text.
        roster_file: Roster persistence file path.
        config: Effective config.

    Returns:
        Process exit code.
    """
    roster = build_roster(roster_file, console=_CONSOLE)
    runtime = build_runtime(roster, config)
    result = runtime.handle_input(text)
    persist_roster(roster, roster_file, console=_CONSOLE)
    _RENDERER.render(result)
    return 0 if result.status == CommandStatus.OK else 1


@app.command("init")
def init_command(
    workspace_dir: WorkspaceDirOption = None,
    config_file: ConfigFileOption = None,
    overwrite_config: Annotated[
        bool,
        typer.Option(
            "--overwrite-config",
            help="Overwrite existing config file with default template.",
        ),
    ] = False,
) -> None:
    """Initialize TAssist workspace files and directories.

    Args:
        workspace_dir: Optional workspace directory override.
        config_file: Optional config file path override.
        overwrite_config: Whether to overwrite existing config payload.
    """
    configure_logging()
    effective_workspace_dir = workspace_dir or default_workspace_dir()
    effective_config_file, roster_file, actions = bootstrap_workspace(
        workspace_dir=effective_workspace_dir,
        config_file=config_file,
        overwrite_config=overwrite_config,
    )
    table = Table(title="TAssist Init", show_header=True, header_style="bold cyan")
    table.add_column("Resource", style="bold")
    table.add_column("Status", style="green")
    for resource, status in actions:
        table.add_row(resource, status)
    _CONSOLE.print(table)
    _CONSOLE.print(
        Panel(
            (
                f"Workspace: {effective_workspace_dir}\n"
                f"Config: {effective_config_file}\n"
                f"Roster: {roster_file}"
            ),
            title="Initialized",
            border_style="green",
            expand=True,
        )
    )


@app.command("run")
def run_command(
    text: Annotated[str, typer.Argument(help="Single command line to execute.")],
    workspace_dir: WorkspaceDirOption = None,
    roster_file: RosterFileOption = None,
    config_file: ConfigFileOption = None,
) -> None:
    """Execute one command line and print the result.

    The roster is reloaded on every call, so a find filter does not carry
    over: indexes always count from the full roster. Use repl to act on a
    filtered list.

    Args:
        text: Raw command line.
        workspace_dir: Optional workspace directory override.
        roster_file: Optional roster file path override.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with command status code for shell integration.
    """
    config, effective_roster_file = _load_effective_config(
        workspace_dir, config_file, roster_file
    )
    exit_code = _execute_once(
        text=text,
        roster_file=effective_roster_file,
        config=config,
    )
    raise typer.Exit(code=exit_code)


@app.command("repl")
def repl_command(
    workspace_dir: WorkspaceDirOption = None,
    roster_file: RosterFileOption = None,
    config_file: ConfigFileOption = None,
) -> None:
    """Run interactive roster REPL.

    Args:
        workspace_dir: Optional workspace directory override.
        roster_file: Optional roster file path override.
        config_file: Optional config file path override.
    """
    config, effective_roster_file = _load_effective_config(
        workspace_dir, config_file, roster_file
    )
    _CONSOLE.print(
        "TAssist REPL. Type help to list commands, or exit to quit.", style="cyan"
    )
    roster = build_roster(effective_roster_file, console=_CONSOLE)
    runtime = build_runtime(roster, config)
    while True:
        try:
            raw = typer.prompt("tassist")
        except (EOFError, KeyboardInterrupt, typer.Abort):
            _CONSOLE.print("\nbye", style="yellow")
            break

        text = raw.strip()
        if not text:
            continue

        result = runtime.handle_input(text)
        persist_roster(roster, effective_roster_file, console=_CONSOLE)
        _RENDERER.render(result)
        if result.should_exit:
            break


def main() -> None:
    """Run the Typer application."""
    app()
