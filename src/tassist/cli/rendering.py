"""CLI result rendering policies and Rich views."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from tassist.cli.renderers.roster import render_person_detail, render_person_list
from tassist.cli.result_codes import (
    ADDRESSING_ERROR_CODES,
    HIDE_DATA_CODES,
    PERSON_DETAIL_CODES,
    PERSON_LIST_CODES,
)
from tassist.commands.types import CommandResult, CommandStatus

_INDEX_HINT = (
    "Indexes refer to the list shown by the last `list` or `find`. "
    "Run `list` to see every student, or address them by student ID."
)


class CliRenderer:
    """Render command results with Rich structures and code-based policies."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, result: CommandResult) -> None:
        """Render one command result.

        Args:
            result: Structured command result.
        """
        if result.status == CommandStatus.OK:
            if self._render_rich_success(result):
                return
            self._console.print(
                Panel(
                    Text(result.message),
                    title=Text(f"TAssist [{result.code}]"),
                    border_style="green",
                    expand=True,
                )
            )
            if result.data and result.code not in HIDE_DATA_CODES:
                self._render_data(result)
            return
        body = Text(result.message)
        if result.code in ADDRESSING_ERROR_CODES:
            body.append(f"\n\n{_INDEX_HINT}", style="yellow")
        self._console.print(
            Panel(
                body,
                title=Text(f"Error [{result.code}]"),
                border_style="bold red",
                expand=True,
            )
        )

    def _render_data(self, result: CommandResult) -> None:
        self._console.print(
            Panel(
                JSON.from_data(result.data),
                title="Data",
                border_style="cyan",
                expand=True,
            )
        )

    def _render_rich_success(self, result: CommandResult) -> bool:
        """Render specialized success view for selected command result codes.

        Args:
            result: Command result payload.

        Returns:
            ``True`` when a specialized render path handled the result.
        """
        renderer: Callable[[Console, CommandResult], bool] | None = None
        if result.code in PERSON_LIST_CODES:
            renderer = render_person_list
        elif result.code in PERSON_DETAIL_CODES:
            renderer = render_person_detail
        if renderer is None:
            return False
        return renderer(self._console, result)
