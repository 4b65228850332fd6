"""Runtime facade: parse, execute, and perform side effects for one line."""

from __future__ import annotations

import logging

from tassist.commands.parser import CommandParseError
from tassist.commands.registry import CommandRegistry
from tassist.commands.types import CommandExecutionError, CommandResult
from tassist.model.roster import RosterModel
from tassist.runtime.browser import (
    BrowserLauncher,
    BrowserLaunchError,
    WebBrowserLauncher,
)

_LOGGER = logging.getLogger(__name__)


class RuntimeFacade:
    """Facade turning raw input lines into roster mutations and results."""

    def __init__(
        self,
        model: RosterModel,
        *,
        command_registry: CommandRegistry | None = None,
        browser: BrowserLauncher | None = None,
    ) -> None:
        """Create facade over one roster.

        Args:
            model: Roster every command runs against.
            command_registry: Optional command registry override.
            browser: Optional browser launcher used by `open`.
        """
        self._model = model
        self._command_registry = command_registry or CommandRegistry()
        self._browser = browser or WebBrowserLauncher()

    @property
    def model(self) -> RosterModel:
        return self._model

    def handle_input(self, text: str) -> CommandResult:
        """Parse and execute one input line.

        Failures never escape: each becomes an error result and leaves the
        roster as it was.

        Args:
            text: Raw user input line.

        Returns:
            Deterministic command result.
        """
        try:
            command = self._command_registry.parse(text)
        except CommandParseError as exc:
            _LOGGER.info("parse failed [%s]: %s", exc.code, text)
            return CommandResult.error(
                str(exc),
                code=exc.code.value,
                data={"input": text, **exc.data},
            )

        _LOGGER.debug("executing %s", type(command).__name__)
        try:
            result = command.execute(self._model)
        except CommandExecutionError as exc:
            _LOGGER.info("execution failed [%s]: %s", exc.code, exc)
            return CommandResult.error(
                str(exc),
                code=exc.code.value,
                data=exc.data or None,
            )

        if result.open_url is None:
            return result
        return self._open_url(result)

    def _open_url(self, result: CommandResult) -> CommandResult:
        """Hand the requested URL to the browser launcher.

        Args:
            result: Successful result carrying ``open_url``.

        Returns:
            The original result, or an error result when launching failed.
        """
        url = result.open_url or ""
        try:
            self._browser.open_url(url)
        except BrowserLaunchError as exc:
            _LOGGER.info("browser launch failed for %s: %s", url, exc)
            return CommandResult.error(
                f"Error: {exc}",
                code="browser_launch_failed",
                data={"url": url},
            )
        return result
