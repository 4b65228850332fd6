"""Browser launcher used by the `open` command."""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol
from urllib.parse import urlsplit

_LOGGER = logging.getLogger(__name__)
_ALLOWED_SCHEMES = frozenset({"http", "https"})


class BrowserLaunchError(RuntimeError):
    """Raised when a URL cannot be handed to a browser."""


class BrowserLauncher(Protocol):
    """Opens URLs outside the process."""

    def open_url(self, url: str) -> None:
        """Open ``url``.

        Raises:
            BrowserLaunchError: If the URL is invalid or no browser accepted it.
        """


def validate_url(url: str) -> str:
    """Check that ``url`` is an absolute http(s) URL without whitespace.

    Args:
        url: Candidate URL.

    Returns:
        The unchanged URL.

    Raises:
        BrowserLaunchError: If the URL is not safe to hand to a browser.
    """
    if not url or any(character.isspace() for character in url):
        raise BrowserLaunchError(f"Invalid URL: {url!r}")
    parts = urlsplit(url)
    if parts.scheme not in _ALLOWED_SCHEMES or not parts.netloc:
        raise BrowserLaunchError(f"Invalid URL: {url!r}")
    return url


class WebBrowserLauncher:
    """Launcher backed by the platform's default browser."""

    def open_url(self, url: str) -> None:
        validate_url(url)
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as exc:
            raise BrowserLaunchError(f"Could not open browser: {exc}") from exc
        if not opened:
            raise BrowserLaunchError(
                "Opening URLs is not supported on this platform."
            )
        _LOGGER.info("opened %s in browser", url)


class DisabledBrowserLauncher:
    """Launcher that refuses every URL; used when browsing is turned off."""

    def open_url(self, url: str) -> None:
        validate_url(url)
        raise BrowserLaunchError(
            f"Browser launching is disabled in config. Visit {url} manually."
        )
