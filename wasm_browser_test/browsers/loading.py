"""Lookup of browser installers registered as entry points."""

from collections.abc import Sequence
from importlib.metadata import entry_points

from wasm_browser_test.browsers.base import BrowserInstaller

ENTRY_POINT_GROUP = "wasm_browser_test.browsers"


class BrowserNotFoundError(Exception):
    """Raised when no installer is registered for a browser key."""


def available_browsers() -> Sequence[str]:
    """Return the registered browser keys in alphabetical order."""
    return sorted({entry.name for entry in entry_points(group=ENTRY_POINT_GROUP)})


def load_browser_installer(key: str) -> BrowserInstaller:
    """Load the installer registered under a browser key.

    Raises:
        BrowserNotFoundError: If the key is unknown or does not name an
            installer

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        raise BrowserNotFoundError(
            f"No installer for browser '{key}'. "
            f"Available browsers: {', '.join(available_browsers())}"
        )

    installer = next(iter(matches)).load()
    if not isinstance(installer, BrowserInstaller):
        raise BrowserNotFoundError(
            f"Entry point for browser '{key}' is not a BrowserInstaller"
        )
    return installer
