"""CLI entry points for the browser installers and the WASM test runner."""

import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from wasm_browser_test.browsers.loading import load_browser_installer
from wasm_browser_test.models.config import RunnerConfig
from wasm_browser_test.runner import run

log = logging.getLogger("wasm_browser_test")


def configure_logging() -> None:
    """Send log records to standard error."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def install_browser(browser_key: str, argv: Sequence[str] | None = None) -> int:
    """Install one browser into the directory given on the command line.

    Exactly one argument is accepted and taken verbatim as the directory, even
    when it starts with a dash. Any other count is a usage error reported
    before any side effect.
    """
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 1:
        log.error("Expected exactly one command-line argument, got %d.", len(argv))
        return 1

    installer = load_browser_installer(browser_key)
    download_dir = Path(argv[0]).resolve()
    return asyncio.run(installer.install(download_dir))


def install_chrome() -> None:
    """Console entry point for the Chrome installer."""
    configure_logging()
    sys.exit(install_browser("chrome"))


def install_firefox() -> None:
    """Console entry point for the Firefox installer."""
    configure_logging()
    sys.exit(install_browser("firefox"))


def main() -> None:
    """Console entry point for the WASM test runner."""
    configure_logging()

    try:
        config = RunnerConfig.from_environ(os.environ)
    except ValidationError as error:
        log.error("Invalid test configuration: %s", error)
        sys.exit(1)

    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":  # pragma: no cover
    main()
