"""Generic install contract shared by the per-browser installers."""

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from wasm_browser_test.fetch import FetchError, run_fetch_command

log = logging.getLogger(__name__)

CACHE_DIR_VARIABLE = "PLAYWRIGHT_BROWSERS_PATH"
INSTALL_TIMEOUT = 90.0
EXECUTABLE_MODE = 0o755


@dataclass(frozen=True, kw_only=True)
class BrowserInstaller:
    """Downloads one browser build into a directory and verifies it.

    The fetch command runs with the download directory as Playwright's browser
    cache, so the executable lands at a fixed path relative to it. The
    relative path can be overridden through ``executable_path_variable`` when
    the fetch tool lays the build out differently.
    """

    display_name: str
    fetch_command: Sequence[str]
    executable_path: str
    executable_path_variable: str
    install_timeout: float = INSTALL_TIMEOUT

    def expected_executable(
        self, download_dir: Path, environ: Mapping[str, str] = os.environ
    ) -> Path:
        """Return where the executable must be after a successful fetch."""
        relative = environ.get(self.executable_path_variable) or self.executable_path
        return download_dir / relative

    async def install(self, download_dir: Path) -> int:
        """Fetch the browser, verify it and mark it executable.

        Args:
            download_dir: Absolute path of the download directory

        Returns:
            Process exit code, 0 on success and 1 on any failure

        """
        log.info("Downloading %s to: %s", self.display_name, download_dir)
        download_dir.mkdir(parents=True, exist_ok=True)

        env = {**os.environ, CACHE_DIR_VARIABLE: str(download_dir)}
        try:
            await run_fetch_command(self.fetch_command, env, self.install_timeout)
        except (FetchError, OSError) as error:
            log.error("Error installing %s: %s", self.display_name, error)
            return 1

        expected_path = self.expected_executable(download_dir)
        log.info("Expected %s executable path: %s", self.display_name, expected_path)

        if not expected_path.is_file():
            log.error(
                "%s executable not found at expected path: %s",
                self.display_name,
                expected_path,
            )
            return 1

        try:
            expected_path.chmod(EXECUTABLE_MODE)
        except OSError as error:
            log.error("Error installing %s: %s", self.display_name, error)
            return 1

        log.info("%s executable found at: %s", self.display_name, expected_path)
        return 0
