"""Tests for the generic browser install contract."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from wasm_browser_test.browsers import chrome_installer, firefox_installer
from wasm_browser_test.browsers.base import CACHE_DIR_VARIABLE, INSTALL_TIMEOUT
from wasm_browser_test.fetch import FetchError


class TestExpectedExecutable:
    """Tests for expected_executable."""

    def test_chrome_default_path(self, tmp_path: Path) -> None:
        """Chrome resolves to the headless shell build."""
        assert chrome_installer.expected_executable(tmp_path, environ={}) == (
            tmp_path / "chromium_headless_shell-1148/chrome-linux/headless_shell"
        )

    def test_firefox_default_path(self, tmp_path: Path) -> None:
        """Firefox resolves to the Playwright Firefox build."""
        assert firefox_installer.expected_executable(tmp_path, environ={}) == (
            tmp_path / "firefox-1466/firefox/firefox"
        )

    def test_override_from_environment(self, tmp_path: Path) -> None:
        """The relative path can be overridden per browser."""
        environ = {"FIREFOX_EXECUTABLE_PATH": "firefox-9999/firefox/firefox"}

        assert firefox_installer.expected_executable(tmp_path, environ=environ) == (
            tmp_path / "firefox-9999/firefox/firefox"
        )


def test_fetch_commands_use_playwright() -> None:
    """Both installers run the Playwright CLI from this interpreter."""
    assert chrome_installer.fetch_command == (
        sys.executable,
        "-m",
        "playwright",
        "install",
        "chromium-headless-shell",
    )
    assert firefox_installer.fetch_command[-2:] == ("install", "firefox")


class TestInstall:
    """Tests for install with the fetch command mocked out."""

    @pytest.fixture(autouse=True)
    def _clear_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CHROME_EXECUTABLE_PATH", raising=False)

    async def test_creates_directory_and_passes_cache_dir(
        self, tmp_path: Path
    ) -> None:
        """Creates the download directory and points the fetch tool at it."""
        download_dir = tmp_path / "nested" / "browsers"

        with patch(
            "wasm_browser_test.browsers.base.run_fetch_command", new=AsyncMock()
        ) as fetch_mock:
            exit_code = await chrome_installer.install(download_dir)

        assert download_dir.is_dir()
        assert exit_code == 1
        command, env, timeout = fetch_mock.call_args.args
        assert command == chrome_installer.fetch_command
        assert env[CACHE_DIR_VARIABLE] == str(download_dir)
        assert timeout == INSTALL_TIMEOUT

    async def test_missing_executable(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Fails and names the expected path when nothing was downloaded."""
        with patch(
            "wasm_browser_test.browsers.base.run_fetch_command", new=AsyncMock()
        ):
            exit_code = await chrome_installer.install(tmp_path)

        expected = chrome_installer.expected_executable(tmp_path)
        assert exit_code == 1
        assert f"Chrome executable not found at expected path: {expected}" in (
            caplog.text
        )

    async def test_fetch_failure(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Fetch errors are logged and turned into exit code 1."""
        with patch(
            "wasm_browser_test.browsers.base.run_fetch_command",
            new=AsyncMock(side_effect=FetchError("Command timed out after 90 seconds")),
        ):
            exit_code = await chrome_installer.install(tmp_path)

        assert exit_code == 1
        assert "Error installing Chrome: Command timed out after 90 seconds" in (
            caplog.text
        )

    async def test_spawn_failure(self, tmp_path: Path) -> None:
        """A fetch command that cannot start is a failure, not a crash."""
        with patch(
            "wasm_browser_test.browsers.base.run_fetch_command",
            new=AsyncMock(side_effect=FileNotFoundError("npx")),
        ):
            assert await chrome_installer.install(tmp_path) == 1

    async def test_chmod_failure(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A permission change that fails is logged as an install error."""
        executable = chrome_installer.expected_executable(tmp_path)
        executable.parent.mkdir(parents=True)
        executable.write_text("#!/bin/sh\n")

        with (
            patch(
                "wasm_browser_test.browsers.base.run_fetch_command", new=AsyncMock()
            ),
            patch.object(
                Path, "chmod", side_effect=PermissionError("Operation not permitted")
            ),
        ):
            exit_code = await chrome_installer.install(tmp_path)

        assert exit_code == 1
        assert "Error installing Chrome: Operation not permitted" in caplog.text
