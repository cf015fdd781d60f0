"""Fixtures for end-to-end runs against a real headless browser."""

from pathlib import Path

import pytest
from playwright.sync_api import sync_playwright


@pytest.fixture(scope="session")
def firefox_executable() -> Path:
    """Locate Playwright's Firefox build, skipping when it is not installed."""
    with sync_playwright() as playwright:
        executable = Path(playwright.firefox.executable_path)
    if not executable.exists():
        pytest.skip("Playwright Firefox is not installed")
    return executable


@pytest.fixture
def harness_dir(tmp_path: Path) -> Path:
    """Create a directory holding a WASM binary for the harness."""
    (tmp_path / "hello_web.wasm").write_bytes(b"\0asm\x01\0\0\0")
    return tmp_path
