"""Headless Chromium installer."""

import sys

from wasm_browser_test.browsers.base import BrowserInstaller

# Layout of the chromium-headless-shell build shipped with Playwright 1.49
CHROME_EXECUTABLE_PATH = "chromium_headless_shell-1148/chrome-linux/headless_shell"

chrome_installer = BrowserInstaller(
    display_name="Chrome",
    fetch_command=(
        sys.executable,
        "-m",
        "playwright",
        "install",
        "chromium-headless-shell",
    ),
    executable_path=CHROME_EXECUTABLE_PATH,
    executable_path_variable="CHROME_EXECUTABLE_PATH",
)
