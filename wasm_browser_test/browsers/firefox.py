"""Firefox installer."""

import sys

from wasm_browser_test.browsers.base import BrowserInstaller

# Layout of the Firefox build shipped with Playwright 1.49
FIREFOX_EXECUTABLE_PATH = "firefox-1466/firefox/firefox"

firefox_installer = BrowserInstaller(
    display_name="Firefox",
    fetch_command=(sys.executable, "-m", "playwright", "install", "firefox"),
    executable_path=FIREFOX_EXECUTABLE_PATH,
    executable_path_variable="FIREFOX_EXECUTABLE_PATH",
)
