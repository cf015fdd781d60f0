"""Browser installers."""

from wasm_browser_test.browsers.base import BrowserInstaller
from wasm_browser_test.browsers.chrome import chrome_installer
from wasm_browser_test.browsers.firefox import firefox_installer

__all__ = ["BrowserInstaller", "chrome_installer", "firefox_installer"]
