"""Configuration for the WASM test runner, read from environment variables."""

from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator

from wasm_browser_test.models.base import Model

PACKAGE_DIR = Path(__file__).resolve().parent.parent

BrowserName = Literal["firefox", "chromium"]

# Environment variable -> RunnerConfig field
ENVIRONMENT_FIELDS: Mapping[str, str] = {
    "TEST_SERVER_PORT": "port",
    "TEST_BROWSER": "browser",
    "WASM_BIN_PATH": "wasm_bin_path",
    "TEST_HTML_PATH": "test_html_path",
    "TEST_STATIC_ROOT": "static_root",
    "TEST_RESULT_TIMEOUT": "result_timeout",
    "TEST_EXPECTED_EXIT_CODE": "expected_exit_code",
}

BROWSER_PATH_VARIABLES: Mapping[str, str] = {
    "firefox": "FIREFOX_PATH",
    "chromium": "CHROME_PATH",
}


class RunnerConfig(Model):
    """Settings for a single test run."""

    port: int = Field(default=8099, ge=0, le=65535, description="Server port")
    browser: BrowserName = Field(default="firefox", description="Browser engine")
    browser_path: Path | None = Field(
        default=None,
        description="Browser executable (None uses Playwright's own build)",
    )
    wasm_bin_path: Path = Field(..., description="WebAssembly binary under test")
    test_html_path: Path = Field(..., description="HTML harness page")
    static_root: Path = Field(
        default=PACKAGE_DIR, description="Root for fallback static file lookups"
    )
    result_timeout: float = Field(
        default=60.0, gt=0, description="Seconds to wait for the result element"
    )
    expected_exit_code: int = Field(
        default=101, description="Exit code the page must report"
    )

    @field_validator("static_root")
    @classmethod
    def _resolve_static_root(cls, value: Path) -> Path:
        return value.resolve()

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "RunnerConfig":
        """Build the configuration from environment variables.

        Unset and empty variables fall back to the field defaults. The browser
        executable comes from FIREFOX_PATH or CHROME_PATH depending on
        TEST_BROWSER.

        Raises:
            pydantic.ValidationError: If a value is missing or malformed

        """
        values: dict[str, str] = {
            field_name: environ[variable]
            for variable, field_name in ENVIRONMENT_FIELDS.items()
            if environ.get(variable)
        }

        path_variable = BROWSER_PATH_VARIABLES.get(values.get("browser", "firefox"))
        if path_variable and environ.get(path_variable):
            values["browser_path"] = environ[path_variable]

        return cls.model_validate(values)
