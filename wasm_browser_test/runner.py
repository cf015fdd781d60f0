"""Run the WASM harness page in a headless browser and judge the outcome."""

import logging

from wasm_browser_test.models.config import RunnerConfig
from wasm_browser_test.models.result import TestOutcome
from wasm_browser_test.page import launch_browser, run_harness_page
from wasm_browser_test.server import HarnessServer

log = logging.getLogger(__name__)


def check_inputs(config: RunnerConfig) -> bool:
    """Verify the harness page and the WASM binary exist on disk."""
    if not config.test_html_path.is_file():
        log.error("Test HTML file not found at: %s", config.test_html_path)
        return False
    if not config.wasm_bin_path.is_file():
        log.error("WASM binary not found at: %s", config.wasm_bin_path)
        return False
    return True


def report_outcome(outcome: TestOutcome, expected_exit_code: int) -> int:
    """Log the outcome and convert it to a process exit code."""
    if outcome.is_success(expected_exit_code):
        log.info(
            "✅ Test passed! Exit code is %d as expected.", expected_exit_code
        )
        return 0

    log.error(
        "❌ Test failed! passed=%s, exit code: %s (expected %d)",
        outcome.passed,
        outcome.exit_code,
        expected_exit_code,
    )
    log.error("Output: %s", outcome.output)
    return 1


async def run(config: RunnerConfig) -> int:
    """Serve the harness, drive the browser against it and return exit code.

    The browser and the server are released on every exit path.
    """
    log.info("Using browser: %s", config.browser)
    log.info("Using browser path: %s", config.browser_path or "(bundled)")
    log.info("Using WASM binary path: %s", config.wasm_bin_path)
    log.info("Using test HTML path: %s", config.test_html_path)

    if not check_inputs(config):
        return 1

    try:
        async with HarnessServer(
            html_path=config.test_html_path,
            wasm_path=config.wasm_bin_path,
            static_root=config.static_root,
            port=config.port,
        ) as server:
            async with launch_browser(config) as browser:
                outcome = await run_harness_page(
                    browser, server.url, config.result_timeout
                )
    except Exception as error:
        log.error("❌ Test error: %s", error)
        return 1

    return report_outcome(outcome, config.expected_exit_code)
