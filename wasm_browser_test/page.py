"""Headless browser control and result scraping for the harness page."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from playwright.async_api import Browser, Page, async_playwright

from wasm_browser_test.models.config import RunnerConfig
from wasm_browser_test.models.result import TestOutcome, parse_exit_code

log = logging.getLogger(__name__)

RESULT_SELECTOR = "#test-result"
PASS_CLASS = "pass"
OUTPUT_ELEMENT_ID = "output"

READ_PASSED_SCRIPT = f"""() => document.querySelector('{RESULT_SELECTOR}')
    .classList.contains('{PASS_CLASS}')"""
READ_OUTPUT_SCRIPT = f"""() => {{
    const output = document.getElementById('{OUTPUT_ELEMENT_ID}');
    return output ? output.textContent : '';
}}"""


@asynccontextmanager
async def launch_browser(config: RunnerConfig) -> AsyncGenerator[Browser, None]:
    """Launch a headless browser and close it when the block exits."""
    async with async_playwright() as playwright:
        browser_type = getattr(playwright, config.browser)
        log.info("Launching %s browser...", config.browser)
        browser: Browser = await browser_type.launch(
            headless=True, executable_path=config.browser_path
        )
        log.info("%s browser launched successfully", config.browser)
        try:
            yield browser
        finally:
            await browser.close()
            log.info("Browser closed")


async def run_harness_page(browser: Browser, url: str, timeout: float) -> TestOutcome:
    """Open the harness page and wait for it to report a result.

    Args:
        browser: Launched browser
        url: Harness page URL
        timeout: Seconds to wait for the result element to become visible

    Returns:
        Outcome scraped from the rendered page

    Raises:
        playwright.async_api.Error: On navigation failure or timeout

    """
    page = await browser.new_page()
    await page.goto(url)

    log.info("Waiting for test result element...")
    await page.wait_for_selector(
        RESULT_SELECTOR, state="visible", timeout=timeout * 1000
    )
    log.info("Test result element found")

    return await read_outcome(page)


async def read_outcome(page: Page) -> TestOutcome:
    """Read the pass flag and the reported exit code from the page."""
    passed = await page.evaluate(READ_PASSED_SCRIPT)
    output = await page.evaluate(READ_OUTPUT_SCRIPT)
    return TestOutcome(
        passed=bool(passed),
        exit_code=parse_exit_code(output or ""),
        output=output or "",
    )
