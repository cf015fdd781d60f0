"""Tests for harness page scraping with a mocked browser."""

from unittest.mock import AsyncMock, Mock

from wasm_browser_test.page import (
    READ_OUTPUT_SCRIPT,
    READ_PASSED_SCRIPT,
    RESULT_SELECTOR,
    read_outcome,
    run_harness_page,
)


def make_page(passed: object, output: object) -> Mock:
    """Create a page mock whose evaluations return the given values."""
    page = Mock()
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.evaluate = AsyncMock(side_effect=[passed, output])
    return page


async def test_run_harness_page_waits_for_result() -> None:
    """Navigates, waits for the visible result element and reads it."""
    page = make_page(True, "Hello Web!\nExit code: 101")
    browser = Mock()
    browser.new_page = AsyncMock(return_value=page)

    outcome = await run_harness_page(browser, "http://127.0.0.1:8099/", 60)

    page.goto.assert_awaited_once_with("http://127.0.0.1:8099/")
    page.wait_for_selector.assert_awaited_once_with(
        RESULT_SELECTOR, state="visible", timeout=60000
    )
    assert outcome.passed is True
    assert outcome.exit_code == 101
    assert outcome.output == "Hello Web!\nExit code: 101"


async def test_read_outcome_evaluates_both_signals() -> None:
    """Reads the pass class first, then the output text."""
    page = make_page(False, "Exit code: 1")

    outcome = await read_outcome(page)

    assert [call.args[0] for call in page.evaluate.await_args_list] == [
        READ_PASSED_SCRIPT,
        READ_OUTPUT_SCRIPT,
    ]
    assert outcome.passed is False
    assert outcome.exit_code == 1


async def test_read_outcome_without_output() -> None:
    """A missing output text yields no exit code."""
    page = make_page(True, None)

    outcome = await read_outcome(page)

    assert outcome.exit_code is None
    assert outcome.output == ""
