"""Models for the outcome scraped from the test harness page."""

import re
from dataclasses import dataclass

EXIT_CODE_PATTERN = re.compile(r"Exit code: (\d+)")


def parse_exit_code(output: str) -> int | None:
    """Extract the integer from the first ``Exit code: <digits>`` in the text."""
    match = EXIT_CODE_PATTERN.search(output)
    return int(match.group(1)) if match else None


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Pass flag and exit code reported by the harness page."""

    __test__ = False

    passed: bool
    exit_code: int | None
    output: str = ""

    def is_success(self, expected_exit_code: int) -> bool:
        """Both signals must hold their expected values."""
        return self.passed and self.exit_code == expected_exit_code
