"""Run the external browser fetch command."""

import asyncio
import logging
from collections.abc import Mapping, Sequence

log = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the fetch command fails or times out."""


async def run_fetch_command(
    command: Sequence[str],
    env: Mapping[str, str],
    timeout: float,
) -> None:
    """Run a command with inherited stdio and a hard timeout.

    Args:
        command: Program and arguments
        env: Complete environment for the child process
        timeout: Seconds before the child is killed

    Raises:
        FetchError: If the command exits non-zero or exceeds the timeout
        OSError: If the command cannot be started

    """
    log.info("Running: %s", " ".join(command))
    process = await asyncio.create_subprocess_exec(*command, env=dict(env))

    try:
        await asyncio.wait_for(process.wait(), timeout=timeout)
    except TimeoutError:
        process.kill()
        await process.wait()
        raise FetchError(
            f"Command timed out after {timeout:g} seconds: {' '.join(command)}"
        ) from None

    if process.returncode != 0:
        raise FetchError(
            f"Command failed with exit code {process.returncode}: {' '.join(command)}"
        )
