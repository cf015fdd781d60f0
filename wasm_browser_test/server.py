"""Static file server for the WASM test harness page."""

import asyncio
import errno
import logging
from collections.abc import Mapping
from pathlib import Path
from types import TracebackType

from aiohttp import web

log = logging.getLogger(__name__)

SERVER_HOST = "127.0.0.1"

WASM_ROUTES = ("/hello_web.wasm", "/tests/hello-web/hello_web_bin")
WASM_CONTENT_TYPE = "application/wasm"
DEFAULT_CONTENT_TYPE = "text/html"

CONTENT_TYPES: Mapping[str, str] = {
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".wasm": WASM_CONTENT_TYPE,
}


def content_type_for(path: Path) -> str:
    """Pick the response content type from the file extension."""
    return CONTENT_TYPES.get(path.suffix, DEFAULT_CONTENT_TYPE)


class HarnessServer:
    """Serves the harness page, the WASM binary and files under a static root.

    Use as an async context manager; the listening socket is closed on exit.
    A port of 0 binds an ephemeral port, reported by ``port`` once started.
    """

    def __init__(
        self,
        *,
        html_path: Path,
        wasm_path: Path,
        static_root: Path,
        port: int,
    ) -> None:
        self.html_path = html_path
        self.wasm_path = wasm_path
        self.static_root = static_root.resolve()
        self._requested_port = port
        self._runner: web.AppRunner | None = None

        self.app = web.Application()
        self.app.router.add_get("/{tail:.*}", self.handle)

    async def __aenter__(self) -> "HarnessServer":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    @property
    def port(self) -> int:
        """Port the server is listening on."""
        if self._runner is None or not self._runner.addresses:
            raise RuntimeError("Test server is not running")
        return int(self._runner.addresses[0][1])

    @property
    def url(self) -> str:
        """Root URL of the running server."""
        return f"http://{SERVER_HOST}:{self.port}/"

    async def start(self) -> None:
        """Bind the listener and start serving."""
        runner = web.AppRunner(self.app, access_log=None)
        await runner.setup()
        site = web.TCPSite(runner, SERVER_HOST, self._requested_port)
        try:
            await site.start()
        except OSError:
            await runner.cleanup()
            raise
        self._runner = runner
        log.info("Test server running at %s", self.url)

    async def stop(self) -> None:
        """Close the listener and wait until the port is released."""
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
        log.info("Test server stopped")

    def resolve(self, request_path: str) -> tuple[Path, str] | None:
        """Map a request path to a file and content type.

        Returns None when a fallback path escapes the static root.
        """
        if request_path == "/":
            return self.html_path, DEFAULT_CONTENT_TYPE
        if request_path in WASM_ROUTES:
            return self.wasm_path, WASM_CONTENT_TYPE

        file_path = (self.static_root / request_path.lstrip("/")).resolve()
        if not file_path.is_relative_to(self.static_root):
            return None
        return file_path, content_type_for(file_path)

    async def handle(self, request: web.Request) -> web.Response:
        """Answer a GET request from disk."""
        resolved = self.resolve(request.path)
        if resolved is None:
            log.error("File not found: %s", request.path)
            return web.Response(status=404, text="File not found")

        file_path, content_type = resolved
        try:
            content = await asyncio.to_thread(file_path.read_bytes)
        except FileNotFoundError:
            log.error("File not found: %s", file_path)
            return web.Response(status=404, text="File not found")
        except OSError as error:
            code = errno.errorcode.get(error.errno or 0, str(error.errno))
            log.error("Server error: %s", code)
            return web.Response(status=500, text=f"Server Error: {code}")

        return web.Response(body=content, content_type=content_type)
