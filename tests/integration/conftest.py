"""Fixtures for integration tests."""
import pytest_asyncio
from aiohttp import web, test_utils


class SheetServer:
    """Local HTTP server answering each path with a configured response."""

    def __init__(self):
        self.routes: dict[str, tuple[int, str]] = {}
        self.hits: list[str] = []
        self._server: test_utils.TestServer | None = None

    def url(self, path: str) -> str:
        return str(self._server.make_url(path))

    def serve(self, path: str, body: str, status: int = 200) -> None:
        self.routes[path] = (status, body)

    async def _handle(self, request: web.Request) -> web.Response:
        self.hits.append(request.path)
        status, body = self.routes.get(request.path, (404, "not found"))
        return web.Response(status=status, text=body, content_type="text/csv")

    async def start(self) -> None:
        app = web.Application()
        app.router.add_get("/{tail:.*}", self._handle)
        self._server = test_utils.TestServer(app)
        await self._server.start_server()

    async def close(self) -> None:
        await self._server.close()


@pytest_asyncio.fixture
async def sheet_server():
    """Provide a running local sheet server."""
    server = SheetServer()
    await server.start()
    yield server
    await server.close()
