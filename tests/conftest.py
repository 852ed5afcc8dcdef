"""Shared fixtures for the error video middleware tests.

Backends are raw ASGI callables so the exact message sequence they emit
(header order, body chunking) is under test control.
"""
from __future__ import annotations

from typing import Any, Callable

import pytest
from starlette.testclient import TestClient

from src.middleware.error_video_middleware import ErrorVideoMiddleware
from src.models import InterceptorConfig

VIDEO_PATH = "/error_videos"


def make_backend(
    status: int = 200,
    body: bytes = b"",
    headers: list[tuple[bytes, bytes]] | None = None,
    chunks: int = 1,
) -> Callable:
    """Build an ASGI app that always answers with the given response.

    The body is split into ``chunks`` roughly equal ``http.response.body``
    messages.
    """
    if headers is None:
        headers = [(b"content-type", b"text/plain; charset=utf-8")]

    async def app(scope, receive, send):
        await send({"type": "http.response.start", "status": status, "headers": list(headers)})
        size = max(1, -(-len(body) // chunks))
        parts = [body[i:i + size] for i in range(0, len(body), size)] or [b""]
        for index, part in enumerate(parts):
            await send({
                "type": "http.response.body",
                "body": part,
                "more_body": index < len(parts) - 1,
            })

    return app


def make_scope(path: str, **extra: Any) -> dict:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver")],
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 12345),
    }
    scope.update(extra)
    return scope


async def empty_receive():
    return {"type": "http.request", "body": b"", "more_body": False}


class RecordingSend:
    """Collects every ASGI message the middleware sends to the client."""

    def __init__(self):
        self.messages: list[dict] = []

    async def __call__(self, message):
        self.messages.append(message)


@pytest.fixture()
def config() -> InterceptorConfig:
    return InterceptorConfig(video_path=VIDEO_PATH)


@pytest.fixture()
def client_for(config):
    """Factory returning a TestClient around ErrorVideoMiddleware(backend)."""

    def _client(backend, interceptor_config: InterceptorConfig | None = None) -> TestClient:
        middleware = ErrorVideoMiddleware(backend, config=interceptor_config or config)
        return TestClient(middleware, follow_redirects=False)

    return _client
