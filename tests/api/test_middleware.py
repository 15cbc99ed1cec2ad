"""Testes do middleware de correlation_id."""

from __future__ import annotations

import pytest
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from api.middleware import correlation_id_middleware
from app.observability import get_correlation_id


def _request(headers: list[tuple[bytes, bytes]] | None = None) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": headers or [],
    }
    return Request(scope)


@pytest.mark.asyncio
async def test_propagates_incoming_header() -> None:
    seen: list[str] = []

    async def call_next(request: Request) -> Response:
        seen.append(get_correlation_id())
        return PlainTextResponse("ok")

    response = await correlation_id_middleware(
        _request([(b"x-correlation-id", b"corr-abc")]), call_next
    )

    assert seen == ["corr-abc"]
    assert response.headers["x-correlation-id"] == "corr-abc"
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_generates_id_when_header_missing() -> None:
    async def call_next(request: Request) -> Response:
        return PlainTextResponse("ok")

    response = await correlation_id_middleware(_request(), call_next)

    assert len(response.headers["x-correlation-id"]) == 36
