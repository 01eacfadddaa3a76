"""
Unit tests for TraceIDMiddleware.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import Request, Response

from btpxpress.core.trace_context import trace_id_context
from btpxpress.middleware import TraceIDMiddleware


@pytest.fixture
def middleware():
    """Create middleware instance."""
    return TraceIDMiddleware(app=AsyncMock())


def make_request(method: str = "GET", path: str = "/api/health"):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    return request


@pytest.mark.asyncio
async def test_trace_id_middleware_adds_header(middleware):
    """Test middleware adds X-Trace-ID header."""
    call_next = AsyncMock(return_value=Response(content="ok", status_code=200))

    result = await middleware.dispatch(make_request(), call_next)

    assert len(result.headers["X-Trace-ID"]) == 36


@pytest.mark.asyncio
async def test_trace_id_middleware_sets_and_resets_context(middleware):
    """Test trace_id is visible while handling and cleared afterwards."""
    seen = []

    async def call_next(req):  # noqa: ASYNC100
        seen.append(trace_id_context.get())
        return Response()

    result = await middleware.dispatch(make_request(), call_next)

    assert seen == [result.headers["X-Trace-ID"]]
    assert trace_id_context.get() is None


@pytest.mark.asyncio
async def test_trace_id_middleware_turns_exception_into_500(middleware):
    """Test unhandled exceptions become a 500 that keeps the trace id."""

    async def call_next(req):  # noqa: ASYNC100
        raise ValueError("Test error")

    result = await middleware.dispatch(make_request(path="/error"), call_next)

    assert result.status_code == 500
    assert len(result.headers["X-Trace-ID"]) == 36
    assert trace_id_context.get() is None


@pytest.mark.asyncio
async def test_trace_id_middleware_unique_ids(middleware):
    """Test middleware generates unique trace IDs."""
    result1 = await middleware.dispatch(
        make_request(), AsyncMock(return_value=Response())
    )
    result2 = await middleware.dispatch(
        make_request(), AsyncMock(return_value=Response())
    )

    assert result1.headers["X-Trace-ID"] != result2.headers["X-Trace-ID"]
