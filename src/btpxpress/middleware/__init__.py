"""
Middleware to add trace_id to each request.

The trace_id allows tracking logs from the same HTTP request throughout
the entire application.
"""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from btpxpress.core.logging import logger
from btpxpress.core.trace_context import trace_id_context
from btpxpress.exception_handlers import general_exception_handler


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique trace_id to each request.

    Flow:
    1. Request arrives -> generates UUID as trace_id
    2. Stores trace_id in contextvars
    3. All logs automatically include the trace_id
    4. Response includes X-Trace-ID header, including 500 responses built
       here for unhandled exceptions
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Processes the request by adding trace_id.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            Response with X-Trace-ID header
        """
        trace_id = str(uuid.uuid4())
        token = trace_id_context.set(trace_id)

        logger.info(f"Request started: {request.method} {request.url.path}")

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # Starlette's error middleware sits outside this one; answer
                # here so the 500 keeps the trace id.
                response = await general_exception_handler(request, exc)

            response.headers["X-Trace-ID"] = trace_id

            logger.info(
                f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}",  # noqa: E501
            )

            return response

        finally:
            trace_id_context.reset(token)


__all__ = ["TraceIDMiddleware"]
