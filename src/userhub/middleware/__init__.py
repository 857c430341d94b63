"""
Middleware to add trace_id to each request.

The trace_id allows tracking logs from the same HTTP request throughout
the entire application, facilitating debugging and observability.
"""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from userhub.core.logging import logger
from userhub.core.trace_context import trace_id_context

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique trace_id to each request.

    Flow:
    1. Request arrives -> reuses a valid incoming X-Trace-ID or generates a UUID
    2. Stores trace_id in contextvars
    3. All logs automatically include the trace_id
    4. Response includes X-Trace-ID header
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
        trace_id = _incoming_trace_id(request) or str(uuid.uuid4())
        token = trace_id_context.set(trace_id)

        logger.info(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id
            logger.info(
                f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}"  # noqa: E501
            )
            return response

        except Exception:
            logger.exception(f"Request failed: {request.method} {request.url.path}")
            raise

        finally:
            trace_id_context.reset(token)


def _incoming_trace_id(request: Request) -> str | None:
    """Accept a caller-supplied trace id only if it is a UUID."""
    value = request.headers.get(TRACE_ID_HEADER)
    if not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


__all__ = ["TRACE_ID_HEADER", "TraceIDMiddleware"]
