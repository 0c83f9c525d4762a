"""
Middleware for request correlation ID tracking.

This middleware adds correlation IDs to requests so every log line written
while serving a search can be traced back to it.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from roster.logging import clear_log_context, set_log_context

# Context variable for storing correlation ID per request
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation IDs to requests.

    This middleware:
    - Extracts correlation ID from X-Correlation-ID header or generates new 8-char UUID
    - Stores correlation ID in context variable for access in logging
    - Adds endpoint and method to the log context for the request
    - Adds correlation ID to response headers for client tracking
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        cid = request.headers.get("X-Correlation-ID", str(uuid.uuid4())[:8])
        cid = cid[:8]

        token = correlation_id.set(cid)
        set_log_context(endpoint=request.url.path, method=request.method)
        try:
            response = await call_next(request)
        finally:
            clear_log_context()
            correlation_id.reset(token)

        response.headers["X-Correlation-ID"] = cid
        return response


def get_correlation_id() -> str:
    """
    Get the correlation ID for the current request context.

    Returns:
        Correlation ID string, or empty string if not in request context.
    """
    return correlation_id.get()
