"""
Logging Middleware

One "request finished" line per request, carrying status and duration.
request_id, method and path are bound to the structlog context for the
lifetime of the request, so log lines emitted by services and
repositories can be correlated. The id is taken from the caller's
X-Request-ID header when present and is always echoed back.
"""

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from docshelf.core.logging import clear_log_context, log_context, logger

REQUEST_ID_HEADER = "X-Request-ID"

# Probed every few seconds by orchestrators
UNLOGGED_PATHS = frozenset({"/health"})


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context and log each request's outcome."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request crashed", duration_ms=_elapsed_ms(started))
            clear_log_context()
            raise

        if request.url.path not in UNLOGGED_PATHS:
            logger.info(
                "Request finished",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
                query=str(request.query_params) or None,
            )
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_log_context()
        return response
