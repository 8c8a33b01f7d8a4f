"""
NoteKeeper Backend - Request Logging Middleware
================================================

What:  One access-log line per request on the `notekeeper.access` logger.
How:   Times the call to the next layer. Handled responses are logged with
       their status; an exception escaping the route (which becomes a 500 in
       the outermost error handler) is logged as a 500 and re-raised.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Line format:
    [<request id>] <METHOD> <path> -> <status> (<ms>ms)

Level by status: 5xx ERROR, 4xx WARNING, anything else INFO.
Request bodies are never logged, and neither is GET /health.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")

UNLOGGED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log, including requests that end in an unhandled error."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    @staticmethod
    def _log(request: Request, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        logger.log(
            level_for_status(status),
            "[%s] %s %s -> %d (%.1fms)",
            rid,
            request.method,
            request.url.path,
            status,
            duration_ms,
            extra={"request_id": rid, "status": status},
        )
