"""
NoteKeeper Backend - Request ID Middleware
===========================================

What:  Tags each request with a short correlation id and echoes it back.
How:   Uses the client's X-Request-ID header when present, otherwise a fresh
       8-character UUID prefix. The id is stored in a ContextVar for loggers
       and error handlers, on request.state for handlers, and returned in the
       X-Request-ID response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a correlation id to every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        # Left set after the call so the outermost error handler can still read it
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
