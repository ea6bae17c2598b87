"""
Noteboard Backend: Request ID Middleware
========================================

What:  Assigns a short correlation id to each request and echoes it back in
       the `X-Request-ID` response header.
How:   Reuses the id sent by the client (the canvas client sends one per
       call) or generates one; stores it in a ContextVar for loggers and
       exception handlers, and in `request.state` for route handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Eight hex characters: enough to correlate log lines by eye."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
