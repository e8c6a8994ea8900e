"""
Weather & News Backend — Request ID Middleware
================================================

What:  Assigns an ID to each incoming request and echoes it in the response.
Why:   Correlates the access log line, the error-handler log line and the
       provider log lines of one request, even when requests interleave on
       the event loop.
How:   Honours a client-sent X-Request-ID when it is short and made of safe
       characters, otherwise generates a short UUID; stores it in a
       ContextVar and returns it in the X-Request-ID header.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client IDs end up in log lines and response headers
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(client_value: str | None) -> str:
    """Return the client's ID if it is acceptable, else a fresh 8-char one."""
    if client_value and _VALID_REQUEST_ID.fullmatch(client_value):
        return client_value
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
