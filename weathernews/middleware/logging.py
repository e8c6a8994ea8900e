"""
Weather & News Backend — Request Logging Middleware
=====================================================

What:  One access-log line per HTTP request: method, path, status, duration.
How:   Measures from middleware entry to response return, which includes the
       provider round-trip for /api routes.

What we log vs what we DON'T log:
    Log: method, path, status, duration, client IP, request ID
    Don't log: query strings (API keys could be pasted there), headers
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from weathernews.middleware.request_id import request_id_var

logger = logging.getLogger("weathernews.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration for each request.

    Level follows the status class so alerting can key off severity:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    # Health checks run every few seconds and would drown the useful lines
    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
