"""
Weather & News Backend — Unexpected Error Middleware
======================================================

What:  Renders unexpected exceptions as the generic 500 envelope from
       inside the middleware chain.
Why:   Starlette runs an `Exception` handler in ServerErrorMiddleware, which
       sits outside every user middleware. A response produced there would
       carry no CORS headers and no X-Request-ID, and would never reach the
       access log. Catching here, innermost, lets those layers see it.
How:   Registered first in create_app() so it wraps only the router.
       WeatherNewsError and HTTPException never get this far; FastAPI's
       exception handlers turn them into responses inside the router.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from weathernews.errors import error_response, normalize_error
from weathernews.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class ErrorNormalizerMiddleware(BaseHTTPMiddleware):
    """Last line of the error shell: any escaped exception becomes a 500 envelope."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return error_response(*normalize_error(exc))
