"""
Weather & News Backend — Error Envelope Rendering
===================================================

What:  Turns any exception into the (status, message) pair of the error
       envelope and renders the envelope as a JSONResponse.
Who:   Used by the exception handlers in main.py and by
       ErrorNormalizerMiddleware, so every failure is shaped in one place.

Response shapes:
    failure   → {"error": {"message": "...", "status": 503}}
    no route  → {"error": "Route not found"}  (status 404)
"""

import logging
from typing import Tuple

from fastapi.responses import JSONResponse

from weathernews.exceptions import WeatherNewsError
from weathernews.schemas.responses import ErrorDetail, ErrorEnvelope, RouteNotFoundResponse

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500
DEFAULT_ERROR_MESSAGE = "Internal Server Error"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


def normalize_error(exc: BaseException) -> Tuple[int, str]:
    """
    Reduce any exception to the (status, message) pair of the error envelope.

    Application errors keep their own status and message. Anything else is
    an unexpected fault and gets the generic 500 so internal details never
    reach the client. This function does not raise: if reading the error
    fails, the defaults are returned.
    """
    try:
        if not isinstance(exc, WeatherNewsError):
            return DEFAULT_ERROR_STATUS, DEFAULT_ERROR_MESSAGE

        status = exc.status
        message = exc.message
        if isinstance(status, bool) or not isinstance(status, int) or not 400 <= status <= 599:
            status = DEFAULT_ERROR_STATUS
        if not isinstance(message, str) or not message:
            message = DEFAULT_ERROR_MESSAGE
        return status, message
    except Exception:
        logger.exception("Could not read error details; using the default envelope")
        return DEFAULT_ERROR_STATUS, DEFAULT_ERROR_MESSAGE


def error_response(status: int, message: str) -> JSONResponse:
    """Render the error envelope: {"error": {"message": ..., "status": ...}}."""
    envelope = ErrorEnvelope(error=ErrorDetail(message=message, status=status))
    return JSONResponse(status_code=status, content=envelope.model_dump())


def route_not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=RouteNotFoundResponse(error=ROUTE_NOT_FOUND_MESSAGE).model_dump(),
    )
