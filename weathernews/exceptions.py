"""
Weather & News Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions, each carrying an HTTP status and a
       client-safe message.
Why:   Handlers and provider clients raise; one boundary (registered in
       main.py) turns every error into the same JSON envelope:
           {"error": {"message": "...", "status": 503}}
How:   Each exception stores `message`, `status` and an optional `context`
       dict. Context is logged server-side and never returned to the client.

Exception Hierarchy:
    WeatherNewsError (base)          → 500 Internal Server Error
    ├── ValidationError              → 400 Bad Request (client can fix)
    └── ProviderError                → upstream status, or 502 Bad Gateway
        └── ProviderNotConfiguredError → 500 (API key missing at call time)
"""

from typing import Any, Dict, Optional


class WeatherNewsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        status:   HTTP status code for the error envelope
        context:  Additional debug info (logged but NOT returned to client)
    """

    status: int = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        status: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status is not None:
            self.status = status
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(WeatherNewsError):
    """
    Raised when a query parameter is missing or malformed.

    Detected in the route handler before any provider call is made.
    HTTP: 400 Bad Request
    """

    status = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ProviderError(WeatherNewsError):
    """
    Raised when a third-party provider call does not succeed.

    What:    Transport failure, non-2xx upstream status, or an unreadable body.
    HTTP:    The upstream status when it is a 4xx/5xx, otherwise 502.

    Not retried and not recovered: the route handler lets it propagate
    and the client sees the upstream message and status verbatim.
    """

    status = 502

    def __init__(
        self,
        message: str = "Upstream provider request failed",
        status: Optional[int] = None,
        provider: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if provider:
            ctx["provider"] = provider
        super().__init__(message=message, status=status, context=ctx)
        self.provider = provider


class ProviderNotConfiguredError(ProviderError):
    """
    Raised when a provider is called without an API key.

    The server starts without keys; the affected route fails here instead,
    before any outbound request is made.
    HTTP: 500 Internal Server Error
    """

    status = 500

    def __init__(
        self,
        provider: str,
        env_var: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["env_var"] = env_var
        super().__init__(
            message=f"{provider} API key is not configured",
            provider=provider,
            context=ctx,
        )
        self.env_var = env_var
