"""
Weather & News Backend — Pydantic Response Schemas
===================================================

What:  Pydantic models for the bodies this service produces itself.
Why:   Successful provider responses are passed through untouched, so the
       only shapes we own are the error bodies and the health report. Route
       decorators reference them so they appear in the OpenAPI docs.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Inner object of the error envelope."""
    message: str = Field(description="Human-readable error description")
    status: int = Field(description="HTTP status code, repeated in the body")


class ErrorEnvelope(BaseModel):
    """
    What:  The single normalized shape for every failure response.

    Example:
        {"error": {"message": "city not found", "status": 404}}
    """
    error: ErrorDetail


class RouteNotFoundResponse(BaseModel):
    """
    What:  Body returned when no route or static asset matched.
    Shape differs from ErrorEnvelope: existing front-ends read a bare
    string under "error" for unknown routes.
    """
    error: str = Field(default="Route not found")


class HealthResponse(BaseModel):
    """Service status and provider key configuration, without outbound calls."""
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    weather_api: str = Field(description="Weather API key: configured, missing")
    news_api: str = Field(description="News API key: configured, missing")
    uptime_seconds: float = Field(description="Seconds since service started")
