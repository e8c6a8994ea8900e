"""
Weather & News Backend — Health Check Route
=============================================

What:  Health check endpoint for monitoring and container liveness checks.
How:   Reports whether each provider API key is configured. No outbound
       calls are made, so a health check never spends provider quota.
       Uptime is measured from app.state.started_at, set at startup.

Status levels:
    - healthy:   both API keys configured
    - degraded:  at least one key missing (the affected route will fail)
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from weathernews import __version__
from weathernews.config import Settings
from weathernews.dependencies import get_settings
from weathernews.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    missing = settings.missing_api_keys()
    started_at = request.app.state.started_at
    return HealthResponse(
        status="degraded" if missing else "healthy",
        version=__version__,
        weather_api="missing" if "OPENWEATHER_API_KEY" in missing else "configured",
        news_api="missing" if "NEWS_API_KEY" in missing else "configured",
        uptime_seconds=round(time.time() - started_at, 2),
    )
