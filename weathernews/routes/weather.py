"""
Weather & News Backend — Weather Route Handler
================================================

What:  Handles GET /api/weather?city=<name>[&units=metric].
Why:   Lets the front-end read current conditions without holding the
       OpenWeatherMap key.
How:   Validates query parameters, calls the weather provider client with
       the key from the injected settings, returns the upstream JSON as-is.

Request Flow:
    1. Missing/blank city or unknown units → ValidationError (400)
    2. OpenWeatherClient.fetch() → upstream JSON
    3. Return 200 with the body unchanged
    4. Provider failures propagate to the global exception handlers
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from weathernews.config import WEATHER_UNITS, Settings
from weathernews.dependencies import get_settings, get_weather_client
from weathernews.exceptions import ValidationError
from weathernews.schemas.responses import ErrorEnvelope
from weathernews.services.provider_base import ProviderClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/weather", tags=["Weather"])


@router.get(
    "",
    responses={
        200: {"description": "Current weather, exactly as returned by OpenWeatherMap"},
        400: {"description": "Missing or invalid query parameter", "model": ErrorEnvelope},
        500: {"description": "API key missing or unexpected error", "model": ErrorEnvelope},
        502: {"description": "Weather provider unreachable", "model": ErrorEnvelope},
    },
    summary="Current weather for a city",
)
@router.get("/", include_in_schema=False)
async def get_weather(
    city: str | None = Query(default=None, description="City name, e.g. 'London' or 'London,GB'"),
    units: str | None = Query(default=None, description="standard, metric or imperial"),
    settings: Settings = Depends(get_settings),
    client: ProviderClient = Depends(get_weather_client),
) -> JSONResponse:
    """
    Forward a current-weather lookup to OpenWeatherMap.

    Error responses (handled by global exception handlers):
        HTTP 400: city missing or units not recognised
        HTTP 4xx/5xx: upstream status and message (e.g. 404 "city not found")
        HTTP 500: OPENWEATHER_API_KEY not configured
        HTTP 502: provider unreachable or returned an unreadable body
    """
    if city is None or not city.strip():
        raise ValidationError("Missing required query parameter: city", field="city")

    if units is not None and units.lower() not in WEATHER_UNITS:
        raise ValidationError(
            f"Invalid value for query parameter units: must be one of {', '.join(sorted(WEATHER_UNITS))}",
            field="units",
        )

    params = {
        "q": city.strip(),
        "units": units.lower() if units else settings.weather_units,
    }
    logger.debug("Weather lookup for %s (%s)", params["q"], params["units"])

    data = await client.fetch(params, settings.openweather_api_key)
    return JSONResponse(content=data)
