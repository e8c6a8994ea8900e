"""
Weather & News Backend — News Route Handler
=============================================

What:  Handles GET /api/news?category=<name>[&country=us].
How:   Validates query parameters, calls the NewsAPI client with the key
       from the injected settings, returns the upstream JSON as-is.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from weathernews.config import Settings
from weathernews.dependencies import get_news_client, get_settings
from weathernews.exceptions import ValidationError
from weathernews.schemas.responses import ErrorEnvelope
from weathernews.services.news_service import NEWS_CATEGORIES
from weathernews.services.provider_base import ProviderClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/news", tags=["News"])


@router.get(
    "",
    responses={
        200: {"description": "Top headlines, exactly as returned by NewsAPI"},
        400: {"description": "Missing or invalid query parameter", "model": ErrorEnvelope},
        500: {"description": "API key missing or unexpected error", "model": ErrorEnvelope},
        502: {"description": "News provider unreachable", "model": ErrorEnvelope},
    },
    summary="Top headlines for a category",
)
@router.get("/", include_in_schema=False)
async def get_news(
    category: str | None = Query(default=None, description="NewsAPI category, e.g. 'technology'"),
    country: str | None = Query(default=None, description="Two-letter country code"),
    settings: Settings = Depends(get_settings),
    client: ProviderClient = Depends(get_news_client),
) -> JSONResponse:
    """Forward a top-headlines lookup to NewsAPI."""
    if category is None or not category.strip():
        raise ValidationError("Missing required query parameter: category", field="category")

    category = category.strip().lower()
    if category not in NEWS_CATEGORIES:
        raise ValidationError(
            f"Invalid value for query parameter category: must be one of {', '.join(sorted(NEWS_CATEGORIES))}",
            field="category",
        )

    if country is not None:
        country = country.strip().lower()
        if len(country) != 2 or not country.isalpha():
            raise ValidationError(
                "Invalid value for query parameter country: expected a two-letter code",
                field="country",
            )

    params = {
        "category": category,
        "country": country or settings.news_country.lower(),
    }
    logger.debug("News lookup for %s (%s)", params["category"], params["country"])

    data = await client.fetch(params, settings.news_api_key)
    return JSONResponse(content=data)
