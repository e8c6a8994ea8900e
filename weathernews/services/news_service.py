"""
Weather & News Backend — NewsAPI Client
=========================================

What:  Provider client for top headlines by category.
How:   GET {base}/top-headlines?category=<category>&country=<cc>
       with the key in the X-Api-Key header (keeps it out of URLs and logs).
Who:   Called by GET /api/news.
"""

import logging
from typing import Any, Mapping

from weathernews.exceptions import ProviderNotConfiguredError
from weathernews.services.provider_base import ProviderClient

logger = logging.getLogger(__name__)

# Categories accepted by NewsAPI's /top-headlines endpoint
NEWS_CATEGORIES = frozenset({
    "business",
    "entertainment",
    "general",
    "health",
    "science",
    "sports",
    "technology",
})


class NewsApiClient(ProviderClient):
    """Top-headline lookups against NewsAPI v2."""

    display_name = "News provider"

    async def fetch(self, params: Mapping[str, str], api_key: str) -> Any:
        if not api_key:
            logger.error("News request rejected: NEWS_API_KEY is not set")
            raise ProviderNotConfiguredError("News", "NEWS_API_KEY")

        return await self._get_json(
            "/top-headlines",
            params,
            headers={"X-Api-Key": api_key},
        )
