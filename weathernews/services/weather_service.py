"""
Weather & News Backend — OpenWeatherMap Client
================================================

What:  Provider client for current weather conditions.
How:   GET {base}/weather?q=<city>&units=<units>&appid=<key>
Who:   Called by GET /api/weather.

OpenWeatherMap reports failures with a JSON body such as
    {"cod": "404", "message": "city not found"}
which ProviderClient._error_message() turns into the client-visible message.
"""

import logging
from typing import Any, Mapping

from weathernews.exceptions import ProviderNotConfiguredError
from weathernews.services.provider_base import ProviderClient

logger = logging.getLogger(__name__)


class OpenWeatherClient(ProviderClient):
    """Current-weather lookups against the OpenWeatherMap 2.5 API."""

    display_name = "Weather provider"

    async def fetch(self, params: Mapping[str, str], api_key: str) -> Any:
        if not api_key:
            logger.error("Weather request rejected: OPENWEATHER_API_KEY is not set")
            raise ProviderNotConfiguredError("Weather", "OPENWEATHER_API_KEY")

        # appid travels as a query parameter, as OpenWeatherMap requires
        return await self._get_json("/weather", params, secret_params={"appid": api_key})
