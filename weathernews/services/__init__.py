# Services package init
"""
Weather & News Backend — Provider Clients
==========================================

What:  Outbound clients for the third-party data providers.
Why:   Routes handle HTTP in and out; clients own the upstream call and the
       translation of upstream failures into ProviderError.

Client Inventory:
    - ProviderClient (abstract): fetch(params, api_key) -> JSON
    - OpenWeatherClient: OpenWeatherMap current weather
    - NewsApiClient: NewsAPI top headlines
"""

from weathernews.services.news_service import NewsApiClient
from weathernews.services.provider_base import ProviderClient
from weathernews.services.weather_service import OpenWeatherClient

__all__ = ["ProviderClient", "OpenWeatherClient", "NewsApiClient"]
