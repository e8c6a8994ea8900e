"""
Weather & News Backend — Request Dependencies
===============================================

What:  FastAPI dependencies that hand the per-app settings and provider
       clients to route handlers.
Why:   Handlers never read configuration from a global. The factory puts
       one frozen Settings and one client per provider on `app.state`;
       these functions read them back for each request.
How:   Route parameters declared as `Depends(get_settings)` etc.
       Tests replace clients either by passing a custom httpx client to
       create_app() or through `app.dependency_overrides`.
"""

from fastapi import Request

from weathernews.config import Settings
from weathernews.services.provider_base import ProviderClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_client(request: Request) -> ProviderClient:
    return request.app.state.weather_client


def get_news_client(request: Request) -> ProviderClient:
    return request.app.state.news_client
