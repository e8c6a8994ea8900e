"""
Weather & News Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Apps are built with create_app() from explicit Settings and an httpx
       client whose MockTransport plays both upstream providers, so no test
       touches the network or the real API keys.

Fixture Hierarchy:
    ├── settings: Frozen test settings with fake keys and fake provider hosts
    ├── upstream: Programmable fake for OpenWeatherMap and NewsAPI
    ├── app_factory: Builds an app wired to `upstream`
    └── test_client: HTTPX AsyncClient talking to a default app via ASGI
"""

import asyncio
import os
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Before any app import: the module-level app in weathernews.main reads the env
os.environ["LOG_LEVEL"] = "WARNING"

from weathernews.config import Settings  # noqa: E402
from weathernews.main import create_app  # noqa: E402

WEATHER_HOST = "weather.test"
NEWS_HOST = "news.test"

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from any local .env file."""
    values: Dict[str, Any] = {
        "openweather_api_key": "test-weather-key",
        "news_api_key": "test-news-key",
        "openweather_base_url": f"https://{WEATHER_HOST}/data/2.5",
        "news_api_base_url": f"https://{NEWS_HOST}/v2",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def json_route(status: int = 200, body: Any = None, delay: float = 0.0) -> Handler:
    """Upstream handler answering with a fixed JSON body, optionally after a delay."""

    async def handler(request: httpx.Request) -> httpx.Response:
        if delay:
            await asyncio.sleep(delay)
        return httpx.Response(status, json=body if body is not None else {})

    return handler


class FakeUpstream:
    """
    Stand-in for both providers, dispatched on the request host.

    Records every outbound request so tests can assert on the query string,
    headers, or that no call was made at all.
    """

    def __init__(self) -> None:
        self.routes: Dict[str, Handler] = {}
        self.requests: List[httpx.Request] = []

    def route(self, host: str, handler: Handler) -> None:
        self.routes[host] = handler

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            return httpx.Response(404, json={"message": f"no fake route for {request.url.host}"})
        return await handler(request)


class StubProviderClient:
    """Provider client double for dependency overrides."""

    def __init__(self, result: Any = None, error: Optional[BaseException] = None):
        self.result = result
        self.error = error
        self.calls: List[tuple] = []

    async def fetch(self, params, api_key):
        self.calls.append((dict(params), api_key))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def app_factory(upstream):
    """
    Builds apps whose outbound client is routed to `upstream`.

    The outbound clients are passed in, so the apps never close them;
    this fixture does on teardown.
    """
    http_clients: List[httpx.AsyncClient] = []

    def _factory(app_settings: Settings):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handle))
        http_clients.append(http_client)
        return create_app(app_settings, http_client=http_client)

    yield _factory

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def app(app_factory, settings):
    return app_factory(settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the app without a server.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
