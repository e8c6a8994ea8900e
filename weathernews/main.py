"""
Weather & News Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn weathernews.main:app) and by the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌─────────┐ ┌──────┐ ┌──────┐ ┌───────┐ │
    │  │ Req ID │→│ Logging │→│ GZip │→│ CORS │→│ Error │ │
    │  └────────┘ └─────────┘ └──────┘ └──────┘ └───────┘ │
    │                                                     │
    │  Routes (matched in this order):                    │
    │  1. GET /api/weather   2. GET /api/news             │
    │  3. GET /health        4. GET /                     │
    │  5. static files at /  (catch-all, always last)     │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ WeatherNewsError → envelope with its status  │   │
    │  │ routing miss (404/405) → "Route not found"   │   │
    │  │ anything else → 500 envelope (Error mw)      │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Response shapes:
    success   → provider JSON, untouched
    failure   → {"error": {"message": "...", "status": 503}}
    no route  → {"error": "Route not found"}  (status 404)

Lifecycle:
    Startup:  configure logging, record start time, report missing API keys
    Shutdown: close the shared outbound HTTP client
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from weathernews import __version__
from weathernews.config import Settings, load_settings
from weathernews.errors import (
    DEFAULT_ERROR_MESSAGE,
    error_response,
    normalize_error,
    route_not_found_response,
)
from weathernews.exceptions import WeatherNewsError
from weathernews.middleware.errors import ErrorNormalizerMiddleware
from weathernews.middleware.logging import RequestLoggingMiddleware
from weathernews.middleware.request_id import RequestIDMiddleware, request_id_var
from weathernews.routes import health, news, pages, weather
from weathernews.services.news_service import NewsApiClient
from weathernews.services.weather_service import OpenWeatherClient

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once from the lifespan hook, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Our own access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def log_configuration_status(settings: Settings) -> None:
    """
    Report where the server listens and which provider keys are set.

    Missing keys are warnings, not errors: the server keeps starting and
    only the affected route fails when it is called.
    """
    missing = settings.missing_api_keys()
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    logger.info(
        "Weather API Key: %s",
        "Missing" if "OPENWEATHER_API_KEY" in missing else "Configured",
    )
    logger.info(
        "News API Key: %s",
        "Missing" if "NEWS_API_KEY" in missing else "Configured",
    )
    for env_var in missing:
        logger.warning("%s is not set; requests that need it will fail", env_var)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    app.state.started_at = time.time()
    logger.info("Weather & News backend %s starting up...", __version__)
    log_configuration_status(settings)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Weather & News backend shutting down...")
    if app.state.owns_http_client:
        await app.state.http_client.aclose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the handlers that turn raised errors into responses.

    Handler hierarchy:
        WeatherNewsError        → its own status (400 input, upstream, 500 config)
        HTTPException 404/405   → 404 {"error": "Route not found"}
        HTTPException other     → envelope with that status

    Everything else is caught by ErrorNormalizerMiddleware, inside the
    middleware chain, and rendered with the same error_response().

    Security: responses never include stack traces or context dicts.
    Details are logged server-side.
    """

    @app.exception_handler(WeatherNewsError)
    async def handle_app_error(request: Request, exc: WeatherNewsError):
        rid = request_id_var.get("")
        status, message = normalize_error(exc)
        log_level = logging.ERROR if status >= 500 else logging.WARNING
        logger.log(
            log_level,
            "[%s] %s %s failed with %d: %s | Context: %s",
            rid,
            request.method,
            request.url.path,
            status,
            message,
            exc.context,
        )
        return error_response(status, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A wrong method on a known path is a routing miss too
        if exc.status_code in (404, 405):
            return route_not_found_response()
        detail = exc.detail if isinstance(exc.detail, str) and exc.detail else DEFAULT_ERROR_MESSAGE
        return error_response(exc.status_code, detail)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings:    Frozen configuration. Read from the environment if omitted.
        http_client: Outbound client shared by both providers. When omitted
                     the app creates one and closes it on shutdown; a client
                     passed in stays owned by the caller.
    """
    if settings is None:
        settings = load_settings()
    owns_http_client = http_client is None
    if http_client is None:
        http_client = httpx.AsyncClient()

    app = FastAPI(
        title="Weather & News API",
        description=(
            "Proxies OpenWeatherMap and NewsAPI for the dashboard front-end. "
            "Provider responses are returned unchanged; failures use one JSON error envelope."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Shared State (read through weathernews.dependencies) ──────────────
    app.state.settings = settings
    app.state.http_client = http_client
    app.state.owns_http_client = owns_http_client
    app.state.weather_client = OpenWeatherClient(http_client, settings.openweather_base_url)
    app.state.news_client = NewsApiClient(http_client, settings.news_api_base_url)
    # Replaced by the lifespan hook when the server actually starts
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost).
    # The error normalizer is added first so it sits innermost and its 500
    # responses still pass through CORS, logging and request ID.
    app.add_middleware(ErrorNormalizerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Matched top to bottom. The API prefixes do not overlap, and the static
    # mount matches every path, so it must stay last.
    app.include_router(weather.router)
    app.include_router(news.router)
    app.include_router(health.router)
    app.include_router(pages.router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found; only API routes are served", static_dir)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = load_settings()
    uvicorn.run(
        "weathernews.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `weathernews.main:app` to be importable
app = create_app()
