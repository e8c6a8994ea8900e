"""
Weather & News Backend — Application Configuration
====================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and produces a frozen `Settings` object.
Who:   Built once by the application factory and injected into route
       handlers through FastAPI dependencies (see weathernews.dependencies).
When:  Once at process start.

Design Decision:
    Settings are frozen and never read from a module-level global inside
    request handling. The factory builds one instance, stores it on
    `app.state`, and handlers receive it by injection. Tests build their
    own instance and pass it to create_app().

    Missing API keys are NOT a validation error: the server must start
    without them and fail only the affected route at call time.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Static assets ship inside the package so an installed copy can find them
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"

WEATHER_UNITS = {"standard", "metric", "imperial"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have working defaults except the two provider API keys,
    which default to empty and are reported at startup when missing.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── OpenWeatherMap ────────────────────────────────────────────────────
    # How to obtain: https://home.openweathermap.org/api_keys
    openweather_api_key: str = Field(
        default="",
        description="OpenWeatherMap API key used by /api/weather",
    )
    openweather_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")

    # What: Units used when the client does not pass ?units=
    weather_units: str = Field(default="metric")

    @field_validator("weather_units")
    @classmethod
    def validate_weather_units(cls, v: str) -> str:
        lower = v.lower()
        if lower not in WEATHER_UNITS:
            raise ValueError(f"Invalid weather_units '{v}'. Must be one of: {sorted(WEATHER_UNITS)}")
        return lower

    # ── NewsAPI ───────────────────────────────────────────────────────────
    # How to obtain: https://newsapi.org/register
    news_api_key: str = Field(
        default="",
        description="NewsAPI key used by /api/news",
    )
    news_api_base_url: str = Field(default="https://newsapi.org/v2")

    # What: Country used when the client does not pass ?country=
    news_country: str = Field(default="us", min_length=2, max_length=2)

    # ── Static Front-End ──────────────────────────────────────────────────
    static_dir: str = Field(default=str(DEFAULT_STATIC_DIR))

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # OPENWEATHER_API_KEY and openweather_api_key both work
        "extra": "ignore",
        "frozen": True,
    }

    def missing_api_keys(self) -> List[str]:
        """
        What:  Names of provider API key variables that are not set.
        When:  Called during startup to log warnings, and by /health.
        """
        missing = []
        if not self.openweather_api_key:
            missing.append("OPENWEATHER_API_KEY")
        if not self.news_api_key:
            missing.append("NEWS_API_KEY")
        return missing


def load_settings() -> Settings:
    """Build the process-wide settings from the environment."""
    return Settings()
