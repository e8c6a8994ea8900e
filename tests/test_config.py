"""
Weather & News Backend — Settings Tests
=========================================

What:  Environment loading, defaults, validation and immutability of Settings.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from weathernews.config import DEFAULT_STATIC_DIR, Settings

ENV_VARS = [
    "PORT", "HOST", "LOG_LEVEL", "OPENWEATHER_API_KEY", "NEWS_API_KEY",
    "WEATHER_UNITS", "NEWS_COUNTRY", "STATIC_DIR", "CORS_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsLoading:

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"
        assert settings.weather_units == "metric"
        assert settings.news_country == "us"
        assert settings.static_dir == str(DEFAULT_STATIC_DIR)
        assert settings.cors_origins_list == ["*"]

    def test_reads_environment(self, clean_env):
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("OPENWEATHER_API_KEY", "weather-from-env")
        clean_env.setenv("news_api_key", "news-from-env")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.openweather_api_key == "weather-from-env"
        assert settings.news_api_key == "news-from-env"
        assert settings.log_level == "DEBUG"

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENWEATHER_API_KEY=from-file\nPORT=4000\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.openweather_api_key == "from-file"
        assert settings.port == 4000

    def test_cors_origins_list(self, clean_env):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestSettingsValidation:

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_weather_units(self, clean_env):
        with pytest.raises(PydanticValidationError, match="Invalid weather_units"):
            Settings(_env_file=None, weather_units="kelvin")

    def test_port_out_of_range(self, clean_env):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, port=70000)

    def test_missing_keys_are_not_an_error(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.missing_api_keys() == ["OPENWEATHER_API_KEY", "NEWS_API_KEY"]

    def test_missing_api_keys_lists_only_unset(self, clean_env):
        settings = Settings(_env_file=None, openweather_api_key="set")

        assert settings.missing_api_keys() == ["NEWS_API_KEY"]

    def test_settings_are_frozen(self, clean_env):
        settings = Settings(_env_file=None)

        with pytest.raises(PydanticValidationError):
            settings.news_api_key = "changed"
