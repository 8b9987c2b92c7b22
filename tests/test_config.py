"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from stop_catalog.adapters.config import AppConfig
from stop_catalog.adapters.hsl_api.constants import HSL_GRAPHQL_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and .env file out of the tests."""
    for name in (
        "DATABASE_URL",
        "DATABASE_ECHO",
        "HSL_API_URL",
        "HSL_API_KEY",
        "HSL_API_TIMEOUT",
        "HSL_API_MIN_DELAY_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.database_url == "sqlite+aiosqlite:///stop_catalog.db"
    assert config.database_echo is False
    assert config.hsl_api_url == HSL_GRAPHQL_URL
    assert config.hsl_api_key is None
    assert config.hsl_api_timeout == 10
    assert config.hsl_api_min_delay_seconds == 0.0
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://hsl@localhost/stops")
    monkeypatch.setenv("HSL_API_KEY", "abc123")
    monkeypatch.setenv("HSL_API_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.database_url == "postgresql+asyncpg://hsl@localhost/stops"
    assert config.hsl_api_key == "abc123"
    assert config.hsl_api_timeout == 2.5
    assert config.log_level == "DEBUG"


def test_config_loads_from_env_file() -> None:
    """Given a .env file in the working directory, when loading config, then it is read."""
    Path(".env").write_text("HSL_API_MIN_DELAY_SECONDS=0.5\n", encoding="utf-8")

    config = AppConfig()

    assert config.hsl_api_min_delay_seconds == 0.5


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


def test_config_validates_timeout() -> None:
    """Given a non-positive timeout, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="hsl_api_timeout must be greater than 0"):
        AppConfig(hsl_api_timeout=0)


def test_config_validates_min_delay() -> None:
    """Given a negative delay, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="must not be negative"):
        AppConfig(hsl_api_min_delay_seconds=-1)
