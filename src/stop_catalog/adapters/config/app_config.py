"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stop_catalog.adapters.hsl_api.constants import HSL_GRAPHQL_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///stop_catalog.db",
        description="SQLAlchemy async database URL",
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")

    # HSL API configuration
    hsl_api_url: str = Field(default=HSL_GRAPHQL_URL, description="Digitransit GraphQL endpoint")
    hsl_api_key: str | None = Field(
        default=None, description="Digitransit subscription key (digitransit-subscription-key)"
    )
    hsl_api_timeout: float = Field(
        default=10, description="Timeout for HSL API requests in seconds"
    )
    hsl_api_min_delay_seconds: float = Field(
        default=0.0,
        description="Minimum delay in seconds between HSL API requests to avoid rate limiting",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, ...)")

    @field_validator("hsl_api_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("hsl_api_timeout must be greater than 0")
        return v

    @field_validator("hsl_api_min_delay_seconds")
    @classmethod
    def validate_min_delay(cls, v: float) -> float:
        """Validate the delay is not negative."""
        if v < 0:
            raise ValueError("hsl_api_min_delay_seconds must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be one of the standard logging levels, got '{v}'")
        return level
