"""Configuration adapters."""

from stop_catalog.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
