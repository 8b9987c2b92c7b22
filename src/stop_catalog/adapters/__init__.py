"""Adapters layer - external system integrations."""

from stop_catalog.adapters.config import AppConfig
from stop_catalog.adapters.hsl_api import HslGraphQLClient
from stop_catalog.adapters.persistence import (
    SqlAlchemyRoutePatternStore,
    SqlAlchemyStopStore,
)

__all__ = [
    "AppConfig",
    "HslGraphQLClient",
    "SqlAlchemyRoutePatternStore",
    "SqlAlchemyStopStore",
]
