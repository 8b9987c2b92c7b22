"""Ports (interfaces) for the ports-and-adapters architecture."""

from stop_catalog.domain.ports.route_pattern_store import RoutePatternStore
from stop_catalog.domain.ports.stop_store import StopStore
from stop_catalog.domain.ports.transit_data_client import TransitDataClient

__all__ = [
    "RoutePatternStore",
    "StopStore",
    "TransitDataClient",
]
