"""Domain models for the stop catalog."""

from stop_catalog.domain.models.request_priority import RequestPriority
from stop_catalog.domain.models.route_pattern import RoutePattern
from stop_catalog.domain.models.stop import Stop
from stop_catalog.domain.models.upstream_stop import UpstreamStop

__all__ = [
    "RequestPriority",
    "RoutePattern",
    "Stop",
    "UpstreamStop",
]
