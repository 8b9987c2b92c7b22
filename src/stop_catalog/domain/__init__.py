"""Domain layer - stop catalog models, ports and errors."""

from stop_catalog.domain.exceptions import (
    CouldNotSaveStopError,
    NoSuchStopError,
    SaveFailureReason,
    StopCatalogError,
    UpstreamQueryError,
)
from stop_catalog.domain.models import RequestPriority, RoutePattern, Stop, UpstreamStop
from stop_catalog.domain.ports import RoutePatternStore, StopStore, TransitDataClient

__all__ = [
    "CouldNotSaveStopError",
    "NoSuchStopError",
    "RequestPriority",
    "RoutePattern",
    "RoutePatternStore",
    "SaveFailureReason",
    "Stop",
    "StopCatalogError",
    "StopStore",
    "TransitDataClient",
    "UpstreamQueryError",
    "UpstreamStop",
]
