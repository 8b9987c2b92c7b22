"""Domain errors raised by the stop catalog."""

from enum import Enum


class StopCatalogError(Exception):
    """Base class for stop catalog errors."""


class NoSuchStopError(StopCatalogError):
    """No stop with the requested identifier exists in the store."""


class SaveFailureReason(Enum):
    """What went wrong on a stop write path."""

    UPSTREAM_FETCH_FAILED = "upstream_fetch_failed"
    STORE_WRITE_FAILED = "store_write_failed"
    LOOKUP_FAILED = "lookup_failed"
    MISSING_STOP = "missing_stop"
    MISSING_ROUTE_PATTERN = "missing_route_pattern"


class CouldNotSaveStopError(StopCatalogError):
    """A stop could not be created or associated.

    Callers treat every reason as terminal; ``reason`` and ``__cause__`` are
    there for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: SaveFailureReason,
        stop_id: str,
        route_pattern_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.stop_id = stop_id
        self.route_pattern_id = route_pattern_id


class UpstreamQueryError(StopCatalogError):
    """The upstream transit data service returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
