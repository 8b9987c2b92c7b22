"""Stop repository: local lookup, upstream-backed creation and route pattern links."""

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from stop_catalog.domain.exceptions import (
    CouldNotSaveStopError,
    NoSuchStopError,
    SaveFailureReason,
)
from stop_catalog.domain.models import RequestPriority, Stop, UpstreamStop

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from stop_catalog.domain.ports import RoutePatternStore, StopStore, TransitDataClient

STOP_QUERY = """
query Stop($id: String!) {
    stop(id: $id) {
        name
        lat
        lon
    }
}
"""


class StopRepository:
    """Resolves stops from the store, creating them from upstream data on demand."""

    def __init__(
        self,
        stop_store: "StopStore",
        route_pattern_store: "RoutePatternStore",
        transit_data_client: "TransitDataClient",
    ) -> None:
        """Initialize with the store and upstream collaborators.

        Args:
            stop_store: Persistent store for stops.
            route_pattern_store: Persistent store for route patterns and their stop links.
            transit_data_client: Client for the upstream transit data service.
        """
        self._stop_store = stop_store
        self._route_pattern_store = route_pattern_store
        self._transit_data_client = transit_data_client

    async def list_stops(self) -> list[Stop]:
        """Return all stored stops."""
        return await self._stop_store.find_all()

    async def list_stops_by_ids(self, stop_ids: Iterable[str]) -> list[Stop]:
        """Return the stored stops among stop_ids; unknown identifiers are skipped."""
        wanted = set(stop_ids)
        if not wanted:
            return []
        return await self._stop_store.find_all_by_ids(wanted)

    async def get_by_id(self, stop_id: str) -> Stop:
        """Get a stored stop.

        Raises:
            NoSuchStopError: If no stop with stop_id is stored.
        """
        stop = await self._stop_store.find_by_id(stop_id)
        if stop is None:
            raise NoSuchStopError(f"No stop found with ID '{stop_id}'")
        return stop

    async def create_by_id(self, stop_id: str) -> Stop:
        """Fetch a stop from upstream and store it unless an identical record exists.

        Args:
            stop_id: Upstream identifier of the stop (e.g., "HSL:1040129").

        Returns:
            The stored stop.

        Raises:
            CouldNotSaveStopError: If the upstream query or the store write fails.
        """
        try:
            stop = await self._find_stop_from_api(stop_id)
        except Exception as e:
            raise self._save_error(stop_id, SaveFailureReason.UPSTREAM_FETCH_FAILED, e) from e

        try:
            saved = await self._stop_store.find_or_create(stop)
        except Exception as e:
            raise self._save_error(stop_id, SaveFailureReason.STORE_WRITE_FAILED, e) from e

        logger.info(f"Stored stop {saved.id} ({saved.name})")
        return saved

    async def associate_to_route_pattern(self, stop_id: str, route_pattern_id: str) -> None:
        """Link a stored stop to a stored route pattern.

        Raises:
            CouldNotSaveStopError: If either side is missing or the link cannot be written.
        """
        stop, route_pattern = await asyncio.gather(
            self._stop_store.find_by_id(stop_id),
            self._route_pattern_store.find_by_id(route_pattern_id),
            return_exceptions=True,
        )

        for result in (stop, route_pattern):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
            if isinstance(result, Exception):
                logger.warning(
                    f"Lookup failed for stop {stop_id} / route pattern {route_pattern_id}: {result}"
                )
                raise CouldNotSaveStopError(
                    f"Could not look up stop with ID '{stop_id}' or route pattern "
                    f"with ID '{route_pattern_id}'. Reason: {result}",
                    reason=SaveFailureReason.LOOKUP_FAILED,
                    stop_id=stop_id,
                    route_pattern_id=route_pattern_id,
                ) from result

        if stop is None:
            raise CouldNotSaveStopError(
                f"No stop found with ID '{stop_id}' to associate to route pattern "
                f"with ID '{route_pattern_id}'",
                reason=SaveFailureReason.MISSING_STOP,
                stop_id=stop_id,
                route_pattern_id=route_pattern_id,
            )

        if route_pattern is None:
            raise CouldNotSaveStopError(
                f"No route pattern found with ID '{route_pattern_id}' to associate to stop "
                f"with ID '{stop_id}'",
                reason=SaveFailureReason.MISSING_ROUTE_PATTERN,
                stop_id=stop_id,
                route_pattern_id=route_pattern_id,
            )

        try:
            await self._route_pattern_store.add_stop(route_pattern_id, stop_id)
        except Exception as e:
            logger.warning(
                f"Could not link stop {stop_id} to route pattern {route_pattern_id}: {e}"
            )
            raise CouldNotSaveStopError(
                f"Could not associate stop with ID '{stop_id}' to route pattern "
                f"with ID '{route_pattern_id}'. Reason: {e}",
                reason=SaveFailureReason.STORE_WRITE_FAILED,
                stop_id=stop_id,
                route_pattern_id=route_pattern_id,
            ) from e

        logger.info(f"Linked stop {stop_id} to route pattern {route_pattern_id}")

    async def _find_stop_from_api(self, stop_id: str) -> Stop:
        """Query upstream for the stop and map it to a Stop."""
        data = await self._transit_data_client.query(
            STOP_QUERY,
            variables={"id": stop_id},
            priority=RequestPriority.HIGH,
        )
        raw_stop = data.get("stop")
        if raw_stop is None:
            raise LookupError(f"Upstream has no stop with ID '{stop_id}'")

        return UpstreamStop.model_validate(raw_stop).to_stop(stop_id)

    @staticmethod
    def _save_error(
        stop_id: str, reason: SaveFailureReason, cause: Exception
    ) -> CouldNotSaveStopError:
        logger.warning(f"Could not save stop {stop_id} ({reason.value}): {cause}")
        return CouldNotSaveStopError(
            f"Could not save stop with ID '{stop_id}'. Reason: {cause}",
            reason=reason,
            stop_id=stop_id,
        )
