"""SQLAlchemy route pattern store adapter."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from stop_catalog.adapters.persistence.orm import RoutePatternRecord, StopRecord
from stop_catalog.domain.models import RoutePattern
from stop_catalog.domain.ports.route_pattern_store import RoutePatternStore

logger = logging.getLogger(__name__)


class SqlAlchemyRoutePatternStore(RoutePatternStore):
    """Route pattern store backed by an SQLAlchemy async engine."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory."""
        self._session_factory = session_factory

    async def find_by_id(self, route_pattern_id: str) -> RoutePattern | None:
        """Find a route pattern by its identifier."""
        async with self._session_factory() as session:
            record = await session.get(RoutePatternRecord, route_pattern_id)
            return record.to_domain() if record else None

    async def find_stop_ids(self, route_pattern_id: str) -> set[str]:
        """Return the identifiers of the stops linked to a route pattern."""
        async with self._session_factory() as session:
            record = await session.get(
                RoutePatternRecord,
                route_pattern_id,
                options=[selectinload(RoutePatternRecord.stops)],
            )
            if record is None:
                return set()
            return {stop.id for stop in record.stops}

    async def add_stop(self, route_pattern_id: str, stop_id: str) -> None:
        """Link a stop to a route pattern in one transaction.

        Raises:
            LookupError: If either row no longer exists.
        """
        async with self._session_factory() as session, session.begin():
            route_pattern = await session.get(
                RoutePatternRecord,
                route_pattern_id,
                options=[selectinload(RoutePatternRecord.stops)],
            )
            if route_pattern is None:
                raise LookupError(f"Route pattern '{route_pattern_id}' does not exist")

            stop = await session.get(StopRecord, stop_id)
            if stop is None:
                raise LookupError(f"Stop '{stop_id}' does not exist")

            route_pattern.stops.add(stop)
            logger.debug(f"Added stop {stop_id} to route pattern {route_pattern_id}")
