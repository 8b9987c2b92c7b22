"""SQLAlchemy stop store adapter."""

import logging
from collections.abc import Iterable

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stop_catalog.adapters.persistence.orm import StopRecord
from stop_catalog.domain.models import Stop
from stop_catalog.domain.ports.stop_store import StopStore

logger = logging.getLogger(__name__)


class SqlAlchemyStopStore(StopStore):
    """Stop store backed by an SQLAlchemy async engine.

    Each call uses its own session, so calls may run concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory."""
        self._session_factory = session_factory

    async def find_all(self) -> list[Stop]:
        """Return every stored stop."""
        async with self._session_factory() as session:
            result = await session.scalars(select(StopRecord))
            return [record.to_domain() for record in result]

    async def find_all_by_ids(self, stop_ids: Iterable[str]) -> list[Stop]:
        """Return the stored stops whose identifier is in stop_ids."""
        ids = set(stop_ids)
        if not ids:
            return []

        async with self._session_factory() as session:
            result = await session.scalars(select(StopRecord).where(StopRecord.id.in_(ids)))
            return [record.to_domain() for record in result]

    async def find_by_id(self, stop_id: str) -> Stop | None:
        """Find a stop by its identifier."""
        async with self._session_factory() as session:
            record = await session.get(StopRecord, stop_id)
            logger.debug(f"Lookup of stop {stop_id}: {'found' if record else 'missing'}")
            return record.to_domain() if record else None

    async def find_or_create(self, stop: Stop) -> Stop:
        """Return the row matching every field of stop, inserting it if none matches.

        When a concurrent caller inserts the same stop first, the insert fails on the
        primary key and the row is read back. A row with the same identifier but
        different attributes does not match, so the IntegrityError propagates.
        """
        try:
            async with self._session_factory() as session, session.begin():
                record = await session.scalar(_matching(stop))
                if record is None:
                    record = StopRecord(
                        id=stop.id,
                        name=stop.name,
                        latitude=stop.latitude,
                        longitude=stop.longitude,
                    )
                    session.add(record)
                    await session.flush()
                    logger.debug(f"Inserted stop {stop.id}")
                return record.to_domain()
        except IntegrityError:
            async with self._session_factory() as session:
                record = await session.scalar(_matching(stop))
            if record is None:
                raise
            logger.debug(f"Stop {stop.id} was inserted concurrently, using the stored row")
            return record.to_domain()


def _matching(stop: Stop) -> Select[tuple[StopRecord]]:
    return select(StopRecord).where(
        StopRecord.id == stop.id,
        StopRecord.name == stop.name,
        StopRecord.latitude == stop.latitude,
        StopRecord.longitude == stop.longitude,
    )
