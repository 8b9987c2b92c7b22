"""Engine and session factory setup for the stop store."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stop_catalog.adapters.persistence.orm import Base

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from stop_catalog.adapters.config import AppConfig


def create_engine_from_config(config: "AppConfig") -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    return create_async_engine(config.database_url, echo=config.database_echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory whose objects stay readable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info(f"Database schema ready at {engine.url.render_as_string(hide_password=True)}")
