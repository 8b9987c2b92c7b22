"""Persistence adapters backed by SQLAlchemy."""

from stop_catalog.adapters.persistence.database import (
    create_engine_from_config,
    create_schema,
    create_session_factory,
)
from stop_catalog.adapters.persistence.sqlalchemy_route_pattern_store import (
    SqlAlchemyRoutePatternStore,
)
from stop_catalog.adapters.persistence.sqlalchemy_stop_store import SqlAlchemyStopStore

__all__ = [
    "SqlAlchemyRoutePatternStore",
    "SqlAlchemyStopStore",
    "create_engine_from_config",
    "create_schema",
    "create_session_factory",
]
