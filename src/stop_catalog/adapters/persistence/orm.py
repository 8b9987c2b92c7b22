"""SQLAlchemy ORM tables for stops, route patterns and their links."""

from __future__ import annotations

from sqlalchemy import Column, Float, ForeignKey, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from stop_catalog.domain.models import RoutePattern, Stop


class Base(DeclarativeBase):
    """Base class for all ORM models."""


route_pattern_stops = Table(
    "route_pattern_stops",
    Base.metadata,
    Column("route_pattern_id", ForeignKey("route_patterns.id"), primary_key=True),
    Column("stop_id", ForeignKey("stops.id"), primary_key=True),
)


class StopRecord(Base):
    """Stored transit stop."""

    __tablename__ = "stops"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    latitude: Mapped[float] = mapped_column(Float)
    longitude: Mapped[float] = mapped_column(Float)

    def to_domain(self) -> Stop:
        return Stop(id=self.id, name=self.name, latitude=self.latitude, longitude=self.longitude)


class RoutePatternRecord(Base):
    """Stored route pattern with the stops it serves."""

    __tablename__ = "route_patterns"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str | None] = mapped_column(String, nullable=True)

    # A set, so linking a stop twice is a no-op
    stops: Mapped[set[StopRecord]] = relationship(
        secondary=route_pattern_stops, collection_class=set, lazy="raise"
    )

    def to_domain(self) -> RoutePattern:
        return RoutePattern(id=self.id, name=self.name)
