"""Route pattern store port."""

from typing import Protocol

from stop_catalog.domain.models.route_pattern import RoutePattern


class RoutePatternStore(Protocol):
    """Port for reading route patterns and linking them to stops."""

    async def find_by_id(self, route_pattern_id: str) -> RoutePattern | None:
        """Find a route pattern by its identifier."""
        ...

    async def add_stop(self, route_pattern_id: str, stop_id: str) -> None:
        """Link an existing stop to an existing route pattern."""
        ...
