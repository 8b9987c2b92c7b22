"""Route pattern domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoutePattern:
    """Directional variant of a route, referenced by its identifier."""

    id: str
    name: str | None = None
