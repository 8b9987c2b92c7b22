"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """Represents a physical public transport stop."""

    id: str
    name: str
    latitude: float
    longitude: float
