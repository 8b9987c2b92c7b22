"""Stop store port."""

from collections.abc import Iterable
from typing import Protocol

from stop_catalog.domain.models.stop import Stop


class StopStore(Protocol):
    """Port for persisting and reading stops."""

    async def find_all(self) -> list[Stop]:
        """Return every stored stop in store order."""
        ...

    async def find_all_by_ids(self, stop_ids: Iterable[str]) -> list[Stop]:
        """Return the stored stops whose identifier is in stop_ids."""
        ...

    async def find_by_id(self, stop_id: str) -> Stop | None:
        """Find a stop by its identifier."""
        ...

    async def find_or_create(self, stop: Stop) -> Stop:
        """Return the stop matching every field of stop, inserting it if absent."""
        ...
