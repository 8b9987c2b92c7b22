"""Upstream transit data client port."""

from typing import Any, Protocol

from stop_catalog.domain.models.request_priority import RequestPriority


class TransitDataClient(Protocol):
    """Port for querying the upstream transit data service."""

    async def query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        priority: RequestPriority = RequestPriority.NORMAL,
    ) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object."""
        ...
