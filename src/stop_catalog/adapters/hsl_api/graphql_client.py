"""GraphQL client for the HSL (Digitransit) routing API."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from stop_catalog.adapters.api_rate_limiter import ApiRateLimiter
from stop_catalog.adapters.api_request_logger import log_api_request
from stop_catalog.adapters.hsl_api.constants import (
    DEFAULT_HEADERS,
    HSL_GRAPHQL_URL,
    HSL_RATE_LIMITER_NAME,
    SUBSCRIPTION_KEY_HEADER,
)
from stop_catalog.domain.exceptions import UpstreamQueryError
from stop_catalog.domain.models import RequestPriority
from stop_catalog.domain.ports.transit_data_client import TransitDataClient

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class HslGraphQLClient(TransitDataClient):
    """Adapter for the Digitransit GraphQL API using aiohttp."""

    def __init__(
        self,
        session: "ClientSession",
        url: str = HSL_GRAPHQL_URL,
        api_key: str | None = None,
        timeout_seconds: float = 10,
        min_delay_seconds: float = 0.0,
    ) -> None:
        """Initialize with an aiohttp session and endpoint settings.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            url: GraphQL endpoint URL.
            api_key: Digitransit subscription key, if any.
            timeout_seconds: Total timeout per request in seconds.
            min_delay_seconds: Minimum delay between requests to the API.
        """
        self._session = session
        self._url = url
        self._api_key = api_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        """Get the shared rate limiter for the HSL API."""
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                HSL_RATE_LIMITER_NAME, self._min_delay_seconds
            )
        return self._rate_limiter

    def _build_headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._api_key:
            headers[SUBSCRIPTION_KEY_HEADER] = self._api_key
        return headers

    async def query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        priority: RequestPriority = RequestPriority.NORMAL,
    ) -> dict[str, Any]:
        """Run a GraphQL query.

        Args:
            query: GraphQL document.
            variables: Values for the document's variables.
            priority: Scheduling hint for the shared rate limiter.

        Returns:
            The ``data`` object of the response.

        Raises:
            UpstreamQueryError: If the API answers with an error status, GraphQL
                errors or no data.
            aiohttp.ClientError: On transport failures.
            asyncio.TimeoutError: If the request times out.
        """
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        headers = self._build_headers()

        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire(priority)

        log_api_request(
            "POST", self._url, headers=headers, payload=payload, priority=priority.value
        )
        logger.debug(f"Querying {self._url} with priority {priority.value}")

        async with self._session.post(
            self._url, json=payload, headers=headers, timeout=self._timeout
        ) as response:
            return await self._handle_response(response)

    async def _handle_response(self, response: "ClientResponse") -> dict[str, Any]:
        """Extract the data object from a GraphQL response."""
        if response.status != 200:
            response_text = await response.text()
            raise UpstreamQueryError(
                f"HSL API returned status {response.status}: {response_text[:200]}",
                status_code=response.status,
            )

        body = await response.json()
        if not isinstance(body, dict):
            raise UpstreamQueryError("HSL API returned a non-object response")

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            raise UpstreamQueryError(f"HSL API returned errors: {messages}")

        data = body.get("data")
        if not isinstance(data, dict):
            raise UpstreamQueryError("HSL API response has no data")

        return data
