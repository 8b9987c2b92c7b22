"""Rate limiter for outgoing API requests.

Provides per-API rate limiting to be nice to external services.
Waiting requests are granted in priority order, FIFO within a priority, with a
minimum delay between consecutive grants.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import time
from typing import ClassVar

from stop_catalog.domain.models import RequestPriority

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Priority-aware rate limiter for outgoing API requests.

    Ensures a minimum delay between requests to a specific API. Requests that are
    waiting for a slot are served HIGH before NORMAL before LOW.
    """

    # Class-level registry of rate limiters by API name
    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, api_name: str, min_delay_seconds: float = 1.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float = 0.0
        self._waiters: list[tuple[int, int, asyncio.Future[None]]] = []
        self._counter = itertools.count()
        self._grant_handle: asyncio.TimerHandle | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    async def get_instance(cls, api_name: str, min_delay_seconds: float = 1.0) -> ApiRateLimiter:
        """Get or create a rate limiter instance for an API.

        This ensures all calls to the same API share the same rate limiter.

        Args:
            api_name: Name of the API.
            min_delay_seconds: Minimum delay between requests in seconds.

        Returns:
            Shared ApiRateLimiter instance for the API.
        """
        # Lazy init the registry lock
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            if api_name not in cls._instances:
                cls._instances[api_name] = cls(api_name, min_delay_seconds)
                logger.info(
                    f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum delay"
                )
            return cls._instances[api_name]

    @property
    def pending(self) -> int:
        """Number of requests still waiting for a slot."""
        return sum(1 for _, _, waiter in self._waiters if not waiter.done())

    async def acquire(self, priority: RequestPriority = RequestPriority.NORMAL) -> None:
        """Acquire permission to make a request.

        Blocks until every higher-priority or earlier same-priority request has been
        granted and the minimum delay since the last grant has passed.
        """
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            self._bind_loop(loop)

        waiter: asyncio.Future[None] = loop.create_future()
        heapq.heappush(self._waiters, (priority.rank, next(self._counter), waiter))
        self._schedule_grant()
        await waiter

    def _bind_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        """Forget timers and waiters left behind by a previous event loop."""
        if self._grant_handle is not None:
            self._grant_handle.cancel()
            self._grant_handle = None
        if self._waiters:
            logger.debug(
                f"{self.api_name}: dropping {len(self._waiters)} waiter(s) from a previous loop"
            )
        self._waiters = []
        self._loop = loop

    def _schedule_grant(self) -> None:
        if self._grant_handle is not None or not self._waiters:
            return

        elapsed = time.monotonic() - self._last_request_time
        wait_time = max(0.0, self.min_delay_seconds - elapsed)
        if wait_time > 0:
            logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
        self._grant_handle = asyncio.get_running_loop().call_later(wait_time, self._grant_next)

    def _grant_next(self) -> None:
        self._grant_handle = None
        while self._waiters:
            _, _, waiter = heapq.heappop(self._waiters)
            if waiter.done():
                # Cancelled while waiting
                continue
            self._last_request_time = time.monotonic()
            waiter.set_result(None)
            break
        self._schedule_grant()

    async def __aenter__(self) -> ApiRateLimiter:
        """Context manager entry - acquire rate limit."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - nothing to do."""
