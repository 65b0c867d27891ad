"""Spacing of outgoing requests to the transport API.

transport.opendata.ch throttles busy clients, and a single viewport cycle
fans out one request per nearby station at once. The limiter makes those
requests queue up behind a minimum delay instead of hitting the API together.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Enforces a minimum delay between requests to one API.

    All callers sharing an instance are serialized through an asyncio.Lock.
    A delay of zero turns the limiter into a pass-through.
    """

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def shared(cls, api_name: str, min_delay_seconds: float = 0.0) -> ApiRateLimiter:
        """Return the limiter registered for an API, creating it on first use.

        The delay of the first registration wins.
        """
        limiter = cls._instances.get(api_name)
        if limiter is None:
            limiter = cls(api_name, min_delay_seconds)
            cls._instances[api_name] = limiter
            logger.info(f"Created rate limiter for {api_name} with {min_delay_seconds}s delay")
        return limiter

    async def acquire(self) -> None:
        """Wait until the next request may be sent."""
        if self.min_delay_seconds <= 0:
            return

        async with self._lock:
            now = time.monotonic()
            if self._last_request_time is not None:
                wait_time = self.min_delay_seconds - (now - self._last_request_time)
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)
            self._last_request_time = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        """Context manager entry - acquire rate limit."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - nothing to release."""
