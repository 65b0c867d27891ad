"""HTTP client for transport.opendata.ch requests.

API Documentation: https://transport.opendata.ch/docs.html
"""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from map_departures.adapters.api_rate_limiter import ApiRateLimiter
from map_departures.adapters.api_request_logger import log_api_request
from map_departures.adapters.transport_api.constants import (
    TRANSPORT_API_BASE_URL,
    TRANSPORT_API_NAME,
)
from map_departures.domain.errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransportHttpClient:
    """Issues GET requests and returns decoded JSON bodies.

    Transport failures and non-200 responses raise NetworkError, bodies that
    are not JSON raise DecodeError. Nothing is retried.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = TRANSPORT_API_BASE_URL,
        timeout_seconds: float = 10,
        rate_limiter: ApiRateLimiter | None = None,
        log_requests: bool = False,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API root, without trailing slash.
            timeout_seconds: Total timeout per request.
            rate_limiter: Limiter spacing out requests; a pass-through if omitted.
            log_requests: Log every request at INFO level.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = rate_limiter or ApiRateLimiter(TRANSPORT_API_NAME)
        self._log_requests = log_requests

    async def get_json(self, path: str, params: dict[str, str | int | float]) -> Any:
        """GET ``path`` with query parameters and return the JSON body.

        Raises:
            NetworkError: On connection errors, timeouts or non-200 status.
            DecodeError: If the body is not valid JSON.
        """
        if self._session is None:
            raise RuntimeError("Transport API requires an aiohttp session")

        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params, enabled=self._log_requests)

        await self._rate_limiter.acquire()
        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                if response.status != 200:
                    body = await response.text(errors="replace")
                    raise NetworkError(
                        f"Transport API returned status {response.status} for {url}: {body[:200]}"
                    )
                body_bytes = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            return json.loads(body_bytes)
        except ValueError as e:
            # UnicodeDecodeError is a ValueError
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e
