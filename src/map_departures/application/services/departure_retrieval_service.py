"""Departure retrieval service with read-through caching."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from map_departures.application.services.departure_cleanser import cleanse_departures

if TYPE_CHECKING:
    from map_departures.domain.contracts.departure_cache import DepartureCacheProtocol
    from map_departures.domain.models.departure import RawDeparture
    from map_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

DEFAULT_DEPARTURE_LIMIT = 50


class DepartureRetrievalService:
    """Retrieves cleansed departures of a station, consulting the cache first."""

    def __init__(
        self,
        departure_repository: DepartureRepository,
        cache: DepartureCacheProtocol,
        limit: int = DEFAULT_DEPARTURE_LIMIT,
    ) -> None:
        """Initialize the service.

        Args:
            departure_repository: Repository for fetching raw departures.
            cache: Cache holding cleansed departures by station ID.
            limit: Number of departures requested per station.
        """
        self._departure_repository = departure_repository
        self._cache = cache
        self._limit = limit
        self._in_flight: dict[str, asyncio.Task[list[RawDeparture]]] = {}

    async def retrieve(self, station_id: str, station_name: str) -> list[RawDeparture]:
        """Get cleansed departures for a station.

        A cache hit is returned as is. On a miss the departures are fetched,
        cleansed with ``station_name`` as the current-station hint, cached and
        returned. Concurrent misses for the same station share one request.

        Raises:
            NetworkError: If the request fails.
            DecodeError: If the response cannot be decoded.
            InvalidInputError: If the station ID cannot be used in a request.
        """
        cached = self._cache.get(station_id)
        if cached is not None:
            logger.debug(f"Departure cache hit for station {station_id}")
            return list(cached)

        task = self._in_flight.get(station_id)
        if task is None:
            task = asyncio.create_task(self._fetch_and_cache(station_id, station_name))
            self._in_flight[station_id] = task
            task.add_done_callback(lambda _: self._in_flight.pop(station_id, None))
        else:
            logger.debug(f"Joining in-flight departure request for station {station_id}")

        # shield() keeps one caller's cancellation from cancelling the shared request
        departures = await asyncio.shield(task)
        return list(departures)

    async def _fetch_and_cache(self, station_id: str, station_name: str) -> list[RawDeparture]:
        raw = await self._departure_repository.get_departures(station_id, limit=self._limit)
        departures = cleanse_departures(raw, station_name)
        self._cache.put(station_id, departures)
        logger.debug(f"Fetched {len(departures)} departures for station {station_id}")
        return departures
