"""In-memory departure cache implementation."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from map_departures.domain.contracts.departure_cache import DepartureCacheProtocol

if TYPE_CHECKING:
    from map_departures.domain.models.departure import RawDeparture

logger = logging.getLogger(__name__)


class InMemoryDepartureCache(DepartureCacheProtocol):
    """Cleansed departures by station ID, valid for the process lifetime.

    There is no expiry and no eviction. Writes go through a lock so
    concurrent retrievals for different stations never corrupt the mapping.
    """

    def __init__(self) -> None:
        """Initialize the cache."""
        self._cache: dict[str, tuple[RawDeparture, ...]] = {}
        self._lock = threading.Lock()

    def get(self, station_id: str) -> tuple[RawDeparture, ...] | None:
        """Get cached departures for a station.

        Args:
            station_id: The station ID to get departures for.

        Returns:
            The cached departures, or None if not cached.
        """
        with self._lock:
            return self._cache.get(station_id)

    def put(self, station_id: str, departures: list[RawDeparture]) -> None:
        """Cache departures for a station.

        Stored as a tuple so later changes to the caller's list do not leak in.

        Args:
            station_id: The station ID.
            departures: The cleansed departures to cache.
        """
        with self._lock:
            self._cache[station_id] = tuple(departures)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
