"""In-memory stop cache implementation."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from map_departures.domain.contracts.stop_cache import StopCacheProtocol

if TYPE_CHECKING:
    from map_departures.domain.models.aggregated_stop import AggregatedStop


class InMemoryStopCache(StopCacheProtocol):
    """Aggregated stops by viewport key, valid for the process lifetime."""

    def __init__(self) -> None:
        """Initialize the cache."""
        self._cache: dict[str, tuple[AggregatedStop, ...]] = {}
        self._lock = threading.Lock()

    def get(self, viewport_key: str) -> tuple[AggregatedStop, ...] | None:
        """Get the cached aggregation for a viewport key, or None on a miss."""
        with self._lock:
            return self._cache.get(viewport_key)

    def put(self, viewport_key: str, stops: list[AggregatedStop]) -> None:
        """Cache the aggregation for a viewport key."""
        with self._lock:
            self._cache[viewport_key] = tuple(stops)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
