"""Cache adapters."""

from map_departures.adapters.cache.in_memory_departure_cache import InMemoryDepartureCache
from map_departures.adapters.cache.in_memory_stop_cache import InMemoryStopCache

__all__ = ["InMemoryDepartureCache", "InMemoryStopCache"]
