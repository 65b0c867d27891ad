"""Protocols for caches and publication."""

from map_departures.domain.contracts.departure_cache import DepartureCacheProtocol
from map_departures.domain.contracts.stop_cache import StopCacheProtocol
from map_departures.domain.contracts.stops_publisher import StopsPublisherProtocol

__all__ = [
    "DepartureCacheProtocol",
    "StopCacheProtocol",
    "StopsPublisherProtocol",
]
