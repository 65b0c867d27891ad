"""Adapters layer - external system integrations."""

from map_departures.adapters.cache import InMemoryDepartureCache, InMemoryStopCache
from map_departures.adapters.config import AppConfig
from map_departures.adapters.publishers import StopsBroadcaster
from map_departures.adapters.transport_api import (
    TransportDepartureRepository,
    TransportHttpClient,
    TransportStationRepository,
)

__all__ = [
    "AppConfig",
    "InMemoryDepartureCache",
    "InMemoryStopCache",
    "StopsBroadcaster",
    "TransportDepartureRepository",
    "TransportHttpClient",
    "TransportStationRepository",
]
