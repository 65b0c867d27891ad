"""transport.opendata.ch API adapters."""

from map_departures.adapters.transport_api.http_client import TransportHttpClient
from map_departures.adapters.transport_api.transport_departure_repository import (
    TransportDepartureRepository,
)
from map_departures.adapters.transport_api.transport_station_repository import (
    TransportStationRepository,
)

__all__ = [
    "TransportDepartureRepository",
    "TransportHttpClient",
    "TransportStationRepository",
]
