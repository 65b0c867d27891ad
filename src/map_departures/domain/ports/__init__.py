"""Ports (interfaces) for the ports-and-adapters architecture."""

from map_departures.domain.ports.departure_repository import DepartureRepository
from map_departures.domain.ports.station_repository import StationRepository

__all__ = [
    "DepartureRepository",
    "StationRepository",
]
