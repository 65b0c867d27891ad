"""Domain layer - core business logic and models."""

from map_departures.domain.models import (
    AggregatedStop,
    Coordinate,
    Direction,
    RawDeparture,
    Station,
    Viewport,
)
from map_departures.domain.ports import (
    DepartureRepository,
    StationRepository,
)

__all__ = [
    "AggregatedStop",
    "Coordinate",
    "DepartureRepository",
    "Direction",
    "RawDeparture",
    "Station",
    "StationRepository",
    "Viewport",
]
