"""Domain models for map departures."""

from map_departures.domain.models.aggregated_stop import AggregatedStop
from map_departures.domain.models.aggregation_result import AggregationResult, AggregationState
from map_departures.domain.models.coordinate import Coordinate
from map_departures.domain.models.departure import PassListEntry, RawDeparture, StationCheckpoint
from map_departures.domain.models.direction import Direction
from map_departures.domain.models.station import Station
from map_departures.domain.models.viewport import Viewport

__all__ = [
    "AggregatedStop",
    "AggregationResult",
    "AggregationState",
    "Coordinate",
    "Direction",
    "PassListEntry",
    "RawDeparture",
    "Station",
    "StationCheckpoint",
    "Viewport",
]
