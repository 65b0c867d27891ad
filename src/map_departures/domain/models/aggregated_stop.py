"""Aggregated stop domain model."""

from dataclasses import dataclass

from map_departures.domain.models.coordinate import Coordinate
from map_departures.domain.models.direction import Direction


@dataclass(frozen=True)
class AggregatedStop:
    """A station ready for display, with its ranked directions (largest first)."""

    id: str
    name: str
    coordinate: Coordinate
    directions: tuple[Direction, ...]
