"""Aggregation cycle state and result models."""

from dataclasses import dataclass, field
from enum import StrEnum

from map_departures.domain.models.aggregated_stop import AggregatedStop
from map_departures.domain.models.viewport import Viewport


class AggregationState(StrEnum):
    """States of one viewport aggregation cycle."""

    IDLE = "idle"
    DISCOVERING = "discovering"
    FETCHING_ALL = "fetching_all"
    AGGREGATING = "aggregating"
    PUBLISHED = "published"
    ABORTED = "aborted"


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of one viewport aggregation cycle."""

    viewport: Viewport
    state: AggregationState
    stops: tuple[AggregatedStop, ...] = ()
    from_cache: bool = False
    superseded: bool = False
    failed_station_ids: tuple[str, ...] = field(default=())
    error: str | None = None
