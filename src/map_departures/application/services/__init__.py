"""Application services."""

from map_departures.application.services.departure_cleanser import (
    cleanse_departure,
    cleanse_departures,
)
from map_departures.application.services.departure_retrieval_service import (
    DepartureRetrievalService,
)
from map_departures.application.services.destination_normalizer import normalize_destination
from map_departures.application.services.direction_grouping_service import (
    DirectionGroupingService,
)
from map_departures.application.services.stop_aggregation_service import (
    StopAggregationService,
)

__all__ = [
    "DepartureRetrievalService",
    "DirectionGroupingService",
    "StopAggregationService",
    "cleanse_departure",
    "cleanse_departures",
    "normalize_destination",
]
