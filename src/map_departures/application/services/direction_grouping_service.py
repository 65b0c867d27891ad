"""Direction grouping service."""

import logging

from map_departures.application.services.destination_normalizer import normalize_destination
from map_departures.domain.models.departure import RawDeparture
from map_departures.domain.models.direction import Direction

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIRECTIONS = 2


class DirectionGroupingService:
    """Groups a station's departures into its most served directions."""

    def __init__(self, max_directions: int = DEFAULT_MAX_DIRECTIONS) -> None:
        """Initialize the service.

        Args:
            max_directions: How many directions to keep per station. The map
                shows at most two destination badges per stop.
        """
        if max_directions < 0:
            raise ValueError("max_directions must not be negative")
        self._max_directions = max_directions

    def group(self, departures: list[RawDeparture]) -> list[Direction]:
        """Group already cleansed departures by normalized destination.

        Groups are ranked by size, largest first. Equal-sized groups keep the
        order in which their first departure appeared, so the result only
        depends on the input order.

        Args:
            departures: Cleansed departures of one station.

        Returns:
            At most ``max_directions`` directions, each keeping its departures
            in input order.
        """
        groups: dict[str, list[RawDeparture]] = {}
        for departure in departures:
            groups.setdefault(normalize_destination(departure.destination), []).append(departure)

        # sorted() is stable, so ties stay in first-seen order
        ranked = sorted(groups.items(), key=lambda item: len(item[1]), reverse=True)
        kept = ranked[: self._max_directions]

        if len(ranked) > len(kept):
            dropped = [destination for destination, _ in ranked[len(kept) :]]
            logger.debug(f"Dropped {len(dropped)} minor direction(s): {dropped}")

        return [
            Direction(destination=destination, departures=tuple(members))
            for destination, members in kept
            if members
        ]
