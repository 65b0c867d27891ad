"""Departure repository port."""

from typing import Protocol

from map_departures.domain.models.departure import RawDeparture


class DepartureRepository(Protocol):
    """Port for retrieving raw departures of a station."""

    async def get_departures(self, station_id: str, limit: int = 50) -> list[RawDeparture]:
        """Get upcoming departures for a station, at most ``limit`` of them."""
        ...
