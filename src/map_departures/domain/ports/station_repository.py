"""Station repository port."""

from typing import Protocol

from map_departures.domain.models.station import Station


class StationRepository(Protocol):
    """Port for discovering stations around a position."""

    async def find_nearby_stations(self, latitude: float, longitude: float) -> list[Station]:
        """Find stations near the given coordinates.

        Only stations with an id and a complete coordinate are returned.
        """
        ...
