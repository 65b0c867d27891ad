"""Protocol for departure caching."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from map_departures.domain.models.departure import RawDeparture


class DepartureCacheProtocol(Protocol):
    """Protocol for caching cleansed departures by station ID."""

    def get(self, station_id: str) -> "tuple[RawDeparture, ...] | None":
        """Get cached departures for a station.

        Args:
            station_id: The station ID to get departures for.

        Returns:
            The cached departures, or None if the station was never cached.
        """
        ...

    def put(self, station_id: str, departures: "list[RawDeparture]") -> None:
        """Cache departures for a station.

        Args:
            station_id: The station ID.
            departures: The cleansed departures to cache.
        """
        ...
