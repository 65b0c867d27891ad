"""Direction domain model."""

from dataclasses import dataclass

from map_departures.domain.models.departure import RawDeparture


@dataclass(frozen=True)
class Direction:
    """Departures of one station sharing a normalized destination."""

    destination: str
    departures: tuple[RawDeparture, ...]

    @property
    def size(self) -> int:
        """Number of departures in this direction."""
        return len(self.departures)
