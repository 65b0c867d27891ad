"""Station domain model."""

from dataclasses import dataclass

from map_departures.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Station:
    """Represents a public transport station as returned by the locations endpoint."""

    id: str | None
    name: str | None
    coordinate: Coordinate | None = None

    @property
    def is_named(self) -> bool:
        """Whether the station carries a non-empty name."""
        return bool(self.name)

    @property
    def is_locatable(self) -> bool:
        """Whether the station has an id and a complete coordinate."""
        return bool(self.id) and self.coordinate is not None and self.coordinate.is_complete
