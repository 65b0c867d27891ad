"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position. Either component may be missing at the wire boundary."""

    latitude: float | None
    longitude: float | None

    @property
    def is_complete(self) -> bool:
        """Whether both latitude and longitude are present."""
        return self.latitude is not None and self.longitude is not None
