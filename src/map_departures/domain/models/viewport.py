"""Viewport domain model."""

from dataclasses import dataclass

from map_departures.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Viewport:
    """Map center plus radius (metres) defining a station query region."""

    latitude: float
    longitude: float
    radius: float = 0.0

    @property
    def center(self) -> Coordinate:
        """Center of the viewport as a coordinate."""
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    def cache_key(self, precision: int | None = None) -> str:
        """Build the stop cache key for this viewport.

        Args:
            precision: Number of decimals to quantize to. ``None`` keeps the
                exact float text, so only bit-identical centers share a key.

        Returns:
            Key in ``"{lat},{lon}"`` form.
        """
        if precision is None:
            return f"{self.latitude},{self.longitude}"
        # Adding 0.0 folds -0.0 into 0.0 so both round to the same key
        lat = round(self.latitude, precision) + 0.0
        lon = round(self.longitude, precision) + 0.0
        return f"{lat:.{precision}f},{lon:.{precision}f}"

    def is_requestable(self, max_radius: float) -> bool:
        """Whether the viewport is small enough to trigger an aggregation."""
        return self.radius <= max_radius
