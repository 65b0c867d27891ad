"""Protocol for aggregated stop caching."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from map_departures.domain.models.aggregated_stop import AggregatedStop


class StopCacheProtocol(Protocol):
    """Protocol for caching aggregated stops by viewport key."""

    def get(self, viewport_key: str) -> "tuple[AggregatedStop, ...] | None":
        """Get the cached aggregation for a viewport key, or None on a miss."""
        ...

    def put(self, viewport_key: str, stops: "list[AggregatedStop]") -> None:
        """Cache the aggregation for a viewport key."""
        ...
