"""Protocol for publishing aggregated stops."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from map_departures.domain.models.aggregated_stop import AggregatedStop


class StopsPublisherProtocol(Protocol):
    """Protocol for pushing aggregation results to subscribers."""

    async def publish(self, stops: "tuple[AggregatedStop, ...]") -> None:
        """Publish a complete aggregation to all subscribers.

        Args:
            stops: Aggregated stops of one finished viewport cycle.
        """
        ...
