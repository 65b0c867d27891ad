"""Broadcaster for aggregated stops."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from map_departures.domain.contracts.stops_publisher import StopsPublisherProtocol

if TYPE_CHECKING:
    from map_departures.domain.models.aggregated_stop import AggregatedStop

logger = logging.getLogger(__name__)


class StopsBroadcaster(StopsPublisherProtocol):
    """Fans published aggregations out to subscriber queues.

    Each subscriber gets its own unbounded asyncio.Queue. The last published
    aggregation is kept in ``latest`` for subscribers joining later.
    """

    def __init__(self) -> None:
        """Initialize with no subscribers."""
        self._subscribers: set[asyncio.Queue[tuple[AggregatedStop, ...]]] = set()
        self.latest: tuple[AggregatedStop, ...] | None = None

    @property
    def subscriber_count(self) -> int:
        """Number of active subscribers."""
        return len(self._subscribers)

    async def publish(self, stops: tuple[AggregatedStop, ...]) -> None:
        """Publish an aggregation to all subscribers.

        Args:
            stops: Aggregated stops of one finished viewport cycle.
        """
        self.latest = stops
        for queue in list(self._subscribers):
            queue.put_nowait(stops)
        logger.debug(f"Published {len(stops)} stop(s) to {len(self._subscribers)} subscriber(s)")

    def register(self) -> asyncio.Queue[tuple[AggregatedStop, ...]]:
        """Register a new subscriber queue."""
        queue: asyncio.Queue[tuple[AggregatedStop, ...]] = asyncio.Queue()
        self._subscribers.add(queue)
        return queue

    def unregister(self, queue: asyncio.Queue[tuple[AggregatedStop, ...]]) -> None:
        """Remove a subscriber queue; unknown queues are ignored."""
        self._subscribers.discard(queue)

    async def subscribe(self) -> AsyncIterator[tuple[AggregatedStop, ...]]:
        """Iterate over publications from now on until the consumer stops."""
        queue = self.register()
        try:
            while True:
                yield await queue.get()
        finally:
            self.unregister(queue)
