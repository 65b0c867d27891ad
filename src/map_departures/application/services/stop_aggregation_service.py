"""Viewport aggregation: stations, their departures and main directions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from map_departures.domain.errors import TransportApiError
from map_departures.domain.models.aggregated_stop import AggregatedStop
from map_departures.domain.models.aggregation_result import AggregationResult, AggregationState

if TYPE_CHECKING:
    from map_departures.application.services.departure_retrieval_service import (
        DepartureRetrievalService,
    )
    from map_departures.application.services.direction_grouping_service import (
        DirectionGroupingService,
    )
    from map_departures.domain.contracts.stop_cache import StopCacheProtocol
    from map_departures.domain.contracts.stops_publisher import StopsPublisherProtocol
    from map_departures.domain.models.departure import RawDeparture
    from map_departures.domain.models.station import Station
    from map_departures.domain.models.viewport import Viewport
    from map_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class StopAggregationService:
    """Runs one aggregation cycle per viewport request.

    A cycle discovers the stations around the viewport center, retrieves the
    departures of every station concurrently, waits for all of them, groups
    each station's departures into directions, caches the result under the
    viewport key and publishes it. Stations whose retrieval fails are left
    out; a discovery failure aborts the cycle and publishes nothing.
    """

    def __init__(
        self,
        station_repository: StationRepository,
        retrieval_service: DepartureRetrievalService,
        grouping_service: DirectionGroupingService,
        stop_cache: StopCacheProtocol,
        publisher: StopsPublisherProtocol | None = None,
        viewport_key_precision: int | None = 4,
    ) -> None:
        """Initialize the service.

        Args:
            station_repository: Repository used for station discovery.
            retrieval_service: Service returning cleansed departures per station.
            grouping_service: Service ranking departures into directions.
            stop_cache: Cache of aggregations by viewport key.
            publisher: Where finished aggregations are pushed, if anywhere.
            viewport_key_precision: Decimals used to quantize viewport keys,
                or None for exact float keys.
        """
        self._station_repository = station_repository
        self._retrieval_service = retrieval_service
        self._grouping_service = grouping_service
        self._stop_cache = stop_cache
        self._publisher = publisher
        self._viewport_key_precision = viewport_key_precision
        self._generation = 0
        self._published_generation = 0

    async def aggregate(self, viewport: Viewport) -> AggregationResult:
        """Run one aggregation cycle for a viewport.

        Never raises; the returned result tells whether the cycle was
        published or aborted.
        """
        self._generation += 1
        generation = self._generation
        key = viewport.cache_key(self._viewport_key_precision)
        self._enter(generation, AggregationState.DISCOVERING, key)

        cached = self._stop_cache.get(key)
        if cached is not None:
            logger.debug(f"Stop cache hit for viewport {key}")
            superseded = not await self._publish(generation, cached)
            return AggregationResult(
                viewport=viewport,
                state=AggregationState.PUBLISHED,
                stops=cached,
                from_cache=True,
                superseded=superseded,
            )

        try:
            stations = await self._station_repository.find_nearby_stations(
                viewport.latitude, viewport.longitude
            )
        except TransportApiError as e:
            logger.error(f"Station discovery failed for viewport {key}: {e}")
            return self._abort(generation, viewport, key, e)
        except Exception as e:
            logger.error(
                f"Unexpected error during station discovery for viewport {key}: {e}",
                exc_info=True,
            )
            return self._abort(generation, viewport, key, e)

        stations = [station for station in stations if station.is_locatable]
        self._enter(generation, AggregationState.FETCHING_ALL, key)
        logger.debug(f"Viewport {key}: fetching departures for {len(stations)} station(s)")

        outcomes = await asyncio.gather(
            *(self._retrieve_station(station) for station in stations)
        )

        self._enter(generation, AggregationState.AGGREGATING, key)
        stops: list[AggregatedStop] = []
        failed: list[str] = []
        for station, departures in zip(stations, outcomes, strict=True):
            if departures is None:
                failed.append(str(station.id))
                continue
            stops.append(self._build_stop(station, departures))

        self._stop_cache.put(key, stops)
        result_stops = tuple(stops)
        superseded = not await self._publish(generation, result_stops)
        self._enter(generation, AggregationState.PUBLISHED, key)
        logger.info(
            f"Aggregated {len(result_stops)} stop(s) for viewport {key}"
            + (f", {len(failed)} station(s) failed" if failed else "")
        )
        return AggregationResult(
            viewport=viewport,
            state=AggregationState.PUBLISHED,
            stops=result_stops,
            superseded=superseded,
            failed_station_ids=tuple(failed),
        )

    @staticmethod
    def _enter(generation: int, state: AggregationState, key: str) -> None:
        logger.debug(f"Cycle {generation} ({key}): {state.value}")

    def _abort(
        self, generation: int, viewport: Viewport, key: str, error: Exception
    ) -> AggregationResult:
        self._enter(generation, AggregationState.ABORTED, key)
        return AggregationResult(
            viewport=viewport, state=AggregationState.ABORTED, error=str(error)
        )

    async def _retrieve_station(self, station: Station) -> list[RawDeparture] | None:
        """Retrieve departures of one station, returning None on failure."""
        station_id = str(station.id)
        try:
            return await self._retrieval_service.retrieve(station_id, station.name or "")
        except Exception as e:
            # One station failing must not abort the other retrievals
            logger.error(
                f"Failed to retrieve departures for station {station_id}: {e}",
                exc_info=True,
            )
            return None

    def _build_stop(self, station: Station, departures: list[RawDeparture]) -> AggregatedStop:
        # Only locatable stations reach this point
        assert station.coordinate is not None
        return AggregatedStop(
            id=str(station.id),
            name=station.name or "",
            coordinate=station.coordinate,
            directions=tuple(self._grouping_service.group(departures)),
        )

    async def _publish(self, generation: int, stops: tuple[AggregatedStop, ...]) -> bool:
        """Publish unless a newer cycle already has; returns whether it published."""
        if generation < self._published_generation:
            logger.info(f"Dropping result of superseded cycle {generation}")
            return False
        self._published_generation = generation
        if self._publisher is not None:
            await self._publisher.publish(stops)
        return True
