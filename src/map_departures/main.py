"""Main entry point: wiring and the long-running viewport watch loop."""

import asyncio
import logging
import sys
from dataclasses import dataclass

import aiohttp

from map_departures.adapters.api_rate_limiter import ApiRateLimiter
from map_departures.adapters.cache import InMemoryDepartureCache, InMemoryStopCache
from map_departures.adapters.config import AppConfig
from map_departures.adapters.publishers import StopsBroadcaster
from map_departures.adapters.transport_api import (
    TransportDepartureRepository,
    TransportHttpClient,
    TransportStationRepository,
)
from map_departures.adapters.transport_api.constants import TRANSPORT_API_NAME
from map_departures.application.services import (
    DepartureRetrievalService,
    DirectionGroupingService,
    StopAggregationService,
)
from map_departures.domain.models import Viewport
from map_departures.formatting import print_stops

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the command line entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass(frozen=True)
class Services:
    """Wired application services sharing one HTTP client and one set of caches."""

    aggregation: StopAggregationService
    retrieval: DepartureRetrievalService
    broadcaster: StopsBroadcaster


def build_services(config: AppConfig, session: aiohttp.ClientSession) -> Services:
    """Wire repositories, caches and services for one aiohttp session."""
    http_client = TransportHttpClient(
        session=session,
        base_url=config.transport_api_base_url,
        timeout_seconds=config.transport_api_timeout,
        rate_limiter=ApiRateLimiter.shared(
            TRANSPORT_API_NAME, config.sleep_ms_between_calls / 1000.0
        ),
        log_requests=config.log_requests,
    )
    retrieval = DepartureRetrievalService(
        TransportDepartureRepository(http_client),
        InMemoryDepartureCache(),
        limit=config.departure_limit,
    )
    broadcaster = StopsBroadcaster()
    aggregation = StopAggregationService(
        station_repository=TransportStationRepository(http_client),
        retrieval_service=retrieval,
        grouping_service=DirectionGroupingService(config.max_directions_per_stop),
        stop_cache=InMemoryStopCache(),
        publisher=broadcaster,
        viewport_key_precision=config.viewport_key_precision,
    )
    return Services(aggregation=aggregation, retrieval=retrieval, broadcaster=broadcaster)


def parse_viewport(line: str) -> Viewport:
    """Parse ``"LAT LON [RADIUS]"`` (commas allowed as separators)."""
    parts = line.replace(",", " ").split()
    if len(parts) not in (2, 3):
        raise ValueError(f"Expected 'LAT LON [RADIUS]', got {line.strip()!r}")
    latitude, longitude = float(parts[0]), float(parts[1])
    radius = float(parts[2]) if len(parts) == 3 else 0.0
    return Viewport(latitude=latitude, longitude=longitude, radius=radius)


async def watch_viewports(
    services: Services,
    config: AppConfig,
    lines: "asyncio.Queue[str | None]",
) -> None:
    """Start an aggregation cycle for every requestable viewport line.

    Cycles run concurrently; a ``None`` line ends the loop after all started
    cycles have finished.
    """
    cycles: set[asyncio.Task] = set()
    while (line := await lines.get()) is not None:
        if not line.strip():
            continue
        try:
            viewport = parse_viewport(line)
        except ValueError as e:
            logger.warning(f"Ignoring viewport: {e}")
            continue
        if not viewport.is_requestable(config.max_viewport_radius):
            logger.info(
                f"Skipping viewport with radius {viewport.radius} > {config.max_viewport_radius}"
            )
            continue
        task = asyncio.create_task(services.aggregation.aggregate(viewport))
        cycles.add(task)
        task.add_done_callback(cycles.discard)

    if cycles:
        await asyncio.gather(*cycles)


async def _read_stdin(lines: "asyncio.Queue[str | None]") -> None:
    loop = asyncio.get_running_loop()
    while line := await loop.run_in_executor(None, sys.stdin.readline):
        await lines.put(line)
    await lines.put(None)


async def main() -> None:
    """Read viewports from stdin and print every published aggregation."""
    config = AppConfig()
    config.load_toml_overrides()

    async with aiohttp.ClientSession() as session:
        services = build_services(config, session)
        lines: asyncio.Queue[str | None] = asyncio.Queue()
        publications = services.broadcaster.register()

        async def _print_publications() -> None:
            while True:
                print_stops(await publications.get())

        printer = asyncio.create_task(_print_publications())
        try:
            await asyncio.gather(_read_stdin(lines), watch_viewports(services, config, lines))
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            printer.cancel()
            while not publications.empty():
                print_stops(publications.get_nowait())
            services.broadcaster.unregister(publications)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
