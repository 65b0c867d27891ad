"""Command line interface for nearby stations and their departures."""

import argparse
import asyncio
import logging
import sys

import aiohttp

from map_departures.adapters.config import AppConfig
from map_departures.domain.models import AggregationState, Viewport
from map_departures.formatting import format_departure, print_stops, to_json
from map_departures.main import build_services, configure_logging
from map_departures.main import main as watch_main


async def show_nearby(
    latitude: float, longitude: float, radius: float, *, format_json: bool = False
) -> int:
    """Run one aggregation cycle and print the stops. Returns the exit code."""
    config = AppConfig()
    config.load_toml_overrides()
    viewport = Viewport(latitude=latitude, longitude=longitude, radius=radius)
    if not viewport.is_requestable(config.max_viewport_radius):
        print(
            f"Radius {radius} exceeds the maximum of {config.max_viewport_radius}.",
            file=sys.stderr,
        )
        return 1

    async with aiohttp.ClientSession() as session:
        services = build_services(config, session)
        result = await services.aggregation.aggregate(viewport)

    if result.state is AggregationState.ABORTED:
        print(f"Station discovery failed: {result.error}", file=sys.stderr)
        return 1

    if format_json:
        print(to_json(result.stops))
    else:
        print_stops(result.stops)
        if result.failed_station_ids:
            print(
                f"Departures unavailable for: {', '.join(result.failed_station_ids)}",
                file=sys.stderr,
            )
    return 0


async def show_departures(station_id: str, station_name: str, *, format_json: bool = False) -> int:
    """Print the cleansed departures of one station. Returns the exit code."""
    config = AppConfig()
    config.load_toml_overrides()

    async with aiohttp.ClientSession() as session:
        services = build_services(config, session)
        departures = await services.retrieval.retrieve(station_id, station_name)

    if format_json:
        print(to_json(departures))
    elif not departures:
        print(f"No departures for {station_name}.")
    else:
        print(f"\nDepartures from {station_name}:\n")
        for departure in departures:
            print(f"  {format_departure(departure)}")
    return 0


async def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Nearby public transport stops and their main directions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    nearby_parser = subparsers.add_parser("nearby", help="Show stops around a position")
    nearby_parser.add_argument("latitude", type=float, help="Latitude (e.g., 46.5247)")
    nearby_parser.add_argument("longitude", type=float, help="Longitude (e.g., 6.5690)")
    nearby_parser.add_argument("--radius", type=float, default=0.0, help="Viewport radius in m")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show departures of a station")
    departures_parser.add_argument("station_id", help="Station ID (e.g., 8501214)")
    departures_parser.add_argument("station_name", help="Station name, used for cleansing")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("watch", help="Read 'LAT LON [RADIUS]' lines from stdin")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "nearby":
            code = await show_nearby(
                args.latitude, args.longitude, args.radius, format_json=args.json
            )
        elif args.command == "departures":
            code = await show_departures(
                args.station_id, args.station_name, format_json=args.json
            )
        else:
            await watch_main()
            code = 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
