"""Tests for the command line wiring, viewport parsing and output formatting."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from map_departures.adapters.config import AppConfig
from map_departures.domain.models import (
    AggregatedStop,
    AggregationResult,
    AggregationState,
    Coordinate,
    Direction,
    Viewport,
)
from map_departures.formatting import format_departure, format_stop, print_stops, to_json
from map_departures.main import Services, build_services, parse_viewport, watch_viewports
from tests.test_services import make_departure


@pytest.fixture
def sample_stop() -> AggregatedStop:
    """Create a stop with two directions."""
    return AggregatedStop(
        id="8501214",
        name="Ecublens VD, EPFL",
        coordinate=Coordinate(latitude=46.522, longitude=6.566),
        directions=(
            Direction(
                destination="Renens VD",
                departures=(
                    make_departure("Renens VD, gare", pass_names=["Bassenges"], number="1"),
                    make_departure("Renens VD, gare", number="1"),
                ),
            ),
            Direction(
                destination="Lausanne",
                departures=(make_departure("Lausanne, Flon", number="1"),),
            ),
        ),
    )


class TestParseViewport:
    """Tests for viewport line parsing."""

    def test_when_lat_lon_then_radius_zero(self) -> None:
        """Given two numbers, when parsing, then the radius defaults to zero."""
        assert parse_viewport("46.5247 6.5690") == Viewport(46.5247, 6.569, 0.0)

    def test_when_comma_separated_with_radius_then_parsed(self) -> None:
        """Given comma separated values with radius, when parsing, then all are read."""
        assert parse_viewport("46.5247,6.5690,800\n") == Viewport(46.5247, 6.569, 800.0)

    @pytest.mark.parametrize("line", ["46.5", "a b", "1 2 3 4"])
    def test_when_malformed_then_value_error(self, line: str) -> None:
        """Given a malformed line, when parsing, then ValueError is raised."""
        with pytest.raises(ValueError):
            parse_viewport(line)


class TestWatchViewports:
    """Tests for the viewport watch loop."""

    @staticmethod
    def _services() -> Services:
        aggregation = MagicMock()
        aggregation.aggregate = AsyncMock(
            side_effect=lambda viewport: AggregationResult(
                viewport=viewport, state=AggregationState.PUBLISHED
            )
        )
        return Services(aggregation=aggregation, retrieval=MagicMock(), broadcaster=MagicMock())

    @pytest.mark.asyncio
    async def test_when_radius_above_threshold_then_skipped(self) -> None:
        """Given viewports around the radius threshold, when watching, then large ones are skipped."""
        services = self._services()
        config = AppConfig(_env_file=None, max_viewport_radius=1000)
        lines: asyncio.Queue[str | None] = asyncio.Queue()
        for line in ["46.52 6.56 500", "46.52 6.56 1500", "", "garbage", "46.53 6.57", None]:
            await lines.put(line)

        await watch_viewports(services, config, lines)

        requested = [call.args[0] for call in services.aggregation.aggregate.await_args_list]
        assert requested == [Viewport(46.52, 6.56, 500.0), Viewport(46.53, 6.57, 0.0)]


class TestBuildServices:
    """Tests for service wiring."""

    @pytest.mark.asyncio
    async def test_when_built_then_services_share_configuration(self) -> None:
        """Given a config, when building services, then the publisher and limits are wired."""
        config = AppConfig(_env_file=None, departure_limit=25, viewport_key_precision=3)

        async with aiohttp.ClientSession() as session:
            services = build_services(config, session)

        assert services.retrieval._limit == 25
        assert services.aggregation._publisher is services.broadcaster
        assert services.aggregation._viewport_key_precision == 3


class TestFormatting:
    """Tests for plain text and JSON output."""

    def test_format_departure_includes_next_stop(self) -> None:
        """Given a departure with a pass list, when formatting, then the next stop is shown."""
        departure = make_departure("Renens VD, gare", pass_names=["Bassenges"], number="1")

        assert format_departure(departure) == "B1 -> Renens VD, gare at ? (next: Bassenges)"

    def test_format_stop_lists_directions(self, sample_stop: AggregatedStop) -> None:
        """Given a stop, when formatting, then each direction is listed with its size."""
        lines = format_stop(sample_stop)

        assert lines[0] == "Ecublens VD, EPFL [8501214]"
        assert "  -> Renens VD (2)" in lines
        assert "  -> Lausanne (1)" in lines

    def test_format_stop_without_directions(self) -> None:
        """Given a stop without departures, when formatting, then a placeholder is shown."""
        stop = AggregatedStop(id="1", name="Empty", coordinate=Coordinate(0, 0), directions=())

        assert format_stop(stop) == ["Empty [1]", "    No departures"]

    def test_print_stops_when_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Given no stops, when printing, then a message is shown."""
        print_stops(())

        assert capsys.readouterr().out == "No stops found.\n"

    def test_to_json_serializes_nested_dataclasses(self, sample_stop: AggregatedStop) -> None:
        """Given stops, when serializing, then nested directions and departures are included."""
        data = json.loads(to_json((sample_stop,)))

        assert data[0]["id"] == "8501214"
        assert data[0]["coordinate"] == {"latitude": 46.522, "longitude": 6.566}
        assert data[0]["directions"][0]["destination"] == "Renens VD"
        assert len(data[0]["directions"][0]["departures"]) == 2
