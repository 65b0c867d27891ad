"""Plain-text and JSON rendering of aggregated stops for the command line."""

import json
from dataclasses import asdict
from typing import Any

from map_departures.domain.models import AggregatedStop, RawDeparture


def format_departure(departure: RawDeparture) -> str:
    """One line per departure: line, destination, time and next stop."""
    line = f"{departure.category}{departure.number}".strip() or departure.name
    time = departure.stop.departure or "?"
    text = f"{line} -> {departure.destination} at {time}"
    if departure.pass_list:
        text += f" (next: {departure.pass_list[0].station.name})"
    return text


def format_stop(stop: AggregatedStop, departures_per_direction: int = 3) -> list[str]:
    """Render a stop with each of its directions and their first departures."""
    lines = [f"{stop.name} [{stop.id}]"]
    if not stop.directions:
        lines.append("    No departures")
    for direction in stop.directions:
        lines.append(f"  -> {direction.destination} ({direction.size})")
        for departure in direction.departures[:departures_per_direction]:
            lines.append(f"      {format_departure(departure)}")
    return lines


def print_stops(stops: tuple[AggregatedStop, ...] | list[AggregatedStop]) -> None:
    """Print stops in plain text."""
    if not stops:
        print("No stops found.")
        return
    for stop in stops:
        print("\n".join(format_stop(stop)))
        print()


def to_json(value: Any) -> str:
    """Serialize dataclass values (or lists of them) to indented JSON."""
    if isinstance(value, list | tuple):
        payload = [asdict(item) for item in value]
    else:
        payload = asdict(value)
    return json.dumps(payload, indent=2, ensure_ascii=False)
