"""Cleansing of departure stop sequences."""

from dataclasses import replace

from map_departures.domain.models.departure import PassListEntry, RawDeparture


def _drop_unnamed(entries: tuple[PassListEntry, ...]) -> tuple[PassListEntry, ...]:
    return tuple(entry for entry in entries if entry.is_named)


def _drop_leading_self(
    entries: tuple[PassListEntry, ...], current_station_name: str
) -> tuple[PassListEntry, ...]:
    # Stops at the first entry naming another station, so a second pass is a no-op
    index = 0
    while index < len(entries) and entries[index].station.name == current_station_name:
        index += 1
    return entries[index:]


def cleanse_departure(departure: RawDeparture, current_station_name: str) -> RawDeparture:
    """Remove noise from a departure's forward stop sequence.

    Unnamed entries are dropped first, then the leading entries naming the
    queried station itself (exact, case-sensitive match), since a station
    should not list itself as its own next stop.

    Args:
        departure: Departure as decoded from the API.
        current_station_name: Name of the station the departures were queried for.

    Returns:
        A new departure; the input is left untouched. Departures without a
        stop sequence are returned as they are.
    """
    if departure.pass_list is None:
        return departure

    entries = _drop_leading_self(_drop_unnamed(departure.pass_list), current_station_name)
    if entries == departure.pass_list:
        return departure
    return replace(departure, pass_list=entries)


def cleanse_departures(
    departures: list[RawDeparture], current_station_name: str
) -> list[RawDeparture]:
    """Cleanse every departure of a station board."""
    return [cleanse_departure(departure, current_station_name) for departure in departures]
