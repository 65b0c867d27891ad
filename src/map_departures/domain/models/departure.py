"""Departure domain models."""

from dataclasses import dataclass, field

from map_departures.domain.models.station import Station


@dataclass(frozen=True)
class StationCheckpoint:
    """Departure record at the originating station."""

    station: Station
    departure: str | None = None
    departure_timestamp: int | None = None
    platform: str | None = None
    delay: int | None = None


@dataclass(frozen=True)
class PassListEntry:
    """One station on a departure's forward stop sequence."""

    station: Station
    arrival: str | None = None
    departure: str | None = None

    @property
    def is_named(self) -> bool:
        """Unnamed entries are noise returned by the upstream API."""
        return self.station.is_named


@dataclass(frozen=True)
class RawDeparture:
    """One scheduled vehicle leaving a station.

    ``pass_list`` is ``None`` when the API gave no stop detail, which is not the
    same as an empty stop sequence.
    """

    category: str
    number: str
    destination: str
    stop: StationCheckpoint
    name: str = ""
    operator: str | None = None
    pass_list: tuple[PassListEntry, ...] | None = field(default=None)
