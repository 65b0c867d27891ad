"""Wire schemas for transport.opendata.ch responses.

The API names latitude ``x`` and longitude ``y``. Only the fields the
aggregation needs are declared; everything else in a payload is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from map_departures.domain.models.coordinate import Coordinate
from map_departures.domain.models.departure import PassListEntry, RawDeparture, StationCheckpoint
from map_departures.domain.models.station import Station


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class CoordinateSchema(_WireModel):
    """Coordinate object; both components may be null."""

    x: float | None = None
    y: float | None = None

    def to_domain(self) -> Coordinate:
        """Convert to a domain coordinate."""
        return Coordinate(latitude=self.x, longitude=self.y)


class StationSchema(_WireModel):
    """Location / station object."""

    id: str | None = None
    name: str | None = None
    coordinate: CoordinateSchema | None = None

    def to_domain(self) -> Station:
        """Convert to a domain station."""
        return Station(
            id=self.id,
            name=self.name,
            coordinate=self.coordinate.to_domain() if self.coordinate else None,
        )


class LocationsResponse(_WireModel):
    """Body of ``GET /locations``."""

    stations: list[StationSchema] = Field(default_factory=list)


class CheckpointSchema(_WireModel):
    """Stop record of a stationboard entry or a pass list entry."""

    station: StationSchema = Field(default_factory=StationSchema)
    arrival: str | None = None
    departure: str | None = None
    departure_timestamp: int | None = Field(default=None, alias="departureTimestamp")
    platform: str | None = None
    delay: int | None = None

    def to_checkpoint(self) -> StationCheckpoint:
        """Convert to the originating-station record of a departure."""
        return StationCheckpoint(
            station=self.station.to_domain(),
            departure=self.departure,
            departure_timestamp=self.departure_timestamp,
            platform=self.platform,
            delay=self.delay,
        )

    def to_pass_list_entry(self) -> PassListEntry:
        """Convert to an entry of a forward stop sequence."""
        return PassListEntry(
            station=self.station.to_domain(),
            arrival=self.arrival,
            departure=self.departure,
        )


class StationboardEntrySchema(_WireModel):
    """One departure on a station board."""

    stop: CheckpointSchema
    name: str | None = None
    category: str | None = None
    number: str | None = None
    operator: str | None = None
    to: str
    pass_list: list[CheckpointSchema] | None = Field(default=None, alias="passList")

    def to_domain(self) -> RawDeparture:
        """Convert to a raw domain departure."""
        return RawDeparture(
            category=self.category or "",
            number=self.number or "",
            destination=self.to,
            stop=self.stop.to_checkpoint(),
            name=self.name or "",
            operator=self.operator,
            pass_list=(
                tuple(entry.to_pass_list_entry() for entry in self.pass_list)
                if self.pass_list is not None
                else None
            ),
        )


class StationboardResponse(_WireModel):
    """Body of ``GET /stationboard``."""

    stationboard: list[StationboardEntrySchema] = Field(default_factory=list)
