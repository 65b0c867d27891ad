"""Station repository adapter for transport.opendata.ch."""

import logging
import math

from pydantic import ValidationError

from map_departures.adapters.transport_api.constants import LOCATION_TYPE_STATION, LOCATIONS_PATH
from map_departures.adapters.transport_api.http_client import TransportHttpClient
from map_departures.adapters.transport_api.schemas import LocationsResponse
from map_departures.domain.errors import DecodeError, InvalidInputError
from map_departures.domain.models.station import Station
from map_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class TransportStationRepository(StationRepository):
    """Discovers stations around a position via ``/locations``."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        """Initialize with the shared HTTP client."""
        self._http_client = http_client

    async def find_nearby_stations(self, latitude: float, longitude: float) -> list[Station]:
        """Find stations near the given coordinates.

        Args:
            latitude: Latitude of the viewport center.
            longitude: Longitude of the viewport center.

        Returns:
            Stations that have an id and both coordinate components, in API order.

        Raises:
            InvalidInputError: If a coordinate is not a finite number.
            NetworkError: If the request fails.
            DecodeError: If the response does not match the locations schema.
        """
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise InvalidInputError(f"Invalid coordinates: {latitude}, {longitude}")

        params: dict[str, str | int | float] = {
            "x": latitude,
            "y": longitude,
            "type": LOCATION_TYPE_STATION,
        }
        data = await self._http_client.get_json(LOCATIONS_PATH, params)

        try:
            response = LocationsResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected locations response: {e}") from e

        stations = [schema.to_domain() for schema in response.stations]
        valid = [station for station in stations if station.is_locatable]
        if len(valid) < len(stations):
            logger.debug(
                f"Discarded {len(stations) - len(valid)} station(s) without id or coordinates"
            )
        return valid
