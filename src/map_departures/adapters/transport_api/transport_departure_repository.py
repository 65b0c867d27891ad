"""Departure repository adapter for transport.opendata.ch."""

import logging

from pydantic import ValidationError

from map_departures.adapters.transport_api.constants import STATIONBOARD_PATH
from map_departures.adapters.transport_api.http_client import TransportHttpClient
from map_departures.adapters.transport_api.schemas import StationboardResponse
from map_departures.domain.errors import DecodeError, InvalidInputError
from map_departures.domain.models.departure import RawDeparture
from map_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class TransportDepartureRepository(DepartureRepository):
    """Fetches a station board via ``/stationboard``."""

    def __init__(self, http_client: TransportHttpClient) -> None:
        """Initialize with the shared HTTP client."""
        self._http_client = http_client

    async def get_departures(self, station_id: str, limit: int = 50) -> list[RawDeparture]:
        """Get upcoming departures for a station.

        Args:
            station_id: Station ID as returned by station discovery.
            limit: Maximum number of departures to request.

        Returns:
            Raw departures in API order, pass lists included when present.

        Raises:
            InvalidInputError: If the station ID is blank or the limit not positive.
            NetworkError: If the request fails.
            DecodeError: If the response does not match the stationboard schema.
        """
        if not station_id or not station_id.strip():
            raise InvalidInputError("Station ID must not be empty")
        if limit <= 0:
            raise InvalidInputError(f"Departure limit must be positive, got {limit}")

        params: dict[str, str | int | float] = {"id": station_id.strip(), "limit": limit}
        data = await self._http_client.get_json(STATIONBOARD_PATH, params)

        try:
            response = StationboardResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected stationboard response for {station_id}: {e}") from e

        departures = [entry.to_domain() for entry in response.stationboard[:limit]]
        logger.debug(f"Decoded {len(departures)} departures for station {station_id}")
        return departures
