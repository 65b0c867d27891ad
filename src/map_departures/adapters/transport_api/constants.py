"""Constants for the transport.opendata.ch API."""

TRANSPORT_API_BASE_URL = "https://transport.opendata.ch/v1"
LOCATIONS_PATH = "/locations"
STATIONBOARD_PATH = "/stationboard"

# Only stations, no addresses or points of interest
LOCATION_TYPE_STATION = "station"

TRANSPORT_API_NAME = "transport_api"
