"""Publication adapters."""

from map_departures.adapters.publishers.stops_broadcaster import StopsBroadcaster

__all__ = ["StopsBroadcaster"]
