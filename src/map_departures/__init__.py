"""Map departures - nearby stations and their main directions for a map viewport."""

__version__ = "0.1.0"
