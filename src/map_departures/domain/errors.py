"""Errors raised while talking to the transport API."""


class TransportApiError(Exception):
    """Base class for transport API failures."""


class NetworkError(TransportApiError):
    """Transport or connectivity failure, including non-success HTTP status."""


class DecodeError(TransportApiError):
    """Response body does not match the expected schema."""


class InvalidInputError(TransportApiError):
    """Request parameters cannot be turned into a valid request."""
