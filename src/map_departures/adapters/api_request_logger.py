"""Logging of outgoing transport API requests."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "MAPDEP_LOG_REQUESTS"


def should_log_requests(enabled: bool = False) -> bool:
    """Whether requests are logged, by configuration or MAPDEP_LOG_REQUESTS=true."""
    return enabled or os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def build_request_url(url: str, params: dict[str, Any] | None) -> str:
    """Render a URL with its query parameters in a stable order."""
    if not params:
        return url
    query = urlencode(sorted(params.items()))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    enabled: bool = False,
) -> None:
    """Log an outgoing request if request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
        enabled: Configuration switch; the environment variable also enables it.
    """
    if not should_log_requests(enabled):
        return
    logger.info(f"API Request: {method} {build_request_url(url, params)}")
