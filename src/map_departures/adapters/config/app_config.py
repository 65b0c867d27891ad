"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Transport API configuration
    transport_api_base_url: str = Field(
        default="https://transport.opendata.ch/v1",
        description="Base URL of the transport.opendata.ch API",
    )
    transport_api_timeout: float = Field(
        default=10, description="Timeout for transport API requests in seconds"
    )
    departure_limit: int = Field(
        default=50, description="Maximum number of departures to fetch per station"
    )
    sleep_ms_between_calls: int = Field(
        default=0,
        description="Minimum time in milliseconds between API calls to avoid rate limiting",
    )
    log_requests: bool = Field(
        default=False, description="Log every outgoing API request at INFO level"
    )

    # Viewport / aggregation configuration
    max_viewport_radius: float = Field(
        default=1000.0,
        description="Viewports with a larger radius (metres) do not trigger an aggregation",
    )
    viewport_key_precision: int | None = Field(
        default=4,
        description="Decimals used to quantize viewport cache keys (unset for exact keys)",
    )
    max_directions_per_stop: int = Field(
        default=2, description="Number of directions kept per station"
    )

    # Optional TOML file overriding the [api], [cache] and [viewport] settings above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file",
    )

    @field_validator("transport_api_timeout", "max_viewport_radius")
    @classmethod
    def validate_positive_float(cls, v: float) -> float:
        """Validate timeouts and radii are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("departure_limit")
    @classmethod
    def validate_departure_limit(cls, v: int) -> int:
        """Validate the departure limit is positive."""
        if v <= 0:
            raise ValueError("departure_limit must be positive")
        return v

    @field_validator("max_directions_per_stop")
    @classmethod
    def validate_max_directions(cls, v: int) -> int:
        """Validate the direction count is not negative."""
        if v < 0:
            raise ValueError("max_directions_per_stop must not be negative")
        return v

    @field_validator("viewport_key_precision")
    @classmethod
    def validate_precision(cls, v: int | None) -> int | None:
        """Validate the viewport key precision is not negative."""
        if v is not None and v < 0:
            raise ValueError("viewport_key_precision must not be negative")
        return v

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its [api], [cache] and [viewport] sections.

        Overridden values go through the same validators as environment values.

        Returns:
            The parsed TOML data, or an empty dict when no file is configured.

        Raises:
            FileNotFoundError: If config_file points to a missing file.
            pydantic.ValidationError: If an override fails validation.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        if "base_url" in api:
            self.transport_api_base_url = api["base_url"]
        if "timeout" in api:
            self.transport_api_timeout = api["timeout"]
        if "departure_limit" in api:
            self.departure_limit = api["departure_limit"]
        if "sleep_ms_between_calls" in api:
            self.sleep_ms_between_calls = api["sleep_ms_between_calls"]
        if "log_requests" in api:
            self.log_requests = api["log_requests"]

        cache = toml_data.get("cache", {})
        if "viewport_key_precision" in cache:
            self.viewport_key_precision = cache["viewport_key_precision"]

        viewport = toml_data.get("viewport", {})
        if "max_radius" in viewport:
            self.max_viewport_radius = viewport["max_radius"]
        if "max_directions_per_stop" in viewport:
            self.max_directions_per_stop = viewport["max_directions_per_stop"]

        return toml_data
