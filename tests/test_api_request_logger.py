"""Tests for API request logger."""

import logging

import pytest

from map_departures.adapters.api_request_logger import (
    build_request_url,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given MAPDEP_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("MAPDEP_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_then_returns_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given MAPDEP_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("MAPDEP_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_enabled_by_config_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given the config switch, when checking, then returns True regardless of env."""
        monkeypatch.setenv("MAPDEP_LOG_REQUESTS", "false")

        assert should_log_requests(enabled=True) is True


class TestBuildRequestUrl:
    """Tests for URL rendering."""

    def test_params_are_sorted_and_encoded(self) -> None:
        """Given params, when rendering, then they are sorted and URL-encoded."""
        url = build_request_url(
            "https://transport.opendata.ch/v1/locations",
            {"y": 6.569, "x": 46.5247, "type": "station"},
        )

        assert url == (
            "https://transport.opendata.ch/v1/locations?type=station&x=46.5247&y=6.569"
        )

    def test_without_params_returns_url(self) -> None:
        """Given no params, when rendering, then the URL is unchanged."""
        assert build_request_url("https://example.org/a", None) == "https://example.org/a"

    def test_existing_query_string_is_extended(self) -> None:
        """Given a URL with a query, when rendering, then params are appended with '&'."""
        assert build_request_url("https://example.org/a?b=1", {"c": 2}) == (
            "https://example.org/a?b=1&c=2"
        )


class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_disabled_then_does_not_log(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        monkeypatch.delenv("MAPDEP_LOG_REQUESTS", raising=False)

        with caplog.at_level(logging.INFO):
            log_api_request("GET", "https://example.org/stationboard", {"id": "1"})

        assert caplog.records == []

    def test_when_enabled_then_logs_method_and_url(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging enabled, when logging a request, then method and full URL are logged."""
        with caplog.at_level(logging.INFO):
            log_api_request(
                "GET", "https://example.org/stationboard", {"id": "1", "limit": 50}, enabled=True
            )

        assert "GET https://example.org/stationboard?id=1&limit=50" in caplog.text
