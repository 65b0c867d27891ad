"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library and other models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("map_departures.domain.models*")
        .should_not_import("map_departures.adapters*")
        .should_not_import("map_departures.application*")
        .should_not_import("map_departures.domain.contracts*")
        .should_not_import("map_departures.domain.ports*")
        .may_import("map_departures.domain.models*")
        .check("map_departures")
    )


def test_domain_does_not_import_outer_layers() -> None:
    """No domain module should import adapters or application services."""
    (
        archrule("domain independence", comment="Domain should not depend on outer layers")
        .match("map_departures.domain*")
        .should_not_import("map_departures.adapters*")
        .should_not_import("map_departures.application*")
        .may_import("map_departures.domain*")
        .check("map_departures", only_direct_imports=True)
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("map_departures.application*")
        .should_not_import("map_departures.adapters*")
        .may_import("map_departures.domain*")
        .may_import("map_departures.application*")
        .check("map_departures", only_direct_imports=True)
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("map_departures.adapters*")
        .should_not_import("map_departures.application*")
        .may_import("map_departures.domain*")
        .may_import("map_departures.adapters*")
        .check("map_departures", only_direct_imports=True)
    )
