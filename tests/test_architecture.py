"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- The stop repository depends on ports, not on adapters
- Adapters do not depend on the application layer
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should import nothing from the project but other domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("stop_catalog.domain.models*")
        .should_not_import("stop_catalog.adapters*")
        .should_not_import("stop_catalog.application*")
        .should_not_import("stop_catalog.domain.ports*")
        .should_not_import("stop_catalog.domain.exceptions")
        .may_import("stop_catalog.domain.models*")
        .check("stop_catalog")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("stop_catalog.domain.ports*")
        .should_not_import("stop_catalog.adapters*")
        .should_not_import("stop_catalog.application*")
        .may_import("stop_catalog.domain*")
        .check("stop_catalog")
    )


def test_application_does_not_import_adapters() -> None:
    """The stop repository should only see the persistence and upstream ports."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("stop_catalog.application*")
        .should_not_import("stop_catalog.adapters*")
        .should_not_import("sqlalchemy*")
        .should_not_import("aiohttp*")
        .may_import("stop_catalog.domain*")
        .may_import("stop_catalog.application*")
        .check("stop_catalog")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("stop_catalog.adapters*")
        .should_not_import("stop_catalog.application*")
        .may_import("stop_catalog.domain*")
        .may_import("stop_catalog.adapters*")
        .check("stop_catalog", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("stop_catalog.domain*")
        .should_not_import("stop_catalog.adapters*")
        .should_not_import("stop_catalog.application*")
        .may_import("stop_catalog.domain*")
        .check("stop_catalog", only_direct_imports=True)
    )
