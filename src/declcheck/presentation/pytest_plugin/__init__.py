"""pytest plugin for declcheck.

Provides fixtures for specification tests:
    declcheck_config: Generation settings (override in conftest.py)
    domain_fixture: DomainFixture of the test package, bound to the test class
    sut: System under test of an InstanceSpecification[T] test class

Marker:
    sut_modification(name): SUT modification method for one test

Configuration (pytest.ini or pyproject.toml):
    declcheck_repeat_count: Items per generated collection (default: 3)
    declcheck_recursion_depth: Request nesting limit (default: 16)
    declcheck_seed: Seed of the random generator (default: unseeded)

Failed structural checks get a "declared members" report section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from declcheck.application.reporters import ConsoleConfig, ConsoleReporter
from declcheck.domain.exceptions import IntrospectionError, InvalidExtensionClassImplementationError, MemberDeclarationError

# Register fixtures from fixtures module
from declcheck.presentation.pytest_plugin.fixtures import (
    SUT_MODIFICATION_MARKER,
    declcheck_config,
    domain_fixture,
    sut,
)

if TYPE_CHECKING:
    from collections.abc import Generator

# Export fixtures for pytest discovery
__all__ = [
    "declcheck_config",
    "domain_fixture",
    "sut",
]

REPORT_SECTION = "declared members"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("declcheck_repeat_count", "Items per generated collection", default="")
    parser.addini("declcheck_recursion_depth", "Request nesting limit of the fixture", default="")
    parser.addini("declcheck_seed", "Seed of the fixture's random generator", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        f"{SUT_MODIFICATION_MARKER}(name): SUT modification method of the InstanceSpecification for this test",
    )


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, pytest.TestReport, pytest.TestReport]:
    """Attach declared members of the checked type to failed structural checks."""
    report = yield
    if call.excinfo is None or call.when != "call":
        return report

    error = call.excinfo.value
    if not isinstance(error, (MemberDeclarationError, InvalidExtensionClassImplementationError)):
        return report
    if not isinstance(error.type_, type):
        return report

    color = item.config.get_terminal_writer().hasmarkup
    try:
        rendered = ConsoleReporter(ConsoleConfig(color=color)).report(error.type_)
    except IntrospectionError as e:
        rendered = str(e)
    report.sections.append((REPORT_SECTION, rendered))
    return report
