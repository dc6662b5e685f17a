"""pytest fixtures for specification tests.

Provides the domain fixture and the SUT to test methods.
User overrides declcheck_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from declcheck.application.discovery import DomainFixture, assembly_of
from declcheck.application.specimens import InstanceSpecification, sut_type_of
from declcheck.domain.model.configuration import DEFAULT_RECURSION_DEPTH, DEFAULT_REPEAT_COUNT, DeclCheckConfig

SUT_MODIFICATION_MARKER = "sut_modification"


def _get_ini_int(config: pytest.Config, name: str, default: int) -> int:
    """Get integer ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Raises:
        pytest.UsageError: If the value is not an integer
    """
    value = config.getini(name)
    if not value:
        return default
    try:
        return int(str(value))
    except ValueError:
        raise pytest.UsageError(f"{name} must be an integer, got {value!r}") from None


def _get_ini_seed(config: pytest.Config) -> int | None:
    value = config.getini("declcheck_seed")
    if not value:
        return None
    return _get_ini_int(config, "declcheck_seed", 0)


@pytest.fixture(scope="session")
def declcheck_config(pytestconfig: pytest.Config) -> DeclCheckConfig:
    """Generation settings from ini options.

    Reads declcheck_repeat_count, declcheck_recursion_depth and
    declcheck_seed from pytest.ini or pyproject.toml.

    Returns:
        DeclCheckConfig
    """
    return DeclCheckConfig(
        repeat_count=_get_ini_int(pytestconfig, "declcheck_repeat_count", DEFAULT_REPEAT_COUNT),
        recursion_depth=_get_ini_int(pytestconfig, "declcheck_recursion_depth", DEFAULT_RECURSION_DEPTH),
        seed=_get_ini_seed(pytestconfig),
    )


@pytest.fixture
def domain_fixture(request: pytest.FixtureRequest, declcheck_config: DeclCheckConfig) -> DomainFixture:
    """Fixture customized with the test package's DomainCustomization.

    Inside a test class the class instance is the specification: its
    overrides and modification hook apply to SUT requests. The
    sut_modification marker sets the hook for one test.

    Returns:
        DomainFixture for the current test
    """
    specification = request.instance
    if specification is None:
        return DomainFixture.load_from(assembly_of(request.module), declcheck_config)

    marker = request.node.get_closest_marker(SUT_MODIFICATION_MARKER)
    if marker is not None:
        if not isinstance(specification, InstanceSpecification):
            raise pytest.UsageError(
                f"@pytest.mark.{SUT_MODIFICATION_MARKER} requires an InstanceSpecification, "
                f"got {type(specification).__qualname__}"
            )
        specification.sut_modification_method = _marker_name(marker.args)

    return DomainFixture.create_for(specification, declcheck_config)


@pytest.fixture
def sut(request: pytest.FixtureRequest, domain_fixture: DomainFixture) -> object:
    """System under test of the current InstanceSpecification.

    Created through the domain fixture, so specification overrides and the
    modification hook apply.

    Raises:
        pytest.UsageError: If the test is not in an InstanceSpecification[T]
    """
    sut_type = None if request.cls is None else sut_type_of(request.cls)
    if sut_type is None:
        raise pytest.UsageError("the sut fixture requires a test class deriving from InstanceSpecification[T]")
    return domain_fixture.create_sut(sut_type)  # type: ignore[arg-type]


def _marker_name(args: tuple[object, ...]) -> str:
    if len(args) != 1 or not isinstance(args[0], str) or not args[0].strip():
        raise pytest.UsageError(f"@pytest.mark.{SUT_MODIFICATION_MARKER} takes one method name, got {args!r}")
    return args[0]
