"""Specimen generation: fixture, builders, SUT relay.

Components:
- Fixture: resolves requests through customizations and built-in builders
- SutInjectionRelay: routes SUT requests through the active specification
"""

from declcheck.application.specimens.builders import MultipleRelay, RandomMultipleRelay
from declcheck.application.specimens.customizations import (
    CompositeCustomization,
    DomainCustomization,
    SpecimenBuilderCustomization,
)
from declcheck.application.specimens.fixture import Fixture
from declcheck.application.specimens.relay import SutInjectionRelay
from declcheck.application.specimens.specification import (
    FixtureOverride,
    InstanceSpecification,
    Specification,
    fixture_override,
    sut_type_of,
)

__all__ = [
    # Fixtures
    "Fixture",
    # Customizations
    "CompositeCustomization",
    "DomainCustomization",
    "SpecimenBuilderCustomization",
    # Builders
    "MultipleRelay",
    "RandomMultipleRelay",
    "SutInjectionRelay",
    # Specifications
    "Specification",
    "InstanceSpecification",
    "FixtureOverride",
    "fixture_override",
    "sut_type_of",
]
