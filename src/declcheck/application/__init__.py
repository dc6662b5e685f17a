"""Application layer for structural conformance checks and specimens.

Components:
- query_builder: declarative flags -> MemberQuery
- assertions: assertion objects, one family per member kind
- assert_type: stateless has_*/has_no_* facade
- lookup: find_*/get_* member lookup
- specimens: default generator, customizations, SUT relay
- discovery: domain customization discovery, DomainFixture
- reporters: rich rendering of declared members
"""

from declcheck.application import assert_type
from declcheck.application.discovery import DomainFixture, discover_domain_customizations
from declcheck.application.operator_names import OperatorNames
from declcheck.application.reporters import ConsoleConfig, ConsoleReporter
from declcheck.application.specimens import (
    CompositeCustomization,
    DomainCustomization,
    Fixture,
    FixtureOverride,
    InstanceSpecification,
    MultipleRelay,
    RandomMultipleRelay,
    Specification,
    SpecimenBuilderCustomization,
    SutInjectionRelay,
    fixture_override,
)

__all__ = [
    # Structural checks
    "assert_type",
    "OperatorNames",
    # Specimens
    "Fixture",
    "DomainFixture",
    "CompositeCustomization",
    "DomainCustomization",
    "SpecimenBuilderCustomization",
    "MultipleRelay",
    "RandomMultipleRelay",
    "SutInjectionRelay",
    "Specification",
    "InstanceSpecification",
    "FixtureOverride",
    "fixture_override",
    "discover_domain_customizations",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
]
