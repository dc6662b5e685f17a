"""Public API for structural conformance tests.

Public exports:
    assert_type: has_*/has_no_* facade module
    MemberVisibility, MemberDetails, FieldDetails, PropertyDetails: flags
    visibility, virtual, extension_method, static_class, event: markers
    Fixture, DomainFixture: specimen generators
    Specification, InstanceSpecification, FixtureOverride, fixture_override:
        specification bases and SUT overrides
    DomainCustomization, CompositeCustomization, SpecimenBuilderCustomization:
        fixture customizations
    OperatorNames: operator method names
"""

from declcheck.application import assert_type
from declcheck.application.discovery import DomainFixture
from declcheck.application.lookup import (
    find_constructor,
    find_event,
    find_field,
    find_method,
    find_property,
    get_constructor,
    get_event,
    get_field,
    get_method,
    get_property,
    type_hierarchy,
)
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
from declcheck.domain.model import (
    DeclCheckConfig,
    FieldDetails,
    MemberDetails,
    MemberVisibility,
    PropertyDetails,
)
from declcheck.infrastructure import (
    PythonIntrospector,
    event,
    extension_method,
    static_class,
    virtual,
    visibility,
)

__all__ = [
    # Structural checks
    "assert_type",
    "find_constructor",
    "find_event",
    "find_field",
    "find_method",
    "find_property",
    "get_constructor",
    "get_event",
    "get_field",
    "get_method",
    "get_property",
    "type_hierarchy",
    "OperatorNames",
    # Flags
    "FieldDetails",
    "MemberDetails",
    "MemberVisibility",
    "PropertyDetails",
    # Markers
    "event",
    "extension_method",
    "static_class",
    "virtual",
    "visibility",
    # Specimens
    "DeclCheckConfig",
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
    # Reporting
    "ConsoleConfig",
    "ConsoleReporter",
    "PythonIntrospector",
]
