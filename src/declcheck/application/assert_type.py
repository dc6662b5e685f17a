"""Structural assertion facade.

Stateless functions: validate arguments, build the assertion object, verify.

Example:
    has_method(Parser, MemberDetails.VIRTUAL, "parse", Document, (str,))
    has_no_field(Parser, FieldDetails.DEFAULT, "cache", dict)
    has_parameterless_constructor(Settings, MemberVisibility.PUBLIC)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application import lookup
from declcheck.application._validation import require_target, require_types
from declcheck.application.assertions import (
    HasConstructorAssertion,
    HasEventAssertion,
    HasFieldAssertion,
    HasMethodAssertion,
    HasNoConstructorAssertion,
    HasNoEventAssertion,
    HasNoFieldAssertion,
    HasNoMethodAssertion,
    HasNoParameterlessConstructorAssertion,
    HasNoPropertyAssertion,
    HasParameterlessConstructorAssertion,
    HasPropertyAssertion,
    IsExtensionClassAssertion,
)
from declcheck.domain.exceptions import MissingInterfaceDeclarationError
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
    from declcheck.domain.ports.introspector import TypeIntrospector


# =============================================================================
# Interfaces
# =============================================================================


def declares_interface(
    type_: object,
    interface: object,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that the class statement of type_ names interface as a base.

    Args:
        type_: Type to examine
        interface: Abstract base class or Protocol
        introspector: Introspection port, PythonIntrospector if None

    Raises:
        TypeError: If type_ or interface is None
        ValueError: If interface is not an interface type
        MissingInterfaceDeclarationError: If type_ does not declare interface
    """
    port = lookup.resolve_introspector(introspector)
    _require_interface(port, interface)
    if interface not in port.interfaces(require_target(type_)):
        raise MissingInterfaceDeclarationError(type_, interface)


def hierarchy_declares_interface(
    type_: object,
    interface: object,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ or any of its base types declares interface.

    Raises:
        TypeError: If type_ or interface is None
        ValueError: If interface is not an interface type
        MissingInterfaceDeclarationError: If no type in the hierarchy declares it
    """
    port = lookup.resolve_introspector(introspector)
    _require_interface(port, interface)
    if not any(interface in port.interfaces(t) for t in port.hierarchy(require_target(type_))):
        raise MissingInterfaceDeclarationError(type_, interface)


def _require_interface(port: TypeIntrospector, interface: object) -> None:
    if interface is None:
        raise TypeError("interface must not be None")
    if not port.is_interface(interface):
        raise ValueError(f"{interface!r} is not an interface type (abstract base class or Protocol)")


# =============================================================================
# Constructors
# =============================================================================


def has_parameterless_constructor(
    type_: object,
    visibility: MemberVisibility,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ can be constructed without arguments.

    A type declaring no constructor passes: its implicit constructor is
    public and parameterless.

    Raises:
        MissingMemberDeclarationError: If constructors exist but none is
            parameterless with an admitted visibility
    """
    HasParameterlessConstructorAssertion(visibility).verify(require_target(type_), introspector)


def has_no_parameterless_constructor(
    type_: object,
    visibility: MemberVisibility,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ cannot be constructed without arguments.

    A type declaring no constructor always fails.

    Raises:
        MemberDeclarationNotExpectedError: If a parameterless constructor exists
    """
    HasNoParameterlessConstructorAssertion(visibility).verify(require_target(type_), introspector)


def has_constructor(
    type_: object,
    visibility: MemberVisibility,
    parameter_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ declares a constructor with exact parameter types.

    Raises:
        MissingMemberDeclarationError: If no constructor matches
    """
    require_target(type_)
    assertion = HasConstructorAssertion(visibility, require_types(parameter_types, "parameter_types"))
    assertion.verify(type_, introspector)


def has_no_constructor(
    type_: object,
    visibility: MemberVisibility,
    parameter_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ does not declare a constructor with exact parameter types.

    Raises:
        MemberDeclarationNotExpectedError: If a constructor matches
    """
    require_target(type_)
    assertion = HasNoConstructorAssertion(visibility, require_types(parameter_types, "parameter_types"))
    assertion.verify(type_, introspector)


# =============================================================================
# Fields
# =============================================================================


def has_field(
    type_: object,
    details: FieldDetails,
    name: str,
    field_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ declares the field.

    Raises:
        MissingMemberDeclarationError: If no field matches
    """
    require_target(type_)
    HasFieldAssertion(details, name, field_type, visibility).verify(type_, introspector)


def has_no_field(
    type_: object,
    details: FieldDetails,
    name: str,
    field_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ does not declare the field.

    Raises:
        MemberDeclarationNotExpectedError: If a field matches
    """
    require_target(type_)
    HasNoFieldAssertion(details, name, field_type, visibility).verify(type_, introspector)


# =============================================================================
# Events
# =============================================================================


def has_event(
    type_: object,
    details: MemberDetails,
    name: str,
    handler_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ declares the event.

    Raises:
        MissingMemberDeclarationError: If no event matches
    """
    require_target(type_)
    HasEventAssertion(details, name, handler_type, visibility).verify(type_, introspector)


def has_no_event(
    type_: object,
    details: MemberDetails,
    name: str,
    handler_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ does not declare the event.

    Raises:
        MemberDeclarationNotExpectedError: If an event matches
    """
    require_target(type_)
    HasNoEventAssertion(details, name, handler_type, visibility).verify(type_, introspector)


# =============================================================================
# Properties
# =============================================================================


def has_property(
    type_: object,
    details: PropertyDetails,
    name: str,
    property_type: object,
    index_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ declares the property.

    Raises:
        MissingMemberDeclarationError: If no property matches
    """
    require_target(type_)
    assertion = HasPropertyAssertion(details, name, property_type, require_types(index_types, "index_types"))
    assertion.verify(type_, introspector)


def has_no_property(
    type_: object,
    details: PropertyDetails,
    name: str,
    property_type: object,
    index_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ does not declare the property.

    Raises:
        MemberDeclarationNotExpectedError: If a property matches
    """
    require_target(type_)
    assertion = HasNoPropertyAssertion(details, name, property_type, require_types(index_types, "index_types"))
    assertion.verify(type_, introspector)


# =============================================================================
# Methods
# =============================================================================


def has_method(
    type_: object,
    details: MemberDetails,
    name: str,
    return_type: object,
    parameter_types: Iterable[object] = (),
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ declares the method.

    Args:
        type_: Type to examine
        details: Declared/static/abstract/virtual flags
        name: Method name
        return_type: Exact return type (``types.NoneType`` for None)
        parameter_types: Exact parameter types, self/cls excluded
        visibility: Admitted visibility levels (NONE: public)
        introspector: Introspection port, PythonIntrospector if None

    Raises:
        MissingMemberDeclarationError: If no method matches
    """
    require_target(type_)
    assertion = HasMethodAssertion(
        details, name, return_type, require_types(parameter_types, "parameter_types"), visibility
    )
    assertion.verify(type_, introspector)


def has_no_method(
    type_: object,
    details: MemberDetails,
    name: str,
    return_type: object,
    parameter_types: Iterable[object] = (),
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> None:
    """Check that type_ does not declare the method.

    Raises:
        MemberDeclarationNotExpectedError: If a method matches
    """
    require_target(type_)
    assertion = HasNoMethodAssertion(
        details, name, return_type, require_types(parameter_types, "parameter_types"), visibility
    )
    assertion.verify(type_, introspector)


# =============================================================================
# Types
# =============================================================================


def is_extension_class(type_: object, introspector: TypeIntrospector | None = None) -> None:
    """Check that type_ is a valid static extension class.

    Raises:
        InvalidExtensionClassImplementationError: With every violation found
    """
    IsExtensionClassAssertion().verify(require_target(type_), introspector)
