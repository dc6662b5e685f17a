"""Member lookup by declaration shape.

find_* return the first matching member or None.
get_* raise MissingMemberDeclarationError instead of returning None.

Example:
    info = find_method(Parser, MemberDetails.DEFAULT, "parse", Document, (str,))
    if info is not None:
        print(info.declaring_type)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application import matching, query_builder
from declcheck.application._validation import (
    require_name,
    require_target,
    require_type,
    require_types,
    require_visibility,
)
from declcheck.domain.exceptions import MissingMemberDeclarationError
from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.query import MemberQuery
from declcheck.domain.model.visibility import MemberVisibility
from declcheck.infrastructure.python_introspector import PythonIntrospector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.ports.introspector import TypeIntrospector

_DEFAULT_INTROSPECTOR = PythonIntrospector()


def resolve_introspector(introspector: TypeIntrospector | None) -> TypeIntrospector:
    """Given introspector, or the shared PythonIntrospector when None."""
    return _DEFAULT_INTROSPECTOR if introspector is None else introspector


def constructor_count(type_: object, introspector: TypeIntrospector | None = None) -> int:
    """Number of declared constructors of any visibility."""
    port = resolve_introspector(introspector)
    return len(port.members(require_target(type_), MemberKind.CONSTRUCTOR, MemberQuery.everything()))


def find_constructor(
    type_: object,
    visibility: MemberVisibility,
    parameter_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
    *,
    query: MemberQuery | None = None,
) -> MemberInfo | None:
    """Find constructor with exact parameter types.

    Args:
        type_: Type to inspect
        visibility: Admitted visibility levels
        parameter_types: Exact parameter types, self excluded
        introspector: Introspection port, PythonIntrospector if None
        query: Prebuilt introspection query, derived from the flags if None

    Returns:
        Matching constructor or None
    """
    require_target(type_)
    mask = require_visibility(visibility)
    params = require_types(parameter_types, "parameter_types")
    port = resolve_introspector(introspector)

    if query is None:
        query = query_builder.visibility_query(mask)
    for info in port.members(type_, MemberKind.CONSTRUCTOR, query):
        if matching.matches_constructor(info, visibility=mask, parameter_types=params):
            return info
    return None


def find_field(
    type_: object,
    details: FieldDetails,
    name: str,
    field_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
    *,
    query: MemberQuery | None = None,
) -> MemberInfo | None:
    """Find field by name, exact type, and modifiers.

    Args:
        type_: Type to inspect
        details: Declared/static/read-only/const flags
        name: Field name
        field_type: Exact field type
        visibility: Admitted visibility levels (NONE: public)
        introspector: Introspection port, PythonIntrospector if None
        query: Prebuilt introspection query, derived from the flags if None

    Returns:
        Matching field or None
    """
    require_target(type_)
    require_name(name, "name")
    require_type(field_type, "field_type")
    mask = require_visibility(visibility)
    port = resolve_introspector(introspector)

    if query is None:
        query = query_builder.field_query(details, mask)
    for info in port.members(type_, MemberKind.FIELD, query, name):
        if matching.matches_field(info, details=details, field_type=field_type, visibility=mask):
            return info
    return None


def find_event(
    type_: object,
    details: MemberDetails,
    name: str,
    handler_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
    *,
    query: MemberQuery | None = None,
) -> MemberInfo | None:
    """Find event by name, exact handler type, and modifiers.

    Args:
        type_: Type to inspect
        details: Declared/static/abstract/virtual flags
        name: Event name
        handler_type: Exact handler type
        visibility: Admitted visibility levels (NONE: public)
        introspector: Introspection port, PythonIntrospector if None
        query: Prebuilt introspection query, derived from the flags if None

    Returns:
        Matching event or None
    """
    require_target(type_)
    require_name(name, "name")
    require_type(handler_type, "handler_type")
    mask = require_visibility(visibility)
    port = resolve_introspector(introspector)

    if query is None:
        query = query_builder.member_query(details, mask)
    for info in port.members(type_, MemberKind.EVENT, query, name):
        if matching.matches_event(info, details=details, handler_type=handler_type, visibility=mask):
            return info
    return None


def find_property(
    type_: object,
    details: PropertyDetails,
    name: str,
    property_type: object,
    index_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
    *,
    query: MemberQuery | None = None,
) -> MemberInfo | None:
    """Find property by name, exact type, index parameters, and accessor states.

    Args:
        type_: Type to inspect
        details: Modifier flags and getter/setter states
        name: Property name
        property_type: Exact property type
        index_types: Exact index parameter types
        introspector: Introspection port, PythonIntrospector if None
        query: Prebuilt introspection query, derived from the flags if None

    Returns:
        Matching property or None

    Raises:
        ValueError: If an accessor group has more than one state
    """
    require_target(type_)
    require_name(name, "name")
    require_type(property_type, "property_type")
    indexes = require_types(index_types, "index_types")
    port = resolve_introspector(introspector)

    if query is None:
        query = query_builder.property_query(details)
    for info in port.members(type_, MemberKind.PROPERTY, query, name):
        if matching.matches_property(info, details=details, property_type=property_type, index_types=indexes):
            return info
    return None


def find_method(
    type_: object,
    details: MemberDetails,
    name: str,
    return_type: object,
    parameter_types: Iterable[object] = (),
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
    *,
    query: MemberQuery | None = None,
) -> MemberInfo | None:
    """Find method by name, exact signature, and modifiers.

    Args:
        type_: Type to inspect
        details: Declared/static/abstract/virtual flags
        name: Method name
        return_type: Exact return type (``types.NoneType`` for None)
        parameter_types: Exact parameter types, self/cls excluded
        visibility: Admitted visibility levels (NONE: public)
        introspector: Introspection port, PythonIntrospector if None
        query: Prebuilt introspection query, derived from the flags if None

    Returns:
        Matching method or None
    """
    require_target(type_)
    require_name(name, "name")
    require_type(return_type, "return_type")
    params = require_types(parameter_types, "parameter_types")
    mask = require_visibility(visibility)
    port = resolve_introspector(introspector)

    if query is None:
        query = query_builder.member_query(details, mask)
    for info in port.members(type_, MemberKind.METHOD, query, name):
        if matching.matches_method(
            info,
            details=details,
            return_type=return_type,
            parameter_types=params,
            visibility=mask,
        ):
            return info
    return None


def get_constructor(
    type_: object,
    visibility: MemberVisibility,
    parameter_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> MemberInfo:
    """Like find_constructor, raising MissingMemberDeclarationError if absent."""
    params = require_types(parameter_types, "parameter_types")
    info = find_constructor(type_, visibility, params, introspector)
    if info is None:
        raise MissingMemberDeclarationError(type_, _signature("__init__", params))
    return info


def get_field(
    type_: object,
    details: FieldDetails,
    name: str,
    field_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> MemberInfo:
    """Like find_field, raising MissingMemberDeclarationError if absent."""
    info = find_field(type_, details, name, field_type, visibility, introspector)
    if info is None:
        raise MissingMemberDeclarationError(type_, f"{name}: {type_label(field_type)}")
    return info


def get_event(
    type_: object,
    details: MemberDetails,
    name: str,
    handler_type: object,
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> MemberInfo:
    """Like find_event, raising MissingMemberDeclarationError if absent."""
    info = find_event(type_, details, name, handler_type, visibility, introspector)
    if info is None:
        raise MissingMemberDeclarationError(type_, f"event {name}: {type_label(handler_type)}")
    return info


def get_property(
    type_: object,
    details: PropertyDetails,
    name: str,
    property_type: object,
    index_types: Iterable[object] = (),
    introspector: TypeIntrospector | None = None,
) -> MemberInfo:
    """Like find_property, raising MissingMemberDeclarationError if absent."""
    indexes = require_types(index_types, "index_types")
    info = find_property(type_, details, name, property_type, indexes, introspector)
    if info is None:
        raise MissingMemberDeclarationError(type_, f"property {name}: {type_label(property_type)}")
    return info


def get_method(
    type_: object,
    details: MemberDetails,
    name: str,
    return_type: object,
    parameter_types: Iterable[object] = (),
    visibility: MemberVisibility = MemberVisibility.NONE,
    introspector: TypeIntrospector | None = None,
) -> MemberInfo:
    """Like find_method, raising MissingMemberDeclarationError if absent."""
    params = require_types(parameter_types, "parameter_types")
    info = find_method(type_, details, name, return_type, params, visibility, introspector)
    if info is None:
        raise MissingMemberDeclarationError(type_, f"{_signature(name, params)} -> {type_label(return_type)}")
    return info


def type_hierarchy(type_: object, introspector: TypeIntrospector | None = None) -> tuple[object, ...]:
    """Type followed by its base types, most derived first."""
    return resolve_introspector(introspector).hierarchy(require_target(type_))


def type_label(type_: object) -> str:
    """Short readable name of a type or type expression."""
    if type_ is type(None):
        return "None"
    if isinstance(type_, type) and not getattr(type_, "__args__", None):
        return type_.__qualname__
    return repr(type_).removeprefix("typing.")


def flag_label(flags: object) -> str:
    """Flag names joined by |, e.g. STATIC|VIRTUAL."""
    return getattr(flags, "name", None) or repr(flags)


def _signature(name: str, params: tuple[object, ...]) -> str:
    return f"{name}({', '.join(type_label(p) for p in params)})"
