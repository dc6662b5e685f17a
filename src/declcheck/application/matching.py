"""Member shape matching.

Pure predicates comparing an introspected MemberInfo against the requested
shape. Types are compared by exact equality: no variance, no subclassing,
``list[int]`` does not match ``list``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application.query_builder import getter_state, setter_state
from declcheck.domain.model.details import FieldDetails, MemberDetails, PropertyDetails
from declcheck.domain.model.enums import AccessorState
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import AccessorInfo, MemberInfo


def admits_visibility(mask: MemberVisibility, visibility: MemberVisibility) -> bool:
    """Mask admits member visibility. Mask without primitives admits PUBLIC only."""
    if not mask & MemberVisibility.ALL:
        return visibility is MemberVisibility.PUBLIC
    return mask.is_match(visibility)


def same_types(actual: tuple[object, ...], expected: tuple[object, ...]) -> bool:
    """Positional exact equality with exact arity."""
    return len(actual) == len(expected) and all(a == e for a, e in zip(actual, expected, strict=True))


def matches_constructor(
    info: MemberInfo,
    *,
    visibility: MemberVisibility,
    parameter_types: tuple[object, ...],
) -> bool:
    """Constructor has the parameter types and an admitted visibility."""
    return admits_visibility(visibility, info.visibility) and same_types(info.parameter_types, parameter_types)


def matches_field(
    info: MemberInfo,
    *,
    details: FieldDetails,
    field_type: object,
    visibility: MemberVisibility,
) -> bool:
    """Field has the type, visibility, and read-only/const modifiers."""
    return (
        admits_visibility(visibility, info.visibility)
        and info.is_read_only == bool(details & FieldDetails.READ_ONLY)
        and info.is_const == bool(details & FieldDetails.CONST)
        and info.value_type == field_type
    )


def matches_event(
    info: MemberInfo,
    *,
    details: MemberDetails,
    handler_type: object,
    visibility: MemberVisibility,
) -> bool:
    """Event has the handler type, visibility, and abstract/virtual modifiers."""
    return (
        admits_visibility(visibility, info.visibility)
        and _modifiers_match(info, details)
        and info.value_type == handler_type
    )


def matches_method(
    info: MemberInfo,
    *,
    details: MemberDetails,
    return_type: object,
    parameter_types: tuple[object, ...],
    visibility: MemberVisibility,
) -> bool:
    """Method has the signature, visibility, and abstract/virtual modifiers."""
    return (
        admits_visibility(visibility, info.visibility)
        and same_types(info.parameter_types, parameter_types)
        and _modifiers_match(info, details)
        and info.value_type == return_type
    )


def matches_property(
    info: MemberInfo,
    *,
    details: PropertyDetails,
    property_type: object,
    index_types: tuple[object, ...],
) -> bool:
    """Property has the type, index parameters, modifiers, and accessor states."""
    return (
        info.value_type == property_type
        and same_types(info.parameter_types, index_types)
        and info.is_abstract == bool(details & PropertyDetails.ABSTRACT)
        and info.is_virtual == bool(details & (PropertyDetails.VIRTUAL | PropertyDetails.ABSTRACT))
        and _accessor_matches(info.getter, getter_state(details))
        and _accessor_matches(info.setter, setter_state(details))
    )


def _modifiers_match(info: MemberInfo, details: MemberDetails) -> bool:
    # abstract members are always overridable
    return info.is_abstract == bool(details & MemberDetails.ABSTRACT) and info.is_virtual == bool(
        details & (MemberDetails.VIRTUAL | MemberDetails.ABSTRACT)
    )


def _accessor_matches(accessor: AccessorInfo | None, state: AccessorState) -> bool:
    match state:
        case AccessorState.ABSENT:
            return accessor is None
        case AccessorState.PUBLIC:
            return accessor is not None and accessor.visibility is MemberVisibility.PUBLIC
        case AccessorState.PROTECTED:
            return accessor is not None and accessor.is_protected
