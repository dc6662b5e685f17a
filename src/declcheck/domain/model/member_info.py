"""Introspected member and type descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.query import SearchScope
from declcheck.domain.model.visibility import MemberVisibility


def _require_primitive(visibility: MemberVisibility, what: str) -> None:
    if not isinstance(visibility, MemberVisibility):
        raise TypeError(f"{what} must be MemberVisibility, got {type(visibility).__name__}")
    if not visibility.is_primitive:
        raise ValueError(f"{what} must be a single primitive level, got {visibility!r}")


def _scope_of(visibility: MemberVisibility) -> SearchScope:
    if visibility is MemberVisibility.PUBLIC:
        return SearchScope.PUBLIC
    return SearchScope.NON_PUBLIC


@dataclass(frozen=True, slots=True)
class AccessorInfo:
    """Property getter or setter.

    Attributes:
        visibility: Primitive visibility of the accessor
        is_static: Accessor belongs to the type, not instances
    """

    visibility: MemberVisibility
    is_static: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _require_primitive(self.visibility, "accessor visibility")

    @property
    def is_protected(self) -> bool:
        """Accessor is visible to derived types outside the package."""
        return bool(self.visibility & MemberVisibility.PUBLIC_FAMILY)


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """Member reported by the introspection port.

    Value type meaning depends on kind: field type, event handler type,
    property type, method return type. Constructors have none.

    Attributes:
        kind: Member kind
        name: Member name (``__init__`` for constructors)
        declaring_type: Type introducing the member
        visibility: Primitive visibility (properties: the widest accessor)
        is_static: Member belongs to the type, not instances
        value_type: Type of the member value, None for constructors
        parameter_types: Ordered parameter (or index parameter) types
        is_abstract: Abstract method, property, or event
        is_virtual: Overridable through explicit polymorphism
        is_read_only: Field assignable only during construction
        is_const: Field with compile-time constant value
        getter: Property getter, None if absent
        setter: Property setter, None if absent
        is_extension: Method marked as extension method
        extended_type: Type extended by an extension method
    """

    kind: MemberKind
    name: str
    declaring_type: object
    visibility: MemberVisibility
    is_static: bool = False
    value_type: object = None
    parameter_types: tuple[object, ...] = ()
    is_abstract: bool = False
    is_virtual: bool = False
    is_read_only: bool = False
    is_const: bool = False
    getter: AccessorInfo | None = None
    setter: AccessorInfo | None = None
    is_extension: bool = False
    extended_type: object = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")

        _require_primitive(self.visibility, "member visibility")

        if self.kind is not MemberKind.PROPERTY and (self.getter or self.setter):
            raise ValueError(f"only properties have accessors, got {self.kind.name}")

        if self.kind is not MemberKind.FIELD and (self.is_read_only or self.is_const):
            raise ValueError(f"only fields can be read-only or const, got {self.kind.name}")

        if self.is_extension and not (self.kind is MemberKind.METHOD and self.is_static):
            raise ValueError("only static methods can be extension methods")

    @property
    def accessors(self) -> tuple[AccessorInfo, ...]:
        """Present property accessors."""
        return tuple(a for a in (self.getter, self.setter) if a is not None)

    @property
    def search_scope(self) -> SearchScope:
        """Query scopes under which this member is visible.

        Properties are visible under the scope of every accessor.
        """
        accessors = self.accessors
        if self.kind is MemberKind.PROPERTY and accessors:
            scope = _scope_of(accessors[0].visibility)
            for accessor in accessors[1:]:
                scope |= _scope_of(accessor.visibility)
            return scope
        return _scope_of(self.visibility)


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Type-level facts reported by the introspection port.

    Attributes:
        name: Qualified type name
        is_class: Type is a class (not a module, function, or instance)
        is_public: Type is visible outside its package
        is_sealed: Type cannot be subclassed
        is_abstract: Type cannot be instantiated
    """

    name: str
    is_class: bool
    is_public: bool
    is_sealed: bool = False
    is_abstract: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")
