"""Property declaration assertions.

Getter and setter states are independent: PUBLIC_GETTER | PROTECTED_SETTER
describes a property readable by anyone and writable by derived types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application import lookup, query_builder
from declcheck.application._validation import require_name, require_target, require_type, require_types
from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.domain.exceptions import MemberDeclarationNotExpectedError, MissingMemberDeclarationError
from declcheck.domain.lazy import Lazy
from declcheck.domain.model.details import PropertyDetails

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.model.query import MemberQuery
    from declcheck.domain.ports.introspector import TypeIntrospector


@dataclass(frozen=True, slots=True)
class PropertyAssertion(IdiomaticAssertion):
    """Property shape: name, exact type, index parameters, accessor states.

    Attributes:
        details: Modifier flags and getter/setter states
        name: Property name
        property_type: Exact property type
        index_types: Exact index parameter types
    """

    details: PropertyDetails
    name: str
    property_type: object
    index_types: tuple[object, ...] = ()
    _query: Lazy[MemberQuery] = field(init=False, repr=False, compare=False)
    _description: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate arguments. FAIL-FIRST.

        Raises:
            ValueError: If an accessor group has more than one state
        """
        if not isinstance(self.details, PropertyDetails):
            raise TypeError(f"details must be PropertyDetails, got {type(self.details).__name__}")
        require_name(self.name, "name")
        require_type(self.property_type, "property_type")
        object.__setattr__(self, "index_types", require_types(self.index_types, "index_types"))
        query_builder.getter_state(self.details)
        query_builder.setter_state(self.details)
        object.__setattr__(self, "_query", Lazy(lambda: query_builder.property_query(self.details)))
        object.__setattr__(self, "_description", Lazy(self._describe))

    @property
    def query(self) -> MemberQuery:
        """Introspection query, computed once."""
        return self._query.value

    @property
    def description(self) -> str:
        """Readable member description, computed once."""
        return self._description.value

    def find(self, type_: object, introspector: TypeIntrospector | None = None) -> MemberInfo | None:
        """Matching property of type_, or None."""
        return lookup.find_property(
            type_, self.details, self.name, self.property_type, self.index_types, introspector, query=self.query
        )

    def _describe(self) -> str:
        getter = query_builder.getter_state(self.details).name.lower()
        setter = query_builder.setter_state(self.details).name.lower()
        index = ""
        if self.index_types:
            index = f"[{', '.join(lookup.type_label(t) for t in self.index_types)}]"
        return (
            f"property {self.name}{index}: {lookup.type_label(self.property_type)} "
            f"[{lookup.flag_label(self.details)}] getter={getter} setter={setter}"
        )


class HasPropertyAssertion(PropertyAssertion):
    """Type declares the property."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError if no property matches."""
        if self.find(require_target(type_), introspector) is None:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoPropertyAssertion(PropertyAssertion):
    """Type does not declare the property."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if a property matches."""
        if self.find(require_target(type_), introspector) is not None:
            raise MemberDeclarationNotExpectedError(type_, self.description)
