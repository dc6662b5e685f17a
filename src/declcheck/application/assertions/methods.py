"""Method declaration assertions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application import lookup, query_builder
from declcheck.application._validation import (
    require_name,
    require_target,
    require_type,
    require_types,
    require_visibility,
)
from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.domain.exceptions import MemberDeclarationNotExpectedError, MissingMemberDeclarationError
from declcheck.domain.lazy import Lazy
from declcheck.domain.model.details import MemberDetails
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.model.query import MemberQuery
    from declcheck.domain.ports.introspector import TypeIntrospector


@dataclass(frozen=True, slots=True)
class MethodAssertion(IdiomaticAssertion):
    """Method shape: name, exact signature, modifiers, visibility.

    Attributes:
        details: Declared/static/abstract/virtual flags
        name: Method name
        return_type: Exact return type (``types.NoneType`` for None)
        parameter_types: Exact parameter types, self/cls excluded
        visibility: Admitted visibility levels (NONE: public)
    """

    details: MemberDetails
    name: str
    return_type: object
    parameter_types: tuple[object, ...] = ()
    visibility: MemberVisibility = MemberVisibility.NONE
    _query: Lazy[MemberQuery] = field(init=False, repr=False, compare=False)
    _description: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate arguments. FAIL-FIRST."""
        if not isinstance(self.details, MemberDetails):
            raise TypeError(f"details must be MemberDetails, got {type(self.details).__name__}")
        require_name(self.name, "name")
        require_type(self.return_type, "return_type")
        object.__setattr__(self, "parameter_types", require_types(self.parameter_types, "parameter_types"))
        require_visibility(self.visibility)
        object.__setattr__(self, "_query", Lazy(lambda: query_builder.member_query(self.details, self.visibility)))
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
        """Matching method of type_, or None."""
        return lookup.find_method(
            type_,
            self.details,
            self.name,
            self.return_type,
            self.parameter_types,
            self.visibility,
            introspector,
            query=self.query,
        )

    def _describe(self) -> str:
        params = ", ".join(lookup.type_label(p) for p in self.parameter_types)
        return (
            f"{self.name}({params}) -> {lookup.type_label(self.return_type)} "
            f"[{lookup.flag_label(self.details)}] visibility={lookup.flag_label(self.visibility)}"
        )


class HasMethodAssertion(MethodAssertion):
    """Type declares the method."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError if no method matches."""
        if self.find(require_target(type_), introspector) is None:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoMethodAssertion(MethodAssertion):
    """Type does not declare the method."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if a method matches."""
        if self.find(require_target(type_), introspector) is not None:
            raise MemberDeclarationNotExpectedError(type_, self.description)
