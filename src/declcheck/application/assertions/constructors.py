"""Constructor declaration assertions.

A type with zero declared constructors has an implicit public parameterless
one: the parameterless assertions account for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application import lookup, query_builder
from declcheck.application._validation import require_target, require_types, require_visibility
from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.domain.exceptions import MemberDeclarationNotExpectedError, MissingMemberDeclarationError
from declcheck.domain.lazy import Lazy
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.model.query import MemberQuery
    from declcheck.domain.ports.introspector import TypeIntrospector


@dataclass(frozen=True, slots=True)
class ConstructorAssertion(IdiomaticAssertion):
    """Constructor shape: visibility and exact parameter types.

    Attributes:
        visibility: Admitted visibility levels
        parameter_types: Exact parameter types, self excluded
    """

    visibility: MemberVisibility
    parameter_types: tuple[object, ...] = ()
    _query: Lazy[MemberQuery] = field(init=False, repr=False, compare=False)
    _description: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate arguments. FAIL-FIRST."""
        require_visibility(self.visibility)
        object.__setattr__(self, "parameter_types", require_types(self.parameter_types, "parameter_types"))
        object.__setattr__(self, "_query", Lazy(lambda: query_builder.visibility_query(self.visibility)))
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
        """Matching constructor of type_, or None."""
        return lookup.find_constructor(
            type_, self.visibility, self.parameter_types, introspector, query=self.query
        )

    def _describe(self) -> str:
        params = ", ".join(lookup.type_label(p) for p in self.parameter_types)
        return f"__init__({params}) visibility={lookup.flag_label(self.visibility)}"


class HasConstructorAssertion(ConstructorAssertion):
    """Type declares the constructor."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError if no constructor matches."""
        if self.find(require_target(type_), introspector) is None:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoConstructorAssertion(ConstructorAssertion):
    """Type does not declare the constructor."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if a constructor matches."""
        if self.find(require_target(type_), introspector) is not None:
            raise MemberDeclarationNotExpectedError(type_, self.description)


class HasParameterlessConstructorAssertion(HasConstructorAssertion):
    """Type can be constructed without arguments.

    Zero declared constructors pass for any requested visibility.
    """

    __slots__ = ()

    def __init__(self, visibility: MemberVisibility) -> None:
        """Initialize with admitted visibility levels."""
        super().__init__(visibility, ())

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError unless a parameterless constructor exists."""
        if self.find(require_target(type_), introspector) is not None:
            return
        if lookup.constructor_count(type_, introspector) != 0:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoParameterlessConstructorAssertion(HasNoConstructorAssertion):
    """Type cannot be constructed without arguments.

    Zero declared constructors always fail: the implicit one is parameterless.
    """

    __slots__ = ()

    def __init__(self, visibility: MemberVisibility) -> None:
        """Initialize with admitted visibility levels."""
        super().__init__(visibility, ())

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if a parameterless constructor exists."""
        super().verify(type_, introspector)
        if lookup.constructor_count(type_, introspector) == 0:
            raise MemberDeclarationNotExpectedError(type_, f"implicit {self.description}")
