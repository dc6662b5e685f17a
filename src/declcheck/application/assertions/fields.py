"""Field declaration assertions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application import lookup, query_builder
from declcheck.application._validation import require_name, require_target, require_type, require_visibility
from declcheck.application.assertions._base import IdiomaticAssertion
from declcheck.domain.exceptions import MemberDeclarationNotExpectedError, MissingMemberDeclarationError
from declcheck.domain.lazy import Lazy
from declcheck.domain.model.details import FieldDetails
from declcheck.domain.model.visibility import MemberVisibility

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo
    from declcheck.domain.model.query import MemberQuery
    from declcheck.domain.ports.introspector import TypeIntrospector


@dataclass(frozen=True, slots=True)
class FieldAssertion(IdiomaticAssertion):
    """Field shape: name, exact type, modifiers, visibility.

    Attributes:
        details: Declared/static/read-only/const flags
        name: Field name
        field_type: Exact field type
        visibility: Admitted visibility levels (NONE: public)
    """

    details: FieldDetails
    name: str
    field_type: object
    visibility: MemberVisibility = MemberVisibility.NONE
    _query: Lazy[MemberQuery] = field(init=False, repr=False, compare=False)
    _description: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate arguments. FAIL-FIRST."""
        if not isinstance(self.details, FieldDetails):
            raise TypeError(f"details must be FieldDetails, got {type(self.details).__name__}")
        require_name(self.name, "name")
        require_type(self.field_type, "field_type")
        require_visibility(self.visibility)
        object.__setattr__(self, "_query", Lazy(lambda: query_builder.field_query(self.details, self.visibility)))
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
        """Matching field of type_, or None."""
        return lookup.find_field(
            type_, self.details, self.name, self.field_type, self.visibility, introspector, query=self.query
        )

    def _describe(self) -> str:
        return (
            f"field {self.name}: {lookup.type_label(self.field_type)} "
            f"[{lookup.flag_label(self.details)}] visibility={lookup.flag_label(self.visibility)}"
        )


class HasFieldAssertion(FieldAssertion):
    """Type declares the field."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError if no field matches."""
        if self.find(require_target(type_), introspector) is None:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoFieldAssertion(FieldAssertion):
    """Type does not declare the field."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if a field matches."""
        if self.find(require_target(type_), introspector) is not None:
            raise MemberDeclarationNotExpectedError(type_, self.description)
