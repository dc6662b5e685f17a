"""Event declaration assertions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application import lookup, query_builder
from declcheck.application._validation import require_name, require_target, require_type, require_visibility
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
class EventAssertion(IdiomaticAssertion):
    """Event shape: name, exact handler type, modifiers, visibility.

    Attributes:
        details: Declared/static/abstract/virtual flags
        name: Event name
        handler_type: Exact handler type
        visibility: Admitted visibility levels (NONE: public)
    """

    details: MemberDetails
    name: str
    handler_type: object
    visibility: MemberVisibility = MemberVisibility.NONE
    _query: Lazy[MemberQuery] = field(init=False, repr=False, compare=False)
    _description: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate arguments. FAIL-FIRST."""
        if not isinstance(self.details, MemberDetails):
            raise TypeError(f"details must be MemberDetails, got {type(self.details).__name__}")
        require_name(self.name, "name")
        require_type(self.handler_type, "handler_type")
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
        """Matching event of type_, or None."""
        return lookup.find_event(
            type_, self.details, self.name, self.handler_type, self.visibility, introspector, query=self.query
        )

    def _describe(self) -> str:
        return (
            f"event {self.name}: {lookup.type_label(self.handler_type)} "
            f"[{lookup.flag_label(self.details)}] visibility={lookup.flag_label(self.visibility)}"
        )


class HasEventAssertion(EventAssertion):
    """Type declares the event."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MissingMemberDeclarationError if no event matches."""
        if self.find(require_target(type_), introspector) is None:
            raise MissingMemberDeclarationError(type_, self.description)


class HasNoEventAssertion(EventAssertion):
    """Type does not declare the event."""

    __slots__ = ()

    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Raise MemberDeclarationNotExpectedError if an event matches."""
        if self.find(require_target(type_), introspector) is not None:
            raise MemberDeclarationNotExpectedError(type_, self.description)
