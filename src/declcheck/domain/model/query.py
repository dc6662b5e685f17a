"""Member query value object consumed by the introspection port."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declcheck.domain.model.member_info import MemberInfo


class SearchScope(Flag):
    """Visibility part of a query."""

    PUBLIC = auto()
    NON_PUBLIC = auto()


class InstanceScope(Flag):
    """Static/instance part of a query."""

    STATIC = auto()
    INSTANCE = auto()


@dataclass(frozen=True, slots=True)
class MemberQuery:
    """Filter applied by the introspection port.

    Attributes:
        visibility: Public and/or non-public members
        instance: Static and/or instance members
        declared_only: Only members introduced on the queried type
    """

    visibility: SearchScope
    instance: InstanceScope
    declared_only: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.visibility, SearchScope):
            raise TypeError(f"visibility must be SearchScope, got {type(self.visibility).__name__}")
        if not isinstance(self.instance, InstanceScope):
            raise TypeError(f"instance must be InstanceScope, got {type(self.instance).__name__}")
        if not self.visibility:
            raise ValueError("query must search at least one visibility scope")
        if not self.instance:
            raise ValueError("query must search static or instance scope")

    @classmethod
    def everything(cls, *, declared_only: bool = False) -> MemberQuery:
        """Query matching members of any visibility and scope."""
        return cls(
            visibility=SearchScope.PUBLIC | SearchScope.NON_PUBLIC,
            instance=InstanceScope.STATIC | InstanceScope.INSTANCE,
            declared_only=declared_only,
        )

    def admits(self, member: MemberInfo, *, declared_here: bool) -> bool:
        """Check whether member passes this query.

        Args:
            member: Introspected member
            declared_here: Member is introduced on the queried type itself

        Returns:
            True if member is in scope
        """
        if self.declared_only and not declared_here:
            return False

        scope = InstanceScope.STATIC if member.is_static else InstanceScope.INSTANCE
        if not self.instance & scope:
            return False

        return bool(self.visibility & member.search_scope)
