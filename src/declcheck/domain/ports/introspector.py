"""Type introspection port (interface).

Structural assertions never touch the Python object model directly.
Infrastructure provides the implementation for live classes, tests may
supply fakes describing arbitrary type systems.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from declcheck.domain.model.enums import MemberKind
    from declcheck.domain.model.member_info import MemberInfo, TypeInfo
    from declcheck.domain.model.query import MemberQuery


class TypeIntrospector(Protocol):
    """Contract for type introspection.

    Example:
        class FakeIntrospector:
            def describe(self, type_: object) -> TypeInfo:
                return TypeInfo(name="Fake", is_class=True, is_public=True)

            def members(self, type_, kind, query, name=None):
                return ()

            def interfaces(self, type_):
                return ()

            def is_interface(self, type_):
                return False

            def hierarchy(self, type_):
                return (type_,)
    """

    def describe(self, type_: object) -> TypeInfo:
        """Describe type-level facts.

        Args:
            type_: Type to describe

        Returns:
            TypeInfo of the type
        """
        ...

    def members(
        self,
        type_: object,
        kind: MemberKind,
        query: MemberQuery,
        name: str | None = None,
    ) -> tuple[MemberInfo, ...]:
        """Enumerate members of a kind admitted by query.

        Members introduced on the type come before inherited ones.
        Overloads of one name are separate members.

        Args:
            type_: Type to inspect
            kind: Member kind to enumerate
            query: Visibility, static/instance, declared-only filter
            name: Exact member name, None for all names

        Returns:
            Matching members in declaration order

        Raises:
            IntrospectionError: If the type cannot be introspected
        """
        ...

    def interfaces(self, type_: object) -> tuple[object, ...]:
        """Interfaces declared by the type itself.

        Args:
            type_: Type to inspect

        Returns:
            Interfaces named directly in the type declaration
        """
        ...

    def is_interface(self, type_: object) -> bool:
        """Whether type_ is an interface type."""
        ...

    def hierarchy(self, type_: object) -> tuple[object, ...]:
        """The type followed by its base types, most derived first."""
        ...
