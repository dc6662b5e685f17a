"""Base class for structural assertions.

Provides the verify() contract. Concrete assertions inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declcheck.domain.ports.introspector import TypeIntrospector


class IdiomaticAssertion(ABC):
    """Reusable structural check executed against a type.

    Concrete assertions must:
    1. Validate their arguments eagerly in __init__/__post_init__
    2. Implement `verify()`, raising a DeclCheckError subclass on failure

    Example:
        class HasDocstring(IdiomaticAssertion):
            def verify(self, type_, introspector=None) -> None:
                if not type_.__doc__:
                    raise MissingMemberDeclarationError(type_, "__doc__")
    """

    __slots__ = ()

    @abstractmethod
    def verify(self, type_: object, introspector: TypeIntrospector | None = None) -> None:
        """Check the type.

        Args:
            type_: Type to verify
            introspector: Introspection port, PythonIntrospector if None

        Raises:
            TypeError: If type_ is None
            DeclCheckError: If the type violates the assertion
        """
