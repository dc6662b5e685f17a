"""Declaration markers for concepts Python has no syntax for.

Markers only attach attributes. PythonIntrospector reads them:
    visibility(level)   explicit visibility of a function or accessor
    virtual             instance method meant to be overridden
    extension_method    static method extending its first parameter's type
    static_class        sealed, non-instantiable class
    event(handler_type) event member with add/remove semantics
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from declcheck.domain.model.visibility import MemberVisibility

VISIBILITY_ATTR = "__member_visibility__"
VIRTUAL_ATTR = "__virtual__"
EXTENSION_ATTR = "__extension_method__"


def visibility[F: Callable[..., Any]](level: MemberVisibility) -> Callable[[F], F]:
    """Declare visibility of a function, overriding naming convention.

    Example:
        @visibility(MemberVisibility.ASSEMBLY)
        def helper(self) -> None: ...

    Args:
        level: Single primitive visibility level

    Returns:
        Decorator setting the visibility

    Raises:
        ValueError: If level is not a single primitive
    """
    if not isinstance(level, MemberVisibility):
        raise TypeError(f"level must be MemberVisibility, got {type(level).__name__}")
    if not level.is_primitive:
        raise ValueError(f"level must be a single primitive visibility, got {level!r}")

    def decorator(func: F) -> F:
        target = getattr(func, "__func__", func)
        setattr(target, VISIBILITY_ATTR, level)
        return func

    return decorator


def virtual[F: Callable[..., Any]](func: F) -> F:
    """Mark instance method as overridable (virtual)."""
    setattr(func, VIRTUAL_ATTR, True)
    return func


def extension_method(func: Any) -> staticmethod:  # type: ignore[type-arg]
    """Mark function as extension method for its first parameter's type.

    Returns a staticmethod: extension methods are static by definition.

    Example:
        @static_class
        class TextExtensions:
            @extension_method
            def shout(value: str) -> str:
                return value.upper()
    """
    target = func.__func__ if isinstance(func, staticmethod) else func
    if not callable(target):
        raise TypeError(f"extension_method requires a function, got {type(func).__name__}")
    setattr(target, EXTENSION_ATTR, True)
    return func if isinstance(func, staticmethod) else staticmethod(target)


def static_class[C: type](cls: C) -> C:
    """Make class sealed and non-instantiable.

    Sets ``__final__`` (as typing.final does) and a non-empty
    ``__abstractmethods__`` so instantiation raises TypeError.
    """
    if not isinstance(cls, type):
        raise TypeError(f"static_class requires a class, got {type(cls).__name__}")
    cls.__final__ = True  # type: ignore[attr-defined]
    cls.__abstractmethods__ = frozenset({"__init__"})  # type: ignore[misc]
    return cls


class event:  # noqa: N801 - reads like a keyword at declaration site
    """Event member descriptor.

    Handlers are subscribed with ``add`` and removed with ``remove``;
    ``emit`` calls every handler in subscription order.

    Example:
        class Counter:
            changed = event(Callable[[int], None])

        counter.changed.add(print)
        counter.changed.emit(1)

    Attributes:
        handler_type: Type of accepted handlers
        is_static: Handlers are stored on the class, not per instance
        is_abstract: Event must be provided by derived types
        is_virtual: Event may be overridden by derived types
        visibility: Explicit visibility, None for naming convention
    """

    __slots__ = ("handler_type", "is_static", "is_abstract", "is_virtual", "visibility", "name", "_class_handlers")

    def __init__(
        self,
        handler_type: object,
        *,
        static: bool = False,
        abstract: bool = False,
        virtual: bool = False,
        visibility: MemberVisibility | None = None,
    ) -> None:
        """Initialize event declaration.

        Raises:
            TypeError: If handler_type is None
            ValueError: If visibility is not a single primitive
        """
        if handler_type is None:
            raise TypeError("handler_type must not be None")
        if visibility is not None and not MemberVisibility(visibility).is_primitive:
            raise ValueError(f"visibility must be a single primitive level, got {visibility!r}")

        self.handler_type = handler_type
        self.is_static = static
        self.is_abstract = abstract
        self.is_virtual = virtual or abstract
        self.visibility = visibility
        self.name = ""
        self._class_handlers: list[Callable[..., Any]] = []

    def __set_name__(self, owner: type, name: str) -> None:
        """Remember attribute name."""
        self.name = name

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        """Return bound handler list (descriptor itself on class access)."""
        if self.is_static:
            return BoundEvent(self, self._class_handlers)
        if instance is None:
            return self
        handlers = instance.__dict__.setdefault(f"__event_{self.name}", [])
        return BoundEvent(self, handlers)


class BoundEvent:
    """Event handlers of one owner."""

    __slots__ = ("_event", "_handlers")

    def __init__(self, declaration: event, handlers: list[Callable[..., Any]]) -> None:
        """Bind declaration to handler storage."""
        self._event = declaration
        self._handlers = handlers

    def add(self, handler: Callable[..., Any]) -> None:
        """Subscribe handler.

        Raises:
            TypeError: If handler is not callable
        """
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)

    def remove(self, handler: Callable[..., Any]) -> None:
        """Unsubscribe handler. Unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every handler in subscription order."""
        for handler in tuple(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        """Number of subscribed handlers."""
        return len(self._handlers)
