"""Compute-once lazy value."""

from __future__ import annotations

import threading
from collections.abc import Callable


class Lazy[T]:
    """Thread-safe single-assignment lazy value.

    Execution and publication: the factory runs at most once, every racing
    caller receives the same published object. The lock guards the first
    computation only; reads after publication take no lock.

    Factories must not call back into code that may block on this instance.
    """

    __slots__ = ("_factory", "_lock", "_value", "_published")

    def __init__(self, factory: Callable[[], T]) -> None:
        """Initialize with value factory.

        Raises:
            TypeError: If factory is not callable
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")

        self._factory: Callable[[], T] | None = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._published = False

    @property
    def is_value_created(self) -> bool:
        """Value has been computed and published."""
        return self._published

    @property
    def value(self) -> T:
        """Computed value, created on first access."""
        if self._published:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._published:
                factory = self._factory
                assert factory is not None
                self._value = factory()
                self._published = True
                # drop closure references once published
                self._factory = None

        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        """Show published value or pending state."""
        if self._published:
            return f"Lazy({self._value!r})"
        return "Lazy(<pending>)"
