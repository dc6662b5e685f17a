"""Test specification bases and SUT override declarations.

A specification is a test class describing the behavior of a SUT type.
It may supply its own SUT factories and a post-construction hook:

    class OrderSpecification(InstanceSpecification[Order], FixtureOverride[Order]):
        def create(self) -> Order:
            return Order(lines=[])

        @fixture_override(Customer)
        def vip(self) -> Customer:
            return Customer(tier="vip")

        def _freeze(self, sut: Order) -> Order:
            return sut.frozen()

With ``sut_modification_method = "_freeze"`` every SUT handed to a test of
this specification passes through ``_freeze`` first.
"""

from __future__ import annotations

import threading
import typing
import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import FunctionType, MappingProxyType
from typing import Any

from declcheck.domain.exceptions import MutationHookNotFoundError

OVERRIDE_ATTR = "__fixture_override__"

type OverrideFactory = Callable[[object], object]


class Specification:
    """Base of all test specifications."""

    __slots__ = ()


class InstanceSpecification[TSut](Specification):
    """Specification of instances of TSut.

    Attributes:
        sut_modification_method: Name of an instance method taking and
            returning the SUT, applied after creation. None = pass-through.
    """

    sut_modification_method: str | None = None

    def modify_sut(self, sut: TSut) -> TSut:
        """Apply the configured modification hook to sut.

        Public and non-public (``_name``, ``__name``) instance methods of the
        specification class and its bases are searched.

        Raises:
            MutationHookNotFoundError: If no instance method has the configured name
        """
        name = self.sut_modification_method
        if name is None:
            return sut
        hook = find_instance_method(type(self), name)
        if hook is None:
            raise MutationHookNotFoundError(type(self), name)
        return hook(self, sut)


class FixtureOverride[T](ABC):
    """Specification supplying its own SUT factory for exactly T.

    Only the type argument given in the class statement is overridden:
    FixtureOverride[Base] is not used for requests of Derived.
    """

    __slots__ = ()

    @abstractmethod
    def create(self) -> T:
        """Create the SUT."""


def fixture_override[F: Callable[..., Any]](sut_type: object) -> Callable[[F], F]:
    """Mark a specification method as SUT factory for exactly sut_type.

    Use it for every SUT type beyond the one given to FixtureOverride[T].

    Raises:
        TypeError: If sut_type is None
    """
    if sut_type is None:
        raise TypeError("sut_type must not be None")

    def decorator(func: F) -> F:
        setattr(func, OVERRIDE_ATTR, sut_type)
        return func

    return decorator


_overrides_lock = threading.Lock()
_overrides_cache: weakref.WeakKeyDictionary[type, Mapping[object, OverrideFactory]] = weakref.WeakKeyDictionary()


def override_factories(specification_type: type) -> Mapping[object, OverrideFactory]:
    """SUT type -> factory map of a specification class.

    Built once per class (under a lock) from FixtureOverride[T] bases and
    @fixture_override methods. The cache holds classes weakly.
    Derived classes replace base declarations.
    Factories take the specification instance.

    Raises:
        ValueError: If one class declares two factories for the same type
    """
    cached = _overrides_cache.get(specification_type)
    if cached is not None:
        return cached

    with _overrides_lock:
        cached = _overrides_cache.get(specification_type)
        if cached is None:
            cached = _build_overrides(specification_type)
            _overrides_cache[specification_type] = cached
    return cached


def sut_type_of(specification_type: type) -> object | None:
    """Type argument T of the nearest InstanceSpecification[T] base, None if unbound."""
    for owner in specification_type.__mro__:
        for base in owner.__dict__.get("__orig_bases__", ()):
            if typing.get_origin(base) is InstanceSpecification:
                (sut_type,) = typing.get_args(base)
                if not isinstance(sut_type, typing.TypeVar):
                    return sut_type
    return None


def find_instance_method(cls: type, name: str) -> FunctionType | None:
    """Plain instance method of cls (or its bases) by source name.

    ``__name`` is looked up under its mangled name in every class.
    """
    for owner in cls.__mro__:
        raw_name = name
        if name.startswith("__") and not name.endswith("__"):
            raw_name = f"_{owner.__name__.lstrip('_')}{name}"
        raw = owner.__dict__.get(raw_name)
        if isinstance(raw, FunctionType):
            return raw
    return None


def _build_overrides(specification_type: type) -> Mapping[object, OverrideFactory]:
    result: dict[object, OverrideFactory] = {}
    for owner in reversed(specification_type.__mro__):
        declared: dict[object, OverrideFactory] = {}

        for base in owner.__dict__.get("__orig_bases__", ()):
            if typing.get_origin(base) is FixtureOverride:
                (sut_type,) = typing.get_args(base)
                if isinstance(sut_type, typing.TypeVar):
                    continue
                _add(declared, owner, sut_type, _call_create)

        for attr_name, raw in owner.__dict__.items():
            if not isinstance(raw, FunctionType):
                continue
            sut_type = getattr(raw, OVERRIDE_ATTR, None)
            if sut_type is not None:
                _add(declared, owner, sut_type, _call_method(attr_name))

        result.update(declared)
    return MappingProxyType(result)


def _add(declared: dict[object, OverrideFactory], owner: type, sut_type: object, factory: OverrideFactory) -> None:
    if sut_type in declared:
        raise ValueError(f"'{owner.__qualname__}' declares more than one fixture override for {sut_type!r}")
    declared[sut_type] = factory


def _call_create(specification: object) -> object:
    return specification.create()  # type: ignore[attr-defined]


def _call_method(attr_name: str) -> OverrideFactory:
    def factory(specification: object) -> object:
        return getattr(specification, attr_name)()

    return factory

