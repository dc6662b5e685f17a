"""Built-in specimen builders.

Each builder handles one family of requests and returns NO_SPECIMEN for
everything else. Nested values are resolved through the context, so
customizations apply at every depth.

Order (first match wins):
    SutRequestRelay     SutRequest -> its type
    ParameterRelay      ParameterRequest -> default, seeded str, or its type
    PrimitiveBuilder    None, bool, int, float, complex, str, bytes, Any
    EnumBuilder         Enum subclasses
    TypeFormBuilder     Annotated, Optional/Union, Literal
    CollectionBuilder   list/tuple/set/frozenset/dict (+ collections.abc)
    MultipleRelay       MultipleRequest -> SequenceRequest
    SequenceBuilder     SequenceRequest -> list
    ConstructorBuilder  concrete classes, through their signature
"""

from __future__ import annotations

import collections.abc
import enum
import inspect
import random
import types
import typing
import uuid
from typing import TYPE_CHECKING, Annotated, Any, Literal

from declcheck.domain.exceptions import SpecimenCreationError
from declcheck.domain.model.requests import MultipleRequest, ParameterRequest, SequenceRequest, SutRequest
from declcheck.domain.ports.specimen_builder import NO_SPECIMEN

if TYPE_CHECKING:
    from declcheck.domain.ports.specimen_builder import SpecimenBuilder, SpecimenContext

_NONE_TYPE = type(None)

_SEQUENCE_ORIGINS = frozenset(
    {
        list,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Iterable,
        collections.abc.Collection,
    }
)
_SET_ORIGINS = frozenset({set, collections.abc.Set, collections.abc.MutableSet})
_MAPPING_ORIGINS = frozenset({dict, collections.abc.Mapping, collections.abc.MutableMapping})


class SutRequestRelay:
    """Resolve SutRequest as a plain request for its type."""

    def create(self, request: object, context: SpecimenContext) -> object:
        """Resolve the requested SUT type, NO_SPECIMEN otherwise."""
        if not isinstance(request, SutRequest):
            return NO_SPECIMEN
        return context.resolve(request.sut_type)


class ParameterRelay:
    """Resolve a parameter from its annotation.

    Unannotated parameters with defaults keep the default.
    ``str`` parameters get the parameter name as prefix.
    """

    def create(self, request: object, context: SpecimenContext) -> object:
        """Resolve the parameter value, NO_SPECIMEN for other requests."""
        if not isinstance(request, ParameterRequest):
            return NO_SPECIMEN
        if request.annotation is Any and request.has_default:
            return request.default
        if request.annotation is str:
            return f"{request.name}{uuid.uuid4()}"
        return context.resolve(request.annotation)


class PrimitiveBuilder:
    """Random primitives drawn from the fixture's generator."""

    def __init__(self, rng: random.Random) -> None:
        """Initialize with random generator."""
        self._rng = rng

    def create(self, request: object, context: SpecimenContext) -> object:
        """Create a primitive value, NO_SPECIMEN for non-primitive requests."""
        rng = self._rng
        if request is _NONE_TYPE:
            return None
        if request is bool:
            return rng.random() < 0.5
        if request is int:
            return rng.randint(1, 2**16)
        if request is float:
            return rng.uniform(1.0, 2.0**16)
        if request is complex:
            return complex(rng.uniform(1.0, 255.0), rng.uniform(1.0, 255.0))
        if request is str or request is Any or request is object:
            return str(uuid.uuid4())
        if request is bytes:
            return rng.randbytes(16)
        if request is bytearray:
            return bytearray(rng.randbytes(16))
        return NO_SPECIMEN


class EnumBuilder:
    """Random member of an Enum subclass."""

    def __init__(self, rng: random.Random) -> None:
        """Initialize with random generator."""
        self._rng = rng

    def create(self, request: object, context: SpecimenContext) -> object:
        """Pick a member, NO_SPECIMEN for non-enum requests."""
        if not (isinstance(request, type) and issubclass(request, enum.Enum)):
            return NO_SPECIMEN
        members = list(request)
        if not members:
            raise SpecimenCreationError(request, "enum has no members")
        return self._rng.choice(members)


class TypeFormBuilder:
    """Special typing forms: Annotated, unions, Literal."""

    def __init__(self, rng: random.Random) -> None:
        """Initialize with random generator."""
        self._rng = rng

    def create(self, request: object, context: SpecimenContext) -> object:
        """Resolve the form, NO_SPECIMEN for other requests."""
        origin = typing.get_origin(request)
        args = typing.get_args(request)

        if origin is Annotated:
            return context.resolve(args[0])

        if origin is typing.Union or origin is types.UnionType:
            # first arm that is not None: Optional[T] -> T
            for arm in args:
                if arm is not _NONE_TYPE:
                    return context.resolve(arm)
            return None

        if origin is Literal:
            return self._rng.choice(args)

        return NO_SPECIMEN


class CollectionBuilder:
    """Builtin containers and their collections.abc counterparts."""

    def create(self, request: object, context: SpecimenContext) -> object:
        """Build the container, NO_SPECIMEN for other requests."""
        origin = typing.get_origin(request) or request
        if not isinstance(origin, type):
            return NO_SPECIMEN
        args = typing.get_args(request)

        if origin is tuple:
            if request is tuple or request is typing.Tuple:
                return tuple(context.resolve(MultipleRequest(Any)))
            if not args:
                # tuple[()]
                return ()
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(context.resolve(MultipleRequest(args[0])))
            return tuple(context.resolve(arg) for arg in args)

        item = args[0] if args else Any
        if origin in _SEQUENCE_ORIGINS:
            return list(context.resolve(MultipleRequest(item)))
        if origin in _SET_ORIGINS:
            return set(context.resolve(MultipleRequest(item)))
        if origin is frozenset:
            return frozenset(context.resolve(MultipleRequest(item)))
        if origin in _MAPPING_ORIGINS:
            key, value = args if len(args) == 2 else (Any, Any)
            keys = context.resolve(MultipleRequest(key))
            return {k: context.resolve(value) for k in keys}
        return NO_SPECIMEN


class MultipleRelay:
    """Translate MultipleRequest into a SequenceRequest of fixed length."""

    def __init__(self, count: int) -> None:
        """Initialize with item count.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._count = count

    @property
    def count(self) -> int:
        """Items per MultipleRequest."""
        return self._count

    def create(self, request: object, context: SpecimenContext) -> object:
        """Resolve the sequence, NO_SPECIMEN for other requests."""
        if not isinstance(request, MultipleRequest):
            return NO_SPECIMEN
        return context.resolve(SequenceRequest(request.request, self._count))


class RandomMultipleRelay:
    """Translate MultipleRequest into a SequenceRequest of random length.

    Add it through SpecimenBuilderCustomization to vary collection sizes:

        fixture.customize(SpecimenBuilderCustomization(RandomMultipleRelay(1, 4)))
    """

    def __init__(self, min_inclusive: int = 1, max_exclusive: int = 4, *, rng: random.Random | None = None) -> None:
        """Initialize with count range.

        Raises:
            ValueError: If min_inclusive < 0 or max_exclusive <= min_inclusive
        """
        if min_inclusive < 0:
            raise ValueError(f"min_inclusive must be >= 0, got {min_inclusive}")
        if max_exclusive <= min_inclusive:
            raise ValueError(
                f"max_exclusive must be > min_inclusive ({min_inclusive}), got {max_exclusive}"
            )
        if rng is None:
            rng = random.Random()
        self._min = min_inclusive
        self._max = max_exclusive
        self._rng = rng

    @property
    def min_inclusive(self) -> int:
        """Smallest generated count."""
        return self._min

    @property
    def max_exclusive(self) -> int:
        """Upper bound of generated counts (exclusive)."""
        return self._max

    def create(self, request: object, context: SpecimenContext) -> object:
        """Resolve the sequence, NO_SPECIMEN for other requests."""
        if not isinstance(request, MultipleRequest):
            return NO_SPECIMEN
        count = self._rng.randrange(self._min, self._max)
        return context.resolve(SequenceRequest(request.request, count))


class SequenceBuilder:
    """Resolve SequenceRequest into a list of count specimens."""

    def create(self, request: object, context: SpecimenContext) -> object:
        """Build the list, NO_SPECIMEN for other requests."""
        if not isinstance(request, SequenceRequest):
            return NO_SPECIMEN
        return [context.resolve(request.request) for _ in range(request.count)]


class ConstructorBuilder:
    """Instantiate concrete classes through their constructor signature.

    Each parameter is resolved as a ParameterRequest. Variadic parameters
    are left empty.
    """

    def create(self, request: object, context: SpecimenContext) -> object:
        """Instantiate the class, NO_SPECIMEN for abstract or non-class requests."""
        if not isinstance(request, type) or inspect.isabstract(request):
            return NO_SPECIMEN
        if getattr(request, "_is_protocol", False):
            return NO_SPECIMEN

        try:
            signature = inspect.signature(request)
        except (TypeError, ValueError):
            return NO_SPECIMEN

        hints = _constructor_hints(request)
        args: list[object] = []
        kwargs: dict[str, object] = {}
        for parameter in signature.parameters.values():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            has_default = parameter.default is not parameter.empty
            value = context.resolve(
                ParameterRequest(
                    name=parameter.name,
                    annotation=hints.get(parameter.name, Any),
                    owner=request,
                    has_default=has_default,
                    default=parameter.default if has_default else None,
                )
            )
            if parameter.kind is parameter.POSITIONAL_ONLY:
                args.append(value)
            else:
                kwargs[parameter.name] = value

        return request(*args, **kwargs)


def _constructor_hints(cls: type) -> dict[str, object]:
    for owner in cls.__mro__:
        for name in ("__init__", "__new__"):
            raw = owner.__dict__.get(name)
            if isinstance(raw, staticmethod):
                raw = raw.__func__
            if isinstance(raw, types.FunctionType):
                try:
                    return typing.get_type_hints(raw)
                except (NameError, TypeError) as e:
                    raise SpecimenCreationError(cls, f"cannot resolve constructor annotations: {e}") from e
    return {}


def default_builders(rng: random.Random, repeat_count: int) -> tuple[SpecimenBuilder, ...]:
    """Built-in builders in resolution order."""
    return (
        SutRequestRelay(),
        ParameterRelay(),
        PrimitiveBuilder(rng),
        EnumBuilder(rng),
        TypeFormBuilder(rng),
        CollectionBuilder(),
        MultipleRelay(repeat_count),
        SequenceBuilder(),
        ConstructorBuilder(),
    )
