"""Type introspection adapter for live Python classes.

Maps the Python object model onto members with six-level visibility:
    name        -> PUBLIC
    _name       -> FAMILY
    __name      -> PRIVATE (name-mangled, demangled on report)
    __name__    -> PUBLIC
Markers (see markers.py) and ``Annotated[T, MemberVisibility.X]`` override
the naming convention.

Scope:
    static   -> staticmethod, classmethod, ClassVar, plain class data,
                static events
    instance -> functions, annotated instance fields, slots, properties
"""

from __future__ import annotations

import abc
import inspect
import typing
from dataclasses import is_dataclass
from functools import cached_property
from types import FunctionType, MemberDescriptorType
from typing import Annotated, Any, ClassVar, Final, Generic, Protocol

from declcheck.domain.exceptions import IntrospectionError
from declcheck.domain.model.enums import MemberKind
from declcheck.domain.model.member_info import AccessorInfo, MemberInfo, TypeInfo
from declcheck.domain.model.visibility import MemberVisibility
from declcheck.infrastructure.markers import (
    EXTENSION_ATTR,
    VIRTUAL_ATTR,
    VISIBILITY_ATTR,
    event,
)

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from declcheck.domain.model.query import MemberQuery

# Set by the interpreter or stdlib machinery, never user declarations
_IMPLEMENTATION_NAMES = frozenset({"_abc_impl", "_is_protocol", "_is_runtime_protocol"})

# Implicitly static in the Python data model
_IMPLICIT_CLASSMETHODS = frozenset({"__init_subclass__", "__class_getitem__"})

_CONSTRUCTOR_NAMES = ("__init__", "__new__")

# __init__ placeholder typing installs on Protocol classes
_TYPING_PLACEHOLDERS = frozenset({"_no_init_or_replace_init"})

# Most visible first
_VISIBILITY_ORDER: tuple[MemberVisibility, ...] = (
    MemberVisibility.PUBLIC,
    MemberVisibility.FAMILY_OR_ASSEMBLY,
    MemberVisibility.FAMILY,
    MemberVisibility.ASSEMBLY,
    MemberVisibility.FAMILY_AND_ASSEMBLY,
    MemberVisibility.PRIVATE,
)

_NO_INTERFACES = (abc.ABC, Protocol, Generic)


class PythonIntrospector:
    """TypeIntrospector for Python classes.

    Stateless: safe to share between threads and tests.
    """

    def describe(self, type_: object) -> TypeInfo:
        """Describe class-level facts.

        Public: no segment of the qualified name starts with underscore.
        Sealed: ``typing.final`` (or static_class) applied to the class.
        Abstract: instantiation is refused (abstract methods pending).
        """
        if not isinstance(type_, type):
            name = getattr(type_, "__qualname__", None) or type(type_).__name__
            return TypeInfo(name=name, is_class=False, is_public=False)

        return TypeInfo(
            name=type_.__qualname__,
            is_class=True,
            is_public=not any(part.startswith("_") for part in type_.__qualname__.split(".")),
            is_sealed=bool(type_.__dict__.get("__final__", False)),
            is_abstract=inspect.isabstract(type_),
        )

    def members(
        self,
        type_: object,
        kind: MemberKind,
        query: MemberQuery,
        name: str | None = None,
    ) -> tuple[MemberInfo, ...]:
        """Enumerate members of kind admitted by query.

        Walks the MRO (only the class itself when declared_only).
        A name declared on a derived class hides base declarations.
        Private members of base classes are not reported.
        """
        cls = _require_class(type_)

        if kind is MemberKind.CONSTRUCTOR:
            return tuple(
                info
                for info in self._constructors(cls)
                if (name is None or info.name == name)
                and query.admits(info, declared_here=info.declaring_type is cls)
            )

        owners = (cls,) if query.declared_only else tuple(k for k in cls.__mro__ if k is not object)

        result: list[MemberInfo] = []
        hidden: set[str] = set()
        for owner in owners:
            for raw_name, info in self._declared(owner, kind, name):
                if raw_name in hidden:
                    continue
                if owner is not cls and info.visibility is MemberVisibility.PRIVATE:
                    continue
                if query.admits(info, declared_here=owner is cls):
                    result.append(info)
            hidden.update(_raw_names(owner))

        return tuple(result)

    def interfaces(self, type_: object) -> tuple[object, ...]:
        """Abstract bases and Protocols named in the class statement."""
        cls = _require_class(type_)
        return tuple(base for base in cls.__bases__ if self.is_interface(base))

    def is_interface(self, type_: object) -> bool:
        """Class is an abstract base class or a Protocol."""
        if not isinstance(type_, type) or type_ in _NO_INTERFACES:
            return False
        return bool(getattr(type_, "_is_protocol", False)) or isinstance(type_, abc.ABCMeta)

    def hierarchy(self, type_: object) -> tuple[object, ...]:
        """Method resolution order, the class itself first."""
        return _require_class(type_).__mro__

    # ------------------------------------------------------------------
    # Per-owner declarations
    # ------------------------------------------------------------------

    def _declared(self, owner: type, kind: MemberKind, name: str | None) -> list[tuple[str, MemberInfo]]:
        """Members of kind declared on owner, only those called name if given.

        Annotations are resolved for the selected members only.
        """
        if kind is MemberKind.FIELD:
            return self._fields(owner, name)

        result: list[tuple[str, MemberInfo]] = []
        for raw_name, raw in owner.__dict__.items():
            if _is_sunder(raw_name) or raw_name in _IMPLEMENTATION_NAMES:
                continue
            member_name = _demangle(owner, raw_name)
            if name is not None and member_name != name:
                continue
            if kind is MemberKind.METHOD:
                infos = self._methods(owner, member_name, raw)
            elif kind is MemberKind.PROPERTY:
                infos = self._properties(owner, member_name, raw)
            else:
                infos = self._events(owner, member_name, raw)
            result.extend((raw_name, info) for info in infos)
        return result

    def _constructors(self, cls: type) -> tuple[MemberInfo, ...]:
        """Overloads of the nearest user-written __init__ or __new__.

        Placeholders installed by typing (Protocol, Generic) are not
        constructors: such classes construct like object.
        """
        for owner in cls.__mro__:
            if owner is object:
                return ()
            if owner is Protocol or owner is Generic:
                continue
            for ctor_name in _CONSTRUCTOR_NAMES:
                raw = owner.__dict__.get(ctor_name)
                func = _unwrap_function(raw)
                if func is None or func.__name__ in _TYPING_PLACEHOLDERS:
                    continue
                visibility = _explicit_visibility(func) or MemberVisibility.PUBLIC
                return tuple(
                    MemberInfo(
                        kind=MemberKind.CONSTRUCTOR,
                        name=ctor_name,
                        declaring_type=owner,
                        visibility=visibility,
                        parameter_types=params,
                    )
                    for params, _ in self._signatures(owner, func, skip_first=True)
                )
        return ()

    def _methods(self, owner: type, name: str, raw: object) -> tuple[MemberInfo, ...]:
        if name in _CONSTRUCTOR_NAMES:
            return ()

        if isinstance(raw, staticmethod):
            func, is_static, skip_first = raw.__func__, True, False
        elif isinstance(raw, classmethod):
            func, is_static, skip_first = raw.__func__, True, True
        elif isinstance(raw, FunctionType):
            func, is_static, skip_first = raw, name in _IMPLICIT_CLASSMETHODS, True
        else:
            return ()

        if not isinstance(func, FunctionType):
            return ()

        visibility = _explicit_visibility(func) or _visibility_from_name(name)
        is_abstract = bool(getattr(raw, "__isabstractmethod__", False))
        is_virtual = not is_static and _is_virtual(func, is_abstract)
        is_extension = isinstance(raw, staticmethod) and bool(getattr(func, EXTENSION_ATTR, False))

        infos: list[MemberInfo] = []
        for params, return_type in self._signatures(owner, func, skip_first=skip_first):
            infos.append(
                MemberInfo(
                    kind=MemberKind.METHOD,
                    name=name,
                    declaring_type=owner,
                    visibility=visibility,
                    is_static=is_static,
                    value_type=return_type,
                    parameter_types=params,
                    is_abstract=is_abstract,
                    is_virtual=is_virtual,
                    is_extension=is_extension,
                    extended_type=params[0] if is_extension and params else None,
                )
            )
        return tuple(infos)

    def _properties(self, owner: type, name: str, raw: object) -> tuple[MemberInfo, ...]:
        if isinstance(raw, property):
            fget, fset = raw.fget, raw.fset
        elif isinstance(raw, cached_property):
            fget, fset = raw.func, None
        else:
            return ()

        getter = _accessor(fget, name)
        setter = _accessor(fset, name)
        accessors = [a for a in (getter, setter) if a is not None]
        visibility = (
            min((a.visibility for a in accessors), key=_VISIBILITY_ORDER.index)
            if accessors
            else _visibility_from_name(name)
        )

        value_type: object = Any
        if fget is not None:
            value_type = self._hints(owner, fget).get("return", Any)
        elif fset is not None:
            params, _ = self._signatures(owner, fset, skip_first=True)[0]
            value_type = params[0] if params else Any

        is_abstract = bool(getattr(raw, "__isabstractmethod__", False))
        primary = fget or fset
        return (
            MemberInfo(
                kind=MemberKind.PROPERTY,
                name=name,
                declaring_type=owner,
                visibility=visibility,
                value_type=value_type,
                is_abstract=is_abstract,
                is_virtual=primary is not None and _is_virtual(primary, is_abstract),
                getter=getter,
                setter=setter,
            ),
        )

    def _events(self, owner: type, name: str, raw: object) -> tuple[MemberInfo, ...]:
        if not isinstance(raw, event):
            return ()
        return (
            MemberInfo(
                kind=MemberKind.EVENT,
                name=name,
                declaring_type=owner,
                visibility=raw.visibility or _visibility_from_name(name),
                is_static=raw.is_static,
                value_type=raw.handler_type,
                is_abstract=raw.is_abstract,
                is_virtual=raw.is_virtual,
            ),
        )

    def _fields(self, owner: type, name: str | None) -> list[tuple[str, MemberInfo]]:
        annotations = _own_annotations(owner)
        frozen = _is_frozen_dataclass(owner)
        dataclass_owner = is_dataclass(owner)

        result: list[tuple[str, MemberInfo]] = []
        for raw_name, annotation in annotations.items():
            if _is_dunder(raw_name) or _is_sunder(raw_name) or raw_name in _IMPLEMENTATION_NAMES:
                continue
            field_name = _demangle(owner, raw_name)
            if name is not None and field_name != name:
                continue
            value = owner.__dict__.get(raw_name, _MISSING)
            has_value = value is not _MISSING and not isinstance(value, MemberDescriptorType)

            unwrapped = _unwrap_annotation(self._field_hint(owner, raw_name, annotation))
            is_static = unwrapped.is_classvar or (unwrapped.is_final and has_value and not dataclass_owner)
            value_type = unwrapped.type_
            if value_type is None:
                value_type = type(value) if has_value else Any

            result.append(
                (
                    raw_name,
                    MemberInfo(
                        kind=MemberKind.FIELD,
                        name=field_name,
                        declaring_type=owner,
                        visibility=unwrapped.visibility or _visibility_from_name(field_name),
                        is_static=is_static,
                        value_type=value_type,
                        is_const=unwrapped.is_final and is_static,
                        is_read_only=not is_static and (unwrapped.is_final or frozen),
                    ),
                )
            )

        for raw_name, raw in owner.__dict__.items():
            if raw_name in annotations or _is_dunder(raw_name) or _is_sunder(raw_name):
                continue
            if raw_name in _IMPLEMENTATION_NAMES:
                continue
            field_name = _demangle(owner, raw_name)
            if name is not None and field_name != name:
                continue
            if isinstance(raw, MemberDescriptorType):
                # __slots__ entry without annotation
                result.append(
                    (
                        raw_name,
                        MemberInfo(
                            kind=MemberKind.FIELD,
                            name=field_name,
                            declaring_type=owner,
                            visibility=_visibility_from_name(field_name),
                            value_type=Any,
                        ),
                    )
                )
            elif _is_plain_data(raw):
                result.append(
                    (
                        raw_name,
                        MemberInfo(
                            kind=MemberKind.FIELD,
                            name=field_name,
                            declaring_type=owner,
                            visibility=_visibility_from_name(field_name),
                            is_static=True,
                            value_type=type(raw),
                        ),
                    )
                )
        return result

    # ------------------------------------------------------------------
    # Signatures and annotations
    # ------------------------------------------------------------------

    def _signatures(
        self,
        owner: type,
        func: Callable[..., Any],
        *,
        skip_first: bool,
    ) -> tuple[tuple[tuple[object, ...], object], ...]:
        """(parameter types, return type) per overload of func."""
        overloads = typing.get_overloads(func) or [func]
        result: list[tuple[tuple[object, ...], object]] = []
        for variant in overloads:
            hints = self._hints(owner, variant)
            parameters = list(inspect.signature(variant).parameters.values())
            if skip_first and parameters:
                parameters = parameters[1:]
            params = tuple(hints.get(p.name, Any) for p in parameters)
            result.append((params, hints.get("return", Any)))
        return tuple(result)

    def _hints(self, owner: type, func: Callable[..., Any]) -> Mapping[str, object]:
        try:
            return typing.get_type_hints(func)
        except (NameError, TypeError, SyntaxError) as e:
            raise IntrospectionError(owner, f"cannot resolve annotations of '{func.__qualname__}': {e}") from e

    def _field_hint(self, owner: type, raw_name: str, annotation: object) -> object:
        """Resolve one class-level annotation in the namespace of owner.

        Sibling annotations stay unresolved, so a name imported only for
        type checking breaks lookups of that field alone.
        """
        holder = type(owner.__name__, (), {"__module__": owner.__module__, "__annotations__": {raw_name: annotation}})
        try:
            return typing.get_type_hints(holder, localns=dict(vars(owner)), include_extras=True)[raw_name]
        except (NameError, TypeError, SyntaxError) as e:
            raise IntrospectionError(owner, f"cannot resolve annotation of field '{raw_name}': {e}") from e


class _Unwrapped(typing.NamedTuple):
    type_: object
    is_classvar: bool
    is_final: bool
    visibility: MemberVisibility | None


_MISSING = object()


def _unwrap_annotation(annotation: object) -> _Unwrapped:
    """Strip Annotated/ClassVar/Final wrappers, collecting their meaning."""
    is_classvar = is_final = False
    visibility: MemberVisibility | None = None
    current: object = annotation

    while True:
        origin = typing.get_origin(current)
        if origin is Annotated:
            for meta in getattr(current, "__metadata__", ()):
                if isinstance(meta, MemberVisibility) and visibility is None:
                    visibility = meta
            current = typing.get_args(current)[0]
        elif origin is ClassVar or current is ClassVar:
            is_classvar = True
            args = typing.get_args(current)
            current = args[0] if args else None
        elif origin is Final or current is Final:
            is_final = True
            args = typing.get_args(current)
            current = args[0] if args else None
        else:
            break

    if isinstance(current, str):
        # unresolved forward reference
        current = Any
    return _Unwrapped(current, is_classvar, is_final, visibility)


def _accessor(func: Callable[..., Any] | None, property_name: str) -> AccessorInfo | None:
    if func is None:
        return None
    return AccessorInfo(visibility=_explicit_visibility(func) or _visibility_from_name(property_name))


def _is_virtual(func: Callable[..., Any], is_abstract: bool) -> bool:
    if getattr(func, "__final__", False):
        return False
    return is_abstract or bool(getattr(func, "__override__", False)) or bool(getattr(func, VIRTUAL_ATTR, False))


def _explicit_visibility(func: object) -> MemberVisibility | None:
    visibility = getattr(func, VISIBILITY_ATTR, None)
    return visibility if isinstance(visibility, MemberVisibility) else None


def _visibility_from_name(name: str) -> MemberVisibility:
    if _is_dunder(name):
        return MemberVisibility.PUBLIC
    if name.startswith("__"):
        return MemberVisibility.PRIVATE
    if name.startswith("_"):
        return MemberVisibility.FAMILY
    return MemberVisibility.PUBLIC


def _demangle(owner: type, raw_name: str) -> str:
    prefix = f"_{owner.__name__.lstrip('_')}__"
    if raw_name.startswith(prefix) and not raw_name.endswith("__") and len(raw_name) > len(prefix):
        return "__" + raw_name[len(prefix) :]
    return raw_name


def _unwrap_function(raw: object) -> FunctionType | None:
    if isinstance(raw, (staticmethod, classmethod)):
        raw = raw.__func__
    return raw if isinstance(raw, FunctionType) else None


def _own_annotations(owner: type) -> dict[str, object]:
    try:
        return dict(inspect.get_annotations(owner))
    except (NameError, TypeError) as e:
        raise IntrospectionError(owner, f"cannot read class annotations: {e}") from e


def _raw_names(owner: type) -> set[str]:
    return set(owner.__dict__) | set(_own_annotations(owner))


def _is_frozen_dataclass(owner: type) -> bool:
    params = owner.__dict__.get("__dataclass_params__")
    return bool(getattr(params, "frozen", False))


def _is_plain_data(raw: object) -> bool:
    """Class attribute holding a value (no descriptor, no nested class)."""
    if isinstance(raw, type):
        return False
    return not hasattr(type(raw), "__get__")


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_sunder(name: str) -> bool:
    return (
        len(name) > 2
        and name.startswith("_")
        and name.endswith("_")
        and not name.startswith("__")
        and not name.endswith("__")
    )


def _require_class(type_: object) -> type:
    if type_ is None:
        raise TypeError("type_ must not be None")
    if not isinstance(type_, type):
        raise TypeError(f"type_ must be a class, got {type(type_).__name__}")
    return type_
