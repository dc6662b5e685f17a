"""Argument validation shared by lookups and assertions. FAIL-FIRST."""

from __future__ import annotations

from collections.abc import Iterable

from declcheck.domain.model.visibility import MemberVisibility


def require_name(name: str, what: str) -> str:
    """Name is a non-blank string.

    Raises:
        TypeError: If name is None or not a string
        ValueError: If name is empty or whitespace
    """
    if name is None:
        raise TypeError(f"{what} must not be None")
    if not isinstance(name, str):
        raise TypeError(f"{what} must be str, got {type(name).__name__}")
    if not name.strip():
        raise ValueError(f"{what} must not be empty or whitespace")
    return name


def require_type(value: object, what: str) -> object:
    """Type argument is present. ``types.NoneType`` stands for None.

    Raises:
        TypeError: If value is None
    """
    if value is None:
        raise TypeError(f"{what} must not be None, use types.NoneType")
    return value


def require_types(values: Iterable[object], what: str) -> tuple[object, ...]:
    """Type collection is present and has no None items.

    Raises:
        TypeError: If values is None or a single string
        ValueError: If any item is None
    """
    if values is None:
        raise TypeError(f"{what} must not be None")
    if isinstance(values, str):
        raise TypeError(f"{what} must be a collection of types, got str")
    result = tuple(values)
    if any(v is None for v in result):
        raise ValueError(f"{what} must not contain None, use types.NoneType")
    return result


def require_visibility(visibility: MemberVisibility) -> MemberVisibility:
    """Visibility is a MemberVisibility mask.

    Raises:
        TypeError: If visibility has the wrong type
    """
    if not isinstance(visibility, MemberVisibility):
        raise TypeError(f"visibility must be MemberVisibility, got {type(visibility).__name__}")
    return visibility


def require_target(type_: object) -> object:
    """Verified type is present.

    Raises:
        TypeError: If type_ is None
    """
    if type_ is None:
        raise TypeError("type_ must not be None")
    return type_
