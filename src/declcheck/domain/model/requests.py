"""Specimen requests understood by the fixture.

A request is a type (``int``, ``Order``, ``list[str]``) or one of the value
objects below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class SutRequest:
    """Request for a system-under-test instance.

    Attributes:
        sut_type: Type of the requested instance
    """

    sut_type: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.sut_type is None:
            raise TypeError("sut_type must not be None")


@dataclass(frozen=True, slots=True)
class ParameterRequest:
    """Request for a value of a constructor (or function) parameter.

    Attributes:
        name: Parameter name
        annotation: Resolved parameter type, typing.Any if unannotated
        owner: Class (or function) declaring the parameter
        has_default: Parameter declares a default value
        default: The default value (meaningful only if has_default)
    """

    name: str
    annotation: object = Any
    owner: object = None
    has_default: bool = False
    default: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("name must not be empty")
        if self.annotation is None:
            raise TypeError("annotation must not be None, use types.NoneType")


@dataclass(frozen=True, slots=True)
class MultipleRequest:
    """Request for several specimens of the inner request.

    Attributes:
        request: Request repeated for every item
    """

    request: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.request is None:
            raise TypeError("request must not be None")


@dataclass(frozen=True, slots=True)
class SequenceRequest:
    """Request for exactly count specimens of the inner request.

    Attributes:
        request: Request repeated for every item
        count: Number of items
    """

    request: object
    count: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.request is None:
            raise TypeError("request must not be None")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"count must be int, got {type(self.count).__name__}")
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
