"""Specimen generation configuration (user config)."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REPEAT_COUNT = 3
DEFAULT_RECURSION_DEPTH = 16


@dataclass(frozen=True, slots=True)
class DeclCheckConfig:
    """Fixture configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    The pytest plugin builds it from ini options; override the
    ``declcheck_config`` fixture in conftest.py to change it per suite.

    Attributes:
        repeat_count: Items generated for list/set/dict/variadic tuple requests
        recursion_depth: Max nesting of requests before generation fails
        seed: Seed of the fixture's random generator. None = unseeded.
    """

    repeat_count: int = DEFAULT_REPEAT_COUNT
    recursion_depth: int = DEFAULT_RECURSION_DEPTH
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _require_int(self.repeat_count, "repeat_count", minimum=0)
        _require_int(self.recursion_depth, "recursion_depth", minimum=1)
        if self.seed is not None:
            _require_int(self.seed, "seed", minimum=None)


def _require_int(value: object, what: str, *, minimum: int | None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be int, got {type(value).__name__}")
    if minimum is not None and value < minimum:
        raise ValueError(f"{what} must be >= {minimum}, got {value}")
