"""Default object-graph generator.

Requests go through the customizations first (in insertion order), then
through the built-in builders. The first builder returning something other
than NO_SPECIMEN wins.

Example:
    fixture = Fixture()
    order = fixture.create(Order)
    sut = fixture.create_sut(OrderService)
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Self

from declcheck.application.specimens.builders import default_builders
from declcheck.domain.exceptions import SpecimenCreationError
from declcheck.domain.model.configuration import DeclCheckConfig
from declcheck.domain.model.requests import SutRequest
from declcheck.domain.ports.specimen_builder import NO_SPECIMEN

if TYPE_CHECKING:
    from declcheck.domain.ports.specimen_builder import Customization, SpecimenBuilder

logger = logging.getLogger(__name__)


class Fixture:
    """Creates anonymous specimens for types and requests.

    Not thread-safe: use one fixture per test.
    """

    def __init__(self, config: DeclCheckConfig | None = None) -> None:
        """Initialize fixture.

        Args:
            config: Generation settings, DeclCheckConfig() if None

        Raises:
            TypeError: If config has the wrong type
        """
        if config is None:
            config = DeclCheckConfig()
        if not isinstance(config, DeclCheckConfig):
            raise TypeError(f"config must be DeclCheckConfig, got {type(config).__name__}")

        self._config = config
        self._random = random.Random(config.seed)
        self._customizations: list[SpecimenBuilder] = []
        self._builders = default_builders(self._random, config.repeat_count)

    @property
    def config(self) -> DeclCheckConfig:
        """Generation settings."""
        return self._config

    @property
    def random(self) -> random.Random:
        """Random generator shared by all built-in builders."""
        return self._random

    @property
    def customizations(self) -> list[SpecimenBuilder]:
        """Builders consulted before the built-in ones, in order. Mutable."""
        return self._customizations

    def customize(self, customization: Customization) -> Self:
        """Apply customization to this fixture.

        Returns:
            self, for chaining

        Raises:
            TypeError: If customization is None
        """
        if customization is None:
            raise TypeError("customization must not be None")
        customization.customize(self)
        return self

    def create(self, request: object) -> object:
        """Create a specimen for a type or request object.

        Raises:
            SpecimenCreationError: If no builder handles the request or the
                request nesting exceeds config.recursion_depth
        """
        if request is None:
            raise TypeError("request must not be None")
        return _ResolutionContext(self).resolve(request)

    def create_sut[T](self, sut_type: type[T]) -> T:
        """Create a system-under-test instance through a SutRequest."""
        return self.create(SutRequest(sut_type))  # type: ignore[return-value]

    def _pipeline(self) -> tuple[SpecimenBuilder, ...]:
        return (*self._customizations, *self._builders)


class _ResolutionContext:
    """SpecimenContext of one create() call. Tracks the request path."""

    __slots__ = ("_fixture", "_path")

    def __init__(self, fixture: Fixture) -> None:
        self._fixture = fixture
        self._path: list[object] = []

    def resolve(self, request: object) -> object:
        """Resolve a nested request through the full pipeline."""
        limit = self._fixture.config.recursion_depth
        if len(self._path) >= limit:
            raise SpecimenCreationError(
                request,
                f"recursion depth {limit} exceeded via {' -> '.join(_label(r) for r in self._path)}",
            )

        self._path.append(request)
        try:
            for builder in self._fixture._pipeline():
                specimen = builder.create(request, self)
                if specimen is not NO_SPECIMEN:
                    return specimen
        finally:
            self._path.pop()

        logger.debug("no specimen builder handles %r", request)
        raise SpecimenCreationError(request, "no specimen builder handles the request")


def _label(request: object) -> str:
    return getattr(request, "__qualname__", None) or repr(request)
