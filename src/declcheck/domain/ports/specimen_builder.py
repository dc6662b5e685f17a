"""Specimen generation ports.

A fixture resolves requests through a chain of specimen builders.
Builders decline a request by returning NO_SPECIMEN.
"""

from __future__ import annotations

from typing import Final, Protocol, final


@final
class NoSpecimen:
    """Sentinel type: builder does not handle the request.

    Not an error. The fixture moves on to the next builder.
    """

    __slots__ = ()
    _instance: NoSpecimen | None = None

    def __new__(cls) -> NoSpecimen:
        """Return the shared sentinel."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        """Render sentinel name."""
        return "NO_SPECIMEN"

    def __bool__(self) -> bool:
        """Sentinel is falsy."""
        return False


NO_SPECIMEN: Final = NoSpecimen()


class SpecimenContext(Protocol):
    """Resolves nested requests while a specimen is being built."""

    def resolve(self, request: object) -> object:
        """Create a specimen for request.

        Args:
            request: Type or request object

        Returns:
            Created specimen

        Raises:
            SpecimenCreationError: If no builder handles the request
        """
        ...


class SpecimenBuilder(Protocol):
    """Contract for builders plugged into a fixture."""

    def create(self, request: object, context: SpecimenContext) -> object:
        """Create a specimen or decline.

        Args:
            request: Type or request object
            context: Context for resolving nested requests

        Returns:
            Specimen, or NO_SPECIMEN if request is not handled
        """
        ...


class CustomizableFixture(Protocol):
    """Fixture surface visible to customizations."""

    @property
    def customizations(self) -> list[SpecimenBuilder]:
        """Builders consulted before the built-in ones, in order."""
        ...


class Customization(Protocol):
    """Contract for fixture customizations."""

    def customize(self, fixture: CustomizableFixture) -> None:
        """Apply customization to fixture."""
        ...
