"""Fixture customizations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declcheck.domain.ports.specimen_builder import CustomizableFixture, Customization, SpecimenBuilder


class CompositeCustomization:
    """Applies several customizations in order."""

    def __init__(self, *customizations: Customization) -> None:
        """Initialize with customizations.

        Raises:
            TypeError: If any customization is None
        """
        if any(c is None for c in customizations):
            raise TypeError("customizations must not contain None")
        self._customizations = customizations

    @property
    def customizations(self) -> tuple[Customization, ...]:
        """Customizations in application order."""
        return self._customizations

    def customize(self, fixture: CustomizableFixture) -> None:
        """Apply every customization to fixture."""
        if fixture is None:
            raise TypeError("fixture must not be None")
        for customization in self._customizations:
            customization.customize(fixture)


class SpecimenBuilderCustomization:
    """Adds one specimen builder to the fixture's customizations."""

    def __init__(self, builder: SpecimenBuilder) -> None:
        """Initialize with builder.

        Raises:
            TypeError: If builder is None
        """
        if builder is None:
            raise TypeError("builder must not be None")
        self._builder = builder

    @property
    def builder(self) -> SpecimenBuilder:
        """Builder added by customize()."""
        return self._builder

    def customize(self, fixture: CustomizableFixture) -> None:
        """Append the builder to fixture.customizations."""
        if fixture is None:
            raise TypeError("fixture must not be None")
        fixture.customizations.append(self._builder)


class DomainCustomization(CompositeCustomization):
    """Base of the single customization of a test package.

    A test package declares exactly one concrete subclass with a
    parameterless constructor; DomainFixture finds and applies it.

    Example:
        class OrdersCustomization(DomainCustomization):
            def __init__(self) -> None:
                super().__init__(
                    SpecimenBuilderCustomization(MoneyBuilder()),
                    SpecimenBuilderCustomization(RandomMultipleRelay()),
                )
    """
