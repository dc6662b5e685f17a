"""Fixture preconfigured with the domain customization of a test package."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import TYPE_CHECKING

from declcheck.application.discovery.customizations import (
    assembly_of,
    discover_domain_customizations,
    import_package,
)
from declcheck.application.specimens.customizations import CompositeCustomization, SpecimenBuilderCustomization
from declcheck.application.specimens.fixture import Fixture
from declcheck.application.specimens.relay import SutInjectionRelay
from declcheck.domain.exceptions import MultipleDomainCustomizationsError, NoDomainCustomizationError

if TYPE_CHECKING:
    from declcheck.domain.model.configuration import DeclCheckConfig
    from declcheck.domain.ports.specimen_builder import Customization

logger = logging.getLogger(__name__)


class DomainFixture(Fixture):
    """Fixture customized with exactly one DomainCustomization.

    Example:
        fixture = DomainFixture.load_from("tests.orders")
        fixture = DomainFixture.create_for(specification)
    """

    def __init__(self, customization: Customization, config: DeclCheckConfig | None = None) -> None:
        """Initialize and apply customization.

        Raises:
            TypeError: If customization is None
        """
        if customization is None:
            raise TypeError("customization must not be None")
        super().__init__(config)
        self.customize(customization)

    @classmethod
    def load_from(
        cls,
        package: ModuleType | str,
        config: DeclCheckConfig | None = None,
    ) -> DomainFixture:
        """Create fixture customized with the package's domain customization.

        Args:
            package: Test package (scanned with all submodules) or module
            config: Generation settings, DeclCheckConfig() if None

        Raises:
            NoDomainCustomizationError: If the package declares none
            MultipleDomainCustomizationsError: If it declares more than one
        """
        return cls(_single_customization(import_package(package)), config)

    @classmethod
    def create_for(
        cls,
        specification: object,
        config: DeclCheckConfig | None = None,
    ) -> DomainFixture:
        """Create fixture for a specification instance.

        The package is the outermost regular package containing the
        specification's module. SUT requests go through a SutInjectionRelay
        bound to the specification.

        Raises:
            TypeError: If specification is None
            NoDomainCustomizationError: If the package declares none
            MultipleDomainCustomizationsError: If it declares more than one
        """
        package = assembly_of(specification)
        composite = CompositeCustomization(
            _single_customization(package),
            SpecimenBuilderCustomization(SutInjectionRelay(specification)),
        )
        return cls(composite, config)


def _single_customization(package: ModuleType) -> Customization:
    candidates = discover_domain_customizations(package)
    if not candidates:
        raise NoDomainCustomizationError(package.__name__)
    if len(candidates) > 1:
        raise MultipleDomainCustomizationsError(package.__name__, tuple(c.__qualname__ for c in candidates))

    (customization_type,) = candidates
    logger.debug("using %s for %s", customization_type.__qualname__, package.__name__)
    return customization_type()
