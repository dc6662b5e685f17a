"""Ports: interfaces implemented by infrastructure or users."""

from declcheck.domain.ports.introspector import TypeIntrospector
from declcheck.domain.ports.specimen_builder import (
    NO_SPECIMEN,
    CustomizableFixture,
    Customization,
    NoSpecimen,
    SpecimenBuilder,
    SpecimenContext,
)

__all__ = [
    "NO_SPECIMEN",
    "CustomizableFixture",
    "Customization",
    "NoSpecimen",
    "SpecimenBuilder",
    "SpecimenContext",
    "TypeIntrospector",
]
