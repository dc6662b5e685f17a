"""The single domain customization: every Money is worth 42."""

from declcheck.application.specimens import DomainCustomization, SpecimenBuilderCustomization
from declcheck.domain.ports.specimen_builder import NO_SPECIMEN
from tests.samples.single.model import Money

FIXED_AMOUNT = 42


class MoneyBuilder:
    def create(self, request: object, context: object) -> object:
        if request is Money:
            return Money(FIXED_AMOUNT)
        return NO_SPECIMEN


class ShopCustomization(DomainCustomization):
    def __init__(self) -> None:
        super().__init__(SpecimenBuilderCustomization(MoneyBuilder()))
