"""Specifications of the single-customization package."""

from declcheck.application.specimens import FixtureOverride, InstanceSpecification, Specification, fixture_override
from tests.samples.single.model import Customer, Money, Order

OVERRIDE_NOTE = "from override"
HOOK_NOTE = "from hook"


class OrderOverrideSpecification(InstanceSpecification[Order], FixtureOverride[Order]):
    def __init__(self) -> None:
        self.created: list[Order] = []

    def create(self) -> Order:
        order = Order(number=7, total=Money(1), note=OVERRIDE_NOTE)
        self.created.append(order)
        return order


class CustomerOverrideSpecification(InstanceSpecification[Customer]):
    @fixture_override(Customer)
    def vip(self) -> Customer:
        return Customer(name="vip")


class HookSpecification(InstanceSpecification[Order]):
    sut_modification_method = "_stamp"

    def _stamp(self, sut: Order) -> Order:
        return sut.stamped(HOOK_NOTE)


class PrivateHookSpecification(InstanceSpecification[Order]):
    sut_modification_method = "__seal"

    def __seal(self, sut: Order) -> Order:
        return sut.stamped("sealed")


class InheritedHookSpecification(HookSpecification):
    pass


class OverrideAndHookSpecification(OrderOverrideSpecification):
    sut_modification_method = "_stamp"

    def _stamp(self, sut: Order) -> Order:
        return sut.stamped(HOOK_NOTE)


class MissingHookSpecification(InstanceSpecification[Order]):
    sut_modification_method = "missing"


class FailingOverrideSpecification(InstanceSpecification[Order], FixtureOverride[Order]):
    def create(self) -> Order:
        raise LookupError("no order today")


class BaseOrderOverride(InstanceSpecification[Order], FixtureOverride[Order]):
    def create(self) -> Order:
        return Order(number=1, total=Money(1), note="base")


class DerivedOrderOverride(BaseOrderOverride):
    @fixture_override(Order)
    def derived(self) -> Order:
        return Order(number=2, total=Money(2), note="derived")


class PlainSpecification(Specification):
    pass
