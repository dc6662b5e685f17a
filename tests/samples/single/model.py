"""Domain types of the single-customization package."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Money:
    amount: int


@dataclass(frozen=True)
class Order:
    number: int
    total: Money
    note: str = ""

    def stamped(self, note: str) -> "Order":
        return replace(self, note=note)


@dataclass(frozen=True)
class Customer:
    name: str


class OrderService:
    def __init__(self, sut: Order, customer: Customer) -> None:
        self.sut = sut
        self.customer = customer
