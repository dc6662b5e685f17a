"""Sample types for the default generator."""

import collections.abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class EmptyEnum(Enum):
    pass


@dataclass
class Address:
    street: str
    number: int


@dataclass
class Customer:
    name: str
    address: Address
    tags: list[str]
    scores: dict[str, float]
    color: Color
    nickname: str | None = None
    rank: Literal["gold", "silver"] = "gold"
    labels: tuple[str, ...] = field(default=())


class Untyped:
    def __init__(self, value, retries=5) -> None:
        self.value = value
        self.retries = retries


class PositionalOnly:
    def __init__(self, first: int, /, second: str) -> None:
        self.first = first
        self.second = second


class Variadic:
    def __init__(self, *args: int, **kwargs: str) -> None:
        self.args = args
        self.kwargs = kwargs


class Node:
    def __init__(self, child: "Node") -> None:
        self.child = child


class NeedsSized:
    def __init__(self, items: collections.abc.Sized) -> None:
        self.items = items
