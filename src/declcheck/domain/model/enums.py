"""Domain enumerations."""

from enum import Enum, auto


class MemberKind(Enum):
    """Kind of type member."""

    CONSTRUCTOR = auto()
    FIELD = auto()
    EVENT = auto()
    PROPERTY = auto()
    METHOD = auto()


class AccessorState(Enum):
    """Requested state of a property accessor."""

    PUBLIC = auto()
    PROTECTED = auto()
    ABSENT = auto()
