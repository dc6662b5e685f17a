"""Method names implementing Python operators.

Use with has_method to assert operator overloads:

    has_method(Money, MemberDetails.DEFAULT, OperatorNames.ADDITION, Money, (Money,))
    has_method(Money, MemberDetails.DEFAULT, OperatorNames.reflected(OperatorNames.ADDITION), Money, (int,))
"""

from __future__ import annotations

from typing import Final, final


@final
class OperatorNames:
    """Operator method names (namespace, not instantiable)."""

    # unary
    UNARY_NEGATION: Final = "__neg__"
    UNARY_PLUS: Final = "__pos__"
    ONES_COMPLEMENT: Final = "__invert__"
    ABSOLUTE: Final = "__abs__"
    TRUE: Final = "__bool__"

    # conversion
    INT_CONVERSION: Final = "__int__"
    FLOAT_CONVERSION: Final = "__float__"
    COMPLEX_CONVERSION: Final = "__complex__"
    INDEX_CONVERSION: Final = "__index__"

    # arithmetic
    ADDITION: Final = "__add__"
    SUBTRACTION: Final = "__sub__"
    MULTIPLY: Final = "__mul__"
    MATRIX_MULTIPLY: Final = "__matmul__"
    DIVISION: Final = "__truediv__"
    FLOOR_DIVISION: Final = "__floordiv__"
    MODULUS: Final = "__mod__"
    POWER: Final = "__pow__"

    # bitwise
    LEFT_SHIFT: Final = "__lshift__"
    RIGHT_SHIFT: Final = "__rshift__"
    BITWISE_AND: Final = "__and__"
    BITWISE_OR: Final = "__or__"
    EXCLUSIVE_OR: Final = "__xor__"

    # comparison
    EQUALITY: Final = "__eq__"
    INEQUALITY: Final = "__ne__"
    LESS_THAN: Final = "__lt__"
    LESS_THAN_OR_EQUAL: Final = "__le__"
    GREATER_THAN: Final = "__gt__"
    GREATER_THAN_OR_EQUAL: Final = "__ge__"

    BINARY: Final = frozenset(
        {
            ADDITION,
            SUBTRACTION,
            MULTIPLY,
            MATRIX_MULTIPLY,
            DIVISION,
            FLOOR_DIVISION,
            MODULUS,
            POWER,
            LEFT_SHIFT,
            RIGHT_SHIFT,
            BITWISE_AND,
            BITWISE_OR,
            EXCLUSIVE_OR,
        }
    )

    def __new__(cls) -> OperatorNames:
        """Reject instantiation."""
        raise TypeError("OperatorNames is a namespace and cannot be instantiated")

    @staticmethod
    def reflected(name: str) -> str:
        """Reflected variant of a binary operator (``__add__`` -> ``__radd__``).

        Raises:
            ValueError: If name is not a binary arithmetic or bitwise operator
        """
        return "__r" + _binary_stem(name) + "__"

    @staticmethod
    def in_place(name: str) -> str:
        """In-place variant of a binary operator (``__add__`` -> ``__iadd__``).

        Raises:
            ValueError: If name is not a binary arithmetic or bitwise operator
        """
        return "__i" + _binary_stem(name) + "__"


def _binary_stem(name: str) -> str:
    if name not in OperatorNames.BINARY:
        raise ValueError(f"'{name}' is not a binary arithmetic or bitwise operator")
    return name[2:-2]
