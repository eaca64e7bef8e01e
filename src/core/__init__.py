"""
Core value type, arithmetic algorithms, and wire contracts.

This package contains the arbitrary-precision unsigned integer and every
algorithm that operates on it. It is independent of any presentation layer
(the console showcase lives in src.demo).
"""

from src.core.domain import (
    BINARY_PREFIX,
    U64_BITS,
    U64_MAX,
    BigNum,
    Ordering,
)
from src.core.math import (
    DivisionByZero,
    DivisionResult,
    SubtractionUnderflow,
    add,
    div,
    divide,
    full_adder,
    modulo,
    multiply,
    subtract,
)

__all__ = [
    # Value type
    "BigNum",
    "Ordering",
    "BINARY_PREFIX",
    "U64_BITS",
    "U64_MAX",
    # Arithmetic
    "add",
    "full_adder",
    "subtract",
    "multiply",
    "divide",
    "div",
    "modulo",
    "DivisionResult",
    # Exceptions
    "DivisionByZero",
    "SubtractionUnderflow",
]
