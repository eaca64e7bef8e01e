"""
Core math modules

Bitwise arithmetic algorithms over BigNum: ripple-carry addition,
borrow-propagating subtraction, shift-and-add multiplication and
binary long division.
"""

# Addition
from src.core.math.addition import (
    add,
    full_adder,
)

# Subtraction
from src.core.math.subtraction import (
    SubtractionUnderflow,
    subtract,
)

# Multiplication
from src.core.math.multiplication import multiply

# Division
from src.core.math.division import (
    DivisionByZero,
    DivisionResult,
    div,
    divide,
    modulo,
)

__all__ = [
    # Addition
    "add",
    "full_adder",
    # Subtraction — Exceptions
    "SubtractionUnderflow",
    # Subtraction — Functions
    "subtract",
    # Multiplication
    "multiply",
    # Division — Exceptions
    "DivisionByZero",
    # Division — Types
    "DivisionResult",
    # Division — Functions
    "divide",
    "div",
    "modulo",
]
