"""
Division — Binary long division with remainder

Builds the quotient bit by bit from the most significant end, reusing the
other BigNum operations (shift, add, subtract, compare):

    remainder = 0
    for each dividend bit, MSB -> LSB:
        remainder = (remainder << 1) + bit
        if remainder >= divisor:
            remainder -= divisor
            quotient[i] = 1

CRITICAL INVARIANTS:
1. Zero divisor -> DivisionByZero; no partial result is ever returned
2. dividend == quotient * divisor + remainder, remainder < divisor
3. Quotient and remainder are normalized
4. div() and modulo() re-run the full division (no memoization)
"""

import logging
from typing import NamedTuple

from src.core.domain.bignum import BigNum, Ordering
from src.core.math.addition import add
from src.core.math.subtraction import subtract

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Divisor is the zero value.

    Fatal to the operation: callers catch this (or ZeroDivisionError)
    to tell it apart from a normal result.
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class DivisionResult(NamedTuple):
    """Quotient and remainder of a division."""

    quotient: BigNum
    remainder: BigNum


# =============================================================================
# DIVIDE
# =============================================================================


def divide(a: BigNum, b: BigNum) -> DivisionResult:
    """
    Quotient and remainder of a / b.

    Fast paths:
        a == 0 -> (0, 0)
        a < b  -> (0, a)
        a == b -> (1, 0)

    Args:
        a: Dividend
        b: Divisor (non-zero)

    Returns:
        DivisionResult(quotient, remainder), unpackable as a pair

    Raises:
        DivisionByZero: If b is zero

    Examples:
        >>> q, r = divide(BigNum.from_u64(17), BigNum.from_u64(5))
        >>> (q.to_u64(), r.to_u64())
        (3, 2)
    """
    if b.is_zero():
        logger.debug("divide: zero divisor (dividend=%s)", a)
        raise DivisionByZero(f"Division by zero: {a} / {b}")

    if a.is_zero():
        return DivisionResult(BigNum.zero(), BigNum.zero())

    ordering = a.compare(b)
    if ordering is Ordering.LESS:
        return DivisionResult(BigNum.zero(), a.normalize())
    if ordering is Ordering.EQUAL:
        return DivisionResult(BigNum.from_u64(1), BigNum.zero())

    one = BigNum.from_u64(1)
    a_bits = a.bits
    quotient = [False] * len(a_bits)
    remainder = BigNum.zero()

    for i in range(len(a_bits) - 1, -1, -1):
        remainder = remainder.shl(1)
        if a_bits[i]:
            remainder = add(remainder, one)

        if remainder.compare(b) is not Ordering.LESS:
            # Ordering already established above
            remainder = subtract(remainder, b, checked=False)
            quotient[i] = True

    return DivisionResult(
        BigNum.from_bits(quotient).normalize(),
        remainder.normalize(),
    )


def div(a: BigNum, b: BigNum) -> BigNum:
    """
    Quotient of a / b (floor).

    Raises:
        DivisionByZero: If b is zero
    """
    return divide(a, b).quotient


def modulo(a: BigNum, b: BigNum) -> BigNum:
    """
    Remainder of a / b.

    Raises:
        DivisionByZero: If b is zero
    """
    return divide(a, b).remainder
