"""
Subtraction — Borrow-propagating bitwise difference

Scans bit 0 upward across max(len(a), len(b)) positions computing
diff = a_i - b_i - borrow_in as a small signed quantity:
- diff >= 0: output bit is (diff != 0), borrow cleared
- diff < 0:  output bit is True (diff + 2), borrow set

CRITICAL INVARIANTS:
1. Checked subtraction (default) never returns a value when a < b:
   SubtractionUnderflow is raised before any work is done
2. Unchecked subtraction with a < b yields the borrow-underflow bits
   (the low max(len(a), len(b)) bits of a - b in two's complement)
3. The result is normalized
"""

from src.core.domain.bignum import BigNum, Ordering


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SubtractionUnderflow(ValueError):
    """
    Minuend smaller than subtrahend.

    BigNum is unsigned, so a - b has no representation when a < b.
    """

    pass


# =============================================================================
# SUBTRACT
# =============================================================================


def subtract(a: BigNum, b: BigNum, *, checked: bool = True) -> BigNum:
    """
    Difference a - b of two non-negative integers.

    Args:
        a: Minuend
        b: Subtrahend
        checked: Verify a >= b first (default: True). Pass False only when
            the caller has already established the ordering; an unchecked
            call with a < b returns borrow-underflow garbage.

    Returns:
        Normalized a - b

    Raises:
        SubtractionUnderflow: If checked and a < b

    Examples:
        >>> subtract(BigNum.from_u64(10), BigNum.from_u64(3)).to_u64()
        7
    """
    if checked and a.compare(b) is Ordering.LESS:
        raise SubtractionUnderflow(
            f"Cannot subtract {b} from smaller value {a}: result would be negative"
        )

    a_bits = a.bits
    b_bits = b.bits
    max_len = max(len(a_bits), len(b_bits))

    result = []
    borrow = False
    for i in range(max_len):
        a_i = int(i < len(a_bits) and a_bits[i])
        b_i = int(i < len(b_bits) and b_bits[i])

        diff = a_i - b_i - int(borrow)
        if diff >= 0:
            result.append(diff != 0)
            borrow = False
        else:
            # -1 -> bit 1 with borrow; -2 -> bit 0 with borrow
            result.append(diff == -1)
            borrow = True

    return BigNum.from_bits(result).normalize()
