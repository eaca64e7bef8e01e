"""
Multiplication — Shift-and-add bitwise product

Grade-school multiplication expressed directly as bitwise accumulation into
a result buffer of len(a) + len(b) bits: for every set bit i of a, the bits
of b are added into the buffer starting at offset i with full-adder carry,
then the carry ripples through the higher positions until it is absorbed.

Equivalent to summing shifted partial products, but performed in place on
one buffer instead of through repeated calls to add().

CRITICAL INVARIANTS:
1. A zero operand returns zero without allocating a buffer
2. len(a) + len(b) bits always suffice; no carry escapes the buffer
3. The result is normalized
4. O(len(a) * len(b)) bit operations; no fast multiplication
"""

from src.core.domain.bignum import BigNum
from src.core.math.addition import full_adder


# =============================================================================
# MULTIPLY
# =============================================================================


def multiply(a: BigNum, b: BigNum) -> BigNum:
    """
    Product of two non-negative integers.

    Args:
        a: Multiplicand (its set bits select the partial products)
        b: Multiplier (added into the buffer at each selected offset)

    Returns:
        Normalized a * b

    Examples:
        >>> multiply(BigNum.from_u64(12), BigNum.from_u64(15)).to_u64()
        180
        >>> multiply(BigNum.from_u64(42), BigNum.from_u64(0)).is_zero()
        True
    """
    if a.is_zero() or b.is_zero():
        return BigNum.zero()

    a_bits = a.bits
    b_bits = b.bits
    result = [False] * (len(a_bits) + len(b_bits))

    for i, a_i in enumerate(a_bits):
        if not a_i:
            continue

        carry = False
        for j, b_j in enumerate(b_bits):
            result[i + j], carry = full_adder(result[i + j], b_j, carry)

        # Ripple the leftover carry
        pos = i + len(b_bits)
        while carry and pos < len(result):
            result[pos], carry = result[pos] ^ carry, result[pos] and carry
            pos += 1

    return BigNum.from_bits(result).normalize()
