"""
Addition — Carry-propagating bitwise sum

Textbook ripple-carry adder over two bit vectors:
- sum bit   = a XOR b XOR carry_in
- carry out = majority(a, b, carry_in)
- bits past an operand's length read as False
- a carry left after the last position appends one more True bit

CRITICAL INVARIANTS:
1. add is total and commutative: no preconditions on the operands
2. len(add(a, b)) <= max(len(a), len(b)) + 1
3. The result is normalized
"""

from src.core.domain.bignum import BigNum


# =============================================================================
# FULL ADDER
# =============================================================================


def full_adder(a: bool, b: bool, carry_in: bool) -> tuple[bool, bool]:
    """
    One-bit full adder.

    Shared by addition and multiplication, which accumulates partial
    products with the same carry logic.

    Args:
        a: First input bit
        b: Second input bit
        carry_in: Carry from the next lower position

    Returns:
        (sum_bit, carry_out)

    Examples:
        >>> full_adder(True, True, False)
        (False, True)
        >>> full_adder(True, True, True)
        (True, True)
    """
    sum_bit = a ^ b ^ carry_in
    carry_out = (a and b) or (carry_in and (a ^ b))
    return sum_bit, carry_out


# =============================================================================
# ADD
# =============================================================================


def add(a: BigNum, b: BigNum) -> BigNum:
    """
    Sum of two non-negative integers.

    Scans bit 0 upward across the longer operand, rippling the carry.

    Args:
        a: First addend
        b: Second addend

    Returns:
        Normalized a + b

    Examples:
        >>> add(BigNum.from_u64(5), BigNum.from_u64(3)).to_u64()
        8
        >>> str(add(BigNum.from_u64(15), BigNum.from_u64(1)))
        '0b10000'
    """
    a_bits = a.bits
    b_bits = b.bits
    max_len = max(len(a_bits), len(b_bits))

    result = []
    carry = False
    for i in range(max_len):
        a_i = a_bits[i] if i < len(a_bits) else False
        b_i = b_bits[i] if i < len(b_bits) else False
        sum_bit, carry = full_adder(a_i, b_i, carry)
        result.append(sum_bit)

    if carry:
        result.append(True)

    # Fresh buffer: operands may have been staged un-normalized
    return BigNum.from_bits(result).normalize()
