"""
Algebraic properties of BigNum arithmetic

Checks the arithmetic against Python int as a reference over generated
operands, small and wider than 64 bits (hypothesis):
1. Round-trip through the 64-bit conversion
2. Addition identity and commutativity
3. Subtraction as the inverse of addition
4. Multiplication identity and zero
5. Division-remainder identity, remainder < divisor
6. Shift inverse
7. Comparison totality consistent with integer ordering
"""

from hypothesis import example, given, settings, strategies as st

from src.core.domain import U64_MAX, BigNum, Ordering
from src.core.math import add, div, divide, modulo, multiply, subtract

# Operands up to 160 bits exercise carries across the 64-bit boundary
WIDE = st.integers(min_value=0, max_value=2**160)
U64 = st.integers(min_value=0, max_value=U64_MAX)
SHIFTS = st.integers(min_value=0, max_value=200)


def big(value: int) -> BigNum:
    """BigNum of any size via its binary literal."""
    return BigNum.from_binary_str(bin(value))


def as_int(value: BigNum) -> int:
    """Reference integer of a BigNum (through its binary literal)."""
    return int(str(value), 2)


# =============================================================================
# CONVERSION
# =============================================================================


class TestConversionProperties:
    """from_u64 / to_u64 / str agree with the integer value"""

    @given(U64)
    @example(0)
    @example(U64_MAX)
    def test_round_trip(self, value: int) -> None:
        assert BigNum.from_u64(value).to_u64() == value

    @given(WIDE)
    def test_binary_literal_round_trip(self, value: int) -> None:
        assert as_int(big(value)) == value
        assert big(value).to_u64() == value & U64_MAX

    @given(WIDE, st.integers(min_value=0, max_value=8))
    def test_normalization_idempotent(self, value: int, padding: int) -> None:
        staged = BigNum.from_bits(big(value).bits + (False,) * padding)
        once = staged.normalize()

        assert once.bits == big(value).bits
        assert once.normalize() is once
        assert staged == once


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmeticProperties:
    """Arithmetic matches integer arithmetic"""

    @given(WIDE, WIDE)
    def test_addition(self, x: int, y: int) -> None:
        a, b = big(x), big(y)
        assert as_int(add(a, b)) == x + y
        assert add(a, b) == add(b, a)
        assert add(a, BigNum.zero()) == a

    @given(WIDE, WIDE)
    def test_subtraction_inverse(self, x: int, y: int) -> None:
        hi, lo = big(max(x, y)), big(min(x, y))
        difference = subtract(hi, lo)
        assert as_int(difference) == max(x, y) - min(x, y)
        assert add(difference, lo) == hi

    @settings(deadline=None)
    @given(WIDE, WIDE)
    def test_multiplication(self, x: int, y: int) -> None:
        a, b = big(x), big(y)
        assert as_int(multiply(a, b)) == x * y
        assert multiply(a, BigNum.from_u64(1)) == a
        assert multiply(a, BigNum.zero()) == BigNum.zero()

    @settings(deadline=None, max_examples=50)
    @given(WIDE, st.integers(min_value=1, max_value=2**160))
    @example(2**160, 1)
    @example(2**64, 2**64 + 1)
    def test_division_remainder_identity(self, x: int, y: int) -> None:
        a, b = big(x), big(y)
        quotient, remainder = divide(a, b)

        assert as_int(quotient) == x // y
        assert as_int(remainder) == x % y
        assert add(multiply(div(a, b), b), modulo(a, b)) == a
        assert modulo(a, b).compare(b) is Ordering.LESS

    @given(WIDE, SHIFTS)
    def test_shift_inverse(self, value: int, n: int) -> None:
        bn = big(value)
        assert as_int(bn.shl(n)) == value << n
        assert as_int(bn.shr(n)) == value >> n
        assert bn.shl(n).shr(n) == bn


# =============================================================================
# COMPARISON
# =============================================================================


class TestComparisonProperties:
    """compare is a total order consistent with integers"""

    @given(U64, U64)
    def test_consistent_with_to_u64(self, x: int, y: int) -> None:
        a, b = BigNum.from_u64(x), BigNum.from_u64(y)
        expected = Ordering.LESS if x < y else Ordering.GREATER if x > y else Ordering.EQUAL

        assert a.compare(b) is expected
        assert b.compare(a) is Ordering(-expected)

    @given(WIDE, WIDE)
    def test_exactly_one_relation_holds(self, x: int, y: int) -> None:
        a, b = big(x), big(y)
        relations = [a < b, a == b, a > b]
        assert relations.count(True) == 1
