"""
BigNum — Arbitrary-precision unsigned integer on an explicit bit vector

Immutable Pydantic model holding the binary digits of a non-negative integer,
least-significant bit first (bit 0 is the ones place). There is no sign and
no fixed width: the value grows to whatever bit length an operation needs.

Representation & core operations:
- Construction from a fixed-width unsigned value, a raw bit sequence or a
  binary literal
- Normalization, zero test, bit length
- Left/right shifts
- Three-way comparison
- Binary rendering ("0b" prefix, most-significant bit first)

Arithmetic lives in src.core.math (addition, subtraction, multiplication,
division); the methods and operators below delegate to it.

CRITICAL INVARIANTS:
1. bits is never empty; zero is exactly (False,)
2. Normal form: the most significant bit is True, except for zero
3. Every operation that escapes this type returns a normalized value
   (from_bits is the only exception: it stages raw intermediate results)
4. Values are never mutated; every operation returns a new BigNum
5. Equality and hashing go by value (normalized bits), never by raw storage
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final, Iterable

from pydantic import BaseModel, Field, StrictBool

if TYPE_CHECKING:
    from src.core.math.division import DivisionResult


# =============================================================================
# CONSTANTS
# =============================================================================

# Width of the fixed-size unsigned integer used at the conversion boundary
U64_BITS: Final[int] = 64

# Largest value accepted by from_u64
U64_MAX: Final[int] = (1 << U64_BITS) - 1

# Prefix of the textual binary rendering
BINARY_PREFIX: Final[str] = "0b"


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Result of a three-way comparison"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# BIGNUM MODEL
# =============================================================================


class BigNum(BaseModel):
    """
    Non-negative integer of unbounded magnitude.

    Immutable model (frozen=True): arithmetic always builds a fresh result,
    so instances can be shared and read concurrently without locking.
    """

    bits: tuple[StrictBool, ...] = Field(
        ..., min_length=1, description="Binary digits, least-significant bit first"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> BigNum:
        """Single-bit zero representation."""
        return cls(bits=(False,))

    @classmethod
    def from_u64(cls, value: int) -> BigNum:
        """
        Convert a fixed-width unsigned 64-bit value.

        Extracts the low bit and shifts right until the value is exhausted.

        Args:
            value: Integer in [0, U64_MAX]

        Returns:
            Normalized BigNum

        Raises:
            ValueError: If value is outside the unsigned 64-bit range

        Examples:
            >>> BigNum.from_u64(5).bits
            (True, False, True)
            >>> BigNum.from_u64(0).bits
            (False,)
        """
        if value < 0 or value > U64_MAX:
            raise ValueError(f"value {value} outside unsigned 64-bit range [0, {U64_MAX}]")

        if value == 0:
            return cls.zero()

        bits = []
        while value > 0:
            bits.append(value & 1 == 1)
            value >>= 1

        return cls(bits=tuple(bits))

    @classmethod
    def from_bits(cls, bits: Iterable[bool]) -> BigNum:
        """
        Staging constructor: store a raw bit sequence as given.

        The sequence is NOT normalized. Arithmetic uses this to wrap a freshly
        built buffer and normalizes explicitly before returning it. Equality,
        hashing and ordering still go by value: a staged value equals its
        normalized form, but .bits and len() expose the raw sequence.

        Args:
            bits: Binary digits, least-significant bit first (at least one)

        Returns:
            BigNum wrapping exactly these bits

        Raises:
            pydantic.ValidationError: If the sequence is empty or not boolean
        """
        return cls(bits=tuple(bits))

    @classmethod
    def from_binary_str(cls, text: str) -> BigNum:
        """
        Parse a binary literal such as "0b1011" (inverse of str()).

        Deliberately more permissive than the bignum_literal wire contract
        (which requires a lowercase "0b" prefix and single underscores between
        digits): the prefix is optional and case-insensitive, surrounding
        whitespace is ignored and underscores are dropped wherever they appear.
        Payloads are validated against the contract before reaching here.

        Args:
            text: Binary digits, most-significant bit first

        Returns:
            Normalized BigNum

        Raises:
            ValueError: If the text contains no digits or a non-binary digit
        """
        digits = text.strip()
        if digits[: len(BINARY_PREFIX)].lower() == BINARY_PREFIX:
            digits = digits[len(BINARY_PREFIX) :]
        digits = digits.replace("_", "")

        if not digits:
            raise ValueError(f"Binary literal has no digits: {text!r}")

        invalid = set(digits) - {"0", "1"}
        if invalid:
            raise ValueError(
                f"Binary literal {text!r} contains non-binary digits: {''.join(sorted(invalid))}"
            )

        return cls.from_bits(ch == "1" for ch in reversed(digits)).normalize()

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_u64(self) -> int:
        """
        Convert to an unsigned 64-bit value. TRUNCATING, not checked.

        Folds bits 0..63; bits at index 64 and above are silently discarded,
        so the result equals the value modulo 2**64. This lossy behaviour is
        intentional and never raises.

        Returns:
            Integer in [0, U64_MAX]
        """
        result = 0
        for i, bit in enumerate(self.bits[:U64_BITS]):
            if bit:
                result |= 1 << i
        return result

    def to_binary_str(self) -> str:
        """Binary literal of the normalized value, most-significant bit first."""
        bits = self.normalize().bits
        return BINARY_PREFIX + "".join("1" if bit else "0" for bit in reversed(bits))

    # -------------------------------------------------------------------------
    # Core operations
    # -------------------------------------------------------------------------

    def bit_length(self) -> int:
        """Number of stored bits (equals the magnitude only when normalized)."""
        return len(self.bits)

    def normalize(self) -> BigNum:
        """
        Strip high-order False bits, keeping at least one bit.

        Idempotent: a normalized value comes back unchanged.

        Returns:
            Normalized BigNum
        """
        end = len(self.bits)
        while end > 1 and not self.bits[end - 1]:
            end -= 1

        if end == len(self.bits):
            return self
        return BigNum.from_bits(self.bits[:end])

    def is_zero(self) -> bool:
        """True iff every bit is False (valid before or after normalization)."""
        return not any(self.bits)

    def shl(self, n: int) -> BigNum:
        """
        Left shift by n positions (multiply by 2**n).

        Args:
            n: Shift amount (>= 0)

        Returns:
            self if the value is zero or n == 0, otherwise a new normalized BigNum

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Shift amount must be non-negative, got {n}")

        if self.is_zero() or n == 0:
            return self

        return BigNum.from_bits((False,) * n + self.bits).normalize()

    def shr(self, n: int) -> BigNum:
        """
        Right shift by n positions (floor division by 2**n).

        Args:
            n: Shift amount (>= 0)

        Returns:
            self if the value is zero or n == 0, zero if n >= bit length,
            otherwise a new normalized BigNum

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Shift amount must be non-negative, got {n}")

        if self.is_zero() or n == 0:
            return self

        if n >= len(self.bits):
            return BigNum.zero()

        return BigNum.from_bits(self.bits[n:]).normalize()

    def compare(self, other: BigNum) -> Ordering:
        """
        Three-way comparison.

        Both operands are normalized internally (copies, never the caller's
        values); bit lengths are compared first, then bits from the most
        significant end down to the first difference.

        Args:
            other: Value to compare against

        Returns:
            Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

        Raises:
            TypeError: If other is not a BigNum
        """
        if not isinstance(other, BigNum):
            raise TypeError(f"Cannot compare BigNum with {type(other).__name__}")

        lhs = self.normalize().bits
        rhs = other.normalize().bits

        if len(lhs) != len(rhs):
            return Ordering.GREATER if len(lhs) > len(rhs) else Ordering.LESS

        for i in range(len(lhs) - 1, -1, -1):
            if lhs[i] != rhs[i]:
                return Ordering.GREATER if lhs[i] else Ordering.LESS

        return Ordering.EQUAL

    # -------------------------------------------------------------------------
    # Arithmetic (delegates to src.core.math)
    # -------------------------------------------------------------------------

    def _require_bignum(self, other: object, op: str) -> None:
        if not isinstance(other, BigNum):
            raise TypeError(f"Unsupported operand for {op}: BigNum and {type(other).__name__}")

    def add(self, other: BigNum) -> BigNum:
        from src.core.math.addition import add

        self._require_bignum(other, "add")
        return add(self, other)

    def subtract(self, other: BigNum) -> BigNum:
        """Checked subtraction; raises SubtractionUnderflow if self < other."""
        from src.core.math.subtraction import subtract

        self._require_bignum(other, "subtract")
        return subtract(self, other)

    def multiply(self, other: BigNum) -> BigNum:
        from src.core.math.multiplication import multiply

        self._require_bignum(other, "multiply")
        return multiply(self, other)

    def divide(self, other: BigNum) -> DivisionResult:
        """(quotient, remainder); raises DivisionByZero for a zero divisor."""
        from src.core.math.division import divide

        self._require_bignum(other, "divide")
        return divide(self, other)

    def div(self, other: BigNum) -> BigNum:
        from src.core.math.division import div

        self._require_bignum(other, "div")
        return div(self, other)

    def modulo(self, other: BigNum) -> BigNum:
        from src.core.math.division import modulo

        self._require_bignum(other, "modulo")
        return modulo(self, other)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------
    # Mixed-type operands get NotImplemented so Python raises TypeError;
    # ints are never coerced.

    def __eq__(self, other: object) -> bool:
        # Value equality: staged (unnormalized) bits equal their normal form
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.normalize().bits == other.normalize().bits

    def __hash__(self) -> int:
        return hash(self.normalize().bits)

    def __add__(self, other: BigNum) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: BigNum) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: BigNum) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: BigNum) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.div(other)

    def __mod__(self, other: BigNum) -> BigNum:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.modulo(other)

    def __divmod__(self, other: BigNum) -> DivisionResult:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.divide(other)

    def __lshift__(self, n: int) -> BigNum:
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.shl(n)

    def __rshift__(self, n: int) -> BigNum:
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.shr(n)

    def __lt__(self, other: BigNum) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: BigNum) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: BigNum) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: BigNum) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __len__(self) -> int:
        return self.bit_length()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_binary_str()

    def __repr__(self) -> str:
        return f"BigNum({self.to_binary_str()})"
