"""
Domain models and value objects.

Contains the BigNum value type and its comparison result.
"""

from src.core.domain.bignum import (
    BINARY_PREFIX,
    U64_BITS,
    U64_MAX,
    BigNum,
    Ordering,
)

__all__ = [
    # Constants
    "BINARY_PREFIX",
    "U64_BITS",
    "U64_MAX",
    # BigNum model
    "BigNum",
    "Ordering",
]
