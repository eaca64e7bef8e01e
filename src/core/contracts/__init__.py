"""
Contract Validation Module

Validation of the JSON contracts that carry BigNum values.
"""

from .validators import (
    LITERAL_SCHEMA_VERSION,
    MAX_SHIFT_AMOUNT,
    BigNumLiteralValidator,
    ContractValidator,
    OperationCaseValidator,
    SchemaLoader,
    bignum_from_literal,
    bignum_to_literal,
    validate_bignum_literal,
    validate_operation_case,
)

__all__ = [
    # Constants
    "LITERAL_SCHEMA_VERSION",
    "MAX_SHIFT_AMOUNT",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNumLiteralValidator",
    "OperationCaseValidator",
    # Functions
    "validate_bignum_literal",
    "validate_operation_case",
    "bignum_to_literal",
    "bignum_from_literal",
]
