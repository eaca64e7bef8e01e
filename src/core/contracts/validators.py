"""
JSON Schema Contract Validators

Validation of JSON payloads that carry BigNum values across a process
boundary. Uses the jsonschema library (Draft 2020-12).

Schemas (src/core/contracts/schema/):
- bignum_literal.json: {"schema_version": "1", "value": "0b1011"}
- operation_case.json: {"op": "add", "lhs": "0b101", "rhs": "0b11"}
  (shift amounts are bounded by MAX_SHIFT_AMOUNT)

BigNum has no decimal or hexadecimal codec: the binary literal is the only
wire representation.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.bignum import BigNum

# Current version of the bignum_literal contract
LITERAL_SCHEMA_VERSION: Final[str] = "1"

# Largest shift amount an operation_case may carry ("maximum" on rhs in
# operation_case.json); bounds the bits a single case can allocate
MAX_SHIFT_AMOUNT: Final[int] = 65536


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas are shipped next to this module in the schema/ directory.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'bignum_literal')

        Returns:
            Loaded schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            jsonschema.ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True if the data matches the schema (never raises)."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Iterate over every validation error.

        Yields:
            ValidationError for each violation found
        """
        return self.validator.iter_errors(data)


class BigNumLiteralValidator(ContractValidator):
    """Validator for the bignum_literal contract."""

    def __init__(self):
        super().__init__("bignum_literal")


class OperationCaseValidator(ContractValidator):
    """Validator for the operation_case contract."""

    def __init__(self):
        super().__init__("operation_case")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bignum_literal(data: Dict[str, Any]) -> None:
    """
    Validate a bignum_literal payload.

    Raises:
        jsonschema.ValidationError: If the data does not match the schema
    """
    BigNumLiteralValidator().validate(data)


def validate_operation_case(data: Dict[str, Any]) -> None:
    """
    Validate an operation_case payload.

    Raises:
        jsonschema.ValidationError: If the data does not match the schema
    """
    OperationCaseValidator().validate(data)


def bignum_to_literal(value: BigNum) -> Dict[str, Any]:
    """
    Encode a BigNum as a bignum_literal payload.

    Args:
        value: Value to encode (rendered in normal form)

    Returns:
        {"schema_version": "1", "value": "0b..."}
    """
    return {"schema_version": LITERAL_SCHEMA_VERSION, "value": value.to_binary_str()}


def bignum_from_literal(data: Dict[str, Any]) -> BigNum:
    """
    Decode a bignum_literal payload.

    Args:
        data: Payload matching bignum_literal.json

    Returns:
        Normalized BigNum

    Raises:
        jsonschema.ValidationError: If the data does not match the schema
    """
    validate_bignum_literal(data)
    return BigNum.from_binary_str(data["value"])
