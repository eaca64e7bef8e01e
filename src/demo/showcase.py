"""Showcase — console demonstration of the BigNum operations.

External collaborator of src.core: it only calls the public BigNum
operations and formats their results. Two modes:
- Built-in script: Addition, Subtraction, Multiplication, Division,
  Bit Shift Operations, Comparison Operations, Edge Cases
- Case file: a JSON list of operation_case payloads evaluated in order

Every result is printed as its binary literal, optionally followed by the
decimal value when it fits in 64 bits.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Final, Iterable, List, Optional

from src.core.contracts import OperationCaseValidator
from src.core.domain.bignum import U64_BITS, BigNum, Ordering
from src.core.math import (
    DivisionByZero,
    SubtractionUnderflow,
    add,
    div,
    divide,
    modulo,
    multiply,
    subtract,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

TITLE: Final[str] = "BigNum Operations Demo"

# Operator symbols for operation_case rendering
OPERATOR_SYMBOLS: Final[Dict[str, str]] = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "÷",
    "div": "÷",
    "modulo": "mod",
    "shl": "<<",
    "shr": ">>",
}

COMPARISON_SYMBOLS: Final[Dict[Ordering, str]] = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


# =============================================================================
# ENUMS
# =============================================================================


class Section(str, Enum):
    """Sections of the built-in showcase, in print order."""

    ADDITION = "Addition"
    SUBTRACTION = "Subtraction"
    MULTIPLICATION = "Multiplication"
    DIVISION = "Division"
    SHIFTS = "Bit Shift Operations"
    COMPARISON = "Comparison Operations"
    EDGE_CASES = "Edge Cases"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ShowcaseConfig:
    """Configuration of the showcase.

    a and b are the headline operands printed first and reused by the
    Addition and Subtraction sections (b - a requires b >= a).
    """

    a: int = 42
    b: int = 58
    sections: tuple[Section, ...] = tuple(Section)
    show_decimal: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ShowcaseLine:
    """One printed line; section is None for headers outside any section."""

    section: Optional[Section]
    text: str


@dataclass
class _Output:
    lines: List[ShowcaseLine] = field(default_factory=list)

    def emit(self, section: Optional[Section], text: str = "") -> None:
        self.lines.append(ShowcaseLine(section=section, text=text))


# =============================================================================
# SHOWCASE
# =============================================================================


class Showcase:
    """Runs the demonstration and collects its output lines."""

    def __init__(self, config: ShowcaseConfig | None = None):
        self.config = config or ShowcaseConfig()
        self._case_validator = OperationCaseValidator()

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def fmt(self, value: BigNum) -> str:
        """Binary literal, with the decimal value when it is exact."""
        if not self.config.show_decimal:
            return str(value)
        if len(value) > U64_BITS:
            return f"{value} (decimal: >{U64_BITS} bits)"
        return f"{value} (decimal: {value.to_u64()})"

    def render(self, lines: Iterable[ShowcaseLine] | None = None) -> str:
        """Join lines into printable text (runs the built-in script by default)."""
        if lines is None:
            lines = self.run()
        return "\n".join(line.text for line in lines)

    # -------------------------------------------------------------------------
    # Built-in script
    # -------------------------------------------------------------------------

    def run(self) -> List[ShowcaseLine]:
        """
        Run the built-in script.

        Returns:
            Output lines in print order

        Raises:
            SubtractionUnderflow: If the configured b is smaller than a
        """
        out = _Output()
        out.emit(None, TITLE)
        out.emit(None, "=" * len(TITLE))

        a = BigNum.from_u64(self.config.a)
        b = BigNum.from_u64(self.config.b)
        out.emit(None, f"a = {self.fmt(a)}")
        out.emit(None, f"b = {self.fmt(b)}")
        out.emit(None)

        steps: Dict[Section, Callable[[_Output, BigNum, BigNum], None]] = {
            Section.ADDITION: self._addition,
            Section.SUBTRACTION: self._subtraction,
            Section.MULTIPLICATION: self._multiplication,
            Section.DIVISION: self._division,
            Section.SHIFTS: self._shifts,
            Section.COMPARISON: self._comparison,
            Section.EDGE_CASES: self._edge_cases,
        }

        for section in self.config.sections:
            logger.debug("showcase section: %s", section.value)
            out.emit(section, f"{section.value}:")
            out.emit(section, "-" * (len(section.value) + 1))
            steps[section](out, a, b)
            out.emit(section)

        out.emit(None, "Demo completed successfully!")
        return out.lines

    def _addition(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.ADDITION
        out.emit(s, f"a + b = {self.fmt(add(a, b))}")

        # Carry ripples through every bit
        x, y = BigNum.from_u64(15), BigNum.from_u64(1)
        out.emit(s, f"{x} + {y} = {self.fmt(add(x, y))}")

    def _subtraction(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.SUBTRACTION
        out.emit(s, f"b - a = {self.fmt(subtract(b, a))}")

        x, y = BigNum.from_u64(100), BigNum.from_u64(37)
        out.emit(s, f"{x} - {y} = {self.fmt(subtract(x, y))}")

    def _multiplication(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.MULTIPLICATION
        for x, y in ((7, 6), (12, 15), (100, 100)):
            lhs, rhs = BigNum.from_u64(x), BigNum.from_u64(y)
            out.emit(s, f"{lhs} * {rhs} = {self.fmt(multiply(lhs, rhs))}")

    def _division(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.DIVISION
        for x, y in ((100, 7), (256, 16)):
            lhs, rhs = BigNum.from_u64(x), BigNum.from_u64(y)
            quotient, remainder = divide(lhs, rhs)
            out.emit(
                s,
                f"{lhs} ÷ {rhs} = {quotient} remainder {remainder} "
                f"(decimal: {quotient.to_u64()} remainder {remainder.to_u64()})",
            )

        lhs, rhs = BigNum.from_u64(100), BigNum.from_u64(7)
        out.emit(
            s,
            f"Using convenience methods: {lhs} ÷ {rhs} = {div(lhs, rhs).to_u64()}, "
            f"{lhs} mod {rhs} = {modulo(lhs, rhs).to_u64()}",
        )

    def _shifts(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.SHIFTS
        value = BigNum.from_u64(5)
        out.emit(s, f"Original: {self.fmt(value)}")

        left = value.shl(2)
        out.emit(s, f"Left shift by 2:  {self.fmt(left)}")
        out.emit(s, f"Right shift by 1: {self.fmt(left.shr(1))}")

    def _comparison(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.COMPARISON
        x, y, z = BigNum.from_u64(42), BigNum.from_u64(37), BigNum.from_u64(42)
        for lhs, rhs in ((x, y), (x, z)):
            out.emit(s, f"{lhs} {COMPARISON_SYMBOLS[lhs.compare(rhs)]} {rhs}")

    def _edge_cases(self, out: _Output, a: BigNum, b: BigNum) -> None:
        s = Section.EDGE_CASES
        zero, one = BigNum.zero(), BigNum.from_u64(1)
        forty_two = BigNum.from_u64(42)

        out.emit(s, f"Zero test: {zero} (is_zero: {str(zero.is_zero()).lower()})")
        out.emit(s, f"One test: {one} (is_zero: {str(one.is_zero()).lower()})")
        out.emit(s, f"0 + 42 = {self.fmt(add(zero, forty_two))}")
        out.emit(s, f"0 * 42 = {self.fmt(multiply(zero, forty_two))}")
        out.emit(s, f"123 ÷ 1 = {self.fmt(div(BigNum.from_u64(123), one))}")

    # -------------------------------------------------------------------------
    # Case files
    # -------------------------------------------------------------------------

    def evaluate_case(self, case: Dict[str, Any]) -> str:
        """
        Evaluate one operation_case payload into a printable line.

        Operation errors (zero divisor, negative difference) are reported in
        the line instead of aborting the run.

        Args:
            case: Payload matching operation_case.json

        Returns:
            Rendered result line

        Raises:
            jsonschema.ValidationError: If the payload does not match the schema
        """
        self._case_validator.validate(case)

        op = case["op"]
        lhs = BigNum.from_binary_str(case["lhs"])
        prefix = f"{case['label']}: " if "label" in case else ""

        if op in ("shl", "shr"):
            amount = case["rhs"]
            result = lhs.shl(amount) if op == "shl" else lhs.shr(amount)
            return f"{prefix}{lhs} {OPERATOR_SYMBOLS[op]} {amount} = {self.fmt(result)}"

        rhs = BigNum.from_binary_str(case["rhs"])
        if op == "compare":
            return f"{prefix}{lhs} {COMPARISON_SYMBOLS[lhs.compare(rhs)]} {rhs}"

        head = f"{prefix}{lhs} {OPERATOR_SYMBOLS[op]} {rhs} = "
        try:
            if op == "divide":
                quotient, remainder = divide(lhs, rhs)
                return f"{head}{self.fmt(quotient)} remainder {self.fmt(remainder)}"

            operations: Dict[str, Callable[[BigNum, BigNum], BigNum]] = {
                "add": add,
                "subtract": subtract,
                "multiply": multiply,
                "div": div,
                "modulo": modulo,
            }
            return head + self.fmt(operations[op](lhs, rhs))
        except (DivisionByZero, SubtractionUnderflow) as e:
            logger.debug("case %r failed: %s", case, e)
            return f"{head}error: {e}"

    def run_cases(self, cases: Iterable[Dict[str, Any]]) -> List[ShowcaseLine]:
        """Evaluate operation cases in order."""
        return [ShowcaseLine(section=None, text=self.evaluate_case(case)) for case in cases]


# =============================================================================
# CASE FILE LOADING
# =============================================================================


def load_cases(path: Path) -> List[Dict[str, Any]]:
    """
    Load and validate a JSON case file (a list of operation_case payloads).

    Args:
        path: Path to the JSON file

    Returns:
        Validated cases

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level value is not a list
        jsonschema.ValidationError: If a case does not match the schema
    """
    with open(path, "r", encoding="utf-8") as f:
        cases = json.load(f)

    if not isinstance(cases, list):
        raise ValueError(f"Case file {path} must contain a JSON list, got {type(cases).__name__}")

    validator = OperationCaseValidator()
    for case in cases:
        validator.validate(case)

    logger.debug("loaded %d cases from %s", len(cases), path)
    return cases
