"""
Tests for the demo showcase and its command line entry point

Covers:
- Built-in script output (headline operands, every section, edge cases)
- Section selection and decimal suppression
- Operation case evaluation, including reported operation errors
- Case file loading and validation
- CLI exit codes
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from typer.testing import CliRunner

import src.demo.__main__ as demo_main
from src.core.domain import BigNum
from src.core.math import SubtractionUnderflow
from src.demo import Section, Showcase, ShowcaseConfig, load_cases


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def showcase():
    """Showcase with default config."""
    return Showcase()


@pytest.fixture
def texts(showcase):
    """Text of every line of the built-in script."""
    return [line.text for line in showcase.run()]


@pytest.fixture
def case_file(tmp_path: Path):
    """Valid case file."""
    path = tmp_path / "cases.json"
    path.write_text(
        json.dumps(
            [
                {"op": "add", "lhs": "0b101", "rhs": "0b11"},
                {"op": "divide", "lhs": "0b10001", "rhs": "0b0"},
                {"op": "shl", "lhs": "0b101", "rhs": 2},
            ]
        ),
        encoding="utf-8",
    )
    return path


# =============================================================================
# BUILT-IN SCRIPT
# =============================================================================


class TestBuiltinScript:
    """Tests for Showcase.run"""

    def test_header_and_footer(self, texts):
        assert texts[0] == "BigNum Operations Demo"
        assert texts[1] == "=" * len(texts[0])
        assert texts[-1] == "Demo completed successfully!"

    def test_headline_operands(self, texts):
        assert "a = 0b101010 (decimal: 42)" in texts
        assert "b = 0b111010 (decimal: 58)" in texts

    def test_every_section_printed_in_order(self, showcase):
        lines = showcase.run()
        seen = []
        for line in lines:
            if line.section is not None and line.section not in seen:
                seen.append(line.section)
        assert seen == list(Section)

    @pytest.mark.parametrize(
        "expected",
        [
            "a + b = 0b1100100 (decimal: 100)",
            "0b1111 + 0b1 = 0b10000 (decimal: 16)",
            "b - a = 0b10000 (decimal: 16)",
            "0b1100100 - 0b100101 = 0b111111 (decimal: 63)",
            "0b111 * 0b110 = 0b101010 (decimal: 42)",
            "0b1100 * 0b1111 = 0b10110100 (decimal: 180)",
            "0b1100100 * 0b1100100 = 0b10011100010000 (decimal: 10000)",
            "0b1100100 ÷ 0b111 = 0b1110 remainder 0b10 (decimal: 14 remainder 2)",
            "0b100000000 ÷ 0b10000 = 0b10000 remainder 0b0 (decimal: 16 remainder 0)",
            "Using convenience methods: 0b1100100 ÷ 0b111 = 14, 0b1100100 mod 0b111 = 2",
            "Original: 0b101 (decimal: 5)",
            "Left shift by 2:  0b10100 (decimal: 20)",
            "Right shift by 1: 0b1010 (decimal: 10)",
            "0b101010 > 0b100101",
            "0b101010 = 0b101010",
            "Zero test: 0b0 (is_zero: true)",
            "One test: 0b1 (is_zero: false)",
            "0 + 42 = 0b101010 (decimal: 42)",
            "0 * 42 = 0b0 (decimal: 0)",
            "123 ÷ 1 = 0b1111011 (decimal: 123)",
        ],
    )
    def test_section_lines(self, texts, expected: str):
        assert expected in texts

    def test_section_selection(self):
        showcase = Showcase(ShowcaseConfig(sections=(Section.SHIFTS,)))
        sections = {line.section for line in showcase.run()}
        assert sections == {None, Section.SHIFTS}

    def test_without_decimal(self):
        showcase = Showcase(ShowcaseConfig(show_decimal=False, sections=(Section.ADDITION,)))
        texts = [line.text for line in showcase.run()]
        assert "a + b = 0b1100100" in texts
        assert not any("decimal" in text for text in texts)

    def test_b_smaller_than_a(self):
        showcase = Showcase(ShowcaseConfig(a=58, b=42))
        with pytest.raises(SubtractionUnderflow):
            showcase.run()

    def test_render_joins_lines(self, showcase):
        rendered = showcase.render()
        assert rendered.startswith("BigNum Operations Demo\n")
        assert rendered.endswith("Demo completed successfully!")


# =============================================================================
# OPERATION CASES
# =============================================================================


class TestOperationCases:
    """Tests for Showcase.evaluate_case / run_cases"""

    @pytest.mark.parametrize(
        "case,expected",
        [
            ({"op": "add", "lhs": "0b101", "rhs": "0b11"}, "0b101 + 0b11 = 0b1000 (decimal: 8)"),
            ({"op": "subtract", "lhs": "0b1010", "rhs": "0b11"}, "0b1010 - 0b11 = 0b111 (decimal: 7)"),
            ({"op": "multiply", "lhs": "0b1100", "rhs": "0b1111"}, "0b1100 * 0b1111 = 0b10110100 (decimal: 180)"),
            (
                {"op": "divide", "lhs": "0b10001", "rhs": "0b101"},
                "0b10001 ÷ 0b101 = 0b11 (decimal: 3) remainder 0b10 (decimal: 2)",
            ),
            ({"op": "div", "lhs": "0b11001", "rhs": "0b111"}, "0b11001 ÷ 0b111 = 0b11 (decimal: 3)"),
            ({"op": "modulo", "lhs": "0b11001", "rhs": "0b111"}, "0b11001 mod 0b111 = 0b100 (decimal: 4)"),
            ({"op": "shl", "lhs": "0b101", "rhs": 2}, "0b101 << 2 = 0b10100 (decimal: 20)"),
            ({"op": "shr", "lhs": "0b10100", "rhs": 2}, "0b10100 >> 2 = 0b101 (decimal: 5)"),
            ({"op": "compare", "lhs": "0b11", "rhs": "0b101"}, "0b11 < 0b101"),
            (
                {"label": "carry", "op": "add", "lhs": "0b1111", "rhs": "0b1"},
                "carry: 0b1111 + 0b1 = 0b10000 (decimal: 16)",
            ),
        ],
    )
    def test_evaluate_case(self, showcase, case, expected: str):
        assert showcase.evaluate_case(case) == expected

    def test_operands_are_normalized(self, showcase):
        line = showcase.evaluate_case({"op": "add", "lhs": "0b0001", "rhs": "0b0"})
        assert line == "0b1 + 0b0 = 0b1 (decimal: 1)"

    def test_division_by_zero_reported(self, showcase):
        line = showcase.evaluate_case({"op": "divide", "lhs": "0b1010", "rhs": "0b0"})
        assert line.startswith("0b1010 ÷ 0b0 = error: Division by zero")

    def test_underflow_reported(self, showcase):
        line = showcase.evaluate_case({"op": "subtract", "lhs": "0b11", "rhs": "0b101"})
        assert "error: Cannot subtract" in line

    def test_wide_result_skips_decimal(self, showcase):
        line = showcase.evaluate_case({"op": "shl", "lhs": "0b1", "rhs": 64})
        assert line == f"0b1 << 64 = {BigNum.from_u64(1).shl(64)} (decimal: >64 bits)"

    def test_invalid_case_raises(self, showcase):
        with pytest.raises(ValidationError):
            showcase.evaluate_case({"op": "shl", "lhs": "0b1", "rhs": "0b1"})

    def test_run_cases_keeps_order(self, showcase):
        lines = showcase.run_cases(
            [
                {"op": "add", "lhs": "0b1", "rhs": "0b1"},
                {"op": "compare", "lhs": "0b1", "rhs": "0b1"},
            ]
        )
        assert [line.text for line in lines] == [
            "0b1 + 0b1 = 0b10 (decimal: 2)",
            "0b1 = 0b1",
        ]


# =============================================================================
# CASE FILES
# =============================================================================


class TestLoadCases:
    """Tests for load_cases"""

    def test_load_valid_file(self, case_file):
        cases = load_cases(case_file)
        assert len(cases) == 3
        assert cases[0]["op"] == "add"

    def test_not_a_list(self, tmp_path: Path):
        path = tmp_path / "cases.json"
        path.write_text(json.dumps({"op": "add"}), encoding="utf-8")
        with pytest.raises(ValueError, match="JSON list"):
            load_cases(path)

    def test_invalid_case(self, tmp_path: Path):
        path = tmp_path / "cases.json"
        path.write_text(json.dumps([{"op": "add", "lhs": "0b1", "rhs": 2}]), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_cases(path)

    def test_bad_json(self, tmp_path: Path):
        path = tmp_path / "cases.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_cases(path)


# =============================================================================
# CLI
# =============================================================================


class TestCli:
    """Tests for python -m src.demo"""

    @pytest.fixture(autouse=True)
    def _quiet_logging(self, monkeypatch):
        # Keep the root logger untouched across tests
        monkeypatch.setattr(demo_main, "setup_logging", lambda debug=False: None)

    def test_builtin_script(self):
        result = CliRunner().invoke(demo_main.app, [])
        assert result.exit_code == 0
        assert "BigNum Operations Demo" in result.output
        assert "Demo completed successfully!" in result.output

    def test_no_decimal(self):
        result = CliRunner().invoke(demo_main.app, ["--no-decimal"])
        assert result.exit_code == 0
        assert "(decimal:" not in result.output

    def test_b_smaller_than_a(self):
        result = CliRunner().invoke(demo_main.app, ["--a", "58", "--b", "42"])
        assert result.exit_code == demo_main.EXIT_INVALID_CASES

    def test_case_file(self, case_file):
        result = CliRunner().invoke(demo_main.app, ["--cases", str(case_file)])
        assert result.exit_code == 0
        assert "0b101 + 0b11 = 0b1000 (decimal: 8)" in result.output
        assert "error: Division by zero" in result.output
        assert "0b101 << 2 = 0b10100 (decimal: 20)" in result.output

    def test_missing_case_file(self, tmp_path: Path):
        result = CliRunner().invoke(demo_main.app, ["--cases", str(tmp_path / "none.json")])
        assert result.exit_code == demo_main.EXIT_INVALID_CASES

    def test_invalid_case_file(self, tmp_path: Path):
        path = tmp_path / "cases.json"
        path.write_text(json.dumps([{"op": "pow", "lhs": "0b1", "rhs": "0b1"}]), encoding="utf-8")
        result = CliRunner().invoke(demo_main.app, ["--cases", str(path)])
        assert result.exit_code == demo_main.EXIT_INVALID_CASES

    def test_oversized_shift_rejected(self, tmp_path: Path):
        path = tmp_path / "cases.json"
        path.write_text(
            json.dumps([{"op": "shl", "lhs": "0b1", "rhs": 1_000_000_000_000}]), encoding="utf-8"
        )
        result = CliRunner().invoke(demo_main.app, ["--cases", str(path)])
        assert result.exit_code == demo_main.EXIT_INVALID_CASES
