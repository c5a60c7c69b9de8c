"""Tests for result and display formatting."""

import pytest

from evaluator import evaluate
from result_formatter import format_formula, format_result, format_result_line


class TestFormatResult:
    @pytest.mark.parametrize("value,expected", [
        (4.0, "4"),
        (10, "10"),
        (-3.0, "-3"),
        (0.5, "0.5"),
        (0.1 + 0.2, "0.3"),
        (2.50, "2.5"),
        (-0.0, "0"),
        (1e-12, "0"),
        (-1e-12, "0"),
        (123456789012.0, "123456789012"),
        (1e20, "100000000000000000000"),
    ])
    def test_values(self, value, expected):
        assert format_result(value) == expected

    def test_known_expressions(self):
        assert format_result(evaluate("2+2")) == "4"
        assert format_result(evaluate("2.5×4")) == "10"
        assert format_result(evaluate("1÷3")) == "0.3333333333"
        assert format_result(evaluate("2÷3")) == "0.6666666667"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            format_result(value)

    def test_no_scientific_notation(self):
        assert "e" not in format_result(1e-7)
        assert format_result(1e-7) == "0.0000001"


class TestFormatFormula:
    def test_empty_buffer(self):
        assert format_formula("") == "0"
        assert format_formula("", has_result=True) == "0"

    def test_operators_spaced(self):
        assert format_formula("12+3×4") == "12 + 3 × 4"

    def test_trailing_operator(self):
        assert format_formula("12+") == "12 +"

    def test_equals_indicator(self):
        assert format_formula("2+2", has_result=True) == "2 + 2 ="


class TestFormatResultLine:
    def test_committed_wins(self):
        assert format_result_line("2+2", committed="4", preview="5") == "4"

    def test_preview_fallback(self):
        assert format_result_line("2+2", preview="4") == "4"

    def test_blank_without_preview(self):
        assert format_result_line("5÷0") == ""

    def test_zero_for_empty_buffer(self):
        assert format_result_line("") == "0"
