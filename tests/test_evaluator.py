"""Tests for the expression evaluator."""

import pytest

from evaluator import (
    DivisionByZero,
    EmptyExpression,
    EvalError,
    MalformedExpression,
    NotFinite,
    evaluate,
    strip_trailing_operators,
    tokenize,
    try_evaluate,
)


class TestPrecedence:
    """× and ÷ bind tighter; equal precedence is left to right."""

    @pytest.mark.parametrize("expression,expected", [
        ("2+2", 4.0),
        ("2+3×4", 14.0),
        ("2×3+4", 10.0),
        ("10-4-3", 3.0),
        ("100÷10÷5", 2.0),
        ("8÷4×2", 4.0),
        ("1+2×3-4÷2", 5.0),
        ("2.5×4", 10.0),
        ("0.5+0.25", 0.75),
        ("007+1", 8.0),
    ])
    def test_values(self, expression, expected):
        assert evaluate(expression) == pytest.approx(expected)

    def test_ascii_aliases(self):
        assert evaluate("6*7") == 42.0
        assert evaluate("9/3") == 3.0
        assert evaluate("2X5") == 10.0

    def test_single_number(self):
        assert evaluate("42") == 42.0
        assert evaluate("5.") == 5.0

    def test_subtraction_can_go_negative(self):
        assert evaluate("3-10") == -7.0


class TestTrailingOperators:
    def test_trailing_operator_ignored(self):
        assert evaluate("5+") == evaluate("5") == 5.0

    def test_strip_helper(self):
        assert strip_trailing_operators("5+×") == "5"
        assert strip_trailing_operators("5") == "5"
        assert strip_trailing_operators("+") == ""


class TestErrors:
    def test_empty(self):
        with pytest.raises(EmptyExpression):
            evaluate("")

    def test_only_operators(self):
        with pytest.raises(EmptyExpression):
            evaluate("+-")

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero) as exc_info:
            evaluate("5÷0")
        assert isinstance(exc_info.value, NotFinite)
        assert exc_info.value.expression == "5÷0"

    def test_zero_divided_by_zero(self):
        with pytest.raises(DivisionByZero):
            evaluate("0÷0.0")

    def test_overflow_is_not_finite(self):
        huge = "9" * 200
        with pytest.raises(NotFinite):
            evaluate("×".join([huge] * 3))

    @pytest.mark.parametrize("expression", [
        "+5",
        "5++3",
        "1..2",
        "1.2.3",
        "5+.",
        "2^3",
        "(1+2)",
        "1e5",
        "abc",
    ])
    def test_malformed(self, expression):
        with pytest.raises(MalformedExpression):
            evaluate(expression)

    def test_all_errors_share_base(self):
        for cls in (EmptyExpression, MalformedExpression, NotFinite, DivisionByZero):
            assert issubclass(cls, EvalError)


class TestPurity:
    def test_repeated_calls_agree(self):
        expression = "1÷3+2×7"
        assert evaluate(expression) == evaluate(expression)

    def test_try_evaluate(self):
        assert try_evaluate("2×3") == 6.0
        assert try_evaluate("5÷0") is None
        assert try_evaluate("") is None


class TestTokenize:
    def test_tokens_alternate(self):
        assert tokenize("1.5+2*3") == [1.5, "+", 2.0, "×", 3.0]

    def test_leading_point_number(self):
        assert tokenize(".5") == [0.5]
