"""
Calculator Engine for PocketCalc
Owns the expression buffer and turns button presses into display strings
"""
import logging
import threading

import config
from evaluator import EvalError, evaluate, try_evaluate
from expression_buffer import (
    InvalidToken,
    append_token,
    apply_percent,
    delete_last,
    normalize_operator,
    number_segment,
)
from result_formatter import format_formula, format_result, format_result_line

logger = logging.getLogger(__name__)


class UnknownButton(ValueError):
    """Raised by Calculator.press() for a label with no action."""


class Calculator:
    def __init__(self):
        self.current_expression = ""
        self.committed_result = None
        # press() and get_state() may be called from the web portal thread
        self.lock = threading.RLock()

    # ── Entry points ─────────────────────────────────────────────────────────
    def on_digit(self, digit):
        """Append a digit (0-9)"""
        digit = str(digit)
        if len(digit) != 1 or digit not in config.DIGITS:
            raise InvalidToken(f"Not a digit: {digit!r}")
        return self._append(digit)

    def on_operator(self, operator):
        """Append or replace a binary operator"""
        if normalize_operator(operator) is None:
            raise InvalidToken(f"Not an operator: {operator!r}")
        return self._append(operator)

    def on_decimal_point(self):
        """Start the fractional part of the current number"""
        return self._append(config.DECIMAL_POINT)

    def on_delete(self):
        """Remove the last character (backspace)"""
        self.committed_result = None
        self.current_expression = delete_last(self.current_expression)
        return self.current_expression

    def on_percent(self):
        """Divide the trailing number by 100"""
        start, end = number_segment(self.current_expression)
        if start < end:
            self.committed_result = None
            self.current_expression = apply_percent(self.current_expression)
        return self.current_expression

    def on_evaluate(self):
        """Commit the result of the current expression.

        Returns the formatted result, "Error" when evaluation fails, or
        None if there is nothing to evaluate.
        """
        if not self.current_expression:
            return None
        try:
            value = evaluate(self.current_expression)
        except EvalError as e:
            logger.debug("Evaluation of %r failed: %s", self.current_expression, e)
            self.committed_result = config.ERROR_TEXT
        else:
            self.committed_result = format_result(value)
        return self.committed_result

    def clear(self):
        """Clear current expression and result"""
        with self.lock:
            self.current_expression = ""
            self.committed_result = None
            return self.current_expression

    def _append(self, token):
        updated = append_token(self.current_expression, token)
        # typing clears the previous computed result
        self.committed_result = None
        self.current_expression = updated
        return self.current_expression

    # ── Label dispatch ───────────────────────────────────────────────────────
    def press(self, label):
        """Handle a single button label and return (formula, result)"""
        label = str(label)
        with self.lock:
            self._dispatch(label)
            return self.get_formula_display(), self.get_result_display()

    def _dispatch(self, label):
        if label in config.DELETE_LABELS:
            self.on_delete()
        elif label in config.EVALUATE_LABELS:
            self.on_evaluate()
        elif label in config.CLEAR_LABELS:
            self.clear()
        elif label == config.PERCENT_LABEL:
            self.on_percent()
        elif label == config.DECIMAL_POINT:
            self.on_decimal_point()
        elif len(label) == 1 and label in config.DIGITS:
            self.on_digit(label)
        elif label in config.OPERATORS or label in config.OPERATOR_ALIASES:
            self.on_operator(label)
        else:
            raise UnknownButton(f"Unknown button label: {label!r}")

    # ── Display ──────────────────────────────────────────────────────────────
    def get_preview(self):
        """Live result of the current expression, or "" if it has none"""
        if not self.current_expression:
            return ""
        value = try_evaluate(self.current_expression)
        return "" if value is None else format_result(value)

    def get_formula_display(self):
        result = self.get_result_display()
        has_result = bool(self.current_expression) and result != ""
        return format_formula(self.current_expression, has_result)

    def get_result_display(self):
        return format_result_line(
            self.current_expression, self.committed_result, self.get_preview()
        )

    def get_expression(self):
        """Get current expression"""
        return self.current_expression

    def get_state(self):
        """Snapshot of the session for API responses"""
        with self.lock:
            return {
                'expression': self.current_expression,
                'formula': self.get_formula_display(),
                'result': self.get_result_display(),
                'committed': self.committed_result,
            }
