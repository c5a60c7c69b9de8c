"""
Expression Evaluator for PocketCalc
Evaluates a four-operator expression without eval()
"""
import logging
import math

import config

logger = logging.getLogger(__name__)

# Operator spellings accepted by the evaluator (canonical + ASCII aliases)
_OPERATOR_MAP = dict(config.OPERATOR_ALIASES)
_OPERATOR_MAP.update({op: op for op in config.OPERATORS})


class EvalError(Exception):
    """Base class for evaluation failures."""

    def __init__(self, message, expression=""):
        super().__init__(message)
        self.expression = expression


class EmptyExpression(EvalError):
    """Nothing left to evaluate after trimming trailing operators."""


class MalformedExpression(EvalError):
    """The token sequence is not a number (operator number)* chain."""


class NotFinite(EvalError):
    """Evaluation produced infinity or NaN."""


class DivisionByZero(NotFinite):
    """A divisor evaluated to zero."""


def strip_trailing_operators(expression):
    """Drop operators typed at the end of the expression."""
    end = len(expression)
    while end > 0 and expression[end - 1] in _OPERATOR_MAP:
        end -= 1
    return expression[:end]


def tokenize(expression):
    """Split an expression into alternating number / operator tokens.

    Numbers come back as floats and operators in canonical form.
    """
    tokens = []
    number = ""
    for ch in expression:
        if ch in config.DIGITS or ch == config.DECIMAL_POINT:
            number += ch
            continue
        if ch in _OPERATOR_MAP:
            tokens.append(_parse_number(number, expression))
            tokens.append(_OPERATOR_MAP[ch])
            number = ""
            continue
        raise MalformedExpression(f"Unexpected character {ch!r}", expression)
    tokens.append(_parse_number(number, expression))
    return tokens


def _parse_number(text, expression):
    if not text or text == config.DECIMAL_POINT or text.count(config.DECIMAL_POINT) > 1:
        raise MalformedExpression(f"Invalid number {text!r}", expression)
    return float(text)


def _apply(left, operator, right, expression):
    if operator == config.ADD:
        return left + right
    if operator == config.SUBTRACT:
        return left - right
    if operator == config.MULTIPLY:
        return left * right
    if right == 0:
        raise DivisionByZero("Division by zero", expression)
    return left / right


def evaluate(expression):
    """Evaluate an expression string and return a float.

    Multiplication and division bind tighter than addition and
    subtraction; equal precedence folds left to right. Raises an
    EvalError subclass on failure.
    """
    trimmed = strip_trailing_operators(expression)
    if not trimmed:
        raise EmptyExpression("Nothing to evaluate", expression)

    tokens = tokenize(trimmed)

    # Pass 1: fold × and ÷ into terms
    terms = [tokens[0]]
    additive_ops = []
    for i in range(1, len(tokens), 2):
        operator, operand = tokens[i], tokens[i + 1]
        if operator in (config.MULTIPLY, config.DIVIDE):
            terms[-1] = _apply(terms[-1], operator, operand, expression)
        else:
            additive_ops.append(operator)
            terms.append(operand)

    # Pass 2: fold + and - across the terms
    result = terms[0]
    for operator, term in zip(additive_ops, terms[1:]):
        result = _apply(result, operator, term, expression)

    if not math.isfinite(result):
        raise NotFinite(f"Result is not finite: {result}", expression)
    return result


def try_evaluate(expression):
    """Like evaluate() but returns None instead of raising."""
    try:
        return evaluate(expression)
    except EvalError as e:
        logger.debug("Evaluation of %r failed: %s", expression, e)
        return None
