"""
Expression Buffer rules for PocketCalc
Validates each incoming token and returns the corrected buffer
"""
import logging
import math

import config
from result_formatter import format_result

logger = logging.getLogger(__name__)


class InvalidToken(ValueError):
    """Raised when a token is outside the calculator alphabet."""


def is_operator(ch):
    """True for one of the four canonical operators."""
    return ch in config.OPERATORS


def normalize_operator(label):
    """Map a button label (X, *, /, −, ...) to its canonical operator, or None."""
    if label in config.OPERATORS:
        return label
    return config.OPERATOR_ALIASES.get(label)


def number_segment(buffer):
    """Return the half-open (start, end) range of the trailing number segment.

    Scans backward from the end of the buffer until an operator or the
    start is found. start == end when the buffer is empty or ends with an
    operator.
    """
    end = len(buffer)
    start = end
    while start > 0 and not is_operator(buffer[start - 1]):
        start -= 1
    return start, end


def append_token(buffer, token):
    """Append one token to the buffer, keeping it well formed.

    Disallowed tokens (operator on an empty buffer, a second decimal point
    in a number) leave the buffer unchanged.
    """
    operator = normalize_operator(token)
    if operator is not None:
        if not buffer:
            logger.debug("Ignoring operator %r on empty buffer", operator)
            return buffer
        if is_operator(buffer[-1]):
            # keep only the most recent operator choice
            return buffer[:-1] + operator
        return buffer + operator

    if token == config.DECIMAL_POINT:
        start, end = number_segment(buffer)
        segment = buffer[start:end]
        if config.DECIMAL_POINT in segment:
            logger.debug("Ignoring second decimal point in %r", segment)
            return buffer
        if not segment:
            return buffer + "0" + config.DECIMAL_POINT
        return buffer + config.DECIMAL_POINT

    if len(token) == 1 and token in config.DIGITS:
        return buffer + token

    raise InvalidToken(f"Unsupported token: {token!r}")


def delete_last(buffer):
    """Remove the final character (no-op on an empty buffer)."""
    return buffer[:-1]


def apply_percent(buffer):
    """Divide the trailing number by 100 in place.

    Everything before the trailing number is left untouched, so
    "100+10" becomes "100+0.1".
    """
    start, end = number_segment(buffer)
    segment = buffer[start:end]
    if not segment:
        return buffer
    try:
        value = float(segment)
    except ValueError:
        logger.debug("Trailing segment %r is not a number", segment)
        return buffer
    if not math.isfinite(value):
        logger.debug("Trailing segment is too large for percent")
        return buffer
    return buffer[:start] + format_result(value / 100)
