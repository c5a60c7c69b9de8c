"""
Result Formatter for PocketCalc
Turns raw numbers and buffers into display strings
"""
import math

import config


def format_result(value):
    """Format a number as a minimal-width decimal string.

    Integral values lose the fractional part entirely; everything else is
    rounded to MAX_FRACTION_DIGITS places and stripped of trailing zeros.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")
    if value.is_integer():
        return str(int(value))

    text = f"{value:.{config.MAX_FRACTION_DIGITS}f}"
    text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_formula(buffer, has_result=False):
    """Formula line: operators spaced out, "0" for an empty buffer."""
    if not buffer:
        return "0"
    parts = []
    for ch in buffer:
        if ch in config.OPERATORS:
            parts.append(f" {ch} ")
        else:
            parts.append(ch)
    text = "".join(parts).strip()
    if has_result:
        text += " ="
    return text


def format_result_line(buffer, committed=None, preview=""):
    """Result line: committed result, else the live preview, else blank."""
    if committed:
        return committed
    if preview:
        return preview
    return "0" if not buffer else ""
