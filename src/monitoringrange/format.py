"""Number formatting for threshold ranges and performance data."""

import decimal
import math


def fmt_perf_float(value: float) -> str:
    """Formats `value` the way the plugin API expects numbers.

    Finite values are written as the shortest positional decimal that
    converts back to the same float: no exponent, no trailing zeros and
    no trailing dot, so 10.0 becomes "10" and 1e-07 becomes
    "0.0000001".

    Infinite values map onto the range grammar: positive infinity is
    the omitted upper bound (""), negative infinity is "~".
    """
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "" if value > 0 else "~"
    # repr() yields the shortest round-tripping digits, Decimal drops the exponent
    text = format(decimal.Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
