"""Threshold range expressions for monitoring plugins.

Parses range specifications like "10", "10:", "~:10", "10:20" and
"@10:20", decides whether a measured value raises an alert, and writes
ranges back in their canonical textual form.
"""

from importlib import metadata

from .error import (
    EmptyInputError,
    InvalidOrderingError,
    LowerBoundParseError,
    RangeError,
    UpperBoundParseError,
)
from .format import fmt_perf_float
from .range import Range, RangeSpec, new_range_from_bounds, parse_range, to_range

__version__: str = metadata.version("monitoringrange")

__all__ = [
    "EmptyInputError",
    "InvalidOrderingError",
    "LowerBoundParseError",
    "Range",
    "RangeError",
    "RangeSpec",
    "UpperBoundParseError",
    "fmt_perf_float",
    "new_range_from_bounds",
    "parse_range",
    "to_range",
]
