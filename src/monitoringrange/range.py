"""Threshold ranges as defined by the monitoring plugin guidelines.

A range is written as "[@][start:][end]". "start:" may be omitted if
start is 0. "~:" means that start is negative infinity. If `end` is
omitted, infinity is assumed. Prefixing the expression with "@" inverts
the match condition: an alert is raised for values inside the range
instead of outside.

See
https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/definitions/01.range_expressions.md
for details.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import typing

import typing_extensions

from .error import (
    EmptyInputError,
    InvalidOrderingError,
    LowerBoundParseError,
    RangeError,
    UpperBoundParseError,
)
from .format import fmt_perf_float

_log = logging.getLogger(__name__)

DEFAULT_START: float = 0.0

DEFAULT_END: float = math.inf

# Tabs are not stripped.
_WHITESPACE = " \r\n"


RangeSpec = typing.Union[str, int, float, "Range"]


@dataclasses.dataclass(frozen=True, repr=False)
class Range:
    """Represents a threshold range.

    Ranges are closed intervals: both `start` and `end` belong to the
    range. Instances are immutable and are usually created with
    :meth:`parse` or :meth:`from_bounds`. Passing the fields directly
    skips all validation.
    """

    start: float = DEFAULT_START

    end: float = DEFAULT_END

    alert_on_inside: bool = False

    @classmethod
    def parse(cls, spec: str) -> typing_extensions.Self:
        """Creates a Range from its textual form.

        :param spec: range specification like "10", "10:", "~:10",
            "10:20" or "@10:20"
        :raises EmptyInputError: if `spec` is empty or only whitespace
        :raises LowerBoundParseError: if the start is not a number
        :raises UpperBoundParseError: if the end is not a number
        :raises InvalidOrderingError: if start is greater than end
        """
        try:
            start, end, alert_on_inside = cls._parse(spec)
        except RangeError as exc:
            _log.debug("rejected range %r: %s", spec, exc)
            raise
        _log.debug("parsed range %r from %r", (start, end, alert_on_inside), spec)
        return cls(start, end, alert_on_inside)

    @classmethod
    def from_bounds(cls, start: float, end: float) -> typing_extensions.Self:
        """Creates a non-inverted Range from two numbers.

        The bounds are written as "start:end" and parsed again, so the
        same validation applies as for textual ranges.
        """
        return cls.parse("%s:%s" % (fmt_perf_float(start), fmt_perf_float(end)))

    @staticmethod
    def _parse(spec: str) -> tuple[float, float, bool]:
        start = DEFAULT_START
        end = DEFAULT_END
        alert_on_inside = False
        rest = spec.strip(_WHITESPACE)
        if rest == "":
            raise EmptyInputError(spec)
        if rest[0] == "@":
            alert_on_inside = True
            rest = rest[1:]
        pos = rest.find(":")
        if pos > -1:
            if rest[0] == "~":
                start = -math.inf
            else:
                start = Range._parse_atom(rest[:pos], LowerBoundParseError)
            rest = rest[pos + 1 :]
        if rest != "":
            end = Range._parse_atom(rest, UpperBoundParseError)
        if start > end:
            raise InvalidOrderingError(start, end)
        return start, end, alert_on_inside

    @staticmethod
    def _parse_atom(atom: str, error: type[RangeError]) -> float:
        # float() also takes "1_000", inner whitespace and non-ASCII digits
        if not atom.isascii() or "_" in atom or any(c.isspace() for c in atom):
            raise error(atom)
        try:
            value = float(atom)
        except ValueError as exc:
            raise error(atom) from exc
        # Infinite bounds are spelled "~" and an omitted end.
        if not math.isfinite(value):
            raise error(atom)
        return value

    def check(self, value: float) -> bool:
        """Decides if `value` should raise an alert.

        :returns: `True` if the value is outside the range for normal
            ranges, or inside the range for inverted ("@") ranges.

        Comparisons with NaN are false, so NaN counts as outside.
        """
        if self.start <= value <= self.end:
            return self.alert_on_inside
        return not self.alert_on_inside

    def check_int(self, value: int) -> bool:
        """Same as :meth:`check` for signed integers."""
        return self.check(float(value))

    def check_uint(self, value: int) -> bool:
        """Same as :meth:`check` for unsigned integers.

        There is no range check: negative values are compared as they are.
        """
        return self.check(float(value))

    def match(self, value: float) -> bool:
        """Decides if `value` is acceptable.

        This is the opposite of :meth:`check`. Also available as `in`
        operator.
        """
        return not self.check(value)

    def __contains__(self, value: float) -> bool:
        return self.match(value)

    def inverted(self) -> Range:
        """Copy of this range with the "@" flag flipped."""
        return dataclasses.replace(self, alert_on_inside=not self.alert_on_inside)

    def _format(self, omit_zero_start: bool = True, marker: bool = True) -> str:
        result: list[str] = []
        if marker and self.alert_on_inside:
            result.append("@")
        if not math.isnan(self.start) and (not omit_zero_start or self.start != 0):
            result.append("%s:" % fmt_perf_float(self.start))
        if not math.isnan(self.end):
            result.append(fmt_perf_float(self.end))
        return "".join(result)

    def render(self) -> str:
        """Canonical range specification, accepted by :meth:`parse`."""
        return self._format()

    def __str__(self) -> str:
        return self._format()

    def __repr__(self) -> str:
        """Parseable range specification."""
        return "Range(%r)" % str(self)

    @property
    def violation(self) -> str:
        """Human-readable description why a value raises an alert."""
        if self.alert_on_inside:
            return "inside range {0}".format(self._format(False, False))
        return "outside range {0}".format(self._format(False, False))


def parse_range(spec: str) -> Range:
    """Module-level shortcut for :meth:`Range.parse`."""
    return Range.parse(spec)


def new_range_from_bounds(start: float, end: float) -> Range:
    """Module-level shortcut for :meth:`Range.from_bounds`."""
    return Range.from_bounds(start, end)


def to_range(spec: typing.Optional[RangeSpec] = None) -> Range:
    """Converts a threshold argument into a Range.

    :param spec: may be a Range (returned as is), a string (parsed), a
        number `n` (the range "0:n"), or None (the default range "0:",
        which never alerts).
    :raises TypeError: for any other type
    """
    if spec is None:
        return Range()
    if isinstance(spec, Range):
        return spec
    if isinstance(spec, str):
        return Range.parse(spec)
    if isinstance(spec, (int, float)) and not isinstance(spec, bool):
        return Range.from_bounds(DEFAULT_START, spec)
    raise TypeError("cannot build a range from %r" % (spec,))
