"""Exceptions raised when a threshold range cannot be built.

All exceptions derive from :class:`RangeError`, which is itself a
:class:`ValueError`. Code that validates plugin arguments may catch
either to report a usage error instead of crashing.
"""


class RangeError(ValueError):
    """Invalid threshold range specification.

    This exception is never raised directly. Parsing either succeeds
    completely or raises one of the subclasses below; there is no
    partially initialized range.
    """

    pass


class EmptyInputError(RangeError):
    """The range specification is empty after stripping whitespace."""

    text: str

    def __init__(self, text: str) -> None:
        super().__init__("empty range specification %r" % text)
        self.text = text


class LowerBoundParseError(RangeError):
    """The part before the colon is neither a number nor "~".

    The :class:`ValueError` raised by :func:`float` is available as
    ``__cause__``.
    """

    text: str

    def __init__(self, text: str) -> None:
        super().__init__("failed to parse lower limit %r" % text)
        self.text = text


class UpperBoundParseError(RangeError):
    """The part after the colon (or the whole spec) is not a number."""

    text: str

    def __init__(self, text: str) -> None:
        super().__init__("failed to parse upper limit %r" % text)
        self.text = text


class InvalidOrderingError(RangeError):
    """The lower bound exceeds the upper bound."""

    start: float

    end: float

    def __init__(self, start: float, end: float) -> None:
        super().__init__("start %s must not be greater than end %s" % (start, end))
        self.start = start
        self.end = end
