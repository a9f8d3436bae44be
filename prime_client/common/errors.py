"""Errors raised by the derived-metric calculators.

Every calculator either returns its result or raises one of these; none of
them log or retry. ``MetricsError`` subclasses ``ValueError`` so callers that
already treat bad input as a ``ValueError`` keep working.
"""


class MetricsError(ValueError):
    """Base class for metric calculation failures."""


class MissingInputError(MetricsError):
    """A field the calculation needs was absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required input: {field}")


class InvalidIntervalError(MetricsError):
    """An interval ends before it starts."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Interval end {end} precedes start {start}")


class DivisionByZeroError(MetricsError):
    """A ratio was requested against a zero denominator."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must be non-zero")


class MixedTimezoneError(MetricsError):
    """One timestamp carries a UTC offset and the other does not."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(
            f"Cannot compare naive and timezone-aware timestamps: {start}, {end}"
        )
