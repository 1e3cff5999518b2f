"""Exception hierarchy for timerange.

All timerange-specific exceptions inherit from TimeRangeError, and also from
the builtin they specialize so callers can catch either.
"""


class TimeRangeError(Exception):
    """Base exception for all timerange errors."""

    pass


class InvalidRangeError(TimeRangeError, ValueError):
    """A range was constructed with start after end.

    Examples:
        - TimeRange(start=20, end=10)
        - TimeRange.from_datetimes(later, earlier)
    """

    pass


class InvalidArgumentError(TimeRangeError, TypeError):
    """A required argument was missing or of an unusable type.

    Examples:
        - range.intersects_with(None)
        - merge(range, None)
        - range < 5
    """

    pass


__all__ = [
    "TimeRangeError",
    "InvalidRangeError",
    "InvalidArgumentError",
]
