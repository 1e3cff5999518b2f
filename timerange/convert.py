"""Conversion between calendar timestamps and epoch milliseconds.

TimeRange stores its bounds as integer milliseconds since the Unix epoch
(1970-01-01 00:00:00 UTC). These helpers translate to and from the calendar
types callers usually hold.

Examples:
    >>> from datetime import datetime, timezone
    >>> to_millis(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
    1000
    >>> from_millis(1000)
    datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc)
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_millis(value: Any) -> int:
    """Convert a timestamp-like value to integer epoch milliseconds.

    Accepts:
    - int: Passed through as-is (epoch milliseconds)
    - datetime: Must be timezone-aware
    - date: Midnight UTC of that day
    - str: ISO-8601 text with an explicit offset

    Sub-millisecond precision is truncated toward negative infinity.

    Raises:
        TypeError: If value is an unsupported type, a bool, or naive
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a timestamp, got bool: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except ValueError as exc:
            raise ValueError(
                f"Could not parse {value!r} as an ISO-8601 timestamp.\n"
                f"Example: '2025-01-15T14:00:00Z'"
            ) from exc
        return _datetime_to_millis(parsed, source=value)
    if isinstance(value, datetime):
        return _datetime_to_millis(value, source=value)
    if isinstance(value, date):
        return _datetime_to_millis(
            datetime.combine(value, time.min, tzinfo=timezone.utc), source=value
        )
    raise TypeError(
        f"Timestamp must be int, datetime, date, or ISO-8601 str.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def _datetime_to_millis(dt: datetime, source: Any) -> int:
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise TypeError(
            f"Timestamp must be timezone-aware.\n"
            f"Got naive value: {source!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)\n"
            f"  # or an explicit offset in text: '2025-01-15T14:00:00+00:00'"
        )
    return (dt - EPOCH) // _ONE_MS


def from_millis(millis: int, tz: str | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime.

    Args:
        millis: Milliseconds since the Unix epoch
        tz: IANA zone name for the result; UTC when omitted

    Returns:
        A timezone-aware datetime for the same instant
    """
    dt = EPOCH + timedelta(milliseconds=millis)
    if tz is None:
        return dt
    return dt.astimezone(ZoneInfo(tz))


__all__ = ["EPOCH", "to_millis", "from_millis"]
