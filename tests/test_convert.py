"""Tests for timestamp conversion helpers."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from timerange.convert import EPOCH, from_millis, to_millis


def test_int_passes_through():
    """Integers are already epoch milliseconds."""
    assert to_millis(1_700_000_000_123) == 1_700_000_000_123
    assert to_millis(-5) == -5


def test_aware_datetime():
    """Aware datetimes keep millisecond precision."""
    dt = datetime(2025, 1, 1, 0, 0, 0, 250_000, tzinfo=timezone.utc)

    assert to_millis(dt) == 1_735_689_600_250


def test_non_utc_zone_converts_to_same_instant():
    """The zone only changes the wall clock, not the instant."""
    pacific = datetime(2024, 12, 31, 16, 0, tzinfo=ZoneInfo("US/Pacific"))

    assert to_millis(pacific) == 1_735_689_600_000


def test_submillisecond_precision_is_truncated():
    """Microseconds below a millisecond are dropped."""
    dt = EPOCH + timedelta(microseconds=1999)

    assert to_millis(dt) == 1


def test_date_is_midnight_utc():
    """A date maps to midnight UTC."""
    assert to_millis(date(2025, 1, 1)) == 1_735_689_600_000


def test_iso_string():
    """ISO-8601 text with an offset is parsed."""
    assert to_millis("2025-01-01T00:00:01Z") == 1_735_689_601_000
    assert to_millis("2025-01-01T01:00:00+01:00") == 1_735_689_600_000


def test_naive_datetime_rejected():
    """A datetime without tzinfo is ambiguous."""
    with pytest.raises(TypeError, match="timezone-aware"):
        to_millis(datetime(2025, 1, 1))


def test_naive_iso_string_rejected():
    """ISO-8601 text without an offset is ambiguous."""
    with pytest.raises(TypeError, match="timezone-aware"):
        to_millis("2025-01-01T00:00:00")


def test_malformed_string_is_value_error():
    """Unparseable text is a bad value, not a bad type."""
    with pytest.raises(ValueError, match="ISO-8601"):
        to_millis("next tuesday")


@pytest.mark.parametrize("bad", [None, 1.5, True, [1]])
def test_unsupported_types_rejected(bad):
    """Anything else is a TypeError."""
    with pytest.raises(TypeError):
        to_millis(bad)


def test_from_millis_defaults_to_utc():
    """Without a zone the result is UTC."""
    dt = from_millis(1_735_689_600_250)

    assert dt == datetime(2025, 1, 1, 0, 0, 0, 250_000, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


def test_from_millis_with_zone():
    """A zone name localizes the result."""
    dt = from_millis(1_735_689_600_000, tz="US/Pacific")

    assert dt.hour == 16
    assert dt.day == 31
    assert to_millis(dt) == 1_735_689_600_000


def test_round_trip_through_datetime():
    """Milliseconds survive a trip through datetime."""
    for millis in (0, 1, -1, 1_735_689_600_999):
        assert to_millis(from_millis(millis)) == millis
