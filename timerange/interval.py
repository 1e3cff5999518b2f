from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from timerange.convert import from_millis, to_millis
from timerange.errors import InvalidArgumentError, InvalidRangeError, TimeRangeError


@dataclass(frozen=True, eq=False)
class TimeRange:
    """Inclusive span [start, end] of epoch milliseconds.

    Used to group time-series samples into common buckets. Equality compares
    both bounds; ordering (<, sorted, compare) looks at start only.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    f"TimeRange {name} must be int milliseconds, "
                    f"got {type(value).__name__!r}: {value!r}\n"
                    f"Hint: Use TimeRange.from_datetimes() for calendar values"
                )
        if self.start > self.end:
            raise InvalidRangeError(
                f"TimeRange start ({self.start}) must be <= end ({self.end})"
            )

    @classmethod
    def from_datetimes(cls, start: Any, end: Any) -> "TimeRange":
        """Build a range from calendar timestamps (see convert.to_millis)."""
        return cls(start=to_millis(start), end=to_millis(end))

    @classmethod
    def create(cls, start: Any, end: Any) -> "RangeResult":
        """Build a range without raising on invalid bounds.

        Integer bounds are used as-is; anything else goes through
        convert.to_millis first.

        Returns:
            RangeResult with the range on success, or the error on failure
        """
        try:
            if isinstance(start, int) and isinstance(end, int):
                created = cls(start=start, end=end)
            else:
                created = cls.from_datetimes(start, end)
        except (TimeRangeError, TypeError, ValueError) as exc:
            return RangeResult(success=False, range=None, error=exc)
        return RangeResult(success=True, range=created, error=None)

    @property
    def start_time(self) -> datetime:
        return from_millis(self.start)

    @property
    def end_time(self) -> datetime:
        return from_millis(self.end)

    @property
    def duration_ms(self) -> int:
        return self.end - self.start

    @property
    def elapsed(self) -> timedelta:
        return timedelta(milliseconds=self.end - self.start)

    def contains(self, point: int) -> bool:
        """True if the millisecond timestamp falls within [start, end]."""
        return self.start <= point <= self.end

    def intersects_with(self, other: "TimeRange") -> bool:
        """Does this range overlap another one?

        A range that ends exactly where the other begins does not count, so
        back-to-back buckets such as [0, 10] and [10, 20] never intersect.
        """
        if not isinstance(other, TimeRange):
            raise InvalidArgumentError(
                f"intersects_with() requires a TimeRange, "
                f"got {type(other).__name__!r}: {other!r}"
            )

        # A -> self, B -> other
        return (
            # A starts before B and ends during/after B
            (self.start <= other.start and self.end > other.start)
            # B starts before A and ends during/after A
            or (other.start <= self.start and other.end > self.start)
        )

    @staticmethod
    def merge(a: "TimeRange", b: "TimeRange") -> "TimeRange":
        """Create a range spanning both inputs.

        The inputs need not intersect; any gap between them is absorbed
        into the result.
        """
        for name, value in (("a", a), ("b", b)):
            if not isinstance(value, TimeRange):
                raise InvalidArgumentError(
                    f"merge() argument {name!r} must be a TimeRange, "
                    f"got {type(value).__name__!r}: {value!r}"
                )
        return TimeRange(start=min(a.start, b.start), end=max(a.end, b.end))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeRange):
            return False
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def _start_of(self, other: Any) -> int:
        if not isinstance(other, TimeRange):
            raise InvalidArgumentError(
                f"Cannot order TimeRange against {type(other).__name__!r}: "
                f"{other!r}"
            )
        return other.start

    def __lt__(self, other: "TimeRange") -> bool:
        return self.start < self._start_of(other)

    def __le__(self, other: "TimeRange") -> bool:
        return self.start <= self._start_of(other)

    def __gt__(self, other: "TimeRange") -> bool:
        return self.start > self._start_of(other)

    def __ge__(self, other: "TimeRange") -> bool:
        return self.start >= self._start_of(other)

    def __str__(self) -> str:
        """Human-friendly string showing range and elapsed time."""
        return f"TimeRange({self.start}→{self.end}, {self.duration_ms}ms)"


@dataclass(frozen=True)
class RangeResult:
    """Result of TimeRange.create().

    Attributes:
        success: True if the range was built, False otherwise
        range: The new range if successful, None if failed
        error: The exception that occurred if failed, None if successful
    """

    success: bool
    range: TimeRange | None
    error: Exception | None


merge = TimeRange.merge


def compare(a: TimeRange, b: TimeRange) -> int:
    """Order two ranges by start: -1, 0 or 1.

    Ranges sharing a start compare as 0 even when their ends differ.
    """
    if not isinstance(a, TimeRange) or not isinstance(b, TimeRange):
        raise InvalidArgumentError(
            f"compare() requires two TimeRanges, got "
            f"{type(a).__name__!r} and {type(b).__name__!r}"
        )
    return (a.start > b.start) - (a.start < b.start)
