from collections.abc import Iterable, Iterator
from functools import reduce

from timerange.errors import InvalidArgumentError
from timerange.interval import TimeRange, merge


def coalesce(ranges: Iterable[TimeRange]) -> list[TimeRange]:
    """Return the ranges sorted by start with intersecting neighbours merged.

    Ranges that merely touch (one ends where the next begins) are kept
    apart, matching TimeRange.intersects_with.

    Example:
        >>> coalesce([TimeRange(5, 20), TimeRange(0, 10), TimeRange(20, 30)])
        [TimeRange(start=0, end=20), TimeRange(start=20, end=30)]
    """
    result: list[TimeRange] = []
    for current in sorted(ranges, key=lambda r: (r.start, r.end)):
        if result and result[-1].intersects_with(current):
            result[-1] = merge(result[-1], current)
        else:
            result.append(current)
    return result


def overlapping(ranges: Iterable[TimeRange], target: TimeRange) -> Iterator[TimeRange]:
    """Yield the ranges that intersect target, in input order."""
    if not isinstance(target, TimeRange):
        raise InvalidArgumentError(
            f"overlapping() target must be a TimeRange, "
            f"got {type(target).__name__!r}: {target!r}"
        )
    return (r for r in ranges if target.intersects_with(r))


def enclosing(ranges: Iterable[TimeRange]) -> TimeRange:
    """Merge all ranges into the smallest range covering every one of them."""
    items = list(ranges)
    if not items:
        raise ValueError(
            f"enclosing() requires at least one range.\n"
            f"Example: enclosing([TimeRange(0, 10), TimeRange(20, 30)])"
        )
    return reduce(merge, items)
