from .convert import from_millis, to_millis
from .core import coalesce, enclosing, overlapping
from .errors import InvalidArgumentError, InvalidRangeError, TimeRangeError
from .interval import RangeResult, TimeRange, compare, merge

__all__ = [
    "TimeRange",
    "RangeResult",
    "merge",
    "compare",
    "TimeRangeError",
    "InvalidRangeError",
    "InvalidArgumentError",
    "to_millis",
    "from_millis",
    "coalesce",
    "overlapping",
    "enclosing",
]
