from .bound import UNBOUNDED, Bound, Exclusive, Inclusive, Unbounded, invert_bound
from .builders import (
    above,
    at_least,
    at_most,
    below,
    between,
    everything,
    from_pair,
    from_range,
    range_set,
)
from .core import RangeSet, intersection, union
from .interval import Interval
from .merge import Merger

__all__ = [
    "Bound",
    "Unbounded",
    "Inclusive",
    "Exclusive",
    "UNBOUNDED",
    "invert_bound",
    "Interval",
    "RangeSet",
    "Merger",
    "union",
    "intersection",
    "everything",
    "below",
    "at_most",
    "at_least",
    "above",
    "between",
    "from_pair",
    "from_range",
    "range_set",
]
