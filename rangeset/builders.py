"""Shorthand builders for intervals and range sets.

These helpers only construct ``Interval`` objects and hand them to
``RangeSet.from_unsorted``; they add no algebra of their own.

Example:
    >>> from rangeset import at_most, between, range_set
    >>>
    >>> busy = range_set(between(9, 12), between(13, 17))
    >>> free = ~busy
    >>> str(free)
    '{(-∞, 9), [12, 13), [17, ∞)}'
    >>> str(range_set(at_most(4), (10, 20), range(30, 40)))
    '{(-∞, 4], [10, 20), [30, 40)}'
"""

from typing import Any

from rangeset.bound import UNBOUNDED, Bound, Exclusive, Inclusive, T, is_bound
from rangeset.core import RangeSet
from rangeset.interval import Interval
from rangeset.util import DEFAULT_CLOSED, Closed

_CLOSED_OPTIONS: dict[Closed, tuple[type, type]] = {
    "left": (Inclusive, Exclusive),
    "right": (Exclusive, Inclusive),
    "both": (Inclusive, Inclusive),
    "neither": (Exclusive, Exclusive),
}


def everything() -> Interval[Any]:
    """``(-∞, ∞)``"""
    return Interval.unbound()


def below(value: T) -> Interval[T]:
    """``(-∞, value)``"""
    return Interval(lower=UNBOUNDED, upper=Exclusive(value))


def at_most(value: T) -> Interval[T]:
    """``(-∞, value]``"""
    return Interval(lower=UNBOUNDED, upper=Inclusive(value))


def at_least(value: T) -> Interval[T]:
    """``[value, ∞)``"""
    return Interval(lower=Inclusive(value), upper=UNBOUNDED)


def above(value: T) -> Interval[T]:
    """``(value, ∞)``"""
    return Interval(lower=Exclusive(value), upper=UNBOUNDED)


def between(lower: T, upper: T, closed: Closed = DEFAULT_CLOSED) -> Interval[T]:
    """
    Return the interval between two values.

    Args:
        lower: Lower endpoint value
        upper: Upper endpoint value
        closed: Which endpoints belong to the interval:
                "left" -> [lower, upper)   (default, like builtin range)
                "right" -> (lower, upper]
                "both" -> [lower, upper]
                "neither" -> (lower, upper)

    Raises:
        ValueError: If ``closed`` is unknown or the interval would be empty

    Example:
        >>> between(4, 8)
        >>> between(1, 4, closed="right")
    """
    if closed not in _CLOSED_OPTIONS:
        valid = ", ".join(repr(option) for option in _CLOSED_OPTIONS)
        raise ValueError(f"Invalid closed option {closed!r}. Valid options: {valid}")

    lower_kind, upper_kind = _CLOSED_OPTIONS[closed]
    return Interval(lower=lower_kind(lower), upper=upper_kind(upper))


def from_pair(pair: "tuple[T, T] | tuple[Bound[T], Bound[T]]") -> Interval[T]:
    """
    Interval from a ``(lower, upper)`` pair.

    Plain values give the half-open ``[a, b)``. A pair of boundary objects,
    e.g. ``(Inclusive(1), UNBOUNDED)``, is used as-is.

    Raises:
        ValueError: If ``pair`` does not hold exactly two items
        TypeError: If only one of the two items is a boundary object
    """
    if len(pair) != 2:
        raise ValueError(
            f"Expected a (lower, upper) pair.\n"
            f"Got {len(pair)} values: {pair!r}"
        )
    lower, upper = pair
    if is_bound(lower) and is_bound(upper):
        return Interval(lower=lower, upper=upper)
    if is_bound(lower) or is_bound(upper):
        raise TypeError(
            f"Cannot mix a boundary object and a plain value in one pair.\n"
            f"Got: {pair!r}\n"
            f"Hint: use two boundaries, e.g. (Inclusive(1), UNBOUNDED),\n"
            f"      or two plain values, e.g. (1, 4)"
        )
    return between(lower, upper)


def from_range(value: range) -> Interval[int]:
    """Half-open ``[start, stop)`` from a builtin ``range`` with step 1."""
    if value.step != 1:
        raise ValueError(
            f"Only ranges with step 1 describe a contiguous interval.\n"
            f"Got {value!r} (step {value.step})"
        )
    return between(value.start, value.stop)


def _coerce(item: Any) -> Interval[Any]:
    if isinstance(item, Interval):
        return item
    if isinstance(item, range):
        return from_range(item)
    if isinstance(item, tuple):
        return from_pair(item)
    raise TypeError(
        f"range_set() items must be Interval, (lower, upper) tuple or range.\n"
        f"Got {type(item).__name__!r}: {item!r}\n"
        f"Examples:\n"
        f"  range_set(between(4, 8))  # Interval\n"
        f"  range_set((4, 8))  # [4, 8)\n"
        f"  range_set((Inclusive(4), UNBOUNDED))  # [4, ∞)\n"
        f"  range_set(range(4, 8))  # [4, 8)"
    )


def range_set(
    *items: "Interval[T] | tuple[T, T] | tuple[Bound[T], Bound[T]] | range",
) -> RangeSet[T]:
    """
    Build a normalized set from intervals, pairs and ranges in any order.

    Example:
        >>> range_set(between(20, 54), (3, 10))
        >>> range_set(below(4), above(10))
        >>> range_set((Inclusive(1), UNBOUNDED))
    """
    return RangeSet.from_unsorted(_coerce(item) for item in items)
