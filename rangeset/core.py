import heapq
from collections.abc import Iterable, Iterator
from functools import reduce
from typing import Any, Generic

from typing_extensions import override

from rangeset.bound import UNBOUNDED, T, Unbounded
from rangeset.compare import (
    compare_lower,
    compare_upper,
    lower_below,
    lower_key,
    upper_above,
)
from rangeset.interval import Interval
from rangeset.merge import Merger


class RangeSet(Generic[T]):
    """A normalized set of intervals over a totally ordered domain.

    Intervals are kept sorted by lower boundary, and no two of them touch or
    overlap, so every point-set has exactly one representation and equality
    is structural. The interval tuple is immutable; ``add`` swaps in a new one.

    Only ``union`` (through the merger) and ``invert`` walk intervals to build
    new sets. ``intersection`` and ``difference`` are composed from them.
    """

    def __init__(self, intervals: Iterable[Interval[T]] = ()) -> None:
        merger: Merger[T] = Merger()
        for interval in sorted(intervals, key=lower_key):
            if merger.add(interval):
                break
        self._items: tuple[Interval[T], ...] = merger.finalize()._items

    @classmethod
    def _from_normalized(cls, items: tuple[Interval[T], ...]) -> "RangeSet[T]":
        """Wrap intervals already known to be sorted and disjoint."""
        result = cls.__new__(cls)
        result._items = items
        return result

    @classmethod
    def empty(cls) -> "RangeSet[Any]":
        return cls._from_normalized(())

    @classmethod
    def unbound(cls) -> "RangeSet[Any]":
        """The set covering the whole ordered domain."""
        return cls._from_normalized((Interval.unbound(),))

    @classmethod
    def from_unsorted(cls, intervals: Iterable[Interval[T]]) -> "RangeSet[T]":
        """Sort and merge arbitrary (possibly overlapping) intervals, O(n log n)."""
        return cls(intervals)

    def is_empty(self) -> bool:
        return not self._items

    def is_unbound(self) -> bool:
        return len(self._items) == 1 and self._items[0].is_unbound()

    def items(self) -> tuple[Interval[T], ...]:
        """The normalized intervals, in order."""
        return self._items

    def copy(self) -> "RangeSet[T]":
        return self._from_normalized(self._items)

    def contains(self, value: T) -> bool:
        for interval in self._items:
            if not lower_below(interval.lower, value):
                # Every later interval starts even higher
                break
            if upper_above(interval.upper, value):
                return True
        return False

    def add(self, interval: Interval[T]) -> None:
        """Insert ``interval`` and renormalize in one linear pass."""
        _check_interval(interval)

        if self.is_unbound():
            return

        if interval.is_unbound():
            self._items = (interval,)
            return

        if not self._items:
            self._items = (interval,)
            return

        merger: Merger[T] = Merger()
        pending: Interval[T] | None = interval

        for item in self._items:
            if pending is not None and compare_lower(pending.lower, item.lower) < 0:
                done = merger.add(pending)
                pending = None
                if done:
                    break
            if merger.add(item):
                break
        else:
            if pending is not None:
                merger.add(pending)

        self._items = merger.finalize()._items

    def union(self, other: "RangeSet[T]") -> "RangeSet[T]":
        _check_operand(other, "union")
        if other.is_empty():
            return self.copy()
        if self.is_empty():
            return other.copy()
        if self.is_unbound() or other.is_unbound():
            return RangeSet.unbound()

        merger: Merger[T] = Merger()
        # Stable: on equal lower boundaries the left interval goes first
        for interval in heapq.merge(self._items, other._items, key=lower_key):
            if merger.add(interval):
                break
        return merger.finalize()

    def invert(self) -> "RangeSet[T]":
        """Return the complement: every value this set does not contain."""
        if self.is_empty():
            return RangeSet.unbound()
        if self.is_unbound():
            return RangeSet.empty()

        gaps: list[Interval[T]] = []
        gap_lower = UNBOUNDED

        for interval in self._items:
            if isinstance(interval.lower, Unbounded):
                # Nothing below the first interval
                gap_lower = interval.upper.invert()
                continue

            gaps.append(Interval(lower=gap_lower, upper=interval.lower.invert()))

            if isinstance(interval.upper, Unbounded):
                return RangeSet._from_normalized(tuple(gaps))

            gap_lower = interval.upper.invert()

        gaps.append(Interval(lower=gap_lower, upper=UNBOUNDED))
        return RangeSet._from_normalized(tuple(gaps))

    def intersection(self, other: "RangeSet[T]") -> "RangeSet[T]":
        """Values contained in both sets: ``~(~self | ~other)``."""
        _check_operand(other, "intersection")
        return self.invert().union(other.invert()).invert()

    def difference(self, other: "RangeSet[T]") -> "RangeSet[T]":
        """Values in this set but not in ``other``: ``~(~self | other)``.

        Asymmetric: ``a.difference(b)`` is generally not ``b.difference(a)``.
        """
        _check_operand(other, "difference")
        return self.invert().union(other).invert()

    def is_disjoint(self, other: "RangeSet[T]") -> bool:
        """True if no value is contained in both sets.

        An empty set is disjoint from everything, the full domain included.
        """
        _check_operand(other, "is_disjoint")
        if self.is_empty() or other.is_empty():
            return True
        if self.is_unbound() or other.is_unbound():
            return False
        return not _any_overlap(self._items, other._items)

    def is_overlapping(self, other: "RangeSet[T]") -> bool:
        """True if at least one value is contained in both sets."""
        _check_operand(other, "is_overlapping")
        if self.is_empty() or other.is_empty():
            return False
        if self.is_unbound() or other.is_unbound():
            return True
        return _any_overlap(self._items, other._items)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Interval[T]]:
        return iter(self._items)

    def __len__(self) -> int:
        """Number of disjoint intervals (not the number of values)."""
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        return f"RangeSet({list(self._items)!r})"

    @override
    def __str__(self) -> str:
        return "{" + ", ".join(str(interval) for interval in self._items) + "}"

    def __or__(self, other: "RangeSet[T]") -> "RangeSet[T]":
        _check_operand(other, "union", "|")
        return self.union(other)

    def __and__(self, other: "RangeSet[T]") -> "RangeSet[T]":
        _check_operand(other, "intersection", "&")
        return self.intersection(other)

    def __sub__(self, other: "RangeSet[T]") -> "RangeSet[T]":
        _check_operand(other, "difference", "-")
        return self.difference(other)

    def __invert__(self) -> "RangeSet[T]":
        return self.invert()


def _check_operand(other: Any, name: str, symbol: str | None = None) -> None:
    if isinstance(other, RangeSet):
        return
    if symbol is None:
        how, call = name, f"rs.{name}(...)"
    else:
        how, call = f"{name} ({symbol})", f"rs {symbol} ..."
    if isinstance(other, Interval):
        raise TypeError(
            f"Cannot {how} a RangeSet with an Interval.\n"
            f"Got: {call} with {other}\n"
            f"Hint: wrap the interval first: RangeSet([interval])\n"
            f"      or insert it in place: rs.add(interval)"
        )
    raise TypeError(
        f"Cannot {how} a RangeSet with {type(other).__name__!r}.\n"
        f"Got: {call} with {other!r}\n"
        f"Hint: build a set first, e.g. range_set(between(4, 8))"
    )


def _check_interval(interval: Any) -> None:
    if isinstance(interval, Interval):
        return
    raise TypeError(
        f"RangeSet.add() expects an Interval.\n"
        f"Got {type(interval).__name__!r}: {interval!r}\n"
        f"Hint: build one first, e.g. rs.add(between(4, 8)),\n"
        f"      or merge several values at once: rs | range_set((4, 8), range(10, 12))"
    )


def _any_overlap(
    left: tuple[Interval[T], ...], right: tuple[Interval[T], ...]
) -> bool:
    """Two-pointer scan over sorted, disjoint sequences.

    The head that ends first cannot overlap anything after the other head,
    so it is the one to advance.
    """
    left_iter = iter(left)
    right_iter = iter(right)
    current_left = next(left_iter, None)
    current_right = next(right_iter, None)

    while current_left is not None and current_right is not None:
        if current_left.overlaps(current_right):
            return True
        if compare_upper(current_left.upper, current_right.upper) < 0:
            current_left = next(left_iter, None)
        else:
            current_right = next(right_iter, None)

    return False


def union(*sets: "RangeSet[T]") -> "RangeSet[T]":
    """Compose sets with union semantics (equivalent to chaining `|`)."""

    if not sets:
        raise ValueError(
            f"union() requires at least one RangeSet argument.\n"
            f"Example: union(set_a, set_b, set_c)"
        )

    def reducer(acc: "RangeSet[T]", nxt: "RangeSet[T]") -> "RangeSet[T]":
        return acc | nxt

    return reduce(reducer, sets)


def intersection(*sets: "RangeSet[T]") -> "RangeSet[T]":
    """Compose sets with intersection semantics (equivalent to chaining `&`)."""

    if not sets:
        raise ValueError(
            f"intersection() requires at least one RangeSet argument.\n"
            f"Example: intersection(set_a, set_b, set_c)"
        )

    def reducer(acc: "RangeSet[T]", nxt: "RangeSet[T]") -> "RangeSet[T]":
        return acc & nxt

    return reduce(reducer, sets)
