"""Linear normalizing merger.

The merger consumes intervals in non-decreasing lower-boundary order and
coalesces every run of touching or overlapping intervals into one. It is the
only place where normalized interval sequences are produced; ``RangeSet``
construction, ``add`` and ``union`` all feed it.
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Generic

from rangeset.bound import T, Unbounded
from rangeset.compare import compare_lower, compare_upper, reaches
from rangeset.interval import Interval

if TYPE_CHECKING:
    from rangeset.core import RangeSet

logger = logging.getLogger(__name__)


class Merger(Generic[T]):
    """Stateful reducer over intervals sorted by lower boundary.

    Attributes:
        _pending: Interval currently being widened, None before the first add
        _output: Finalized intervals, sorted and pairwise disjoint
        _previous: Last interval fed, for the ordering check
        _finalized: Set once ``finalize`` has handed out the result
    """

    def __init__(self) -> None:
        self._pending: Interval[T] | None = None
        self._output: list[Interval[T]] = []
        self._previous: Interval[T] | None = None
        self._finalized: bool = False

    def add(self, interval: Interval[T]) -> bool:
        """Feed the next interval.

        Returns:
            True once the pending interval is unbounded above. Nothing fed
            afterwards can change the result, so callers may stop early.

        Raises:
            ValueError: If the merger was finalized, or ``interval`` starts
                before the interval fed previously
        """
        if self._finalized:
            raise ValueError(
                "Merger was already finalized.\n"
                "Hint: create a new Merger for each normalization pass"
            )

        previous = self._previous
        if previous is not None and compare_lower(interval.lower, previous.lower) < 0:
            logger.debug(
                "rejecting out-of-order interval %s after %s", interval, previous
            )
            raise ValueError(
                f"Intervals must be fed in non-decreasing lower-boundary order.\n"
                f"Got: {interval} after {previous}\n"
                f"Hint: sort with key=rangeset.compare.lower_key first, "
                f"or use RangeSet.from_unsorted(...)"
            )
        self._previous = interval

        pending = self._pending
        if pending is None:
            self._pending = interval
        else:
            if not reaches(pending.upper, interval.lower):
                # Gap: pending is complete
                self._output.append(pending)
                self._pending = interval
            elif compare_upper(interval.upper, pending.upper) > 0:
                self._pending = replace(pending, upper=interval.upper)

        done = isinstance(self._pending.upper, Unbounded)
        if done:
            logger.debug("pending interval %s is unbounded above", self._pending)
        return done

    def finalize(self) -> "RangeSet[T]":
        """Flush the pending interval and return the normalized set."""
        # Import at runtime to avoid circular dependency
        from rangeset.core import RangeSet

        if self._finalized:
            raise ValueError(
                "Merger was already finalized.\n"
                "Hint: create a new Merger for each normalization pass"
            )
        self._finalized = True

        if self._pending is not None:
            self._output.append(self._pending)
            self._pending = None

        return RangeSet._from_normalized(tuple(self._output))
