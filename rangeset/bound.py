"""Interval boundaries.

A boundary is one endpoint of an interval: either ``Unbounded`` or a value
tagged ``Inclusive``/``Exclusive``. Boundaries carry no role of their own;
whether one acts as a lower or upper endpoint is decided by the interval
holding it (see ``rangeset.compare``).
"""

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeAlias, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass(frozen=True)
class Unbounded:
    """No limit on this side of the interval."""

    def invert(self) -> "Unbounded":
        return self


@dataclass(frozen=True)
class Inclusive(Generic[T]):
    value: T

    def invert(self) -> "Exclusive[T]":
        return Exclusive(self.value)


@dataclass(frozen=True)
class Exclusive(Generic[T]):
    value: T

    def invert(self) -> Inclusive[T]:
        return Inclusive(self.value)


Bound: TypeAlias = Unbounded | Inclusive[T] | Exclusive[T]

UNBOUNDED = Unbounded()


def invert_bound(bound: "Bound[T]") -> "Bound[T]":
    """Flip inclusive and exclusive; ``Unbounded`` stays unbounded.

    Inverting keeps the cut point while swapping its role, so the inverted
    upper boundary of one interval is the lower boundary of the gap after it.
    """
    return bound.invert()


def is_bound(value: Any) -> bool:
    return isinstance(value, (Unbounded, Inclusive, Exclusive))
