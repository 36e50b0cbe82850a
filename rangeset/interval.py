from dataclasses import dataclass
from typing import Any, Generic

from rangeset.bound import UNBOUNDED, Bound, Inclusive, T, Unbounded, is_bound
from rangeset.compare import is_below, lower_below, upper_above
from rangeset.util import NEG_INFINITY, POS_INFINITY


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    lower: "Bound[T]"
    upper: "Bound[T]"

    def __post_init__(self) -> None:
        for edge in ("lower", "upper"):
            bound = getattr(self, edge)
            if not is_bound(bound):
                raise TypeError(
                    f"Interval {edge} must be Unbounded, Inclusive or Exclusive.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Hint: wrap plain values, e.g. Interval(lower=Inclusive(4), "
                    f"upper=Exclusive(8))\n"
                    f"      or use a builder: between(4, 8)"
                )
        if not is_below(self.lower, "lower", self.upper, "upper"):
            raise ValueError(
                f"Interval {self} is empty: no value lies between "
                f"lower {self.lower!r} and upper {self.upper!r}"
            )

    @classmethod
    def unbound(cls) -> "Interval[Any]":
        """The interval covering the whole ordered domain."""
        return cls(lower=UNBOUNDED, upper=UNBOUNDED)

    def is_unbound(self) -> bool:
        return isinstance(self.lower, Unbounded) and isinstance(self.upper, Unbounded)

    def contains(self, value: T) -> bool:
        return lower_below(self.lower, value) and upper_above(self.upper, value)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def overlaps(self, other: "Interval[T]") -> bool:
        """True if at least one value lies in both intervals."""
        return is_below(self.lower, "lower", other.upper, "upper") and is_below(
            other.lower, "lower", self.upper, "upper"
        )

    def __str__(self) -> str:
        """Mathematical notation, e.g. ``[4, 8)`` or ``(-∞, 4]``."""
        if isinstance(self.lower, Unbounded):
            left = f"({NEG_INFINITY}"
        else:
            bracket = "[" if isinstance(self.lower, Inclusive) else "("
            left = f"{bracket}{self.lower.value!r}"

        if isinstance(self.upper, Unbounded):
            right = f"{POS_INFINITY})"
        else:
            bracket = "]" if isinstance(self.upper, Inclusive) else ")"
            right = f"{self.upper.value!r}{bracket}"

        return f"{left}, {right}"
