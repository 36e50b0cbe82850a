"""Role-sensitive ordering of interval boundaries.

The same boundary means different things depending on which end of an
interval it sits on. ``Inclusive(4)`` as a lower boundary starts *at* 4, but
as an upper boundary it ends just *after* 4. To compare boundaries we map
each (boundary, role) pair onto a cut point in the ordered domain:

    lower Inclusive(v), upper Exclusive(v)  ->  just before v
    lower Exclusive(v), upper Inclusive(v)  ->  just after v
    lower Unbounded                         ->  below everything
    upper Unbounded                         ->  above everything

Cuts order first by infinity, then by value, then before < after. Every
ordering question in the package goes through this module; nothing else
compares boundary values directly. Scalar values only need ``<``.
"""

from functools import cmp_to_key
from typing import Any, Callable, Literal, TypeAlias

from rangeset.bound import Bound, Exclusive, Inclusive, T, Unbounded

Role: TypeAlias = Literal["lower", "upper"]

# Infinity ranks
_BELOW_ALL = -1
_FINITE = 0
_ABOVE_ALL = 1

# Sides of a finite cut
_BEFORE = 0
_AFTER = 1


def _cut(bound: "Bound[T]", role: Role) -> tuple[int, Any, int]:
    if isinstance(bound, Unbounded):
        return (_BELOW_ALL if role == "lower" else _ABOVE_ALL), None, _BEFORE
    if isinstance(bound, Inclusive):
        return _FINITE, bound.value, (_BEFORE if role == "lower" else _AFTER)
    if isinstance(bound, Exclusive):
        return _FINITE, bound.value, (_AFTER if role == "lower" else _BEFORE)
    raise TypeError(
        f"Expected a boundary (Unbounded, Inclusive or Exclusive).\n"
        f"Got {type(bound).__name__!r}: {bound!r}"
    )


def compare(a: "Bound[T]", a_role: Role, b: "Bound[T]", b_role: Role) -> int:
    """Return -1, 0 or 1 as the cut of ``a`` is below, at or above ``b``'s.

    Two boundaries compare equal only when they denote the same cut, e.g.
    lower ``Inclusive(4)`` and upper ``Exclusive(4)``.
    """
    a_rank, a_value, a_side = _cut(a, a_role)
    b_rank, b_value, b_side = _cut(b, b_role)

    if a_rank != b_rank:
        return -1 if a_rank < b_rank else 1
    if a_rank != _FINITE:
        return 0
    if a_value < b_value:
        return -1
    if b_value < a_value:
        return 1
    if a_side != b_side:
        return -1 if a_side < b_side else 1
    return 0


def is_below(a: "Bound[T]", a_role: Role, b: "Bound[T]", b_role: Role) -> bool:
    return compare(a, a_role, b, b_role) < 0


def is_above(a: "Bound[T]", a_role: Role, b: "Bound[T]", b_role: Role) -> bool:
    return compare(a, a_role, b, b_role) > 0


def compare_lower(a: "Bound[T]", b: "Bound[T]") -> int:
    """Order two lower boundaries; ``Inclusive(v)`` sorts before ``Exclusive(v)``."""
    return compare(a, "lower", b, "lower")


def compare_upper(a: "Bound[T]", b: "Bound[T]") -> int:
    """Order two upper boundaries; ``Exclusive(v)`` sorts before ``Inclusive(v)``."""
    return compare(a, "upper", b, "upper")


def reaches(upper: "Bound[T]", lower: "Bound[T]") -> bool:
    """True if an interval ending at ``upper`` touches or overlaps one starting at ``lower``.

    Touching intervals leave no value between them, so ``[1, 3)`` reaches
    ``[3, 5)`` and ``[1, 3]`` reaches ``(3, 5)``, but ``[1, 3)`` does not
    reach ``(3, 5)`` since 3 itself is missing.
    """
    return compare(lower, "lower", upper, "upper") <= 0


def lower_below(bound: "Bound[T]", value: T) -> bool:
    """True if ``value`` is not excluded by ``bound`` acting as a lower boundary."""
    if isinstance(bound, Unbounded):
        return True
    if isinstance(bound, Inclusive):
        return not (value < bound.value)
    return bound.value < value


def upper_above(bound: "Bound[T]", value: T) -> bool:
    """True if ``value`` is not excluded by ``bound`` acting as an upper boundary."""
    if isinstance(bound, Unbounded):
        return True
    if isinstance(bound, Inclusive):
        return not (bound.value < value)
    return value < bound.value


def _interval_key(attr: str, role: Role) -> Callable[[Any], Any]:
    def cmp(left: Any, right: Any) -> int:
        return compare(getattr(left, attr), role, getattr(right, attr), role)

    return cmp_to_key(cmp)


# Sort keys for intervals
lower_key = _interval_key("lower", "lower")
upper_key = _interval_key("upper", "upper")
