"""Tests for the interval and range-set builders."""

import pytest

from rangeset import UNBOUNDED, Exclusive, Inclusive, Interval, RangeSet
from rangeset.builders import (
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


def test_unbounded_shorthands():
    assert everything() == Interval(lower=UNBOUNDED, upper=UNBOUNDED)
    assert below(4) == Interval(lower=UNBOUNDED, upper=Exclusive(4))
    assert at_most(4) == Interval(lower=UNBOUNDED, upper=Inclusive(4))
    assert at_least(4) == Interval(lower=Inclusive(4), upper=UNBOUNDED)
    assert above(4) == Interval(lower=Exclusive(4), upper=UNBOUNDED)


@pytest.mark.parametrize(
    "closed, lower, upper",
    [
        ("left", Inclusive(1), Exclusive(4)),
        ("right", Exclusive(1), Inclusive(4)),
        ("both", Inclusive(1), Inclusive(4)),
        ("neither", Exclusive(1), Exclusive(4)),
    ],
)
def test_between(closed, lower, upper):
    assert between(1, 4, closed=closed) == Interval(lower=lower, upper=upper)


def test_between_defaults_to_half_open():
    assert between(1, 4) == between(1, 4, closed="left")


def test_between_rejects_unknown_option():
    with pytest.raises(ValueError, match="Invalid closed option 'open'"):
        between(1, 4, closed="open")  # type: ignore[arg-type]


def test_between_rejects_empty():
    with pytest.raises(ValueError, match="is empty"):
        between(4, 4)
    assert between(4, 4, closed="both").contains(4)


def test_expression_values():
    interval = above(5 + 5)
    assert not interval.contains(10)
    assert interval.contains(11)


def test_from_pair():
    assert from_pair((3, 10)) == between(3, 10)
    with pytest.raises(ValueError, match="Expected a \\(lower, upper\\) pair"):
        from_pair((1, 2, 3))  # type: ignore[arg-type]


def test_from_range():
    assert from_range(range(4, 8)) == between(4, 8)
    with pytest.raises(ValueError, match="step 1"):
        from_range(range(0, 10, 2))
    with pytest.raises(ValueError, match="is empty"):
        from_range(range(5, 5))


class TestRangeSet:
    def test_empty(self):
        assert range_set() == RangeSet.empty()

    def test_mixed_items(self):
        result = range_set(at_most(4), (10, 20), range(30, 40))
        assert str(result) == "{(-∞, 4], [10, 20), [30, 40)}"

    def test_sorts_input(self):
        result = range_set(between(20, 54), (3, 10))
        assert [str(i) for i in result] == ["[3, 10)", "[20, 54)"]

    def test_merges_input(self):
        assert range_set((1, 5), (3, 8), range(8, 12)) == range_set(between(1, 12))

    def test_unbound(self):
        assert range_set(everything()) == RangeSet.unbound()
        assert range_set(below(4), at_least(4)) == RangeSet.unbound()

    def test_complement_example(self):
        busy = range_set(between(9, 12), between(13, 17))
        assert str(~busy) == "{(-∞, 9), [12, 13), [17, ∞)}"

    def test_rejects_unsupported_items(self):
        with pytest.raises(TypeError, match="range_set\\(\\) items must be"):
            range_set([1, 2])  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="Examples"):
            range_set(5)  # type: ignore[arg-type]


class TestBoundaryPairs:
    def test_from_pair_takes_boundaries_as_is(self):
        """A pair of boundary objects keeps its inclusive/exclusive kinds."""
        assert from_pair((Inclusive(1), UNBOUNDED)) == at_least(1)
        assert from_pair((Exclusive(1), Inclusive(4))) == between(1, 4, closed="right")

    def test_range_set_accepts_boundary_pairs(self):
        result = range_set((Inclusive(1), UNBOUNDED))
        assert result == RangeSet([Interval(lower=Inclusive(1), upper=UNBOUNDED)])
        assert range_set((UNBOUNDED, Exclusive(4)), (4, 10)) == range_set(below(10))

    def test_empty_boundary_pair_rejected(self):
        with pytest.raises(ValueError, match="is empty"):
            from_pair((Inclusive(4), Exclusive(4)))

    def test_mixed_pair_rejected(self):
        """One boundary and one plain value is ambiguous."""
        with pytest.raises(TypeError, match="Cannot mix a boundary object"):
            from_pair((Inclusive(1), 4))
        with pytest.raises(TypeError, match="Hint"):
            range_set((1, UNBOUNDED))
