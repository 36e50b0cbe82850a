"""Tests for Interval construction, containment and rendering."""

import pytest

from rangeset import Exclusive, Inclusive, Interval
from rangeset.builders import above, at_least, at_most, below, between, everything


# --- Construction ---


class TestConstruction:
    def test_valid(self):
        interval = Interval(lower=Inclusive(4), upper=Exclusive(8))
        assert interval.lower == Inclusive(4)
        assert interval.upper == Exclusive(8)

    def test_single_point(self):
        """[4, 4] holds exactly one value."""
        interval = Interval(lower=Inclusive(4), upper=Inclusive(4))
        assert interval.contains(4)

    @pytest.mark.parametrize(
        "lower, upper",
        [
            (Inclusive(4), Exclusive(4)),
            (Exclusive(4), Inclusive(4)),
            (Exclusive(4), Exclusive(4)),
            (Inclusive(8), Inclusive(4)),
            (Exclusive(8), Exclusive(4)),
        ],
    )
    def test_empty_rejected(self, lower, upper):
        """No value satisfies both boundaries."""
        with pytest.raises(ValueError, match="is empty"):
            Interval(lower=lower, upper=upper)

    def test_plain_values_rejected(self):
        """Fields must be boundary objects, not raw values."""
        with pytest.raises(TypeError, match="must be Unbounded, Inclusive or Exclusive"):
            Interval(lower=4, upper=Exclusive(8))
        with pytest.raises(TypeError, match="Hint"):
            Interval(lower=Inclusive(4), upper=None)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            Interval(Inclusive(4), Exclusive(8))  # type: ignore[misc]

    def test_frozen(self):
        interval = between(4, 8)
        with pytest.raises(AttributeError):
            interval.lower = Inclusive(0)  # type: ignore[misc]

    def test_unbound(self):
        assert Interval.unbound().is_unbound()
        assert Interval.unbound() == everything()
        assert not at_least(3).is_unbound()
        assert not at_most(3).is_unbound()

    def test_open_interval_over_integers_is_accepted(self):
        """Emptiness is judged over a dense order."""
        assert between(3, 4, closed="neither").contains(3.5)


# --- Containment ---


class TestContains:
    def test_inclusive_start(self):
        interval = between(4, 8)
        assert interval.contains(4)
        assert 7 in interval
        assert not interval.contains(8)
        assert not interval.contains(3)

    def test_exclusive_start(self):
        interval = above(4)
        assert not interval.contains(4)
        assert interval.contains(5)
        assert 10**12 in interval

    def test_unbounded_below(self):
        assert below(0).contains(-(10**12))
        assert not below(0).contains(0)
        assert at_most(0).contains(0)

    def test_closed_right(self):
        interval = between(1, 4, closed="right")
        assert interval.contains(4)
        assert not interval.contains(1)


# --- Overlap ---


class TestOverlaps:
    def test_overlapping(self):
        assert between(1, 5).overlaps(between(3, 10))
        assert between(3, 10).overlaps(between(1, 5))

    def test_touching_is_not_overlapping(self):
        """[1, 3) and [3, 6) share no value."""
        assert not between(1, 3).overlaps(between(3, 6))
        assert not between(3, 6).overlaps(between(1, 3))

    def test_shared_endpoint(self):
        """Closed ends meeting at one value overlap on that value."""
        assert between(1, 3, closed="both").overlaps(between(3, 6))

    def test_contained(self):
        assert everything().overlaps(between(3, 6))
        assert between(0, 10).overlaps(between(3, 6))


# --- Rendering ---


class TestStr:
    def test_bounded(self):
        assert str(between(4, 8)) == "[4, 8)"
        assert str(between(1, 4, closed="right")) == "(1, 4]"
        assert str(between(1, 4, closed="both")) == "[1, 4]"
        assert str(between(1, 4, closed="neither")) == "(1, 4)"

    def test_unbounded(self):
        assert str(at_most(4)) == "(-∞, 4]"
        assert str(above(4)) == "(4, ∞)"
        assert str(everything()) == "(-∞, ∞)"

    def test_values_use_repr(self):
        """Strings render quoted so their type stays visible."""
        assert str(between("a", "c")) == "['a', 'c')"
