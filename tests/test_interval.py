import math

import pytest

from weekendtracer.interval import Interval, enclose


def test_default_is_empty():
    ival = Interval()
    assert ival == Interval.EMPTY
    assert not ival.contains(0)
    assert ival.size() == -math.inf


def test_universe_contains_everything():
    assert Interval.UNIVERSE.contains(1e300)
    assert Interval.UNIVERSE.surrounds(-1e300)
    assert Interval.UNIVERSE.size() == math.inf


def test_contains_vs_surrounds_at_bounds():
    ival = Interval(1, 3)
    assert ival.contains(1) and ival.contains(3)
    assert not ival.surrounds(1) and not ival.surrounds(3)
    assert ival.surrounds(2)
    assert not ival.contains(3.5)


def test_size():
    assert Interval(-2, 5).size() == 7


def test_clamp():
    ival = Interval(0, 1)
    assert ival.clamp(-4) == 0
    assert ival.clamp(9) == 1
    assert ival.clamp(0.25) == 0.25


def test_expand_adds_delta_to_size_symmetrically():
    ival = Interval(2, 4)
    wider = ival.expand(1)
    assert wider.size() == pytest.approx(ival.size() + 1)
    assert (wider.min + wider.max) / 2 == pytest.approx(3)


def test_enclose():
    a = Interval(0, 2)
    b = Interval(1, 5)
    assert enclose(a, b) == Interval(0, 5)
    assert enclose(b, a) == Interval(0, 5)
    assert enclose(a, Interval.EMPTY) == a


def test_displacement_both_sides():
    ival = Interval(1, 2)
    assert ival + 3 == Interval(4, 5)
    assert 3 + ival == Interval(4, 5)


def test_is_immutable():
    ival = Interval(0, 1)
    with pytest.raises(AttributeError):
        ival.min = 5
    assert ival.min == 0
    assert ival.size() == 1