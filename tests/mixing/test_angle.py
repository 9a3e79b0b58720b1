import math
import pytest

from chromalab.mixing.angle import (
    mix_angle,
    mix_angle_near,
    mix_angle_far,
    mix_angle_cw,
    mix_angle_ccw,
    wrap_angle,
)
from chromalab.types.mix_types import PolarDirection

angle_tolerance = 1e-9
all_mixers = [mix_angle_near, mix_angle_far, mix_angle_cw, mix_angle_ccw]


def angle_distance(a, b, period=1.0):
    d = abs(a - b) % period
    return min(d, period - d)


@pytest.mark.parametrize("mixer", all_mixers)
def test_boundary_laws(mixer):
    for o, d in [(0.1, 0.9), (0.9, 0.1), (0.25, 0.3), (0.0, 0.5)]:
        assert mixer(o, d, 0.0) == o
        assert mixer(o, d, 1.0) == d
        assert mixer(o, d, -2.0) == o
        assert mixer(o, d, 3.0) == d


@pytest.mark.parametrize("mixer", all_mixers)
def test_equal_angles_are_idempotent(mixer):
    for h in (0.0, 0.3, 0.999):
        for t in (0.1, 0.5, 0.9):
            assert mixer(h, h, t) == h


def test_near_idempotent_across_wraparound():
    assert angle_distance(mix_angle_near(1.3, 0.3, 0.5), 0.3) < angle_tolerance


def test_near_takes_shortest_arc():
    assert angle_distance(mix_angle_near(0.9, 0.1, 0.5), 0.0) < angle_tolerance
    assert angle_distance(mix_angle_near(0.1, 0.9, 0.5), 0.0) < angle_tolerance
    assert abs(mix_angle_near(0.2, 0.4, 0.5) - 0.3) < angle_tolerance


def test_far_takes_longest_arc():
    assert abs(mix_angle_far(0.9, 0.1, 0.5) - 0.5) < angle_tolerance
    assert abs(mix_angle_far(0.2, 0.4, 0.5) - 0.8) < angle_tolerance


def test_cw_decreases_and_ccw_increases():
    assert angle_distance(mix_angle_cw(0.1, 0.9, 0.5), 0.0) < angle_tolerance
    assert abs(mix_angle_cw(0.9, 0.1, 0.5) - 0.5) < angle_tolerance
    assert angle_distance(mix_angle_ccw(0.9, 0.1, 0.5), 0.0) < angle_tolerance
    assert abs(mix_angle_ccw(0.1, 0.9, 0.5) - 0.5) < angle_tolerance
    assert abs(mix_angle_ccw(0.2, 0.4, 0.25) - 0.25) < angle_tolerance


@pytest.mark.parametrize("mixer", all_mixers)
def test_results_are_wrapped(mixer):
    for t in (0.1, 0.37, 0.5, 0.81):
        for o, d in [(0.95, 0.05), (0.05, 0.95), (-0.3, 1.6)]:
            out = mixer(o, d, t)
            assert 0.0 <= out < 1.0


def test_other_periods():
    assert angle_distance(mix_angle_near(350.0, 10.0, 0.5, 360.0), 0.0, 360.0) < angle_tolerance
    assert abs(mix_angle_far(0.0, math.pi / 2.0, 0.5, math.tau) - 5.0 * math.pi / 4.0) < angle_tolerance


def test_dispatcher_accepts_enum_and_name():
    assert mix_angle(0.9, 0.1, 0.5, 1.0, PolarDirection.FAR) == mix_angle_far(0.9, 0.1, 0.5)
    assert mix_angle(0.9, 0.1, 0.5, 1.0, "ccw") == mix_angle_ccw(0.9, 0.1, 0.5)
    assert mix_angle(0.9, 0.1, 0.5, 1.0, 2) == mix_angle_cw(0.9, 0.1, 0.5)
    with pytest.raises(ValueError):
        mix_angle(0.1, 0.2, 0.5, 1.0, "sideways")


def test_wrap_angle():
    assert wrap_angle(1.25) == 0.25
    assert wrap_angle(-0.25) == 0.75
    assert wrap_angle(-1e-18) == 0.0
    assert wrap_angle(370.0, 360.0) == 10.0
