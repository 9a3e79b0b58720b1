import math
import numpy as np
import pytest

from chromalab.types.color_types import as_channel_array, join_alpha, split_alpha
from chromalab.types.mix_types import (
    GradientEasing,
    PolarDirection,
    to_gradient_easing,
    to_polar_direction,
)
from chromalab.utils import fmt, to_uint, value_or_default, wrap_period


def test_wrap_period():
    assert wrap_period(0.25) == 0.25
    assert wrap_period(-0.25) == 0.75
    assert wrap_period(3.5, 2.0) == 1.5
    assert wrap_period(-1e-18) == 0.0
    assert wrap_period(-math.tau, math.tau) == 0.0


def test_to_uint():
    assert to_uint(0.5, 255, 255) == 128
    assert to_uint(0.498, 255, 255) == 127
    assert to_uint(-3.0, 255, 255) == 0
    assert to_uint(3.0, 255, 255) == 255
    assert to_uint(float("nan"), 255, 255) == 0
    assert to_uint(float("-inf"), 255, 255) == 0


def test_fmt():
    assert fmt(1.0) == "1.0000"
    assert fmt(-0.123456) == "-0.1235"
    assert fmt(2.5, 1) == "2.5"


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0


def test_direction_coercion():
    assert to_polar_direction("near") is PolarDirection.NEAR
    assert to_polar_direction("CW") is PolarDirection.CW
    assert to_polar_direction(3) is PolarDirection.CCW
    assert to_polar_direction(PolarDirection.FAR) is PolarDirection.FAR
    with pytest.raises(ValueError):
        to_polar_direction("up")
    with pytest.raises(ValueError):
        to_polar_direction(9)


def test_easing_coercion():
    assert to_gradient_easing("LAB") is GradientEasing.LAB
    assert to_gradient_easing(GradientEasing.CCW) is GradientEasing.CCW
    with pytest.raises(ValueError):
        to_gradient_easing("oklab")


def test_channel_array_helpers():
    arr = as_channel_array([[0.1, 0.2, 0.3, 0.4]])
    base, alpha = split_alpha(arr)
    assert base.shape == (1, 3)
    assert alpha.shape == (1,)
    assert np.array_equal(join_alpha(base, alpha), arr)
    base, alpha = split_alpha(as_channel_array([0.1, 0.2, 0.3]))
    assert alpha is None
    with pytest.raises(ValueError):
        as_channel_array(0.5)
