import pytest

from chromalab.colors.rgb import Rgb
from chromalab.colors.lab import Lab
from chromalab.colors.lch import Lch
from chromalab.colors import lab as lab_ops
from chromalab.mixing.mix import (
    mix,
    mix_gamma_rgb,
    mix_lab,
    mix_lab_polar,
    mix_lch,
    mix_linear_rgb,
)
from chromalab.types.mix_types import GradientEasing, PolarDirection

mix_tolerance = 1e-9


def hue_distance(h1, h2):
    d = abs(h1 - h2) % 1.0
    return min(d, 1.0 - d)


rgb_pair = (Rgb(0.9, 0.1, 0.3, 1.0), Rgb(0.2, 0.8, 0.4, 0.5))
lab_pair = (Lab(40.0, 50.0, -20.0, 1.0), Lab(80.0, -30.0, 40.0, 0.25))
lch_pair = (Lch(40.0, 50.0, 0.9, 1.0), Lch(80.0, 30.0, 0.2, 0.25))


@pytest.mark.parametrize("mixer, pair", [
    (mix_linear_rgb, rgb_pair),
    (mix_gamma_rgb, rgb_pair),
    (mix_lab, lab_pair),
    (mix_lab_polar, lab_pair),
    (mix_lch, lch_pair),
    (mix, lab_pair),
])
def test_boundary_laws(mixer, pair):
    o, d = pair
    assert mixer(o, d, 0.0) == o
    assert mixer(o, d, 1.0) == d


@pytest.mark.parametrize("direction", list(PolarDirection))
def test_polar_boundary_laws_for_every_direction(direction):
    o, d = lch_pair
    assert mix_lch(o, d, 0.0, direction) == o
    assert mix_lch(o, d, 1.0, direction) == d
    o, d = lab_pair
    assert mix_lab_polar(o, d, 0.0, direction) == o
    assert mix_lab_polar(o, d, 1.0, direction) == d


@pytest.mark.parametrize("easing", list(GradientEasing))
def test_mix_dispatcher_boundary_laws(easing):
    o, d = lab_pair
    assert mix(o, d, 0.0, easing) == o
    assert mix(o, d, 1.0, easing) == d


def test_mix_linear_rgb_midpoint():
    out = mix_linear_rgb(Rgb(0.0, 0.0, 0.0, 0.0), Rgb(1.0, 0.5, 0.25, 1.0), 0.5)
    assert out.is_close(Rgb(0.5, 0.25, 0.125, 0.5), mix_tolerance)


def test_mix_gamma_rgb_mixes_in_linear_light():
    out = mix_gamma_rgb(Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0), 0.5)
    # Half linear light encodes to about 0.7354 in gamma
    assert abs(out.r - 0.735357) < 1e-5
    assert out.r == out.g == out.b


def test_mix_lab_is_componentwise():
    o, d = lab_pair
    out = mix_lab(o, d, 0.25)
    assert out.is_close(Lab(50.0, 30.0, -5.0, 0.8125), mix_tolerance)


def test_mix_lch_black_to_white_stays_gray():
    out = mix_lch(Lch(0.0, 0.0, 0.0), Lch(100.0, 0.0, 0.0), 0.5)
    assert out == Lch(50.0, 0.0, 0.0, 1.0)


def test_mix_lch_one_gray_side_keeps_other_hue():
    out = mix_lch(Lch(50.0, 0.0, 0.0), Lch(50.0, 40.0, 0.25), 0.5)
    assert abs(out.l - 50.0) < mix_tolerance
    assert abs(out.c - 20.0) < mix_tolerance
    assert hue_distance(out.h, 0.25) < mix_tolerance

    out = mix_lch(Lch(70.0, 40.0, 0.6, 0.5), Lch(30.0, 0.0005, 0.1, 1.0), 0.25)
    assert abs(out.c - 30.0) < mix_tolerance
    assert hue_distance(out.h, 0.6) < mix_tolerance
    assert abs(out.alpha - 0.625) < mix_tolerance


def test_mix_lch_directions():
    o = Lch(50.0, 40.0, 0.9)
    d = Lch(50.0, 40.0, 0.1)
    assert hue_distance(mix_lch(o, d, 0.5, PolarDirection.NEAR).h, 0.0) < mix_tolerance
    assert abs(mix_lch(o, d, 0.5, PolarDirection.FAR).h - 0.5) < mix_tolerance
    assert abs(mix_lch(o, d, 0.5, PolarDirection.CW).h - 0.5) < mix_tolerance
    assert hue_distance(mix_lch(o, d, 0.5, "ccw").h, 0.0) < mix_tolerance


def test_mix_lab_polar_preserves_chroma_on_equal_chroma():
    o = Lab(50.0, 40.0, 0.0)
    d = Lab(50.0, 0.0, 40.0)
    out = mix_lab_polar(o, d, 0.5)
    assert abs(lab_ops.chroma(out) - 40.0) < mix_tolerance
    assert abs(lab_ops.hue(out) - 0.125) < mix_tolerance
    # Rectangular mixing cuts the corner and loses chroma
    assert lab_ops.chroma(mix_lab(o, d, 0.5)) < 40.0


def test_mix_lab_polar_falls_back_to_lab_for_gray():
    o = Lab(20.0, 0.0, 0.0)
    d = Lab(80.0, 30.0, -30.0)
    assert mix_lab_polar(o, d, 0.3) == mix_lab(o, d, 0.3)
    assert mix_lab_polar(d, o, 0.3, PolarDirection.FAR) == mix_lab(d, o, 0.3)


def test_mix_dispatcher_routes_easing():
    o, d = lab_pair
    assert mix(o, d, 0.4) == mix_lab(o, d, 0.4)
    assert mix(o, d, 0.4, GradientEasing.FAR) == mix_lab_polar(o, d, 0.4, PolarDirection.FAR)
    assert mix(o, d, 0.4, "cw") == mix_lab_polar(o, d, 0.4, PolarDirection.CW)
    with pytest.raises(ValueError):
        mix(o, d, 0.4, "hsv")
