import logging
import numpy as np
import pytest

from chromalab.colors.lab import Lab, BLACK, WHITE
from chromalab.colors.rgb import Rgb
from chromalab.gradients import Gradient, GradientKey
from chromalab.mixing.mix import mix_lab, mix_lab_polar
from chromalab.types.mix_types import GradientEasing, PolarDirection

mix_tolerance = 1e-9

red = Lab(53.2, 78.2, 67.7, 1.0)
green = Lab(86.9, -82.7, 83.2, 1.0)
blue = Lab(29.6, 68.3, -112.0, 0.5)


def three_key_gradient():
    return Gradient([GradientKey(0.0, red), GradientKey(0.5, green), GradientKey(1.0, blue)])


# ------------------ KEYS ------------------

def test_key_defaults_and_clamping():
    assert GradientKey() == GradientKey(0.0, Lab())
    assert GradientKey(-1.0, red).step == 0.0
    assert GradientKey(2.0, red).step == 1.0
    assert isinstance(GradientKey(1, red).step, float)


def test_key_requires_lab():
    with pytest.raises(TypeError):
        GradientKey(0.5, Rgb(1.0, 0.0, 0.0))


def test_key_is_immutable_and_hashable():
    key = GradientKey(0.25, red)
    with pytest.raises(AttributeError):
        key.step = 0.5
    assert key.with_step(0.75) == GradientKey(0.75, red)
    assert key.with_color(blue).color == blue
    assert len({key, GradientKey(0.25, red)}) == 1
    assert sorted([GradientKey(0.9, red), key])[0] == key


# ------------------ FACTORIES ------------------

def test_from_colors_empty_evaluates_to_mid_gray():
    gradient = Gradient.from_colors([])
    assert len(gradient) == 2
    assert gradient.eval(0.5) == Lab(50.0, 0.0, 0.0, 1.0)
    assert gradient.eval(0.5) == mix_lab(BLACK, WHITE, 0.5)


def test_from_colors_single_color_is_framed():
    gradient = Gradient.from_colors([red])
    assert [k.step for k in gradient] == [0.0, 0.5, 1.0]
    assert gradient[0].color == BLACK
    assert gradient[1].color == red
    assert gradient[2].color == WHITE


def test_from_colors_spreads_evenly():
    gradient = Gradient.from_colors([red, green, blue, red, green])
    assert [k.step for k in gradient] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_from_colors_logs_fallback(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromalab.gradients.gradient"):
        Gradient.from_colors([])
    assert "no colors" in caplog.text


def test_from_gamma_rgb_colors():
    gradient = Gradient.from_gamma_rgb_colors([Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0)])
    assert gradient.first_key.color == Lab(0.0, 0.0, 0.0, 1.0)
    assert abs(gradient.last_key.color.l - 100.0) < 1e-2


# ------------------ EVALUATION ------------------

@pytest.mark.parametrize("easing", list(GradientEasing))
def test_endpoint_law(easing):
    gradient = three_key_gradient()
    assert gradient.eval(gradient.first_key.step, easing) == gradient.first_key.color
    assert gradient.eval(gradient.last_key.step, easing) == gradient.last_key.color
    assert gradient.eval(0.5, easing) == green


def test_clamp_law():
    gradient = Gradient([GradientKey(0.2, red), GradientKey(0.8, blue)])
    assert gradient.eval(-5.0) == gradient.eval(0.2)
    assert gradient.eval(0.1) == red
    assert gradient.eval(0.95) == gradient.eval(0.8)
    assert gradient.eval(7.0) == blue


def test_eval_mixes_bracketing_keys():
    gradient = three_key_gradient()
    assert gradient.eval(0.25).is_close(mix_lab(red, green, 0.5), mix_tolerance)
    assert gradient.eval(0.875).is_close(mix_lab(green, blue, 0.75), mix_tolerance)
    near = gradient.eval(0.75, GradientEasing.NEAR)
    assert near.is_close(mix_lab_polar(green, blue, 0.5, PolarDirection.NEAR), mix_tolerance)


def test_eval_single_key_and_coincident_keys():
    assert Gradient([GradientKey(0.3, red)]).eval(0.9) == red
    gradient = Gradient([GradientKey(0.0, red), GradientKey(0.5, green), GradientKey(0.5, blue), GradientKey(1.0, red)])
    assert gradient.eval(0.5) == blue
    assert gradient.eval(0.49).is_close(mix_lab(red, green, 0.98), mix_tolerance)


def test_eval_empty_raises():
    with pytest.raises(ValueError):
        Gradient().eval(0.5)
    with pytest.raises(ValueError):
        Gradient().first_key


def test_eval_accepts_easing_names():
    gradient = three_key_gradient()
    assert gradient.eval(0.3, "far") == gradient.eval(0.3, GradientEasing.FAR)
    with pytest.raises(ValueError):
        gradient.eval(0.3, "spiral")


def test_eval_range():
    gradient = three_key_gradient()
    samples = gradient.eval_range(5)
    assert len(samples) == 5
    assert samples[0] == red
    assert samples[2] == green
    assert samples[4] == blue
    assert len(gradient.eval_range(0)) == 2
    assert len(gradient.eval_range(1)) == 2


def test_eval_range_sub_interval():
    gradient = three_key_gradient()
    samples = gradient.eval_range(3, GradientEasing.LAB, 0.5, 1.0)
    assert samples[0] == green
    assert samples[1].is_close(gradient.eval(0.75), mix_tolerance)
    assert samples[2] == blue


def test_eval_range_array():
    gradient = Gradient.from_gamma_rgb_colors([Rgb(1.0, 0.0, 0.0, 1.0), Rgb(0.0, 0.0, 1.0, 0.5)])
    arr = gradient.eval_range_array(4)
    assert arr.shape == (4, 4)
    assert np.allclose(arr[0], [1.0, 0.0, 0.0, 1.0], atol=1e-3)
    assert np.allclose(arr[-1], [0.0, 0.0, 1.0, 0.5], atol=1e-3)


# ------------------ STRUCTURE ------------------

def test_distributed():
    gradient = Gradient([GradientKey(0.0, red), GradientKey(0.1, green), GradientKey(0.2, blue)])
    spread = gradient.distributed()
    assert [k.step for k in spread] == [0.0, 0.5, 1.0]
    assert [k.color for k in spread] == [red, green, blue]
    assert [k.step for k in gradient] == [0.0, 0.1, 0.2]
    assert Gradient([GradientKey(0.9, red)]).distributed()[0].step == 0.5
    assert len(Gradient().distributed()) == 0


def test_reversed():
    gradient = Gradient([GradientKey(0.0, red), GradientKey(0.3, green), GradientKey(1.0, blue)])
    flipped = gradient.reversed()
    assert [k.color for k in flipped] == [blue, green, red]
    assert [k.step for k in flipped] == pytest.approx([0.0, 0.7, 1.0])
    assert flipped.eval(0.7) == green


def test_extent():
    assert Gradient([GradientKey(0.2, red), GradientKey(0.7, blue)]).extent() == pytest.approx(0.5)
    assert Gradient([GradientKey(0.4, red)]).extent() == 0.0
    assert Gradient().extent() == 0.0


def test_in_place_edits():
    gradient = Gradient()
    gradient.append(GradientKey(1.0, blue)).prepend(GradientKey(0.0, red))
    assert [k.color for k in gradient] == [red, blue]

    gradient.insert_or_replace(GradientKey(0.5, green))
    assert [k.step for k in gradient] == [0.0, 0.5, 1.0]
    gradient.insert_or_replace(GradientKey(0.5, red))
    assert len(gradient) == 3
    assert gradient[1].color == red

    removed = gradient.remove_at(1)
    assert removed.step == 0.5
    assert len(gradient) == 2

    gradient.clear()
    assert len(gradient) == 0


def test_sort_is_explicit():
    gradient = Gradient([GradientKey(1.0, blue), GradientKey(0.0, red)])
    assert gradient[0].color == blue
    gradient.sort()
    assert [k.step for k in gradient] == [0.0, 1.0]


def test_queries():
    gradient = three_key_gradient()
    assert gradient.find_key_index(0.5) == 1
    assert gradient.find_key_index(0.5000001) == 1
    assert gradient.find_key_index(0.6) is None
    assert gradient.contains_step(1.0)
    assert not gradient.contains_step(0.25)


def test_gradient_equality_and_json():
    assert three_key_gradient() == three_key_gradient()
    gradient = Gradient([GradientKey(0.5, Lab(50.0, 0.0, 0.0, 1.0))])
    assert gradient.to_json_string() == (
        '{"keys":[{"step":0.5000,"color":{"l":50.0000,"a":0.0000,"b":0.0000,"alpha":1.0000}}]}'
    )
