"""Chromalab: SR LAB 2 color conversion, perceptual mixing, gradients and color curves."""
import logging

from .colors.color_base import ColorBase
from .colors.rgb import Rgb
from .colors.lab import Lab
from .colors.lch import Lch
from .convert import (
    linear_rgb_to_sr_lab_2,
    gamma_rgb_to_sr_lab_2,
    sr_lab_2_to_linear_rgb,
    sr_lab_2_to_gamma_rgb,
    lab_to_lch,
    lch_to_lab,
    gamma_rgb_to_sr_lch,
    linear_rgb_to_sr_lch,
    sr_lch_to_gamma_rgb,
    sr_lch_to_linear_rgb,
    np_gamma_rgb_to_sr_lab_2,
    np_sr_lab_2_to_gamma_rgb,
    np_gamma_rgb_to_sr_lch,
    np_sr_lch_to_gamma_rgb,
)
from .mixing import (
    wrap_angle,
    mix_angle,
    mix_angle_near,
    mix_angle_far,
    mix_angle_cw,
    mix_angle_ccw,
    mix,
    mix_linear_rgb,
    mix_gamma_rgb,
    mix_lab,
    mix_lch,
    mix_lab_polar,
)
from .gradients import GradientKey, Gradient, gradient_to_svg_string, gradient_to_image
from .curves import Knot, Curve, from_seg_linear, from_seg_catmull
from .types import PolarDirection, GradientEasing
from .bridge import rgb_from_display, rgb_to_display, gradient_from_sampler

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # color types
    "ColorBase",
    "Rgb",
    "Lab",
    "Lch",
    # conversions
    "linear_rgb_to_sr_lab_2",
    "gamma_rgb_to_sr_lab_2",
    "sr_lab_2_to_linear_rgb",
    "sr_lab_2_to_gamma_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "gamma_rgb_to_sr_lch",
    "linear_rgb_to_sr_lch",
    "sr_lch_to_gamma_rgb",
    "sr_lch_to_linear_rgb",
    "np_gamma_rgb_to_sr_lab_2",
    "np_sr_lab_2_to_gamma_rgb",
    "np_gamma_rgb_to_sr_lch",
    "np_sr_lch_to_gamma_rgb",
    # mixing
    "wrap_angle",
    "mix_angle",
    "mix_angle_near",
    "mix_angle_far",
    "mix_angle_cw",
    "mix_angle_ccw",
    "mix",
    "mix_linear_rgb",
    "mix_gamma_rgb",
    "mix_lab",
    "mix_lch",
    "mix_lab_polar",
    # gradients and curves
    "GradientKey",
    "Gradient",
    "gradient_to_svg_string",
    "gradient_to_image",
    "Knot",
    "Curve",
    "from_seg_linear",
    "from_seg_catmull",
    # enums
    "PolarDirection",
    "GradientEasing",
    # host boundary
    "rgb_from_display",
    "rgb_to_display",
    "gradient_from_sampler",
]
