"""
Chromalab Raw Conversions
=========================

Numeric kernels on plain floats (scalar functions) and numpy arrays
(``np_`` functions). The typed API in ``chromalab.convert`` wraps these for
Rgb, Lab and Lch values.

Transfer:
    gamma_to_linear_channel, linear_to_gamma_channel
    np_gamma_to_linear, np_linear_to_gamma
    luminance, np_luminance
    tone_map_aces, np_tone_map_aces

SR LAB 2:
    linear_rgb_to_sr_lab_2, sr_lab_2_to_linear_rgb
    np_linear_rgb_to_sr_lab_2, np_sr_lab_2_to_linear_rgb
    lab_to_lch, lch_to_lab, np_lab_to_lch, np_lch_to_lab
"""

from .transfer import (
    gamma_to_linear_channel,
    linear_to_gamma_channel,
    np_gamma_to_linear,
    np_linear_to_gamma,
    luminance,
    np_luminance,
    tone_map_aces,
    np_tone_map_aces,
)
from .sr_lab_2 import (
    linear_rgb_to_sr_xyz,
    sr_xyz_to_linear_rgb,
    sr_xyz_to_sr_lab_2,
    sr_lab_2_to_sr_xyz,
    linear_rgb_to_sr_lab_2,
    sr_lab_2_to_linear_rgb,
    np_linear_rgb_to_sr_lab_2,
    np_sr_lab_2_to_linear_rgb,
    lab_to_lch,
    lch_to_lab,
    np_lab_to_lch,
    np_lch_to_lab,
)

__all__ = [
    "gamma_to_linear_channel",
    "linear_to_gamma_channel",
    "np_gamma_to_linear",
    "np_linear_to_gamma",
    "luminance",
    "np_luminance",
    "tone_map_aces",
    "np_tone_map_aces",
    "linear_rgb_to_sr_xyz",
    "sr_xyz_to_linear_rgb",
    "sr_xyz_to_sr_lab_2",
    "sr_lab_2_to_sr_xyz",
    "linear_rgb_to_sr_lab_2",
    "sr_lab_2_to_linear_rgb",
    "np_linear_rgb_to_sr_lab_2",
    "np_sr_lab_2_to_linear_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "np_lab_to_lch",
    "np_lch_to_lab",
]
