from __future__ import annotations
from numpy import ndarray as NDArray

from .colors.rgb import Rgb, gamma_to_linear, linear_to_gamma
from .colors.lab import Lab
from .colors.lch import Lch
from .conversions import sr_lab_2 as _sr
from .conversions.transfer import np_gamma_to_linear, np_linear_to_gamma


# =============================================================================
# RGB ↔ SR LAB 2
# =============================================================================

def linear_rgb_to_sr_lab_2(c: Rgb) -> Lab:
    """Convert linear sRGB to SR LAB 2; alpha is carried over."""
    return Lab(*_sr.linear_rgb_to_sr_lab_2(c.r, c.g, c.b), c.alpha)


def gamma_rgb_to_sr_lab_2(c: Rgb) -> Lab:
    """Convert gamma sRGB to SR LAB 2; alpha is carried over."""
    return linear_rgb_to_sr_lab_2(gamma_to_linear(c))


def sr_lab_2_to_linear_rgb(c: Lab) -> Rgb:
    """Convert SR LAB 2 to linear sRGB. The result may be out of gamut."""
    return Rgb(*_sr.sr_lab_2_to_linear_rgb(c.l, c.a, c.b), c.alpha)


def sr_lab_2_to_gamma_rgb(c: Lab) -> Rgb:
    """Convert SR LAB 2 to gamma sRGB. The result may be out of gamut."""
    return linear_to_gamma(sr_lab_2_to_linear_rgb(c))


# =============================================================================
# LAB ↔ LCH
# =============================================================================

def lab_to_lch(c: Lab) -> Lch:
    """Rectangular to polar. Gray colors collapse to chroma 0, hue 0."""
    return Lch(*_sr.lab_to_lch(c.l, c.a, c.b), c.alpha)


def lch_to_lab(c: Lch) -> Lab:
    """Polar to rectangular."""
    return Lab(*_sr.lch_to_lab(c.l, c.c, c.h), c.alpha)


# =============================================================================
# RGB ↔ SR LCH
# =============================================================================

def gamma_rgb_to_sr_lch(c: Rgb) -> Lch:
    return lab_to_lch(gamma_rgb_to_sr_lab_2(c))


def linear_rgb_to_sr_lch(c: Rgb) -> Lch:
    return lab_to_lch(linear_rgb_to_sr_lab_2(c))


def sr_lch_to_gamma_rgb(c: Lch) -> Rgb:
    return sr_lab_2_to_gamma_rgb(lch_to_lab(c))


def sr_lch_to_linear_rgb(c: Lch) -> Rgb:
    return sr_lab_2_to_linear_rgb(lch_to_lab(c))


# =============================================================================
# Vectorized
# =============================================================================

def np_gamma_rgb_to_sr_lab_2(rgb: NDArray) -> NDArray:
    """Arrays of gamma sRGB, shape (..., 3|4), to SR LAB 2."""
    return _sr.np_linear_rgb_to_sr_lab_2(np_gamma_to_linear(rgb))


def np_sr_lab_2_to_gamma_rgb(lab: NDArray) -> NDArray:
    """Arrays of SR LAB 2, shape (..., 3|4), to gamma sRGB."""
    return np_linear_to_gamma(_sr.np_sr_lab_2_to_linear_rgb(lab))


def np_gamma_rgb_to_sr_lch(rgb: NDArray) -> NDArray:
    return _sr.np_lab_to_lch(np_gamma_rgb_to_sr_lab_2(rgb))


def np_sr_lch_to_gamma_rgb(lch: NDArray) -> NDArray:
    return np_sr_lab_2_to_gamma_rgb(_sr.np_lch_to_lab(lch))


np_linear_rgb_to_sr_lab_2 = _sr.np_linear_rgb_to_sr_lab_2
np_sr_lab_2_to_linear_rgb = _sr.np_sr_lab_2_to_linear_rgb
np_lab_to_lch = _sr.np_lab_to_lch
np_lch_to_lab = _sr.np_lch_to_lab
