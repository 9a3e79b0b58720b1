"""
SR LAB 2 conversion math on raw channels.

SR LAB 2 (Jan Behrens) replaces the CIE LAB compression with a smoother
piecewise cube root and uses a fixed sRGB primaries matrix with a D65 white.

Pipeline:
    linear sRGB → SR XYZ (3x3) → per axis compression → SR LAB (3x3)

Scalar functions work on plain floats and return tuples; ``np_`` variants
accept arrays shaped ``(..., 3)`` or ``(..., 4)`` (alpha last, passed through).
Hue is expressed as a fraction of a full turn in [0, 1).
"""
from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Channels3, as_channel_array, split_alpha, join_alpha
from ..types.constants import (
    GRAY_EPSILON,
    TAU,
    ONE_TAU,
    SR_LAB_EPSILON,
    SR_LAB_KAPPA_SCALE,
    SR_LAB_INV_KAPPA_SCALE,
    SR_LAB_INV_THRESHOLD,
    SR_LAB_CBRT_SCALE,
    SR_LAB_CBRT_OFFSET,
)
from ..utils.num_utils import wrap_period

LINEAR_RGB_TO_SR_XYZ = np.array([
    [0.32053, 0.63692, 0.04256],
    [0.161987, 0.756636, 0.081376],
    [0.017228, 0.10866, 0.874112],
])

SR_XYZ_TO_SR_LAB = np.array([
    [37.095, 62.9054, -0.0008],
    [663.4684, -750.5078, 87.0328],
    [63.9569, 108.4576, -172.4152],
])

SR_LAB_TO_SR_XYZ = np.array([
    [0.01, 0.000904127, 0.000456344],
    [0.01, -0.000533159, -0.000269178],
    [0.01, 0.0, -0.0058],
])

SR_XYZ_TO_LINEAR_RGB = np.array([
    [5.435679, -4.599131, 0.163593],
    [-1.16809, 2.327977, -0.159798],
    [0.03784, -0.198564, 1.160644],
])


def _mat_vec(m: NDArray, x: float, y: float, z: float) -> Channels3:
    return (
        float(m[0, 0] * x + m[0, 1] * y + m[0, 2] * z),
        float(m[1, 0] * x + m[1, 1] * y + m[1, 2] * z),
        float(m[2, 0] * x + m[2, 1] * y + m[2, 2] * z),
    )


# =============================================================================
# Per axis compression
# =============================================================================

def compress_axis(v: float) -> float:
    """Forward SR LAB 2 nonlinearity for one XYZ axis."""
    if v < SR_LAB_EPSILON:
        return v * SR_LAB_KAPPA_SCALE
    return SR_LAB_CBRT_SCALE * v ** (1.0 / 3.0) - SR_LAB_CBRT_OFFSET


def expand_axis(v: float) -> float:
    """Inverse of compress_axis."""
    if v < SR_LAB_INV_THRESHOLD:
        return v * SR_LAB_INV_KAPPA_SCALE
    return ((v + SR_LAB_CBRT_OFFSET) / SR_LAB_CBRT_SCALE) ** 3


def np_compress_axis(v: NDArray) -> NDArray:
    cbrt = SR_LAB_CBRT_SCALE * np.cbrt(v) - SR_LAB_CBRT_OFFSET
    return np.where(v < SR_LAB_EPSILON, v * SR_LAB_KAPPA_SCALE, cbrt)


def np_expand_axis(v: NDArray) -> NDArray:
    cube = ((v + SR_LAB_CBRT_OFFSET) / SR_LAB_CBRT_SCALE) ** 3
    return np.where(v < SR_LAB_INV_THRESHOLD, v * SR_LAB_INV_KAPPA_SCALE, cube)


# =============================================================================
# Linear sRGB ↔ SR XYZ ↔ SR LAB 2
# =============================================================================

def linear_rgb_to_sr_xyz(r: float, g: float, b: float) -> Channels3:
    return _mat_vec(LINEAR_RGB_TO_SR_XYZ, r, g, b)


def sr_xyz_to_linear_rgb(x: float, y: float, z: float) -> Channels3:
    return _mat_vec(SR_XYZ_TO_LINEAR_RGB, x, y, z)


def sr_xyz_to_sr_lab_2(x: float, y: float, z: float) -> Channels3:
    """Compress SR XYZ and rotate into SR LAB 2 (l, a, b)."""
    return _mat_vec(SR_XYZ_TO_SR_LAB, compress_axis(x), compress_axis(y), compress_axis(z))


def sr_lab_2_to_sr_xyz(l: float, a: float, b: float) -> Channels3:
    """Rotate SR LAB 2 back into compressed XYZ and expand each axis."""
    x, y, z = _mat_vec(SR_LAB_TO_SR_XYZ, l, a, b)
    return expand_axis(x), expand_axis(y), expand_axis(z)


def linear_rgb_to_sr_lab_2(r: float, g: float, b: float) -> Channels3:
    """
    Convert linear sRGB to SR LAB 2.

    Args:
        r, g, b: Linear sRGB channels; values outside [0, 1] are accepted

    Returns:
        Tuple[float, float, float]: (l, a, b), l nominally in [0, 100]
    """
    return sr_xyz_to_sr_lab_2(*linear_rgb_to_sr_xyz(r, g, b))


def sr_lab_2_to_linear_rgb(l: float, a: float, b: float) -> Channels3:
    """
    Convert SR LAB 2 to linear sRGB.

    Args:
        l, a, b: SR LAB 2 coordinates

    Returns:
        Tuple[float, float, float]: linear (r, g, b), unclamped
    """
    return sr_xyz_to_linear_rgb(*sr_lab_2_to_sr_xyz(l, a, b))


def np_linear_rgb_to_sr_lab_2(rgb: NDArray) -> NDArray:
    """Vectorized linear sRGB → SR LAB 2; alpha passes through."""
    arr = as_channel_array(rgb)
    base, alpha = split_alpha(arr)
    xyz = np_compress_axis(base @ LINEAR_RGB_TO_SR_XYZ.T)
    return join_alpha(xyz @ SR_XYZ_TO_SR_LAB.T, alpha)


def np_sr_lab_2_to_linear_rgb(lab: NDArray) -> NDArray:
    """Vectorized SR LAB 2 → linear sRGB; alpha passes through."""
    arr = as_channel_array(lab)
    base, alpha = split_alpha(arr)
    xyz = np_expand_axis(base @ SR_LAB_TO_SR_XYZ.T)
    return join_alpha(xyz @ SR_XYZ_TO_LINEAR_RGB.T, alpha)


# =============================================================================
# LAB ↔ LCH
# =============================================================================

def lab_to_lch(l: float, a: float, b: float) -> Channels3:
    """
    Convert rectangular (l, a, b) to polar (l, c, h).

    Gray colors (a² + b² below GRAY_EPSILON) collapse to c = 0, h = 0.

    Returns:
        Tuple[float, float, float]: (l, c, h) with h in [0, 1)
    """
    c_sq = a * a + b * b
    if c_sq < GRAY_EPSILON:
        return l, 0.0, 0.0
    return l, math.sqrt(c_sq), wrap_period(math.atan2(b, a) * ONE_TAU)


def lch_to_lab(l: float, c: float, h: float) -> Channels3:
    """
    Convert polar (l, c, h) to rectangular (l, a, b).

    Negative chroma is treated as 0.
    """
    cr = max(0.0, c)
    hr = h * TAU
    return l, cr * math.cos(hr), cr * math.sin(hr)


def np_lab_to_lch(lab: NDArray) -> NDArray:
    """Vectorized lab_to_lch; alpha passes through."""
    arr = as_channel_array(lab)
    base, alpha = split_alpha(arr)
    l, a, b = base[..., 0], base[..., 1], base[..., 2]
    c_sq = a * a + b * b
    gray = c_sq < GRAY_EPSILON
    c = np.where(gray, 0.0, np.sqrt(c_sq))
    h = np.mod(np.arctan2(b, a) * ONE_TAU, 1.0)
    h = np.where(gray | (h >= 1.0), 0.0, h)
    return join_alpha(np.stack([l, c, h], axis=-1), alpha)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    """Vectorized lch_to_lab; alpha passes through."""
    arr = as_channel_array(lch)
    base, alpha = split_alpha(arr)
    l, c, h = base[..., 0], np.maximum(base[..., 1], 0.0), base[..., 2] * TAU
    return join_alpha(np.stack([l, c * np.cos(h), c * np.sin(h)], axis=-1), alpha)
