"""
sRGB transfer functions, luminance and ACES tone mapping on raw channels.

Scalar functions take and return plain floats; the ``np_`` variants accept
arrays shaped ``(..., 3)`` or ``(..., 4)`` with alpha passed through.
"""
from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp01

from ..types.color_types import Channels3, as_channel_array, split_alpha, join_alpha
from ..types.constants import (
    SRGB_LINEAR_THRESHOLD,
    SRGB_GAMMA_THRESHOLD,
    SRGB_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_EXPONENT,
    SRGB_INV_EXPONENT,
    LUM_R,
    LUM_G,
    LUM_B,
)

# Stephen Hill's fit of the ACES RRT + ODT, applied to linear sRGB.
ACES_INPUT = np.array([
    [0.59719, 0.35458, 0.04823],
    [0.07600, 0.90834, 0.01566],
    [0.02840, 0.13383, 0.83777],
])

ACES_OUTPUT = np.array([
    [1.60475, -0.53108, -0.07367],
    [-0.10208, 1.10813, -0.00605],
    [-0.00327, -0.07276, 1.07602],
])


# =============================================================================
# Per channel sRGB transfer
# =============================================================================

def gamma_to_linear_channel(c: float) -> float:
    """Decode one gamma sRGB channel to linear light."""
    if c <= SRGB_GAMMA_THRESHOLD:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_EXPONENT


def linear_to_gamma_channel(c: float) -> float:
    """Encode one linear sRGB channel for display."""
    if c <= SRGB_LINEAR_THRESHOLD:
        return c * SRGB_SLOPE
    return SRGB_SCALE * c ** SRGB_INV_EXPONENT - SRGB_OFFSET


def np_gamma_to_linear(rgb: NDArray) -> NDArray:
    """Vectorized gamma to linear; alpha (if present) passes through."""
    arr = as_channel_array(rgb)
    base, alpha = split_alpha(arr)
    # Clip the power branch input so negatives never reach the fractional power.
    power = ((np.maximum(base, SRGB_GAMMA_THRESHOLD) + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_EXPONENT
    out = np.where(base <= SRGB_GAMMA_THRESHOLD, base / SRGB_SLOPE, power)
    return join_alpha(out, alpha)


def np_linear_to_gamma(rgb: NDArray) -> NDArray:
    """Vectorized linear to gamma; alpha (if present) passes through."""
    arr = as_channel_array(rgb)
    base, alpha = split_alpha(arr)
    power = SRGB_SCALE * np.maximum(base, SRGB_LINEAR_THRESHOLD) ** SRGB_INV_EXPONENT - SRGB_OFFSET
    out = np.where(base <= SRGB_LINEAR_THRESHOLD, base * SRGB_SLOPE, power)
    return join_alpha(out, alpha)


# =============================================================================
# Luminance
# =============================================================================

def luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of a linear sRGB triple."""
    return LUM_R * r + LUM_G * g + LUM_B * b


def np_luminance(rgb: NDArray) -> NDArray:
    """Vectorized relative luminance of linear sRGB, shape (...)."""
    arr = as_channel_array(rgb)
    return arr[..., 0] * LUM_R + arr[..., 1] * LUM_G + arr[..., 2] * LUM_B


# =============================================================================
# ACES tone mapping
# =============================================================================

def _rrt_odt_fit(x: float) -> float:
    a = x * (x + 0.0245786) - 0.000090537
    b = x * (0.983729 * x + 0.4329510) + 0.238081
    return a / b


def tone_map_aces(r: float, g: float, b: float) -> Channels3:
    """
    Compress linear sRGB into the displayable range with the ACES fit.

    Args:
        r, g, b: Linear sRGB channels, possibly outside [0, 1]

    Returns:
        Tuple[float, float, float]: linear sRGB clamped to [0, 1]
    """
    m = ACES_INPUT
    x = m[0, 0] * r + m[0, 1] * g + m[0, 2] * b
    y = m[1, 0] * r + m[1, 1] * g + m[1, 2] * b
    z = m[2, 0] * r + m[2, 1] * g + m[2, 2] * b

    x = _rrt_odt_fit(x)
    y = _rrt_odt_fit(y)
    z = _rrt_odt_fit(z)

    n = ACES_OUTPUT
    return (
        float(clamp01(n[0, 0] * x + n[0, 1] * y + n[0, 2] * z)),
        float(clamp01(n[1, 0] * x + n[1, 1] * y + n[1, 2] * z)),
        float(clamp01(n[2, 0] * x + n[2, 1] * y + n[2, 2] * z)),
    )


def np_tone_map_aces(rgb: NDArray) -> NDArray:
    """Vectorized ACES tone map of linear sRGB; alpha passes through."""
    arr = as_channel_array(rgb)
    base, alpha = split_alpha(arr)
    v = base @ ACES_INPUT.T
    v = (v * (v + 0.0245786) - 0.000090537) / (v * (0.983729 * v + 0.4329510) + 0.238081)
    out = np.clip(v @ ACES_OUTPUT.T, 0.0, 1.0)
    return join_alpha(out, alpha)
