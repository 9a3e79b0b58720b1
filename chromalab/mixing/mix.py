from __future__ import annotations
import math

from .angle import mix_angle
from ..colors.rgb import Rgb, gamma_to_linear, linear_to_gamma
from ..colors.lab import Lab
from ..colors.lch import Lch
from ..conversions.sr_lab_2 import lab_to_lch as _lab_to_lch
from ..types.constants import GRAY_EPSILON, TAU, ONE_TAU
from ..types.mix_types import (
    PolarDirection,
    GradientEasing,
    easing_to_direction,
    to_gradient_easing,
    to_polar_direction,
)
from ..utils.num_utils import wrap_period


# =============================================================================
# Linear mixing
# =============================================================================

def mix_linear_rgb(o: Rgb, d: Rgb, t: float = 0.5) -> Rgb:
    """Component-wise mix of two linear colors, alpha included."""
    u = 1.0 - t
    return Rgb(
        u * o.r + t * d.r,
        u * o.g + t * d.g,
        u * o.b + t * d.b,
        u * o.alpha + t * d.alpha,
    )


def mix_gamma_rgb(o: Rgb, d: Rgb, t: float = 0.5) -> Rgb:
    """Mix two gamma colors in linear space and re-encode the result."""
    if t <= 0.0:
        return o
    if t >= 1.0:
        return d
    return linear_to_gamma(mix_linear_rgb(gamma_to_linear(o), gamma_to_linear(d), t))


def mix_lab(o: Lab, d: Lab, t: float = 0.5) -> Lab:
    """Component-wise mix of two LAB colors, alpha included."""
    u = 1.0 - t
    return Lab(
        u * o.l + t * d.l,
        u * o.a + t * d.a,
        u * o.b + t * d.b,
        u * o.alpha + t * d.alpha,
    )


# =============================================================================
# Polar mixing
# =============================================================================

def mix_lch(
    o: Lch,
    d: Lch,
    t: float = 0.5,
    direction: PolarDirection | str = PolarDirection.NEAR,
) -> Lch:
    """
    Mix two LCH colors, interpolating hue around the circle.

    Lightness and alpha mix linearly. When both colors are gray the result is
    gray. When only one is gray its hue is meaningless, so the other color's
    (a, b) point scaled by its weight is converted back to chroma and hue.
    Otherwise chroma mixes linearly and hue follows ``direction``.
    """
    if t <= 0.0:
        return o
    if t >= 1.0:
        return d

    u = 1.0 - t
    cl = u * o.l + t * d.l
    calpha = u * o.alpha + t * d.alpha

    o_gray = o.c * o.c < GRAY_EPSILON
    d_gray = d.c * d.c < GRAY_EPSILON

    if o_gray and d_gray:
        return Lch(cl, 0.0, 0.0, calpha)

    if o_gray or d_gray:
        ca = 0.0
        cb = 0.0
        if not o_gray:
            ot = o.h * TAU
            ca += u * o.c * math.cos(ot)
            cb += u * o.c * math.sin(ot)
        if not d_gray:
            dt = d.h * TAU
            ca += t * d.c * math.cos(dt)
            cb += t * d.c * math.sin(dt)
        _, cc, ch = _lab_to_lch(cl, ca, cb)
        return Lch(cl, cc, ch, calpha)

    cc = u * o.c + t * d.c
    ch = mix_angle(o.h, d.h, t, 1.0, direction)
    return Lch(cl, cc, ch, calpha)


def mix_lab_polar(
    o: Lab,
    d: Lab,
    t: float = 0.5,
    direction: PolarDirection | str = PolarDirection.NEAR,
) -> Lab:
    """
    Mix two LAB colors as if they were LCH, without an explicit conversion.

    Falls back to mix_lab when either color is gray.
    """
    if t <= 0.0:
        return o
    if t >= 1.0:
        return d

    o_c_sq = o.a * o.a + o.b * o.b
    d_c_sq = d.a * d.a + d.b * d.b
    if o_c_sq < GRAY_EPSILON or d_c_sq < GRAY_EPSILON:
        return mix_lab(o, d, t)

    u = 1.0 - t
    o_hue = wrap_period(math.atan2(o.b, o.a) * ONE_TAU)
    d_hue = wrap_period(math.atan2(d.b, d.a) * ONE_TAU)
    c = u * math.sqrt(o_c_sq) + t * math.sqrt(d_c_sq)
    h = mix_angle(o_hue, d_hue, t, 1.0, to_polar_direction(direction)) * TAU
    return Lab(
        u * o.l + t * d.l,
        c * math.cos(h),
        c * math.sin(h),
        u * o.alpha + t * d.alpha,
    )


def mix(o: Lab, d: Lab, t: float = 0.5, easing: GradientEasing | str = GradientEasing.LAB) -> Lab:
    """Mix two LAB colors with a gradient easing preset."""
    easing = to_gradient_easing(easing)
    if easing is GradientEasing.LAB:
        return mix_lab(o, d, t)
    return mix_lab_polar(o, d, t, easing_to_direction[easing])
