"""
Conversions at the boundary with host graphics code.

Hosts hand colors over as plain sequences of gamma sRGB floats, either three
channels or four with alpha last. Nothing here depends on a particular
graphics framework.
"""
from __future__ import annotations
import logging
from typing import Callable, Sequence

from boundednumbers import clamp01

from .colors.rgb import Rgb
from .convert import gamma_rgb_to_sr_lab_2
from .gradients.gradient import Gradient
from .gradients.key import GradientKey
from .types.color_types import Channels4

logger = logging.getLogger(__name__)

Sampler = Callable[[float], Sequence[float]]


def rgb_from_display(channels: Sequence[float]) -> Rgb:
    """
    Build a gamma Rgb from host channels.

    Raises:
        ValueError: If ``channels`` does not hold 3 or 4 values
    """
    values = tuple(float(v) for v in channels)
    if len(values) == 3:
        return Rgb(*values, 1.0)
    if len(values) == 4:
        return Rgb(*values)
    raise ValueError(f"expected 3 or 4 channels, got {len(values)}")


def rgb_to_display(rgb: Rgb) -> Channels4:
    """Channels of ``rgb`` clamped to [0, 1], alpha last."""
    return (clamp01(rgb.r), clamp01(rgb.g), clamp01(rgb.b), clamp01(rgb.alpha))


def gradient_from_sampler(sampler: Sampler, count: int) -> Gradient:
    """
    Build a gradient by sampling a host color function.

    ``sampler`` maps a step in [0, 1] to gamma sRGB channels. Keys are placed
    at ``count`` (at least 2) evenly spaced steps, both ends included.
    """
    if count < 2:
        logger.debug("gradient_from_sampler: count %d raised to 2", count)
        count = 2
    to_step = 1.0 / (count - 1)
    keys = []
    for i in range(count):
        step = i * to_step
        keys.append(GradientKey(step, gamma_rgb_to_sr_lab_2(rgb_from_display(sampler(step)))))
    return Gradient(keys)
