from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from ..types.constants import SVG_DEFAULT_WIDTH, SVG_DEFAULT_HEIGHT, BYTE_MAX
from ..types.mix_types import GradientEasing

if TYPE_CHECKING:
    from .gradient import Gradient


def gradient_to_image(
    gradient: Gradient,
    width: int = SVG_DEFAULT_WIDTH,
    height: int = SVG_DEFAULT_HEIGHT,
    easing: GradientEasing | str = GradientEasing.LAB,
) -> Image.Image:
    """
    Rasterize a gradient left to right into an RGBA image.

    Each column is one evaluation of the gradient, converted to gamma sRGB,
    clamped and rounded half up to 8 bits.

    Args:
        gradient: Gradient to render
        width: Image width in pixels, at least 2
        height: Image height in pixels, at least 1
        easing: Mixing preset used when sampling

    Returns:
        PIL.Image.Image in RGBA mode
    """
    width = max(2, int(width))
    height = max(1, int(height))
    rgba = gradient.eval_range_array(width, easing)
    row = np.floor(np.clip(rgba, 0.0, 1.0) * BYTE_MAX + 0.5).astype(np.uint8)
    pixels = np.ascontiguousarray(np.broadcast_to(row[None, :, :], (height, width, 4)))
    return Image.fromarray(pixels)
