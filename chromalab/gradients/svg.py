"""
SVG export of gradients.

SVG interpolates stop colors in gamma sRGB, so a gradient mixed in SR LAB 2
is approximated by sampling it densely; with ``sample_count`` below 2 the
gradient keys are written as stops directly.
"""
from __future__ import annotations
from html import escape
from typing import TYPE_CHECKING, List, Tuple

from boundednumbers import clamp01

from ..colors.lab import Lab
from ..colors.rgb import clamp_01, to_hex_web
from ..convert import sr_lab_2_to_gamma_rgb
from ..types.constants import SVG_DEFAULT_ID, SVG_DEFAULT_WIDTH, SVG_DEFAULT_HEIGHT
from ..types.mix_types import GradientEasing
from ..utils.num_utils import fmt

if TYPE_CHECKING:
    from .gradient import Gradient


def _stops(gradient: Gradient, sample_count: int, easing: GradientEasing | str) -> List[Tuple[float, Lab]]:
    if sample_count >= 2:
        to_fac = 1.0 / (sample_count - 1)
        colors = gradient.eval_range(sample_count, easing)
        return [(i * to_fac, c) for i, c in enumerate(colors)]
    return [(k.step, k.color) for k in gradient.keys]


def gradient_to_svg_string(
    gradient: Gradient,
    gradient_id: str = SVG_DEFAULT_ID,
    width: int = SVG_DEFAULT_WIDTH,
    height: int = SVG_DEFAULT_HEIGHT,
    x1: float = 0.0,
    y1: float = 0.5,
    x2: float = 1.0,
    y2: float = 0.5,
    sample_count: int = 0,
    easing: GradientEasing | str = GradientEasing.LAB,
) -> str:
    """
    Render a gradient as a standalone SVG document.

    The upper half of the image is a bar filled with a ``<linearGradient>``;
    the lower half is a row of solid swatches, one per stop.

    Args:
        gradient: Gradient to export
        gradient_id: Element id of the linearGradient
        width, height: Image size in pixels
        x1, y1, x2, y2: Gradient axis in bounding box units
        sample_count: Number of evaluated stops; below 2 uses the keys
        easing: Mixing preset used when sampling

    Returns:
        SVG document text

    Raises:
        ValueError: If the gradient has no keys
    """
    if not gradient.keys:
        raise ValueError("Cannot export a gradient with no keys")
    gid = escape(gradient_id, quote=True)
    stops = _stops(gradient, sample_count, easing)
    bar_height = height // 2
    swatch_height = height - bar_height
    swatch_width = width / len(stops)

    stop_lines = []
    swatch_lines = []
    for i, (offset, color) in enumerate(stops):
        rgb = clamp_01(sr_lab_2_to_gamma_rgb(color))
        hex_color = to_hex_web(rgb)
        opacity = fmt(clamp01(color.alpha))
        stop_lines.append(
            f'<stop offset="{fmt(offset)}" stop-color="#{hex_color}" stop-opacity="{opacity}" />'
        )
        swatch_lines.append(
            f'<rect x="{fmt(i * swatch_width)}" y="{bar_height}" '
            f'width="{fmt(swatch_width)}" height="{swatch_height}" '
            f'fill="#{hex_color}" fill-opacity="{opacity}" />'
        )

    return "\n".join([
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        "<defs>",
        f'<linearGradient id="{gid}" x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}">',
        *stop_lines,
        "</linearGradient>",
        "</defs>",
        f'<rect x="0" y="0" width="{width}" height="{bar_height}" fill="url(#{gid})" />',
        '<g id="swatches">',
        *swatch_lines,
        "</g>",
        "</svg>",
    ])
