from __future__ import annotations
from typing import ClassVar, Tuple
import re
from boundednumbers import clamp01

from .color_base import ColorBase
from ..conversions.transfer import (
    gamma_to_linear_channel,
    linear_to_gamma_channel,
    luminance,
    tone_map_aces,
)
from ..types.constants import BYTE_MAX, SHORT_MAX
from ..utils.num_utils import to_uint


class Rgb(ColorBase):
    """
    Additive color, gamma (display) or linear encoded by caller convention.

    Channels are not clamped; out of gamut colors are representable.
    """
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "alpha")

    def __init__(self, r: float = 1.0, g: float = 1.0, b: float = 1.0, alpha: float = 1.0) -> None:
        self._freeze((r, g, b, alpha))

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]


BLACK = Rgb(0.0, 0.0, 0.0, 1.0)
WHITE = Rgb(1.0, 1.0, 1.0, 1.0)
RED = Rgb(1.0, 0.0, 0.0, 1.0)
GREEN = Rgb(0.0, 1.0, 0.0, 1.0)
BLUE = Rgb(0.0, 0.0, 1.0, 1.0)
CYAN = Rgb(0.0, 1.0, 1.0, 1.0)
MAGENTA = Rgb(1.0, 0.0, 1.0, 1.0)
YELLOW = Rgb(1.0, 1.0, 0.0, 1.0)
CLEAR_BLACK = Rgb(0.0, 0.0, 0.0, 0.0)
CLEAR_WHITE = Rgb(1.0, 1.0, 1.0, 0.0)

_HEX_WEB = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


# =============================================================================
# Transfer functions
# =============================================================================

def gamma_to_linear(c: Rgb) -> Rgb:
    """Convert a gamma sRGB color to linear sRGB; alpha is unchanged."""
    return Rgb(
        gamma_to_linear_channel(c.r),
        gamma_to_linear_channel(c.g),
        gamma_to_linear_channel(c.b),
        c.alpha,
    )


def linear_to_gamma(c: Rgb) -> Rgb:
    """Convert a linear sRGB color to gamma sRGB; alpha is unchanged."""
    return Rgb(
        linear_to_gamma_channel(c.r),
        linear_to_gamma_channel(c.g),
        linear_to_gamma_channel(c.b),
        c.alpha,
    )


def tone_map_aces_linear(c: Rgb) -> Rgb:
    """ACES tone map a linear color into [0, 1]."""
    return Rgb(*tone_map_aces(c.r, c.g, c.b), c.alpha)


def tone_map_aces_gamma(c: Rgb) -> Rgb:
    """ACES tone map a gamma color; the curve is applied in linear space."""
    return linear_to_gamma(tone_map_aces_linear(gamma_to_linear(c)))


# =============================================================================
# Grayscale
# =============================================================================

def gray_linear(c: Rgb) -> Rgb:
    """Replace a linear color with its luminance on every channel."""
    v = luminance(c.r, c.g, c.b)
    return Rgb(v, v, v, c.alpha)


def gray_gamma(c: Rgb) -> Rgb:
    """Gray out a gamma color by its linear luminance."""
    lin = gamma_to_linear(c)
    v = linear_to_gamma_channel(luminance(lin.r, lin.g, lin.b))
    return Rgb(v, v, v, c.alpha)


# =============================================================================
# Alpha
# =============================================================================

def premul(c: Rgb) -> Rgb:
    """Multiply color channels by alpha."""
    if c.alpha <= 0.0:
        return CLEAR_BLACK
    if c.alpha >= 1.0:
        return c
    return Rgb(c.r * c.alpha, c.g * c.alpha, c.b * c.alpha, c.alpha)


def unpremul(c: Rgb) -> Rgb:
    """Divide color channels by alpha."""
    if c.alpha <= 0.0:
        return CLEAR_BLACK
    if c.alpha >= 1.0:
        return c
    inv = 1.0 / c.alpha
    return Rgb(c.r * inv, c.g * inv, c.b * inv, c.alpha)


def opaque(c: Rgb) -> Rgb:
    return Rgb(c.r, c.g, c.b, 1.0)


# =============================================================================
# Gamut
# =============================================================================

def clamp_01(c: Rgb) -> Rgb:
    """Clamp all four channels to [0, 1]."""
    return Rgb(clamp01(c.r), clamp01(c.g), clamp01(c.b), clamp01(c.alpha))


def is_in_gamut(c: Rgb, tol: float = 0.0) -> bool:
    """Whether r, g and b lie in [-tol, 1 + tol]. Alpha is ignored."""
    return all(-tol <= v <= 1.0 + tol for v in (c.r, c.g, c.b))


# =============================================================================
# Integer and text encodings
# =============================================================================

def to_bytes(c: Rgb) -> Tuple[int, int, int, int]:
    """Encode as (r, g, b, a) bytes in [0, 255], rounding half up."""
    return (
        to_uint(c.r, BYTE_MAX, BYTE_MAX),
        to_uint(c.g, BYTE_MAX, BYTE_MAX),
        to_uint(c.b, BYTE_MAX, BYTE_MAX),
        to_uint(c.alpha, BYTE_MAX, BYTE_MAX),
    )


def from_bytes(r: int, g: int, b: int, a: int = BYTE_MAX) -> Rgb:
    return Rgb(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, a / BYTE_MAX)


def to_shorts(c: Rgb) -> Tuple[int, int, int, int]:
    """Encode as (r, g, b, a) 16 bit integers in [0, 65535], rounding half up."""
    return (
        to_uint(c.r, SHORT_MAX, SHORT_MAX),
        to_uint(c.g, SHORT_MAX, SHORT_MAX),
        to_uint(c.b, SHORT_MAX, SHORT_MAX),
        to_uint(c.alpha, SHORT_MAX, SHORT_MAX),
    )


def from_shorts(r: int, g: int, b: int, a: int = SHORT_MAX) -> Rgb:
    return Rgb(r / SHORT_MAX, g / SHORT_MAX, b / SHORT_MAX, a / SHORT_MAX)


def to_hex_argb32(c: Rgb) -> int:
    """Pack into a 32 bit integer laid out as 0xAARRGGBB."""
    r, g, b, a = to_bytes(c)
    return a << 24 | r << 16 | g << 8 | b


def from_hex_argb32(value: int) -> Rgb:
    """Unpack a 0xAARRGGBB integer."""
    return from_bytes(
        value >> 16 & 0xFF,
        value >> 8 & 0xFF,
        value & 0xFF,
        value >> 24 & 0xFF,
    )


def to_hex_web(c: Rgb) -> str:
    """Six lowercase hex digits for r, g, b; no alpha and no '#' prefix."""
    r, g, b, _ = to_bytes(c)
    return f"{r:02x}{g:02x}{b:02x}"


def from_hex_web(text: str) -> Rgb:
    """
    Parse a web hex string.

    Accepts an optional '#' followed by 3 (rgb), 6 (rrggbb) or 8 (rrggbbaa)
    hex digits.

    Raises:
        ValueError: If the string is not a recognised hex color
    """
    match = _HEX_WEB.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid web hex color: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    return from_bytes(r, g, b, a)
