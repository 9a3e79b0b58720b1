from __future__ import annotations
from typing import ClassVar, Tuple
import math

from .color_base import ColorBase
from ..types.constants import (
    GRAY_EPSILON,
    TAU,
    ONE_TAU,
    BYTE_MAX,
    SHORT_MAX,
    SR_LCH_MAX_CHROMA,
)
from ..utils.num_utils import to_uint, wrap_period


class Lch(ColorBase):
    """
    SR LCH color: the polar form of SR LAB 2.

    ``h`` is a fraction of a full turn and is wrapped into [0, 1) on
    construction; ``c`` is forced non-negative.
    """
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("l", "c", "h", "alpha")

    def __init__(self, l: float = 100.0, c: float = 0.0, h: float = 0.0, alpha: float = 1.0) -> None:
        self._freeze((l, max(0.0, c), wrap_period(h), alpha))

    @property
    def l(self) -> float:
        return self._value[0]

    @property
    def c(self) -> float:
        return self._value[1]

    @property
    def h(self) -> float:
        return self._value[2]


BLACK = Lch(0.0, 0.0, 0.0, 1.0)
WHITE = Lch(100.0, 0.0, 0.0, 1.0)
CLEAR_BLACK = Lch(0.0, 0.0, 0.0, 0.0)
CLEAR_WHITE = Lch(100.0, 0.0, 0.0, 0.0)


# =============================================================================
# Angle convention helpers
# =============================================================================

def hue_to_degrees(h: float) -> float:
    return h * 360.0


def hue_to_radians(h: float) -> float:
    return h * TAU


def hue_from_degrees(degrees: float) -> float:
    return wrap_period(degrees / 360.0)


def hue_from_radians(radians: float) -> float:
    return wrap_period(radians * ONE_TAU)


# =============================================================================
# Basic operations
# =============================================================================

def is_gray(o: Lch, eps: float = GRAY_EPSILON) -> bool:
    """Whether the squared chroma is below ``eps``, leaving hue undefined."""
    return o.c * o.c < eps


def gray(o: Lch) -> Lch:
    return Lch(o.l, 0.0, 0.0, o.alpha)


def opaque(o: Lch) -> Lch:
    return Lch(o.l, o.c, o.h, 1.0)


def adjust(o: Lch, delta: Lch | Tuple[float, float, float, float]) -> Lch:
    """
    Offset each channel by ``delta``; hue wraps and chroma stays non-negative.

    ``delta`` may be a plain tuple so negative chroma offsets can be expressed.
    """
    dl, dc, dh, dalpha = delta
    return Lch(o.l + dl, o.c + dc, o.h + dh, o.alpha + dalpha)


def rotate_hue(o: Lch, amount: float) -> Lch:
    """Rotate hue by ``amount`` turns."""
    return Lch(o.l, o.c, o.h + amount, o.alpha)


def rescale_chroma(o: Lch, new_chroma: float) -> Lch:
    return Lch(o.l, new_chroma, o.h, o.alpha)


# =============================================================================
# Harmonies
# =============================================================================
# Same lightness rules as the LAB harmonies, expressed as hue offsets.

def harmony_analogous(o: Lch) -> Tuple[Lch, Lch]:
    l_ana = (o.l * 2.0 + 50.0) / 3.0
    return (
        Lch(l_ana, o.c, o.h + 1.0 / 12.0, o.alpha),
        Lch(l_ana, o.c, o.h - 1.0 / 12.0, o.alpha),
    )


def harmony_complement(o: Lch) -> Lch:
    return Lch(100.0 - o.l, o.c, o.h + 0.5, o.alpha)


def harmony_split(o: Lch) -> Tuple[Lch, Lch]:
    l_spl = (250.0 - o.l * 2.0) / 3.0
    return (
        Lch(l_spl, o.c, o.h + 5.0 / 12.0, o.alpha),
        Lch(l_spl, o.c, o.h - 5.0 / 12.0, o.alpha),
    )


def harmony_square(o: Lch) -> Tuple[Lch, Lch, Lch]:
    return (
        Lch(50.0, o.c, o.h + 0.25, o.alpha),
        Lch(100.0 - o.l, o.c, o.h + 0.5, o.alpha),
        Lch(50.0, o.c, o.h + 0.75, o.alpha),
    )


def harmony_tetradic(o: Lch) -> Tuple[Lch, Lch, Lch]:
    l_tri = (200.0 - o.l) / 3.0
    l_tet = (100.0 + o.l) / 3.0
    return (
        Lch(l_tri, o.c, o.h + 1.0 / 3.0, o.alpha),
        Lch(100.0 - o.l, o.c, o.h + 0.5, o.alpha),
        Lch(l_tet, o.c, o.h + 5.0 / 6.0, o.alpha),
    )


def harmony_triadic(o: Lch) -> Tuple[Lch, Lch]:
    l_tri = (200.0 - o.l) / 3.0
    return (
        Lch(l_tri, o.c, o.h + 1.0 / 3.0, o.alpha),
        Lch(l_tri, o.c, o.h - 1.0 / 3.0, o.alpha),
    )


# =============================================================================
# Integer encodings
# =============================================================================
# Chroma is scaled against SR_LCH_MAX_CHROMA and saturates above it.

def to_bytes(o: Lch) -> Tuple[int, int, int, int]:
    return (
        to_uint(o.l, BYTE_MAX / 100.0, BYTE_MAX),
        to_uint(o.c, BYTE_MAX / SR_LCH_MAX_CHROMA, BYTE_MAX),
        to_uint(o.h, BYTE_MAX, BYTE_MAX),
        to_uint(o.alpha, BYTE_MAX, BYTE_MAX),
    )


def from_bytes(l: int, c: int, h: int, alpha: int = BYTE_MAX) -> Lch:
    return Lch(
        l * 100.0 / BYTE_MAX,
        c * SR_LCH_MAX_CHROMA / BYTE_MAX,
        h / BYTE_MAX,
        alpha / BYTE_MAX,
    )


def to_shorts(o: Lch) -> Tuple[int, int, int, int]:
    return (
        to_uint(o.l, SHORT_MAX / 100.0, SHORT_MAX),
        to_uint(o.c, SHORT_MAX / SR_LCH_MAX_CHROMA, SHORT_MAX),
        to_uint(o.h, SHORT_MAX, SHORT_MAX),
        to_uint(o.alpha, SHORT_MAX, SHORT_MAX),
    )


def from_shorts(l: int, c: int, h: int, alpha: int = SHORT_MAX) -> Lch:
    return Lch(
        l * 100.0 / SHORT_MAX,
        c * SR_LCH_MAX_CHROMA / SHORT_MAX,
        h / SHORT_MAX,
        alpha / SHORT_MAX,
    )
