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
    LAB_AB_BYTE_OFFSET,
    LAB_AB_SHORT_SCALE,
)
from ..utils.num_utils import to_uint, wrap_period


class Lab(ColorBase):
    """
    SR LAB 2 color in rectangular coordinates.

    ``l`` is lightness, nominally in [0, 100]; ``a`` (green to magenta) and
    ``b`` (blue to yellow) are signed and unbounded, roughly [-111, 111] for
    colors inside the sRGB gamut.
    """
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("l", "a", "b", "alpha")

    def __init__(self, l: float = 100.0, a: float = 0.0, b: float = 0.0, alpha: float = 1.0) -> None:
        self._freeze((l, a, b, alpha))

    @property
    def l(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    def __add__(self, other: Lab) -> Lab:
        return add(self, other)

    def __sub__(self, other: Lab) -> Lab:
        return sub(self, other)

    def __mul__(self, scalar: float) -> Lab:
        return scale(self, scalar)

    __rmul__ = __mul__


BLACK = Lab(0.0, 0.0, 0.0, 1.0)
WHITE = Lab(100.0, 0.0, 0.0, 1.0)
CLEAR_BLACK = Lab(0.0, 0.0, 0.0, 0.0)
CLEAR_WHITE = Lab(100.0, 0.0, 0.0, 0.0)


# =============================================================================
# Component-wise arithmetic (all four channels)
# =============================================================================

def add(o: Lab, d: Lab) -> Lab:
    return Lab(o.l + d.l, o.a + d.a, o.b + d.b, o.alpha + d.alpha)


def sub(o: Lab, d: Lab) -> Lab:
    return Lab(o.l - d.l, o.a - d.a, o.b - d.b, o.alpha - d.alpha)


def scale(o: Lab, scalar: float) -> Lab:
    return Lab(o.l * scalar, o.a * scalar, o.b * scalar, o.alpha * scalar)


def adjust(o: Lab, delta: Lab) -> Lab:
    """
    Offset l, a, b and alpha by the matching channels of ``delta``.

    Equivalent to ``add``; named for callers nudging a color by a delta.
    """
    return add(o, delta)


# =============================================================================
# Chroma and hue
# =============================================================================

def chroma_sq(o: Lab) -> float:
    return o.a * o.a + o.b * o.b


def chroma(o: Lab) -> float:
    return math.sqrt(o.a * o.a + o.b * o.b)


def is_gray(o: Lab, eps: float = GRAY_EPSILON) -> bool:
    """Whether the squared chroma is below ``eps``, leaving hue undefined."""
    return chroma_sq(o) < eps


def hue(o: Lab) -> float:
    """Hue as a fraction of a turn in [0, 1); 0 for gray colors."""
    if is_gray(o):
        return 0.0
    return wrap_period(math.atan2(o.b, o.a) * ONE_TAU)


def gray(o: Lab) -> Lab:
    """Drop chroma, keeping lightness and alpha."""
    return Lab(o.l, 0.0, 0.0, o.alpha)


def opaque(o: Lab) -> Lab:
    return Lab(o.l, o.a, o.b, 1.0)


def rescale_chroma(o: Lab, new_chroma: float) -> Lab:
    """
    Scale a and b so the chroma equals ``new_chroma`` (negative treated as 0).

    Gray colors have no hue to scale along and are returned as gray.
    """
    c_sq = chroma_sq(o)
    if c_sq < GRAY_EPSILON:
        return gray(o)
    s = max(0.0, new_chroma) / math.sqrt(c_sq)
    return Lab(o.l, o.a * s, o.b * s, o.alpha)


def rotate_hue(o: Lab, amount: float) -> Lab:
    """Rotate a and b by ``amount`` turns."""
    radians = amount * TAU
    return _rotate_ab(o, math.cos(radians), math.sin(radians), o.l)


def _rotate_ab(o: Lab, cosa: float, sina: float, l: float) -> Lab:
    return Lab(l, cosa * o.a - sina * o.b, cosa * o.b + sina * o.a, o.alpha)


# =============================================================================
# Distance
# =============================================================================

def dist_sq(o: Lab, d: Lab) -> float:
    """Squared Euclidean distance over l, a and b."""
    dl = d.l - o.l
    da = d.a - o.a
    db = d.b - o.b
    return dl * dl + da * da + db * db


def dist(o: Lab, d: Lab) -> float:
    return math.sqrt(dist_sq(o, d))


# =============================================================================
# Harmonies
# =============================================================================
# Lightness of each harmony color is spread away from the source so the set
# reads as distinct swatches; hue offsets are fixed fractions of a turn.

_COS_30 = math.sqrt(3.0) * 0.5
_SIN_30 = 0.5
_COS_150 = -_COS_30
_SIN_150 = 0.5
_COS_120 = -0.5
_SIN_120 = math.sqrt(3.0) * 0.5


def harmony_analogous(o: Lab) -> Tuple[Lab, Lab]:
    """Two colors 30 degrees either side, lightness pulled toward 50."""
    l_ana = (o.l * 2.0 + 50.0) / 3.0
    return (
        _rotate_ab(o, _COS_30, _SIN_30, l_ana),
        _rotate_ab(o, _COS_30, -_SIN_30, l_ana),
    )


def harmony_complement(o: Lab) -> Lab:
    """Opposite hue with inverted lightness."""
    return Lab(100.0 - o.l, -o.a, -o.b, o.alpha)


def harmony_split(o: Lab) -> Tuple[Lab, Lab]:
    """Two colors 150 degrees either side."""
    l_spl = (250.0 - o.l * 2.0) / 3.0
    return (
        _rotate_ab(o, _COS_150, _SIN_150, l_spl),
        _rotate_ab(o, _COS_150, -_SIN_150, l_spl),
    )


def harmony_square(o: Lab) -> Tuple[Lab, Lab, Lab]:
    """Colors at 90, 180 and 270 degrees."""
    return (
        _rotate_ab(o, 0.0, 1.0, 50.0),
        Lab(100.0 - o.l, -o.a, -o.b, o.alpha),
        _rotate_ab(o, 0.0, -1.0, 50.0),
    )


def harmony_tetradic(o: Lab) -> Tuple[Lab, Lab, Lab]:
    """Colors at 120, 180 and 300 degrees."""
    l_tri = (200.0 - o.l) / 3.0
    l_tet = (100.0 + o.l) / 3.0
    return (
        _rotate_ab(o, _COS_120, _SIN_120, l_tri),
        Lab(100.0 - o.l, -o.a, -o.b, o.alpha),
        _rotate_ab(o, 0.5, -_SIN_120, l_tet),
    )


def harmony_triadic(o: Lab) -> Tuple[Lab, Lab]:
    """Two colors 120 degrees either side."""
    l_tri = (200.0 - o.l) / 3.0
    return (
        _rotate_ab(o, _COS_120, _SIN_120, l_tri),
        _rotate_ab(o, _COS_120, -_SIN_120, l_tri),
    )


# =============================================================================
# Integer encodings
# =============================================================================
# l maps [0, 100] onto the full integer range; a and b are offset by 128 so
# [-128, 128) fits unsigned. Alpha maps [0, 1].

def to_bytes(o: Lab) -> Tuple[int, int, int, int]:
    """Encode as (l, a, b, alpha) bytes, rounding half up and saturating."""
    return (
        to_uint(o.l, BYTE_MAX / 100.0, BYTE_MAX),
        to_uint(o.a + LAB_AB_BYTE_OFFSET, 1.0, BYTE_MAX),
        to_uint(o.b + LAB_AB_BYTE_OFFSET, 1.0, BYTE_MAX),
        to_uint(o.alpha, BYTE_MAX, BYTE_MAX),
    )


def from_bytes(l: int, a: int, b: int, alpha: int = BYTE_MAX) -> Lab:
    return Lab(
        l * 100.0 / BYTE_MAX,
        a - LAB_AB_BYTE_OFFSET,
        b - LAB_AB_BYTE_OFFSET,
        alpha / BYTE_MAX,
    )


def to_shorts(o: Lab) -> Tuple[int, int, int, int]:
    """Encode as (l, a, b, alpha) 16 bit integers, rounding half up and saturating."""
    return (
        to_uint(o.l, SHORT_MAX / 100.0, SHORT_MAX),
        to_uint(o.a + LAB_AB_BYTE_OFFSET, LAB_AB_SHORT_SCALE, SHORT_MAX),
        to_uint(o.b + LAB_AB_BYTE_OFFSET, LAB_AB_SHORT_SCALE, SHORT_MAX),
        to_uint(o.alpha, SHORT_MAX, SHORT_MAX),
    )


def from_shorts(l: int, a: int, b: int, alpha: int = SHORT_MAX) -> Lab:
    return Lab(
        l * 100.0 / SHORT_MAX,
        a / LAB_AB_SHORT_SCALE - LAB_AB_BYTE_OFFSET,
        b / LAB_AB_SHORT_SCALE - LAB_AB_BYTE_OFFSET,
        alpha / SHORT_MAX,
    )


def to_hex_64(o: Lab) -> int:
    """Pack the 16 bit encoding into one integer laid out as alpha, l, a, b."""
    l, a, b, alpha = to_shorts(o)
    return alpha << 48 | l << 32 | a << 16 | b


def from_hex_64(value: int) -> Lab:
    return from_shorts(
        value >> 32 & 0xFFFF,
        value >> 16 & 0xFFFF,
        value & 0xFFFF,
        value >> 48 & 0xFFFF,
    )
