"""
Angular interpolation over a periodic scalar.

``period`` is 1.0 for turn-fraction hues, ``math.tau`` for radians and 360
for degrees. Every function wraps both inputs into ``[0, period)`` first and
returns a wrapped result. ``t <= 0`` yields the wrapped origin and ``t >= 1``
the wrapped destination exactly.
"""
from __future__ import annotations
from typing import Callable, Dict

from ..types.mix_types import PolarDirection, to_polar_direction
from ..utils.num_utils import wrap_period

AngleMixer = Callable[[float, float, float, float], float]


def wrap_angle(value: float, period: float = 1.0) -> float:
    """Wrap an angle into ``[0, period)``."""
    return wrap_period(value, period)


def _prepare(origin: float, dest: float, t: float, period: float) -> tuple[float, float, float | None]:
    o = wrap_period(origin, period)
    d = wrap_period(dest, period)
    if t <= 0.0 or o == d:
        return o, d, o
    if t >= 1.0:
        return o, d, d
    return o, d, None


def mix_angle_near(origin: float, dest: float, t: float = 0.5, period: float = 1.0) -> float:
    """Mix along the shortest arc."""
    o, d, early = _prepare(origin, dest, t, period)
    if early is not None:
        return early
    u = 1.0 - t
    diff = d - o
    half = period * 0.5
    if o < d and diff > half:
        return wrap_period(u * (o + period) + t * d, period)
    if o > d and diff < -half:
        return wrap_period(u * o + t * (d + period), period)
    return u * o + t * d


def mix_angle_far(origin: float, dest: float, t: float = 0.5, period: float = 1.0) -> float:
    """Mix along the longest arc."""
    o, d, early = _prepare(origin, dest, t, period)
    if early is not None:
        return early
    u = 1.0 - t
    diff = d - o
    half = period * 0.5
    if o < d and diff < half:
        return wrap_period(u * (o + period) + t * d, period)
    if o > d and diff > -half:
        return wrap_period(u * o + t * (d + period), period)
    return u * o + t * d


def mix_angle_cw(origin: float, dest: float, t: float = 0.5, period: float = 1.0) -> float:
    """Mix clockwise, i.e. with decreasing angle."""
    o, d, early = _prepare(origin, dest, t, period)
    if early is not None:
        return early
    u = 1.0 - t
    if o < d:
        return wrap_period(u * (o + period) + t * d, period)
    return u * o + t * d


def mix_angle_ccw(origin: float, dest: float, t: float = 0.5, period: float = 1.0) -> float:
    """Mix counterclockwise, i.e. with increasing angle."""
    o, d, early = _prepare(origin, dest, t, period)
    if early is not None:
        return early
    u = 1.0 - t
    if o > d:
        return wrap_period(u * o + t * (d + period), period)
    return u * o + t * d


_MIXERS: Dict[PolarDirection, AngleMixer] = {
    PolarDirection.NEAR: mix_angle_near,
    PolarDirection.FAR: mix_angle_far,
    PolarDirection.CW: mix_angle_cw,
    PolarDirection.CCW: mix_angle_ccw,
}


def mix_angle(
    origin: float,
    dest: float,
    t: float = 0.5,
    period: float = 1.0,
    direction: PolarDirection | str = PolarDirection.NEAR,
) -> float:
    """
    Mix two angles with the given direction policy.

    Args:
        origin: Start angle
        dest: End angle
        t: Mix factor; values outside [0, 1] return the nearest endpoint
        period: Length of a full turn in the caller's unit
        direction: NEAR, FAR, CW or CCW (enum or name)

    Returns:
        Mixed angle in [0, period)
    """
    return _MIXERS[to_polar_direction(direction)](origin, dest, t, period)
