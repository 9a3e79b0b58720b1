from __future__ import annotations
from enum import Enum, IntEnum


class PolarDirection(IntEnum):
    """
    Direction taken around the hue circle when mixing two angles.

    NEAR: Shortest arc (at most half a turn)
    FAR:  Longest arc (at least half a turn)
    CW:   Clockwise (decreasing angle)
    CCW:  Counterclockwise (increasing angle)
    """
    NEAR = 0
    FAR = 1
    CW = 2
    CCW = 3


class GradientEasing(str, Enum):
    """
    Color mixing preset used when evaluating gradients.

    LAB mixes rectangular coordinates; the others mix LAB as if it were LCH
    with the matching PolarDirection for hue.
    """
    LAB = "lab"
    NEAR = "near"
    FAR = "far"
    CW = "cw"
    CCW = "ccw"


easing_to_direction: dict[GradientEasing, PolarDirection] = {
    GradientEasing.NEAR: PolarDirection.NEAR,
    GradientEasing.FAR: PolarDirection.FAR,
    GradientEasing.CW: PolarDirection.CW,
    GradientEasing.CCW: PolarDirection.CCW,
}


def to_polar_direction(direction: PolarDirection | str | int) -> PolarDirection:
    """
    Coerce a direction given as enum, name or integer value.

    Raises:
        ValueError: If the direction is not recognised
    """
    if isinstance(direction, PolarDirection):
        return direction
    if isinstance(direction, str):
        try:
            return PolarDirection[direction.upper()]
        except KeyError:
            raise ValueError(f"Invalid polar direction: {direction!r}") from None
    try:
        return PolarDirection(direction)
    except ValueError:
        raise ValueError(f"Invalid polar direction: {direction!r}") from None


def to_gradient_easing(easing: GradientEasing | str) -> GradientEasing:
    """
    Coerce an easing given as enum or its string value.

    Raises:
        ValueError: If the easing is not recognised
    """
    if isinstance(easing, GradientEasing):
        return easing
    try:
        return GradientEasing(str(easing).lower())
    except ValueError:
        raise ValueError(f"Invalid gradient easing: {easing!r}") from None
