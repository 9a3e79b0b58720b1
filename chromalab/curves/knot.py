from __future__ import annotations
from typing import Optional

from ..colors.lab import Lab
from ..types.constants import ONE_SIXTH
from ..utils.default import value_or_default


def _check_lab(name: str, value: Lab) -> Lab:
    if not isinstance(value, Lab):
        raise TypeError(f"Knot {name} must be Lab, got {type(value).__name__}")
    return value


class Knot:
    """
    Anchor point of a cubic Bezier curve through LAB space.

    ``fore_handle`` controls the outgoing segment and ``rear_handle`` the
    incoming one. Handles that are not given sit on the coordinate. Unlike
    color values, knots are edited in place.
    """
    __slots__ = ('coord', 'fore_handle', 'rear_handle')

    def __init__(
        self,
        coord: Optional[Lab] = None,
        fore_handle: Optional[Lab] = None,
        rear_handle: Optional[Lab] = None,
    ) -> None:
        self.coord = _check_lab("coord", value_or_default(coord, Lab()))
        self.fore_handle = _check_lab("fore_handle", value_or_default(fore_handle, self.coord))
        self.rear_handle = _check_lab("rear_handle", value_or_default(rear_handle, self.coord))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Knot):
            return NotImplemented
        return (
            self.coord == other.coord
            and self.fore_handle == other.fore_handle
            and self.rear_handle == other.rear_handle
        )

    def __repr__(self) -> str:
        return (
            f"Knot(coord={self.coord!r}, fore_handle={self.fore_handle!r}, "
            f"rear_handle={self.rear_handle!r})"
        )

    def copy(self) -> Knot:
        return Knot(self.coord, self.fore_handle, self.rear_handle)

    def mirror_handles_forward(self) -> Knot:
        """Set the rear handle to the fore handle reflected through the coordinate."""
        self.rear_handle = self.coord - (self.fore_handle - self.coord)
        return self

    def mirror_handles_backward(self) -> Knot:
        """Set the fore handle to the rear handle reflected through the coordinate."""
        self.fore_handle = self.coord - (self.rear_handle - self.coord)
        return self

    def reverse(self) -> Knot:
        """Swap the fore and rear handles."""
        self.fore_handle, self.rear_handle = self.rear_handle, self.fore_handle
        return self

    def to_json_string(self) -> str:
        return (
            f'{{"coord":{self.coord.to_json_string()},'
            f'"foreHandle":{self.fore_handle.to_json_string()},'
            f'"rearHandle":{self.rear_handle.to_json_string()}}}'
        )


# =============================================================================
# Segment construction
# =============================================================================

def from_seg_linear(prev_anchor: Lab, next_anchor: Lab, prev_knot: Knot, next_knot: Knot) -> None:
    """
    Shape the segment between two knots into a straight line.

    Sets both coordinates and places the handles at exactly one and two
    thirds of the way from ``prev_anchor`` to ``next_anchor``.
    """
    prev_knot.coord = prev_anchor
    prev_knot.fore_handle = Lab(
        (2.0 * prev_anchor.l + next_anchor.l) / 3.0,
        (2.0 * prev_anchor.a + next_anchor.a) / 3.0,
        (2.0 * prev_anchor.b + next_anchor.b) / 3.0,
        (2.0 * prev_anchor.alpha + next_anchor.alpha) / 3.0,
    )
    next_knot.rear_handle = Lab(
        (prev_anchor.l + 2.0 * next_anchor.l) / 3.0,
        (prev_anchor.a + 2.0 * next_anchor.a) / 3.0,
        (prev_anchor.b + 2.0 * next_anchor.b) / 3.0,
        (prev_anchor.alpha + 2.0 * next_anchor.alpha) / 3.0,
    )
    next_knot.coord = next_anchor


def from_seg_catmull(
    prev_anchor: Lab,
    curr_anchor: Lab,
    next_anchor: Lab,
    advance_anchor: Lab,
    tightness: float,
    curr_knot: Knot,
    next_knot: Knot,
) -> None:
    """
    Shape the segment from ``curr_anchor`` to ``next_anchor`` as Catmull-Rom.

    Sets the fore handle of ``curr_knot`` and the rear handle of
    ``next_knot`` from the four surrounding anchors. Tightness 0 is the
    standard Catmull-Rom spline; tightness 1 is a straight segment.
    """
    if tightness == 1.0:
        from_seg_linear(curr_anchor, next_anchor, curr_knot, next_knot)
        return

    fac = (tightness - 1.0) * ONE_SIXTH
    curr_knot.coord = curr_anchor
    curr_knot.fore_handle = curr_anchor - (next_anchor - prev_anchor) * fac
    next_knot.rear_handle = next_anchor + (advance_anchor - curr_anchor) * fac
    next_knot.coord = next_anchor
