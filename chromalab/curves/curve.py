from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .knot import Knot, from_seg_catmull, from_seg_linear
from ..colors.lab import Lab
from ..types.constants import DEFAULT_TIGHTNESS
from ..utils.num_utils import wrap_period

logger = logging.getLogger(__name__)


# =============================================================================
# Cubic Bezier kernels
# =============================================================================

def bezier_point(ap0: Lab, cp0: Lab, cp1: Lab, ap1: Lab, t: float) -> Lab:
    """Evaluate one cubic Bezier segment in Bernstein form, all four channels."""
    if t <= 0.0:
        return ap0
    if t >= 1.0:
        return ap1
    u = 1.0 - t
    tsq = t * t
    usq = u * u
    b0 = usq * u
    b1 = 3.0 * usq * t
    b2 = 3.0 * u * tsq
    b3 = tsq * t
    return Lab(
        b0 * ap0.l + b1 * cp0.l + b2 * cp1.l + b3 * ap1.l,
        b0 * ap0.a + b1 * cp0.a + b2 * cp1.a + b3 * ap1.a,
        b0 * ap0.b + b1 * cp0.b + b2 * cp1.b + b3 * ap1.b,
        b0 * ap0.alpha + b1 * cp0.alpha + b2 * cp1.alpha + b3 * ap1.alpha,
    )


def bezier_tangent(ap0: Lab, cp0: Lab, cp1: Lab, ap1: Lab, t: float) -> Lab:
    """First derivative of a cubic Bezier segment; not normalized."""
    u = 1.0 - t
    b0 = 3.0 * u * u
    b1 = 6.0 * u * t
    b2 = 3.0 * t * t
    return (cp0 - ap0) * b0 + (cp1 - cp0) * b1 + (ap1 - cp1) * b2


class Curve:
    """
    Piecewise cubic Bezier curve through LAB colors.

    Open curves run from the first knot to the last and clamp steps outside
    [0, 1]. Closed loops add a segment from the last knot back to the first
    and wrap the step instead.

    Args:
        closed_loop: Whether the last knot connects back to the first
        knots: Initial knots; the list is copied, the knots are not
    """
    __slots__ = ('closed_loop', 'knots')

    def __init__(self, closed_loop: bool = False, knots: Optional[Iterable[Knot]] = None) -> None:
        self.closed_loop = closed_loop
        self.knots: List[Knot] = list(knots) if knots is not None else []

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_catmull(
        cls,
        closed_loop: bool,
        colors: Sequence[Lab],
        tightness: float = DEFAULT_TIGHTNESS,
    ) -> Curve:
        """
        Fit a curve through the colors with Catmull-Rom handles.

        Open curves use the first and last color only as neighbors, so four
        or more colors give ``len(colors) - 2`` knots. Two or three colors
        are padded by repeating the end colors, which keeps every color as
        a knot. The dangling end handles are mirrored. Closed loops take
        neighbors modulo the color count and keep every color.

        Args:
            closed_loop: Build a closed loop
            colors: At least two LAB anchors
            tightness: 0 for a standard Catmull-Rom spline, 1 for straight segments

        Raises:
            ValueError: If fewer than two colors are given
        """
        points = list(colors)
        n = len(points)
        if n < 2:
            raise ValueError(f"from_catmull needs at least 2 colors, got {n}")

        if closed_loop:
            knots = [Knot(p) for p in points]
            for i in range(n):
                from_seg_catmull(
                    points[(i - 1) % n],
                    points[i],
                    points[(i + 1) % n],
                    points[(i + 2) % n],
                    tightness,
                    knots[i],
                    knots[(i + 1) % n],
                )
            return cls(True, knots)

        if n < 4:
            logger.debug("from_catmull: padding %d colors with repeated end points", n)
            padded = [points[0], *points, points[-1]]
        else:
            padded = points
        knots = [Knot(p) for p in padded[1:-1]]
        for i in range(len(padded) - 3):
            from_seg_catmull(
                padded[i],
                padded[i + 1],
                padded[i + 2],
                padded[i + 3],
                tightness,
                knots[i],
                knots[i + 1],
            )
        knots[0].mirror_handles_forward()
        knots[-1].mirror_handles_backward()
        return cls(False, knots)

    @classmethod
    def from_linear(cls, closed_loop: bool, colors: Sequence[Lab]) -> Curve:
        """
        Build a curve of straight segments through the colors.

        Raises:
            ValueError: If no colors are given
        """
        points = list(colors)
        n = len(points)
        if n < 1:
            raise ValueError("from_linear needs at least 1 color")

        knots = [Knot(p) for p in points]
        for i in range(n - 1):
            from_seg_linear(points[i], points[i + 1], knots[i], knots[i + 1])
        if closed_loop and n > 1:
            from_seg_linear(points[-1], points[0], knots[-1], knots[0])
        elif n > 1:
            knots[0].mirror_handles_forward()
            knots[-1].mirror_handles_backward()
        return cls(closed_loop, knots)

    # ------------------ CONTAINER PROTOCOL ------------------
    def __len__(self) -> int:
        return len(self.knots)

    def __iter__(self) -> Iterator[Knot]:
        return iter(self.knots)

    def __getitem__(self, index: int) -> Knot:
        return self.knots[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self.closed_loop == other.closed_loop and self.knots == other.knots

    def __repr__(self) -> str:
        return f"Curve(closed_loop={self.closed_loop!r}, knots={self.knots!r})"

    # ------------------ IN-PLACE EDITS ------------------
    def append(self, knot: Knot) -> Curve:
        self.knots.append(knot)
        return self

    def prepend(self, knot: Knot) -> Curve:
        self.knots.insert(0, knot)
        return self

    def resize(self, count: int) -> Curve:
        """
        Grow or shrink the knot list to ``count`` (at least 1) knots.

        New knots copy the current last knot, or are default knots when the
        curve is empty.
        """
        count = max(1, count)
        if count < len(self.knots):
            del self.knots[count:]
        while len(self.knots) < count:
            self.knots.append(self.knots[-1].copy() if self.knots else Knot())
        return self

    def reverse(self) -> Curve:
        """Reverse the knot order and swap each knot's handles."""
        self.knots.reverse()
        for knot in self.knots:
            knot.reverse()
        return self

    # ------------------ EVALUATION ------------------
    def _require_knots(self) -> None:
        if not self.knots:
            raise ValueError("Curve has no knots")

    def _locate(self, step: float) -> Tuple[Knot, Knot, float]:
        """Segment end knots and local factor for an in-range step."""
        knots = self.knots
        n = len(knots)
        if self.closed_loop:
            scaled = wrap_period(step, 1.0) * n
            i = int(scaled)
            return knots[i % n], knots[(i + 1) % n], scaled - i

        scaled = step * (n - 1)
        i = int(scaled)
        if i >= n - 1:
            return knots[n - 2], knots[n - 1], 1.0
        return knots[i], knots[i + 1], scaled - i

    def eval(self, step: float) -> Lab:
        """
        Color on the curve at ``step``.

        Raises:
            ValueError: If the curve has no knots
        """
        self._require_knots()
        if not self.closed_loop:
            if step <= 0.0 or len(self.knots) == 1:
                return self.knots[0].coord
            if step >= 1.0:
                return self.knots[-1].coord
        a, b, t = self._locate(step)
        return bezier_point(a.coord, a.fore_handle, b.rear_handle, b.coord, t)

    def tangent(self, step: float) -> Lab:
        """
        Bezier derivative at ``step``, as a LAB delta.

        Open curves clamp the step, so the ends report the end tangents.

        Raises:
            ValueError: If the curve has no knots
        """
        self._require_knots()
        knots = self.knots
        if not self.closed_loop:
            if len(knots) == 1:
                return Lab(0.0, 0.0, 0.0, 0.0)
            if step <= 0.0:
                a, b, t = knots[0], knots[1], 0.0
            elif step >= 1.0:
                a, b, t = knots[-2], knots[-1], 1.0
            else:
                a, b, t = self._locate(step)
        else:
            a, b, t = self._locate(step)
        return bezier_tangent(a.coord, a.fore_handle, b.rear_handle, b.coord, t)

    def eval_range(self, count: int) -> List[Lab]:
        """
        Sample ``count`` (at least 2) evenly spaced colors.

        Open curves include both ends; closed loops stop one step short of
        wrapping back to the start.
        """
        count = max(2, count)
        to_step = 1.0 / (count if self.closed_loop else count - 1)
        return [self.eval(i * to_step) for i in range(count)]

    # ------------------ OUTPUT ------------------
    def to_json_string(self) -> str:
        closed = "true" if self.closed_loop else "false"
        knots = ",".join(k.to_json_string() for k in self.knots)
        return f'{{"closedLoop":{closed},"knots":[{knots}]}}'
