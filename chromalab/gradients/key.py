from __future__ import annotations
from boundednumbers import clamp01

from ..colors.lab import Lab
from ..utils.default import value_or_default
from ..utils.num_utils import fmt


class GradientKey:
    """
    One control point of a gradient: a step in [0, 1] and a LAB color.

    The step is clamped on construction. Keys are immutable and order by step.
    """
    __slots__ = ('_step', '_color', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, step: float = 0.0, color: Lab | None = None) -> None:
        color = value_or_default(color, Lab())
        if not isinstance(color, Lab):
            raise TypeError(f"GradientKey color must be Lab, got {type(color).__name__}")
        self._step = float(clamp01(step))
        self._color = color
        super().__setattr__('_is_frozen', True)

    @property
    def step(self) -> float:
        return self._step

    @property
    def color(self) -> Lab:
        return self._color

    def with_step(self, step: float) -> GradientKey:
        return GradientKey(step, self._color)

    def with_color(self, color: Lab) -> GradientKey:
        return GradientKey(self._step, color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientKey):
            return NotImplemented
        return self._step == other._step and self._color == other._color

    def __hash__(self) -> int:
        return hash((self._step, self._color))

    def __lt__(self, other: GradientKey) -> bool:
        return self._step < other._step

    def __repr__(self) -> str:
        return f"GradientKey(step={self._step!r}, color={self._color!r})"

    def to_json_string(self) -> str:
        return f'{{"step":{fmt(self._step)},"color":{self._color.to_json_string()}}}'
