from __future__ import annotations
from typing import ClassVar, Iterator, Tuple, Self
import math
from ..types.color_types import Channels4
from ..utils.num_utils import fmt


class ColorBase:
    """
    Immutable four channel color value.

    Subclasses name their channels through ``channel_names``; alpha is always
    the last channel. Values are stored as plain floats and are never clamped
    on construction.
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes → immutability

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("x", "y", "z", "alpha")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self, value: Tuple[float, float, float, float]) -> None:
        self._value = tuple(float(v) for v in value)
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Channels4:
        return self._value

    @property
    def alpha(self) -> float:
        return self._value[3]

    # ------------------ SEQUENCE PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)

    # ------------------ HELPERS ------------------
    def with_alpha(self, alpha: float) -> Self:
        """Return a copy with a replaced alpha channel."""
        return self.__class__(*self._value[:3], alpha)

    def is_close(self, other: ColorBase, tol: float = 1e-6) -> bool:
        """Channel-wise absolute comparison, including alpha."""
        return all(math.isclose(s, o, rel_tol=0.0, abs_tol=tol) for s, o in zip(self, other))

    def to_json_string(self) -> str:
        """JSON-shaped text with fixed 4-decimal fields."""
        fields = ",".join(f'"{n}":{fmt(v)}' for n, v in zip(self.channel_names, self._value))
        return "{" + fields + "}"
