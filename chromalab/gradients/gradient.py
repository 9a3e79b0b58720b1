from __future__ import annotations
import logging
from bisect import bisect_right
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from PIL import Image

from .key import GradientKey
from .render import gradient_to_image
from .svg import gradient_to_svg_string
from ..colors.lab import Lab, BLACK, WHITE
from ..colors.rgb import Rgb
from ..convert import gamma_rgb_to_sr_lab_2, np_sr_lab_2_to_gamma_rgb
from ..mixing.mix import mix
from ..types.constants import SVG_DEFAULT_ID, SVG_DEFAULT_WIDTH, SVG_DEFAULT_HEIGHT
from ..types.mix_types import GradientEasing, to_gradient_easing

logger = logging.getLogger(__name__)


class Gradient:
    """
    Keyframed color gradient over LAB colors.

    Keys are kept in the order the caller provides. Evaluation assumes they
    are sorted by ascending step; ``sort`` and ``insert_or_replace`` keep
    them that way for callers that need it.

    Args:
        keys: Initial keys; copied into a new list
    """
    __slots__ = ('keys',)

    def __init__(self, keys: Optional[Iterable[GradientKey]] = None) -> None:
        self.keys: List[GradientKey] = list(keys) if keys is not None else []

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_colors(cls, colors: Sequence[Lab]) -> Gradient:
        """
        Build a gradient with keys spread evenly over [0, 1].

        No colors gives black to white; a single color is placed at 0.5
        between black and white, so evaluation never sees fewer than two keys.
        """
        n = len(colors)
        if n == 0:
            logger.debug("from_colors: no colors, using black to white")
            return cls([GradientKey(0.0, BLACK), GradientKey(1.0, WHITE)])
        if n == 1:
            logger.debug("from_colors: one color, framing it with black and white")
            return cls([
                GradientKey(0.0, BLACK),
                GradientKey(0.5, colors[0]),
                GradientKey(1.0, WHITE),
            ])
        to_step = 1.0 / (n - 1)
        return cls(GradientKey(i * to_step, c) for i, c in enumerate(colors))

    @classmethod
    def from_gamma_rgb_colors(cls, colors: Sequence[Rgb]) -> Gradient:
        """Same as from_colors for gamma sRGB input."""
        return cls.from_colors([gamma_rgb_to_sr_lab_2(c) for c in colors])

    # ------------------ CONTAINER PROTOCOL ------------------
    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[GradientKey]:
        return iter(self.keys)

    def __getitem__(self, index: int) -> GradientKey:
        return self.keys[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return self.keys == other.keys

    def __repr__(self) -> str:
        return f"Gradient(keys={self.keys!r})"

    @property
    def first_key(self) -> GradientKey:
        self._require_keys()
        return self.keys[0]

    @property
    def last_key(self) -> GradientKey:
        self._require_keys()
        return self.keys[-1]

    def _require_keys(self) -> None:
        if not self.keys:
            raise ValueError("Gradient has no keys")

    # ------------------ IN-PLACE EDITS ------------------
    def append(self, key: GradientKey) -> Gradient:
        self.keys.append(key)
        return self

    def prepend(self, key: GradientKey) -> Gradient:
        self.keys.insert(0, key)
        return self

    def insert_or_replace(self, key: GradientKey, tol: float = 1e-6) -> Gradient:
        """
        Insert a key at its sorted position, replacing a key with the same step.

        Assumes the existing keys are sorted.
        """
        index = self.find_key_index(key.step, tol)
        if index is not None:
            self.keys[index] = key
        else:
            steps = [k.step for k in self.keys]
            self.keys.insert(bisect_right(steps, key.step), key)
        return self

    def remove_at(self, index: int) -> GradientKey:
        return self.keys.pop(index)

    def sort(self) -> Gradient:
        """Stable sort of the keys by step."""
        self.keys.sort(key=lambda k: k.step)
        return self

    def clear(self) -> Gradient:
        self.keys.clear()
        return self

    # ------------------ QUERIES ------------------
    def find_key_index(self, step: float, tol: float = 1e-6) -> Optional[int]:
        """Index of the first key whose step is within ``tol`` of ``step``."""
        for i, k in enumerate(self.keys):
            if abs(k.step - step) <= tol:
                return i
        return None

    def contains_step(self, step: float, tol: float = 1e-6) -> bool:
        return self.find_key_index(step, tol) is not None

    def extent(self) -> float:
        """Difference between the largest and smallest key step."""
        if not self.keys:
            return 0.0
        steps = [k.step for k in self.keys]
        return max(steps) - min(steps)

    # ------------------ STRUCTURAL TRANSFORMS ------------------
    def distributed(self) -> Gradient:
        """Copy with the same colors, in order, at evenly spaced steps."""
        n = len(self.keys)
        if n == 1:
            return Gradient([GradientKey(0.5, self.keys[0].color)])
        if n == 0:
            return Gradient()
        to_step = 1.0 / (n - 1)
        return Gradient(GradientKey(i * to_step, k.color) for i, k in enumerate(self.keys))

    def reversed(self) -> Gradient:
        """Copy with every step flipped to ``1 - step`` and the key order reversed."""
        return Gradient(GradientKey(1.0 - k.step, k.color) for k in reversed(self.keys))

    # ------------------ EVALUATION ------------------
    def eval(self, step: float, easing: GradientEasing | str = GradientEasing.LAB) -> Lab:
        """
        Evaluate the gradient at ``step``.

        The step is clamped to the first and last key steps. The bracketing
        keys are found by binary search and mixed with ``easing``.

        Raises:
            ValueError: If the gradient has no keys
        """
        self._require_keys()
        easing = to_gradient_easing(easing)
        keys = self.keys
        last = len(keys) - 1

        t = clamp(step, keys[0].step, keys[last].step)
        next_index = bisect_right(keys, t, key=lambda k: k.step)
        prev_key = keys[min(max(next_index - 1, 0), last)]
        next_key = keys[min(next_index, last)]

        span = next_key.step - prev_key.step
        local = (t - prev_key.step) / span if span != 0.0 else 0.0
        return mix(prev_key.color, next_key.color, local, easing)

    def eval_range(
        self,
        count: int,
        easing: GradientEasing | str = GradientEasing.LAB,
        start: float = 0.0,
        stop: float = 1.0,
    ) -> List[Lab]:
        """
        Sample ``count`` evenly spaced colors from ``start`` to ``stop``.

        ``count`` below 2 is raised to 2.
        """
        if count < 2:
            logger.debug("eval_range: count %d raised to 2", count)
            count = 2
        to_fac = 1.0 / (count - 1)
        samples = []
        for i in range(count):
            fac = i * to_fac
            samples.append(self.eval((1.0 - fac) * start + fac * stop, easing))
        return samples

    def eval_range_array(
        self,
        count: int,
        easing: GradientEasing | str = GradientEasing.LAB,
        start: float = 0.0,
        stop: float = 1.0,
    ) -> NDArray:
        """Samples as an (n, 4) float array of gamma sRGB with alpha."""
        lab = np.array([c.value for c in self.eval_range(count, easing, start, stop)], dtype=np.float64)
        return np_sr_lab_2_to_gamma_rgb(lab)

    # ------------------ OUTPUT ------------------
    def to_json_string(self) -> str:
        return '{"keys":[' + ",".join(k.to_json_string() for k in self.keys) + "]}"

    def to_svg_string(
        self,
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
        """Standalone SVG document; see ``gradients.svg.gradient_to_svg_string``."""
        return gradient_to_svg_string(
            self,
            gradient_id=gradient_id,
            width=width,
            height=height,
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            sample_count=sample_count,
            easing=easing,
        )

    def to_image(
        self,
        width: int = SVG_DEFAULT_WIDTH,
        height: int = SVG_DEFAULT_HEIGHT,
        easing: GradientEasing | str = GradientEasing.LAB,
    ) -> Image.Image:
        """RGBA preview image; see ``gradients.render.gradient_to_image``."""
        return gradient_to_image(self, width=width, height=height, easing=easing)
