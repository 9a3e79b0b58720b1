from .mix_types import PolarDirection, GradientEasing, to_polar_direction, to_gradient_easing

__all__ = [
    "PolarDirection",
    "GradientEasing",
    "to_polar_direction",
    "to_gradient_easing",
]
