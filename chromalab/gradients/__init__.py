from .key import GradientKey
from .gradient import Gradient
from .svg import gradient_to_svg_string
from .render import gradient_to_image

__all__ = ["GradientKey", "Gradient", "gradient_to_svg_string", "gradient_to_image"]
