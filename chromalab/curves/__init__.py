from .knot import Knot, from_seg_linear, from_seg_catmull
from .curve import Curve, bezier_point, bezier_tangent

__all__ = ["Knot", "Curve", "from_seg_linear", "from_seg_catmull", "bezier_point", "bezier_tangent"]
