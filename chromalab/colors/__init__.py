"""
Chromalab Color Classes
=======================

Immutable four channel color values. Operations live as module functions
next to each class and always return new instances.

>>> from chromalab.colors import rgb, Rgb
>>> rgb.to_hex_web(Rgb(0.0, 1.0, 0.0))
'00ff00'

Color Classes
-------------
    - Rgb: gamma or linear sRGB (caller convention), default opaque white
    - Lab: SR LAB 2 rectangular, default opaque white (l = 100)
    - Lch: SR LCH polar, hue as a turn fraction in [0, 1)

Notes
-----
- Assigning to an attribute after construction raises AttributeError
- Channels are not clamped; clamping happens in the byte/short/hex encoders
"""

from . import rgb, lab, lch
from .color_base import ColorBase
from .rgb import Rgb
from .lab import Lab
from .lch import Lch

__all__ = ["ColorBase", "Rgb", "Lab", "Lch", "rgb", "lab", "lch"]
