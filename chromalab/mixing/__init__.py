from .angle import wrap_angle, mix_angle, mix_angle_near, mix_angle_far, mix_angle_cw, mix_angle_ccw
from .mix import mix, mix_linear_rgb, mix_gamma_rgb, mix_lab, mix_lch, mix_lab_polar

__all__ = [
    "wrap_angle",
    "mix_angle",
    "mix_angle_near",
    "mix_angle_far",
    "mix_angle_cw",
    "mix_angle_ccw",
    "mix",
    "mix_linear_rgb",
    "mix_gamma_rgb",
    "mix_lab",
    "mix_lch",
    "mix_lab_polar",
]
