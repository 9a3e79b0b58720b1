# No dependencies
import math

TAU = math.tau
ONE_TAU = 1.0 / math.tau

# Below this squared chroma a color is gray and its hue is undefined.
GRAY_EPSILON = 1e-6

# sRGB transfer function (IEC 61966-2-1)
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_GAMMA_THRESHOLD = 0.04045
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_EXPONENT = 2.4
SRGB_INV_EXPONENT = 1.0 / 2.4

# Luminance weights for linear sRGB primaries
LUM_R = 0.21264935
LUM_G = 0.71516913
LUM_B = 0.07218152

# SR LAB 2 compression
SR_LAB_EPSILON = 216.0 / 24389.0
SR_LAB_KAPPA_SCALE = 24389.0 / 2700.0
SR_LAB_INV_KAPPA_SCALE = 2700.0 / 24389.0
SR_LAB_INV_THRESHOLD = 0.08
SR_LAB_CBRT_SCALE = 1.16
SR_LAB_CBRT_OFFSET = 0.16

# Practical upper bound of chroma in SR LCH for gamut sRGB colors
SR_LCH_MAX_CHROMA = 135.0

# Integer encodings
BYTE_MAX = 255
SHORT_MAX = 65535
LAB_AB_BYTE_OFFSET = 128.0
LAB_AB_SHORT_SCALE = 256.0

# Text output
JSON_PRECISION = 4

# SVG export defaults
SVG_DEFAULT_ID = "chromalabGradient"
SVG_DEFAULT_WIDTH = 768
SVG_DEFAULT_HEIGHT = 64

# Curve fitting
DEFAULT_TIGHTNESS = 0.0
ONE_SIXTH = 1.0 / 6.0
