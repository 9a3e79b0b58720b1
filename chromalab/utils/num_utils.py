import math
from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float
from ..types.constants import JSON_PRECISION


def wrap_period(value: float, period: float = 1.0) -> float:
    """
    Wrap a value into ``[0, period)`` using floor-based wraparound.

    Float modulo can round a tiny negative value up to exactly ``period``;
    that case is folded back to 0.
    """
    wrapped = cyclic_wrap_float(value, 0.0, period)
    if wrapped >= period:
        return 0.0
    return wrapped


def to_uint(value: float, scale: float, limit: int) -> int:
    """Scale, round half up and saturate a float into ``[0, limit]``."""
    scaled = value * scale + 0.5
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return limit if scaled > 0 else 0
    return clamp(int(scaled), 0, limit)


def fmt(value: float, precision: int = JSON_PRECISION) -> str:
    """Fixed-point text for JSON-shaped output."""
    return f"{value:.{precision}f}"
