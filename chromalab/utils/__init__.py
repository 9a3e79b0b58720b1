from .default import value_or_default
from .num_utils import wrap_period, to_uint, fmt

__all__ = ["value_or_default", "wrap_period", "to_uint", "fmt"]
