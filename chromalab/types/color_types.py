from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Channels3 = Tuple[float, float, float]
Channels4 = Tuple[float, float, float, float]
ArrayLike = Union[ndarray, ScalarVector, list]


def as_channel_array(values: ArrayLike) -> ndarray:
    """
    Convert a color array-like to a float64 array with 3 or 4 channels last.

    Args:
        values: Array-like whose last dimension is 3 (no alpha) or 4 (alpha last)

    Returns:
        float64 ndarray view/copy of the input

    Raises:
        ValueError: If the last dimension is neither 3 nor 4
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] not in (3, 4):
        raise ValueError(f"expected last dimension of 3 or 4 channels, got shape {arr.shape}")
    return arr


def split_alpha(arr: ndarray) -> tuple[ndarray, ndarray | None]:
    """Split an (..., 3|4) array into its color channels and optional alpha."""
    if arr.shape[-1] == 4:
        return arr[..., :3], arr[..., 3]
    return arr, None


def join_alpha(base: ndarray, alpha: ndarray | None) -> ndarray:
    """Inverse of split_alpha."""
    if alpha is None:
        return base
    return np.concatenate([base, alpha[..., None]], axis=-1)
