"""Window-space to shader-space coordinate transforms.

Both transforms operate on the last axis of their input, so a single
``(x, y)`` pair and a whole ``(rows, cols, 2)`` grid go through the same code.
Degenerate viewports are not rejected: division by zero yields ``inf`` or
``nan`` and that value flows on to the color mapper untouched.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def _as_pairs(values: ArrayLike) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.shape[-1:] != (2,):
        raise ValueError(f"expected a trailing axis of length 2, got {array.shape}")
    return array


def normalize_coordinates(position: ArrayLike, resolution: ArrayLike) -> np.ndarray:
    """Map window-space ``position`` into the unit square of ``resolution``."""

    position = _as_pairs(position)
    resolution = _as_pairs(resolution)
    with np.errstate(divide="ignore", invalid="ignore"):
        return position / resolution


def correct_aspect(normalized: ArrayLike, resolution: ArrayLike) -> np.ndarray:
    """Scale the horizontal component by ``width / height``.

    Only x changes; y is returned as-is. Nothing is centred or clamped, so x
    runs past 1 on landscape viewports.
    """

    corrected = _as_pairs(normalized).copy()
    width, height = _as_pairs(resolution)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        corrected[..., 0] *= width / height
    return corrected
