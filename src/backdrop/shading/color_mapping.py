from __future__ import annotations

from typing import Callable

import numpy as np

from backdrop.utilities.env.enums import ColorMapping

ALPHA = 1.0

ColorMapper = Callable[[np.ndarray, float], np.ndarray]


def _rgba(red, green, blue, shape: tuple[int, ...]) -> np.ndarray:
    color = np.empty(shape + (4,), dtype=np.float64)
    color[..., 0] = red
    color[..., 1] = green
    color[..., 2] = blue
    color[..., 3] = ALPHA
    return color


def map_static(corrected: np.ndarray, time_seconds: float = 0.0) -> np.ndarray:
    """Red follows y, blue follows x; time is ignored."""

    corrected = np.asarray(corrected, dtype=np.float64)
    return _rgba(corrected[..., 1], 0.0, corrected[..., 0], corrected.shape[:-1])


def map_animated(corrected: np.ndarray, time_seconds: float) -> np.ndarray:
    """Red follows x, green follows y, blue pulses as ``|sin(t)|``."""

    corrected = np.asarray(corrected, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        pulse = np.abs(np.sin(np.float64(time_seconds)))
    return _rgba(corrected[..., 0], corrected[..., 1], pulse, corrected.shape[:-1])


_MAPPERS: dict[ColorMapping, ColorMapper] = {
    ColorMapping.STATIC: map_static,
    ColorMapping.ANIMATED: map_animated,
}


def color_mapper(mapping: ColorMapping | str) -> ColorMapper:
    try:
        return _MAPPERS[ColorMapping(mapping)]
    except ValueError as exc:
        raise ValueError(
            f"Unknown color mapping {mapping!r}; expected one of "
            f"{', '.join(m.value for m in ColorMapping)}"
        ) from exc
