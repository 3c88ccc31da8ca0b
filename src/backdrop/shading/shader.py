from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from backdrop.shading.color_mapping import color_mapper
from backdrop.shading.coordinates import correct_aspect, normalize_coordinates
from backdrop.utilities.env.enums import ColorMapping
from backdrop.viewport import Viewport

MILLIS_PER_SECOND = 1000.0


@dataclass(frozen=True)
class FrameUniforms:
    """Per-frame inputs shared by every pixel of a frame."""

    resolution: tuple[float, float]
    time_seconds: float = 0.0

    @classmethod
    def from_viewport(cls, viewport: Viewport, millis: int = 0) -> "FrameUniforms":
        return cls(
            resolution=viewport.resolution(),
            time_seconds=millis / MILLIS_PER_SECOND,
        )


class BackgroundShader:
    """Normalize, correct aspect, then map to color.

    Holds nothing but the chosen mapping, so one instance can be shared by
    every worker thread of a frame.
    """

    def __init__(self, mapping: ColorMapping | str = ColorMapping.ANIMATED) -> None:
        self._mapper = color_mapper(mapping)
        self.mapping = ColorMapping(mapping)

    def shade(self, position: ArrayLike, uniforms: FrameUniforms) -> np.ndarray:
        normalized = normalize_coordinates(position, uniforms.resolution)
        corrected = correct_aspect(normalized, uniforms.resolution)
        return self._mapper(corrected, uniforms.time_seconds)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mapping={self.mapping.value!r})"


def shade_pixel(
    x: float,
    y: float,
    uniforms: FrameUniforms,
    mapping: ColorMapping | str = ColorMapping.ANIMATED,
) -> tuple[float, float, float, float]:
    red, green, blue, alpha = BackgroundShader(mapping).shade((x, y), uniforms)
    return float(red), float(green), float(blue), float(alpha)
