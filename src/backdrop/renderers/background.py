from __future__ import annotations

import numpy as np
import pygame

from backdrop.runtime.clock import ElapsedTime
from backdrop.runtime.rasterizer import FrameRasterizer
from backdrop.shading.shader import BackgroundShader, FrameUniforms
from backdrop.utilities.env.enums import ColorMapping
from backdrop.utilities.logging import get_logger
from backdrop.viewport import Viewport

logger = get_logger(__name__)


def to_rgba8(frame: np.ndarray) -> np.ndarray:
    """Quantize a float RGBA frame for display.

    The shader output is unclamped and may be non-finite; this is where it
    gets squeezed into 0..255.
    """

    finite = np.nan_to_num(frame, nan=0.0, posinf=1.0, neginf=0.0)
    return np.rint(np.clip(finite, 0.0, 1.0) * 255.0).astype(np.uint8)


class BackgroundRenderer:
    def __init__(self, rasterizer: FrameRasterizer) -> None:
        self._rasterizer = rasterizer

    @property
    def mapping(self) -> ColorMapping:
        return self._rasterizer.shader.mapping

    def reload(self, mapping: ColorMapping | str) -> None:
        shader = BackgroundShader(mapping)
        logger.info("Reloading background shader: %s -> %s", self.mapping, shader.mapping)
        self._rasterizer.shader = shader

    def render_rgba8(
        self,
        size: tuple[int, int],
        viewport: Viewport,
        elapsed: ElapsedTime,
    ) -> np.ndarray:
        uniforms = FrameUniforms.from_viewport(viewport, elapsed.millis)
        return to_rgba8(self._rasterizer.render(size, uniforms))

    def render(
        self,
        window: pygame.Surface,
        viewport: Viewport,
        elapsed: ElapsedTime,
    ) -> None:
        rgba = self.render_rgba8(window.get_size(), viewport, elapsed)
        # surfarray is indexed (x, y)
        pygame.surfarray.blit_array(window, np.transpose(rgba[..., :3], (1, 0, 2)))
