from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np

from backdrop.shading.shader import BackgroundShader, FrameUniforms
from backdrop.utilities.env import Configuration
from backdrop.utilities.logging import get_logger

logger = get_logger(__name__)

PIXEL_CENTER_OFFSET = 0.5


def pixel_centers(
    width: int,
    height: int,
    row_start: int = 0,
    row_stop: int | None = None,
) -> np.ndarray:
    """Return fragment positions for rows ``row_start:row_stop`` of an image.

    Row 0 is the top of the image but the fragment y axis starts at the
    bottom of the viewport, so rows count down from ``height``.
    """

    if row_stop is None:
        row_stop = height
    xs = np.arange(width, dtype=np.float64) + PIXEL_CENTER_OFFSET
    rows = np.arange(row_start, row_stop, dtype=np.float64)
    ys = height - rows - PIXEL_CENTER_OFFSET
    grid_x, grid_y = np.meshgrid(xs, ys)
    return np.stack((grid_x, grid_y), axis=-1)


class FrameRasterizer:
    """Evaluate a shader for every pixel of a frame.

    Large frames are cut into horizontal tiles that run on a thread pool;
    every tile sees the same frozen :class:`FrameUniforms`.
    """

    def __init__(
        self,
        shader: BackgroundShader,
        max_workers: int | None = None,
        parallel_threshold: int | None = None,
        tile_rows: int | None = None,
    ) -> None:
        self.shader = shader
        self._max_workers = (
            max_workers
            if max_workers is not None
            else Configuration.render_executor_max_workers()
        )
        self._parallel_threshold = (
            parallel_threshold
            if parallel_threshold is not None
            else Configuration.render_parallel_threshold()
        )
        self._tile_rows = (
            tile_rows if tile_rows is not None else Configuration.render_tile_rows()
        )
        self._executor: ThreadPoolExecutor | None = None

    def __enter__(self) -> "FrameRasterizer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def render(self, size: tuple[int, int], uniforms: FrameUniforms) -> np.ndarray:
        width, height = size
        frame = np.empty((height, width, 4), dtype=np.float64)
        if width * height < self._parallel_threshold:
            self._shade_tile(frame, width, height, uniforms, (0, height))
            return frame

        tiles = [
            (start, min(start + self._tile_rows, height))
            for start in range(0, height, self._tile_rows)
        ]
        shade_tile = partial(self._shade_tile, frame, width, height, uniforms)
        # Consuming the iterator re-raises any worker exception here.
        for _ in self._get_executor().map(shade_tile, tiles):
            pass
        return frame

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Rasterizer executor shut down")

    def _shade_tile(
        self,
        frame: np.ndarray,
        width: int,
        height: int,
        uniforms: FrameUniforms,
        rows: tuple[int, int],
    ) -> None:
        start, stop = rows
        positions = pixel_centers(width, height, start, stop)
        frame[start:stop] = self.shader.shade(positions, uniforms)

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers,
                thread_name_prefix="backdrop-raster",
            )
            logger.debug(
                "Started rasterizer executor (max_workers=%s, tile_rows=%s)",
                self._max_workers,
                self._tile_rows,
            )
        return self._executor
