import os

from backdrop.utilities.env.enums import ColorMapping
from backdrop.utilities.env.parsing import (_env_flag, _env_float, _env_int,
                                            _env_optional_int)

DEFAULT_COLOR_MAPPING = ColorMapping.ANIMATED
DEFAULT_RENDER_PARALLEL_THRESHOLD = 128 * 128
DEFAULT_RENDER_TILE_ROWS = 32
DEFAULT_RENDER_MAX_FPS = 60
DEFAULT_VIEWPORT_SCALE = 1.0


class RenderingConfiguration:
    @classmethod
    def color_mapping(cls) -> ColorMapping:
        mapping = os.environ.get(
            "BACKDROP_COLOR_MAPPING", DEFAULT_COLOR_MAPPING.value
        ).strip().lower()
        try:
            return ColorMapping(mapping)
        except ValueError as exc:
            raise ValueError(
                "BACKDROP_COLOR_MAPPING must be 'static' or 'animated'"
            ) from exc

    @classmethod
    def render_executor_max_workers(cls) -> int | None:
        return _env_optional_int("BACKDROP_RENDER_MAX_WORKERS", minimum=1)

    @classmethod
    def render_parallel_threshold(cls) -> int:
        return _env_int(
            "BACKDROP_RENDER_PARALLEL_THRESHOLD",
            default=DEFAULT_RENDER_PARALLEL_THRESHOLD,
            minimum=1,
        )

    @classmethod
    def render_tile_rows(cls) -> int:
        return _env_int(
            "BACKDROP_RENDER_TILE_ROWS", default=DEFAULT_RENDER_TILE_ROWS, minimum=1
        )

    @classmethod
    def render_max_fps(cls) -> int:
        return _env_int(
            "BACKDROP_RENDER_MAX_FPS", default=DEFAULT_RENDER_MAX_FPS, minimum=0
        )

    @classmethod
    def render_min_interval_ms(cls) -> float:
        return _env_float(
            "BACKDROP_RENDER_MIN_INTERVAL_MS", default=0.0, minimum=0.0
        )

    @classmethod
    def viewport_scale(cls) -> float:
        return _env_float(
            "BACKDROP_VIEWPORT_SCALE", default=DEFAULT_VIEWPORT_SCALE, greater_than=0.0
        )

    @classmethod
    def frame_stats_enabled(cls) -> bool:
        return _env_flag("BACKDROP_FRAME_STATS", default=False)
