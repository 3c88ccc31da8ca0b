from __future__ import annotations

import time

from backdrop.utilities.env import Configuration


class FramePacer:
    def __init__(self, max_fps: int, clock=time.monotonic) -> None:
        self._max_fps = max_fps
        self._clock = clock
        self._last_render_time: float | None = None

    def should_render(self) -> bool:
        if self._last_render_time is None:
            return True
        interval_s = self.target_interval_s()
        if interval_s <= 0.0:
            return True
        return self._clock() - self._last_render_time >= interval_s

    def mark_rendered(self) -> None:
        self._last_render_time = self._clock()

    def remaining_s(self) -> float:
        if self._last_render_time is None:
            return 0.0
        elapsed_s = self._clock() - self._last_render_time
        return max(self.target_interval_s() - elapsed_s, 0.0)

    def target_interval_s(self) -> float:
        interval_ms = self._base_interval_ms()
        interval_ms = max(interval_ms, Configuration.render_min_interval_ms())
        return interval_ms / 1000.0

    def _base_interval_ms(self) -> float:
        if self._max_fps <= 0:
            return 0.0
        return 1000.0 / self._max_fps
