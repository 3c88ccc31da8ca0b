from __future__ import annotations

import time
from dataclasses import dataclass

import reactivex
from reactivex import operators as ops

from backdrop.utilities.logging import get_logger

logger = get_logger(__name__)

MILLIS_PER_SECOND = 1000


@dataclass(frozen=True)
class ElapsedTime:
    """Milliseconds since the loop started."""

    millis: int = 0

    @property
    def seconds(self) -> float:
        return self.millis / MILLIS_PER_SECOND

    def advance_to(self, millis: int) -> "ElapsedTime":
        if millis <= self.millis:
            return self
        return ElapsedTime(millis=millis)


def elapsed_time_stream(
    ticks: reactivex.Observable[int],
) -> reactivex.Observable[ElapsedTime]:
    """Fold raw millisecond readings into a non-decreasing elapsed time."""

    initial_state = ElapsedTime()

    def advance_state(state: ElapsedTime, millis: int) -> ElapsedTime:
        return state.advance_to(millis)

    return ticks.pipe(
        ops.scan(advance_state, seed=initial_state),
        ops.start_with(initial_state),
        ops.distinct_until_changed(),
        ops.share(),
    )


class FrameStats:
    """Count frames and report ms/frame and fps once per second."""

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._window_start = clock()
        self.frame_count = 0
        self.last_fps: float | None = None

    def step_frame(self) -> float | None:
        self.frame_count += 1
        now = self._clock()
        elapsed = now - self._window_start
        if elapsed < 1.0:
            return None

        fps = self.frame_count / elapsed
        logger.info("%.2f ms/frame | %.1f fps", 1000.0 / fps, fps)
        self.last_fps = fps
        self.frame_count = 0
        self._window_start = now
        return fps
