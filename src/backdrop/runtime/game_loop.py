from __future__ import annotations

import pygame
from reactivex.subject import Subject

from backdrop.renderers.background import BackgroundRenderer
from backdrop.runtime.clock import ElapsedTime, FrameStats, elapsed_time_stream
from backdrop.runtime.frame_pacer import FramePacer
from backdrop.utilities.env import Configuration
from backdrop.utilities.logging import get_logger
from backdrop.viewport import Viewport

logger = get_logger(__name__)

WINDOW_TITLE = "backdrop"
QUIT_KEYS = frozenset({pygame.K_ESCAPE, pygame.K_q})
RELOAD_KEY = pygame.K_r


class GameLoop:
    def __init__(
        self,
        viewport: Viewport,
        renderer: BackgroundRenderer,
        max_fps: int | None = None,
    ) -> None:
        self.viewport = viewport
        self.renderer = renderer
        self.max_fps = max_fps if max_fps is not None else Configuration.render_max_fps()
        self.running = False
        self.frames_rendered = 0
        self.screen: pygame.Surface | None = None
        self.elapsed = ElapsedTime()

        self._pacer = FramePacer(self.max_fps)
        self._stats = FrameStats() if Configuration.frame_stats_enabled() else None
        self._ticks: Subject[int] | None = None

    def start(self, max_frames: int | None = None) -> None:
        logger.info(
            "Starting GameLoop (viewport=%s, mapping=%s, max_fps=%s)",
            self.viewport,
            self.renderer.mapping,
            self.max_fps,
        )
        # pygame.init restarts get_ticks, so each run gets a fresh time stream.
        ticks: Subject[int] = Subject()
        subscription = elapsed_time_stream(ticks).subscribe(self._on_elapsed)
        self._ticks = ticks
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self._set_mode()
        last_frame = None if max_frames is None else self.frames_rendered + max_frames
        self.running = True
        try:
            while self.running:
                self.running = self.handle_events()
                if not self.running:
                    break
                if not self._pacer.should_render():
                    pygame.time.wait(int(self._pacer.remaining_s() * 1000))
                    continue
                self._one_loop()
                if last_frame is not None and self.frames_rendered >= last_frame:
                    self.running = False
        finally:
            subscription.dispose()
            ticks.on_completed()
            self._ticks = None
            pygame.quit()
            logger.info("GameLoop stopped after %d frames", self.frames_rendered)

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    running = False
                elif event.key == RELOAD_KEY:
                    self.reload()
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
        return running

    def reload(self) -> None:
        try:
            mapping = Configuration.color_mapping()
        except ValueError:
            # Keep the current shader running on a bad edit.
            logger.exception("Unable to reload color mapping")
            return
        self.renderer.reload(mapping)

    def resize(self, width: int, height: int) -> None:
        scale = self.viewport.scale
        self.viewport = self.viewport.resized(
            max(round(width / scale), 1), max(round(height / scale), 1)
        )
        logger.info("Viewport resized to %s", self.viewport)
        self._set_mode()

    def _set_mode(self) -> None:
        self.screen = pygame.display.set_mode(
            self.viewport.scaled_size(), pygame.RESIZABLE
        )

    def _one_loop(self) -> None:
        if self.screen is None or self._ticks is None:
            raise RuntimeError("GameLoop is not running")
        self._ticks.on_next(pygame.time.get_ticks())
        self.renderer.render(self.screen, self.viewport, self.elapsed)
        pygame.display.flip()
        self._pacer.mark_rendered()
        self.frames_rendered += 1
        if self._stats is not None:
            self._stats.step_frame()

    def _on_elapsed(self, elapsed: ElapsedTime) -> None:
        self.elapsed = elapsed
