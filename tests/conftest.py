from collections.abc import Iterator

import pygame
import pytest
from hypothesis import HealthCheck, settings

from backdrop.shading.shader import FrameUniforms

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

BACKDROP_ENV_VARS = (
    "BACKDROP_COLOR_MAPPING",
    "BACKDROP_RENDER_MAX_WORKERS",
    "BACKDROP_RENDER_PARALLEL_THRESHOLD",
    "BACKDROP_RENDER_TILE_ROWS",
    "BACKDROP_RENDER_MAX_FPS",
    "BACKDROP_RENDER_MIN_INTERVAL_MS",
    "BACKDROP_VIEWPORT_SCALE",
    "BACKDROP_FRAME_STATS",
)


class StubClock:
    """Monotonic clock whose value tests advance by hand."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_backdrop_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default configuration."""

    for name in BACKDROP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> Iterator[None]:
    pygame.init()
    yield


@pytest.fixture()
def stub_clock() -> StubClock:
    return StubClock()


@pytest.fixture()
def square_uniforms() -> FrameUniforms:
    return FrameUniforms(resolution=(100.0, 100.0), time_seconds=0.0)
