from typing import Annotated

import typer

from backdrop.cli.commands.options import (DEFAULT_HEIGHT, DEFAULT_WIDTH,
                                           resolve_mapping, resolve_scale)
from backdrop.renderers.background import BackgroundRenderer
from backdrop.runtime.game_loop import GameLoop
from backdrop.runtime.rasterizer import FrameRasterizer
from backdrop.shading.shader import BackgroundShader
from backdrop.viewport import Viewport


def run_command(
    width: Annotated[int, typer.Option("--width", min=1)] = DEFAULT_WIDTH,
    height: Annotated[int, typer.Option("--height", min=1)] = DEFAULT_HEIGHT,
    scale: Annotated[float | None, typer.Option("--scale")] = None,
    max_fps: Annotated[int | None, typer.Option("--max-fps", min=0)] = None,
    mapping: Annotated[str | None, typer.Option("--mapping")] = None,
    max_frames: Annotated[
        int | None, typer.Option("--max-frames", min=1, help="Stop after N frames")
    ] = None,
) -> None:
    """Open a window and draw the background until closed."""

    viewport = Viewport(size=(width, height), scale=resolve_scale(scale))
    shader = BackgroundShader(resolve_mapping(mapping))
    with FrameRasterizer(shader) as rasterizer:
        loop = GameLoop(viewport, BackgroundRenderer(rasterizer), max_fps=max_fps)
        loop.start(max_frames=max_frames)
