from pathlib import Path
from typing import Annotated

import typer
from PIL import Image

from backdrop.cli.commands.options import (DEFAULT_HEIGHT, DEFAULT_WIDTH,
                                           resolve_mapping, resolve_scale)
from backdrop.renderers.background import BackgroundRenderer
from backdrop.runtime.clock import ElapsedTime
from backdrop.runtime.rasterizer import FrameRasterizer
from backdrop.shading.shader import BackgroundShader
from backdrop.utilities.logging import get_logger
from backdrop.viewport import Viewport

logger = get_logger(__name__)


def render_command(
    output: Annotated[Path, typer.Option("--output", "-o")] = Path("backdrop.png"),
    width: Annotated[int, typer.Option("--width", min=1)] = DEFAULT_WIDTH,
    height: Annotated[int, typer.Option("--height", min=1)] = DEFAULT_HEIGHT,
    scale: Annotated[float | None, typer.Option("--scale")] = None,
    millis: Annotated[
        int, typer.Option("--millis", min=0, help="Elapsed time in milliseconds")
    ] = 0,
    mapping: Annotated[
        str | None, typer.Option("--mapping", help="static or animated")
    ] = None,
) -> None:
    """Render a single frame to a PNG file."""

    viewport = Viewport(size=(width, height), scale=resolve_scale(scale))
    shader = BackgroundShader(resolve_mapping(mapping))
    with FrameRasterizer(shader) as rasterizer:
        rgba = BackgroundRenderer(rasterizer).render_rgba8(
            viewport.scaled_size(), viewport, ElapsedTime(millis=millis)
        )

    Image.fromarray(rgba).save(output)
    logger.info(
        "Wrote %sx%s %s frame at %d ms to %s",
        rgba.shape[1],
        rgba.shape[0],
        shader.mapping,
        millis,
        output,
    )
