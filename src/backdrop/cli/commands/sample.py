from typing import Annotated

import typer

from backdrop.cli.commands.options import (DEFAULT_HEIGHT, DEFAULT_WIDTH,
                                           resolve_mapping)
from backdrop.shading.shader import FrameUniforms, shade_pixel


def sample_command(
    x: Annotated[float, typer.Option("--x")],
    y: Annotated[float, typer.Option("--y", help="Measured from the bottom edge")],
    width: Annotated[float, typer.Option("--width")] = DEFAULT_WIDTH,
    height: Annotated[float, typer.Option("--height")] = DEFAULT_HEIGHT,
    seconds: Annotated[float, typer.Option("--seconds")] = 0.0,
    mapping: Annotated[str | None, typer.Option("--mapping")] = None,
) -> None:
    """Print the RGBA color of a single fragment position."""

    uniforms = FrameUniforms(resolution=(width, height), time_seconds=seconds)
    color = shade_pixel(x, y, uniforms, resolve_mapping(mapping))
    typer.echo(" ".join(f"{channel:.6f}" for channel in color))
