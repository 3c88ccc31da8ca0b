import typer

from backdrop.utilities.env import ColorMapping, Configuration
from backdrop.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


def resolve_mapping(mapping: str | None) -> ColorMapping:
    """Parse ``mapping`` or fall back to the configured one, exiting on bad input."""

    try:
        if mapping is None:
            return Configuration.color_mapping()
        return ColorMapping(mapping.strip().lower())
    except ValueError:
        logger.error(
            "Unknown color mapping %r; expected one of: %s",
            mapping,
            ", ".join(m.value for m in ColorMapping),
        )
        raise typer.Exit(code=1)


def resolve_scale(scale: float | None) -> float:
    if scale is None:
        return Configuration.viewport_scale()
    if scale <= 0.0:
        logger.error("Viewport scale must be greater than 0, got %s", scale)
        raise typer.Exit(code=1)
    return scale
