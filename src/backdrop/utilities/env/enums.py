from enum import StrEnum


class ColorMapping(StrEnum):
    """Color-mapping policy applied after aspect correction."""

    STATIC = "static"
    ANIMATED = "animated"
