from backdrop.shading.color_mapping import (color_mapper, map_animated,
                                            map_static)
from backdrop.shading.coordinates import (correct_aspect,
                                          normalize_coordinates)
from backdrop.shading.shader import (BackgroundShader, FrameUniforms,
                                     shade_pixel)
from backdrop.utilities.env.enums import ColorMapping

__all__ = [
    "BackgroundShader",
    "ColorMapping",
    "FrameUniforms",
    "color_mapper",
    "correct_aspect",
    "map_animated",
    "map_static",
    "normalize_coordinates",
    "shade_pixel",
]
