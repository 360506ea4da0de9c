"""Core data structures: colors, palette, geometry and the canvas."""

from unsvg.core.color import Color
from unsvg.core.palette import COLORS, PaletteColor
from unsvg.core.geometry import get_end_coordinates, normalize_direction, quantize
from unsvg.core.primitive import BackgroundFill, LineSegment
from unsvg.core.canvas import Canvas

__all__ = [
    "Color",
    "COLORS",
    "PaletteColor",
    "get_end_coordinates",
    "normalize_direction",
    "quantize",
    "BackgroundFill",
    "LineSegment",
    "Canvas",
]
