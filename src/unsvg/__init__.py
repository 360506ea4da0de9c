"""
unsvg: a very simple deterministic vector canvas

Draw straight colored lines by start point, compass direction and length,
then save the drawing as SVG or as a raster image.

Quick Start:
    >>> import unsvg
    >>> canvas = unsvg.new(200, 200)
    >>> x2, y2 = canvas.draw_simple_line(10, 10, 120, 100, unsvg.COLORS[1])
    >>> x3, y3 = canvas.draw_simple_line(x2, y2, 240, 100, unsvg.COLORS[2])
    >>> canvas.draw_simple_line(x3, y3, 0, 100, unsvg.COLORS[3])
    >>> canvas.save_vector("path_to.svg")

Directions are compass bearings in degrees: 0 is straight up and angles
grow clockwise. All coordinates are snapped to a 1/256 grid, so the same
inputs always give the same end points regardless of float quirks.
"""

__version__ = "0.1.0"

# Core types
from unsvg.core.color import Color
from unsvg.core.palette import COLORS, PaletteColor, color_by_name
from unsvg.core.canvas import Canvas
from unsvg.core.primitive import BackgroundFill, LineSegment

# Coordinate math
from unsvg.core.geometry import get_end_coordinates, normalize_direction, quantize

# Errors
from unsvg.errors import (
    ColorIndexError,
    ColorNotFoundError,
    ExportError,
    LineError,
    UnsvgError,
)

# I/O
from unsvg.io.writer import save

def new(width: int, height: int) -> Canvas:
    """Create a new black canvas of ``width x height``."""
    return Canvas(width, height)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "COLORS",
    "PaletteColor",
    "color_by_name",
    "Canvas",
    "BackgroundFill",
    "LineSegment",
    # Coordinate math
    "get_end_coordinates",
    "normalize_direction",
    "quantize",
    # Errors
    "UnsvgError",
    "ColorIndexError",
    "ColorNotFoundError",
    "LineError",
    "ExportError",
    # I/O
    "save",
    "new",
]
