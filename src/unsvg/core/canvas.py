"""Canvas - a fixed-size drawing made of an ordered list of primitives."""

from __future__ import annotations

import logging
import math
import operator
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from unsvg.core.color import Color
from unsvg.core.constants import BACKGROUND_RGB
from unsvg.core.geometry import Point, get_end_coordinates, quantize
from unsvg.core.palette import PaletteColor
from unsvg.core.primitive import BackgroundFill, LineSegment, Primitive
from unsvg.errors import LineError

if TYPE_CHECKING:
    from PIL import Image as PILImage

_logger = logging.getLogger(__name__)


def _dimension(name: str, value: int) -> int:
    value = operator.index(value)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


class Canvas:
    """
    An image that's being constructed.

    A new canvas starts with a single black background fill covering
    ``width x height``. Every successful ``draw_simple_line`` call appends
    one line on top of everything drawn before it. Nothing else changes
    the scene; exports only read it.

    Example:
        >>> canvas = Canvas(200, 200)
        >>> p1 = canvas.draw_simple_line(10, 10, 120, 100, COLORS[1])
        >>> p2 = canvas.draw_simple_line(*p1, 240, 100, COLORS[2])
        >>> canvas.save_vector("path_to.svg")
    """

    def __init__(self, width: int, height: int):
        self._width = _dimension("width", width)
        self._height = _dimension("height", height)
        self._scene: list[Primitive] = [
            BackgroundFill(self._width, self._height, Color(*BACKGROUND_RGB))
        ]

    @classmethod
    def new(cls, width: int, height: int) -> Canvas:
        """Create a canvas of ``width x height``."""
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        """The scene in render order; ``primitives[0]`` is the background."""
        return tuple(self._scene)

    def __len__(self) -> int:
        return len(self._scene)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(tuple(self._scene))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height}, primitives={len(self._scene)})"

    def get_dimensions(self) -> tuple[int, int]:
        """Get the size of the canvas as ``(width, height)``."""
        return (self._width, self._height)

    def lines(self) -> Iterator[LineSegment]:
        """Iterate over the line segments in draw order."""
        for primitive in self._scene:
            if isinstance(primitive, LineSegment):
                yield primitive

    def copy(self) -> Canvas:
        """Return an independent canvas with the same scene."""
        clone = Canvas(self._width, self._height)
        clone._scene = list(self._scene)
        return clone

    def draw_simple_line(
        self,
        x: float,
        y: float,
        direction: int,
        length: float,
        color: Color | PaletteColor,
    ) -> Point:
        """
        Draw a line from ``(x, y)`` heading ``direction`` for ``length`` units.

        Returns the quantized end point, so consecutive calls can be chained
        head-to-tail. Raises LineError if either end of the line is not a
        finite point; the canvas is left untouched in that case.
        """
        if isinstance(color, PaletteColor):
            color = color.color
        elif not isinstance(color, Color):
            raise TypeError(f"color must be a Color or PaletteColor, got {color!r}")

        start = (quantize(x), quantize(y))
        end = get_end_coordinates(start[0], start[1], direction, length)

        if not all(math.isfinite(v) for v in (*start, *end)):
            raise LineError(f"Could not draw line from {start} to {end}")

        self._scene.append(LineSegment(start, end, color))
        _logger.debug("line %s -> %s %s (%d primitives)", start, end, color.to_hex(), len(self._scene))
        return end

    def to_svg(self, **kwargs) -> str:
        """Render to an SVG document string."""
        from unsvg.render.svg import SvgRenderer
        return SvgRenderer(**kwargs).render(self)

    def to_raster(self, **kwargs) -> "PILImage.Image":
        """Render to a Pillow image of exactly ``width x height`` pixels."""
        from unsvg.render.raster import RasterRenderer
        return RasterRenderer(**kwargs).render(self)

    def save_vector(self, path: str | Path) -> None:
        """
        Save the canvas as an SVG file.

        ```
        canvas = Canvas(100, 100)
        canvas.save_vector("image.svg")
        ```
        """
        from unsvg.io.writer import save_vector
        save_vector(self, path)

    def save_raster(self, path: str | Path, format: str = "PNG") -> None:
        """Save the canvas as a raster image file (PNG by default)."""
        from unsvg.io.writer import save_raster
        save_raster(self, path, format=format)

    def save(self, path: str | Path, format: str | None = None) -> None:
        """Save the canvas, picking vector or raster output from the suffix."""
        from unsvg.io.writer import save
        save(self, path, format=format)
