"""Render a canvas to an SVG document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from unsvg.core.constants import DEFAULT_STROKE_WIDTH, SVG_NAMESPACE
from unsvg.core.geometry import Point
from unsvg.core.primitive import BackgroundFill, LineSegment

if TYPE_CHECKING:
    from unsvg.core.canvas import Canvas


def _fmt(value: float) -> str:
    """Format a coordinate exactly, without trailing zeros."""
    if float(value).is_integer():
        return str(int(value))
    # multiples of 1/256 never need more than 8 decimals
    text = f"{float(value):.8f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _path_data(points: list[Point], close: bool = False) -> str:
    x0, y0 = points[0]
    parts = [f"M {_fmt(x0)} {_fmt(y0)}"]
    for x, y in points[1:]:
        parts.append(f"L {_fmt(x)} {_fmt(y)}")
    if close:
        parts.append("Z")
    return " ".join(parts)


class SvgRenderer:
    """
    Render a Canvas to SVG text.

    The document root is sized ``width x height`` with a matching viewBox.
    The background becomes one filled rectangle path; each line becomes
    one unfilled, stroked path, in scene order.
    """

    def __init__(self, stroke_width: float = DEFAULT_STROKE_WIDTH):
        self.stroke_width = stroke_width

    def render(self, canvas: "Canvas") -> str:
        """Render canvas to an SVG string."""
        width, height = canvas.get_dimensions()
        lines: list[str] = [
            f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
            f'xmlns="{SVG_NAMESPACE}">'
        ]

        for primitive in canvas.primitives:
            if isinstance(primitive, BackgroundFill):
                lines.append(self._background(primitive))
            elif isinstance(primitive, LineSegment):
                lines.append(self._line(primitive))
            else:
                raise TypeError(f"Unknown primitive: {primitive!r}")

        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def _background(self, fill: BackgroundFill) -> str:
        d = _path_data(list(fill.corners()), close=True)
        return f'  <path fill="{fill.color.to_hex()}" d="{d}"/>'

    def _line(self, line: LineSegment) -> str:
        d = _path_data([line.start, line.end])
        return (
            f'  <path fill="none" stroke="{line.color.to_hex()}" '
            f'stroke-width="{_fmt(self.stroke_width)}" d="{d}"/>'
        )
