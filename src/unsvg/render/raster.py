"""Render a canvas to a pixel image with Pillow."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from unsvg.core.constants import DEFAULT_STROKE_WIDTH
from unsvg.core.primitive import BackgroundFill, LineSegment

if TYPE_CHECKING:
    from unsvg.core.canvas import Canvas


class RasterRenderer:
    """
    Rasterize a Canvas to an RGB image.

    The image is exactly ``width x height`` pixels and drawn with an
    identity transform: one canvas unit is one pixel. Primitives are
    painted in scene order, so later lines cover earlier ones.
    """

    def __init__(self, stroke_width: float = DEFAULT_STROKE_WIDTH):
        self.stroke_width = max(1, round(stroke_width))

    def render(self, canvas: "Canvas") -> Image.Image:
        """Render canvas to a Pillow image."""
        width, height = canvas.get_dimensions()
        image = Image.new("RGB", (width, height))
        draw = ImageDraw.Draw(image)

        for primitive in canvas.primitives:
            if isinstance(primitive, BackgroundFill):
                draw.rectangle(
                    [(0, 0), (primitive.width - 1, primitive.height - 1)],
                    fill=primitive.color.rgb,
                )
            elif isinstance(primitive, LineSegment):
                draw.line(
                    [primitive.start, primitive.end],
                    fill=primitive.color.rgb,
                    width=self.stroke_width,
                )
            else:
                raise TypeError(f"Unknown primitive: {primitive!r}")

        return image

    def render_bytes(self, canvas: "Canvas", format: str = "PNG") -> bytes:
        """Render canvas and encode it in an image file format."""
        return encode_image(self.render(canvas), format=format)


def encode_image(image: Image.Image, format: str = "PNG") -> bytes:
    """Encode a rendered image in an image file format."""
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    return buffer.getvalue()
