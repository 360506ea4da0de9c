"""Save canvases to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from unsvg.core.constants import RASTER_FORMATS, VECTOR_FORMATS
from unsvg.errors import ExportError

if TYPE_CHECKING:
    from unsvg.core.canvas import Canvas

_logger = logging.getLogger(__name__)


def _write(path: Path, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e
    _logger.debug("wrote %d bytes to %s", len(data), path)


def save_vector(canvas: "Canvas", path: str | Path) -> None:
    """Serialize the canvas to SVG and write it to ``path``."""
    from unsvg.render.svg import SvgRenderer
    data = SvgRenderer().render(canvas).encode("utf-8")
    _write(Path(path), data)


def save_raster(canvas: "Canvas", path: str | Path, format: str = "PNG") -> None:
    """
    Rasterize the canvas and write it to ``path`` as an image file.

    The image has the canvas's exact pixel dimensions.
    """
    from unsvg.render.raster import RasterRenderer, encode_image
    image = RasterRenderer().render(canvas)
    try:
        data = encode_image(image, format=format)
    except (KeyError, ValueError, OSError) as e:
        raise ExportError(f"Could not encode {format} image: {e}") from e
    _write(Path(path), data)


def save(canvas: "Canvas", path: str | Path, format: str | None = None) -> None:
    """
    Save a canvas, choosing the output format from the file suffix.

    ``.svg`` writes a vector document; ``.png``, ``.bmp``, ``.gif`` and
    ``.tif``/``.tiff`` write a raster image. Pass ``format`` ("SVG",
    "PNG", ...) to override the suffix.
    """
    path = Path(path)

    if format is None:
        suffix = path.suffix.lower()
        format = VECTOR_FORMATS.get(suffix) or RASTER_FORMATS.get(suffix)
        if format is None:
            raise ExportError(f"Cannot detect export format from suffix: {suffix!r}")

    format = format.upper()
    if format in VECTOR_FORMATS.values():
        save_vector(canvas, path)
    elif format in RASTER_FORMATS.values():
        save_raster(canvas, path, format=format)
    else:
        raise ExportError(f"Unsupported export format: {format!r}")
