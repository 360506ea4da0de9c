"""Shared constants for the canvas model and its renderers."""

# Coordinates are snapped to 1/QUANTIZE_STEPS of a unit
QUANTIZE_STEPS = 256

# Stroke width of every line, in canvas units
DEFAULT_STROKE_WIDTH = 1.0

# RGB of the fill laid down by every new canvas
BACKGROUND_RGB = (0, 0, 0)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# File suffix -> export format
VECTOR_FORMATS = {".svg": "SVG"}
RASTER_FORMATS = {
    ".png": "PNG",
    ".bmp": "BMP",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
}
