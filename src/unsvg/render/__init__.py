"""Renderers for exporting a canvas to vector or raster formats."""

from unsvg.render.svg import SvgRenderer
from unsvg.render.raster import RasterRenderer

__all__ = ["SvgRenderer", "RasterRenderer"]
