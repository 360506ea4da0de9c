"""File output for canvases."""

from unsvg.io.writer import save, save_raster, save_vector

__all__ = ["save", "save_raster", "save_vector"]
