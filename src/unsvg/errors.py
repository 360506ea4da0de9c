"""Exceptions raised by unsvg."""


class UnsvgError(Exception):
    """Base class for all recoverable unsvg errors."""


class ColorIndexError(UnsvgError, IndexError):
    """A palette index outside 0-15 was requested."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Palette index out of range: {index} (expected 0-15)")


class ColorNotFoundError(UnsvgError, LookupError):
    """A color (or color name) is not part of the palette."""


class LineError(UnsvgError, ValueError):
    """A line could not be built from the given points."""


class ExportError(UnsvgError, OSError):
    """Writing or encoding a canvas export failed."""
