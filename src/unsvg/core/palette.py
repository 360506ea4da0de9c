"""The fixed 16-color palette.

These are the 16 colors of the original Logo language. Index order is
fixed and never changes at runtime:

    0 Black    4 Red       8 Brown    12 Salmon
    1 Blue     5 Magenta   9 Tan      13 Purple
    2 Cyan     6 Yellow   10 Forest   14 Orange
    3 Green    7 White    11 Aqua     15 Grey
"""

from __future__ import annotations

from enum import IntEnum

from unsvg.core.color import Color
from unsvg.errors import ColorIndexError, ColorNotFoundError


COLORS: tuple[Color, ...] = (
    Color(0, 0, 0),        # 0 - Black
    Color(0, 0, 255),      # 1 - Blue
    Color(0, 255, 255),    # 2 - Cyan
    Color(0, 255, 0),      # 3 - Green
    Color(255, 0, 0),      # 4 - Red
    Color(255, 0, 255),    # 5 - Magenta
    Color(255, 255, 0),    # 6 - Yellow
    Color(255, 255, 255),  # 7 - White
    Color(165, 42, 42),    # 8 - Brown
    Color(210, 180, 140),  # 9 - Tan
    Color(34, 139, 34),    # 10 - Forest
    Color(127, 255, 212),  # 11 - Aqua
    Color(250, 128, 114),  # 12 - Salmon
    Color(128, 0, 128),    # 13 - Purple
    Color(255, 165, 0),    # 14 - Orange
    Color(128, 128, 128),  # 15 - Grey
)


class PaletteColor(IntEnum):
    """Symbolic names for the entries of COLORS."""
    BLACK = 0
    BLUE = 1
    CYAN = 2
    GREEN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    WHITE = 7
    BROWN = 8
    TAN = 9
    FOREST = 10
    AQUA = 11
    SALMON = 12
    PURPLE = 13
    ORANGE = 14
    GREY = 15

    @classmethod
    def from_index(cls, index: int) -> PaletteColor:
        """Return the palette entry at ``index`` (0-15)."""
        if isinstance(index, bool) or not 0 <= index < len(COLORS):
            raise ColorIndexError(index)
        return cls(index)

    @classmethod
    def from_color(cls, color: Color) -> PaletteColor:
        """Return the palette entry whose RGB value equals ``color``."""
        for index, candidate in enumerate(COLORS):
            if candidate == color:
                return cls(index)
        raise ColorNotFoundError(f"Color not found in palette: {color}")

    @property
    def color(self) -> Color:
        return COLORS[self]

    @property
    def label(self) -> str:
        """Display name, e.g. "Forest"."""
        return self.name.capitalize()


def color_by_name(name: str) -> Color:
    """Look up a palette color by name (case-insensitive)."""
    key = name.strip().upper()
    try:
        return PaletteColor[key].color
    except KeyError:
        raise ColorNotFoundError(f"Unknown color name: {name!r}") from None
