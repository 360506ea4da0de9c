"""Color representation for canvas strokes and fills."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """
    An opaque 24-bit RGB color.

    Each channel is an integer in 0-255. Two colors are equal when all
    three channels are equal.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise TypeError(f"RGB channels must be int, got {channel!r}")
        if not all(0 <= c <= 255 for c in (self.red, self.green, self.blue)):
            raise ValueError(
                f"RGB values must be 0-255, got ({self.red}, {self.green}, {self.blue})"
            )

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Create a Color from "#rrggbb", "rrggbb" or the short "#rgb" form."""
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(c * 2 for c in text)
        if len(text) != 6:
            raise ValueError(f"Cannot parse color: {value!r}")
        try:
            r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Cannot parse color: {value!r}") from None
        return cls(r, g, b)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def black(cls) -> Color:
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> Color:
        return cls(255, 255, 255)
