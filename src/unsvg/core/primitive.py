"""Drawing primitives held in a canvas scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from unsvg.core.color import Color
from unsvg.core.geometry import Point


@dataclass(frozen=True, slots=True)
class BackgroundFill:
    """A solid rectangle covering the whole canvas."""
    width: int
    height: int
    color: Color

    def corners(self) -> tuple[Point, Point, Point, Point]:
        w, h = float(self.width), float(self.height)
        return ((0.0, 0.0), (w, 0.0), (w, h), (0.0, h))


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A straight stroked line with no fill."""
    start: Point
    end: Point
    color: Color

    @property
    def length(self) -> float:
        return ((self.end[0] - self.start[0]) ** 2 + (self.end[1] - self.start[1]) ** 2) ** 0.5


Primitive = Union[BackgroundFill, LineSegment]
