"""Direction and endpoint math.

Directions are compass bearings in whole degrees: 0 points up (towards
smaller y), and angles grow clockwise. Every coordinate going in or out
of this module is snapped to a 1/256 grid so that the same inputs give
the same outputs on every platform.
"""

from __future__ import annotations

import math
import numbers
import operator

from unsvg.core.constants import QUANTIZE_STEPS

Point = tuple[float, float]


def _real(value: float) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Coordinates and lengths must be real numbers, got {value!r}")
    return float(value)


def quantize(value: float) -> float:
    """Snap ``value`` to the nearest multiple of 1/256.

    Halves round away from zero. Non-finite values, and values too large
    to scale, come back non-finite instead of raising.
    """
    scaled = _real(value) * QUANTIZE_STEPS
    if not math.isfinite(scaled):
        return scaled
    # scaled - steps is exact for every double
    steps = math.trunc(scaled)
    if abs(scaled - steps) >= 0.5:
        steps += 1 if scaled > 0 else -1
    return steps / QUANTIZE_STEPS


def normalize_direction(direction: int) -> int:
    """Normalize a direction in degrees to within [0, 360)."""
    return operator.index(direction) % 360


def get_end_coordinates(x: float, y: float, direction: int, length: float) -> Point:
    """Tell where a line will end, given a start point, direction and length.

    This is used by ``Canvas.draw_simple_line`` to find the end point of a
    line. A negative length walks backwards along the direction.
    """
    x = quantize(x)
    y = quantize(y)
    direction = normalize_direction(direction)

    # 0 degrees is straight up and clockwise; shift so 0 is straight right
    radians = math.radians(direction - 90)

    length = _real(length)
    end_x = quantize(x + math.cos(radians) * length)
    end_y = quantize(y + math.sin(radians) * length)
    return (end_x, end_y)
