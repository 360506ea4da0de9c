"""Shared fixtures for unsvg tests."""

import pytest

from unsvg.core.canvas import Canvas
from unsvg.core.palette import COLORS


@pytest.fixture
def canvas() -> Canvas:
    """A fresh 200x200 canvas."""
    return Canvas(200, 200)


@pytest.fixture
def demo_canvas() -> Canvas:
    """The three-line sample drawing."""
    canvas = Canvas(200, 200)
    p1 = canvas.draw_simple_line(10, 10, 120, 100, COLORS[1])
    p2 = canvas.draw_simple_line(*p1, 240, 100, COLORS[2])
    canvas.draw_simple_line(*p2, 0, 100, COLORS[3])
    return canvas
