"""Tests for the Canvas model."""

import math

import pytest

import unsvg
from unsvg.core.canvas import Canvas
from unsvg.core.color import Color
from unsvg.core.palette import COLORS, PaletteColor
from unsvg.core.primitive import BackgroundFill, LineSegment
from unsvg.errors import LineError


class TestConstruction:
    """Tests for creating a canvas."""

    def test_dimensions(self) -> None:
        canvas = Canvas(100, 50)
        assert canvas.get_dimensions() == (100, 50)
        assert canvas.width == 100
        assert canvas.height == 50

    def test_new_aliases(self) -> None:
        assert Canvas.new(10, 20).get_dimensions() == (10, 20)
        assert unsvg.new(30, 40).get_dimensions() == (30, 40)

    def test_starts_with_black_background(self, canvas: Canvas) -> None:
        assert len(canvas) == 1
        background = canvas.primitives[0]
        assert isinstance(background, BackgroundFill)
        assert background.color == Color(0, 0, 0)
        assert (background.width, background.height) == (200, 200)

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Canvas(0, 10)
        with pytest.raises(ValueError):
            Canvas(10, -5)

    def test_non_integer_size_rejected(self) -> None:
        with pytest.raises(TypeError):
            Canvas(10.5, 10)  # type: ignore[arg-type]


class TestDrawSimpleLine:
    """Tests for draw_simple_line."""

    def test_returns_end_point(self, canvas: Canvas) -> None:
        end = canvas.draw_simple_line(10, 10, 90, 50, COLORS[4])
        assert end == (60.0, 10.0)

    def test_appends_line(self, canvas: Canvas) -> None:
        canvas.draw_simple_line(10, 10, 180, 25, COLORS[4])
        assert len(canvas) == 2
        line = canvas.primitives[1]
        assert isinstance(line, LineSegment)
        assert line.start == (10.0, 10.0)
        assert line.end == (10.0, 35.0)
        assert line.color == COLORS[4]
        assert line.length == 25.0

    def test_scene_growth(self, canvas: Canvas) -> None:
        for n in range(1, 6):
            canvas.draw_simple_line(100, 100, n * 40, 10, COLORS[n])
            assert len(canvas) == n + 1
        assert isinstance(canvas.primitives[0], BackgroundFill)
        assert len(list(canvas.lines())) == 5

    def test_draw_order_preserved(self, canvas: Canvas) -> None:
        canvas.draw_simple_line(0, 0, 90, 10, COLORS[1])
        canvas.draw_simple_line(0, 0, 90, 10, COLORS[2])
        colors = [line.color for line in canvas.lines()]
        assert colors == [COLORS[1], COLORS[2]]

    def test_start_is_quantized(self, canvas: Canvas) -> None:
        canvas.draw_simple_line(0.1, 0.2, 90, 1, COLORS[7])
        line = canvas.primitives[-1]
        assert line.start == (26 / 256, 51 / 256)

    def test_palette_color_accepted(self, canvas: Canvas) -> None:
        canvas.draw_simple_line(0, 0, 0, 5, PaletteColor.ORANGE)
        assert canvas.primitives[-1].color == COLORS[14]

    def test_bad_color_type(self, canvas: Canvas) -> None:
        with pytest.raises(TypeError):
            canvas.draw_simple_line(0, 0, 0, 5, (255, 0, 0))  # type: ignore[arg-type]
        assert len(canvas) == 1

    def test_zero_length_line(self, canvas: Canvas) -> None:
        assert canvas.draw_simple_line(5, 5, 45, 0, COLORS[1]) == (5.0, 5.0)
        assert len(canvas) == 2

    def test_non_finite_leaves_canvas_unchanged(self, canvas: Canvas) -> None:
        canvas.draw_simple_line(0, 0, 90, 10, COLORS[1])
        before = canvas.primitives
        with pytest.raises(LineError):
            canvas.draw_simple_line(math.inf, 0, 90, 10, COLORS[1])
        with pytest.raises(LineError):
            canvas.draw_simple_line(0, 0, 90, math.nan, COLORS[1])
        assert canvas.primitives == before

    def test_overflowing_line_leaves_canvas_unchanged(self, canvas: Canvas) -> None:
        with pytest.raises(LineError):
            canvas.draw_simple_line(0, 0, 90, 1e307, COLORS[1])
        assert len(canvas) == 1

    def test_string_coordinates_rejected(self, canvas: Canvas) -> None:
        with pytest.raises(TypeError):
            canvas.draw_simple_line("10", "10", 90, "5", COLORS[1])  # type: ignore[arg-type]
        assert len(canvas) == 1

    def test_chaining_stays_on_grid(self, canvas: Canvas) -> None:
        point = (10.0, 10.0)
        for direction in (120, 240, 0):
            point = canvas.draw_simple_line(*point, direction, 100, COLORS[3])
            assert (point[0] * 256).is_integer()
            assert (point[1] * 256).is_integer()

    def test_sample_drawing(self, demo_canvas: Canvas) -> None:
        assert len(demo_canvas) == 4
        lines = list(demo_canvas.lines())
        assert lines[0].start == (10.0, 10.0)
        assert lines[0].end == (96.6015625, 60.0)
        assert lines[1].start == lines[0].end
        assert lines[2].start == lines[1].end
        assert [line.color for line in lines] == [COLORS[1], COLORS[2], COLORS[3]]


class TestCopy:
    """Tests for Canvas.copy."""

    def test_copy_is_independent(self, demo_canvas: Canvas) -> None:
        clone = demo_canvas.copy()
        assert clone.primitives == demo_canvas.primitives
        clone.draw_simple_line(0, 0, 90, 10, COLORS[5])
        assert len(clone) == 5
        assert len(demo_canvas) == 4

    def test_primitives_is_read_only_view(self, canvas: Canvas) -> None:
        view = canvas.primitives
        assert isinstance(view, tuple)
        canvas.draw_simple_line(0, 0, 90, 10, COLORS[5])
        assert len(view) == 1
