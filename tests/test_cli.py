"""Tests for the command line interface."""

from pathlib import Path

import pytest

pytest.importorskip("typer")
pytest.importorskip("rich")

from typer.testing import CliRunner

from unsvg.cli.app import create_app, parse_color, parse_segment
from unsvg.core.palette import COLORS
from unsvg.errors import ColorIndexError

pytestmark = pytest.mark.cli

runner = CliRunner()


class TestParsing:
    """Tests for segment and color parsing."""

    def test_parse_color(self) -> None:
        assert parse_color("forest") == COLORS[10]
        assert parse_color("2") == COLORS[2]
        with pytest.raises(ColorIndexError):
            parse_color("16")

    def test_parse_segment(self) -> None:
        assert parse_segment("120:100:blue") == (120, 100.0, COLORS[1])
        assert parse_segment("-90:2.5") == (-90, 2.5, COLORS[7])
        with pytest.raises(ValueError):
            parse_segment("120")


class TestCommands:
    """Tests for CLI commands."""

    def test_palette(self) -> None:
        result = runner.invoke(create_app(), ["palette"])
        assert result.exit_code == 0
        assert "Forest" in result.output

    def test_draw_svg(self, tmp_path: Path) -> None:
        out = tmp_path / "out.svg"
        result = runner.invoke(
            create_app(),
            ["draw", str(out), "120:100:blue", "240:100:cyan", "0:100:green", "--start", "10", "10"],
        )
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").count("<path") == 4

    def test_draw_bad_segment(self, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["draw", str(tmp_path / "out.svg"), "nope"])
        assert result.exit_code == 1

    def test_draw_bad_color(self, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["draw", str(tmp_path / "out.svg"), "90:10:chartreuse"])
        assert result.exit_code == 1

    def test_demo_png(self, tmp_path: Path) -> None:
        out = tmp_path / "demo.png"
        result = runner.invoke(create_app(), ["demo", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(b"\x89PNG")
