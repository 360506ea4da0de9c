"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from unsvg.core.color import Color
from unsvg.core.palette import COLORS, PaletteColor, color_by_name
from unsvg.errors import UnsvgError


def parse_color(text: str) -> Color:
    """Parse a palette name ("forest") or index ("10")."""
    text = text.strip()
    if text.isdigit():
        return PaletteColor.from_index(int(text)).color
    return color_by_name(text)


def parse_segment(text: str) -> tuple[int, float, Color]:
    """Parse a ``DIRECTION:LENGTH[:COLOR]`` segment."""
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Segment must be DIRECTION:LENGTH[:COLOR], got {text!r}")
    direction = int(parts[0])
    length = float(parts[1])
    color = parse_color(parts[2]) if len(parts) == 3 else PaletteColor.WHITE.color
    return direction, length, color


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="unsvg",
        help="Draw deterministic line art and save it as SVG or PNG.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def draw(
        output: Annotated[Path, typer.Argument(help="Destination file (.svg, .png, ...)")],
        segments: Annotated[list[str], typer.Argument(help="Segments as DIRECTION:LENGTH[:COLOR]")],
        width: Annotated[int, typer.Option("--width", "-W", help="Canvas width")] = 200,
        height: Annotated[int, typer.Option("--height", "-H", help="Canvas height")] = 200,
        start: Annotated[tuple[float, float], typer.Option("--start", "-s", help="Start point X Y")] = (0.0, 0.0),
        format: Annotated[Optional[str], typer.Option("--format", "-f", help="Output format (auto-detected from extension)")] = None,
    ) -> None:
        """Draw a chain of line segments, each starting where the last ended."""
        from unsvg.core.canvas import Canvas

        if width <= 0 or height <= 0:
            console.print(f"[red]Canvas size must be positive, got {width}x{height}[/]")
            raise typer.Exit(1)

        try:
            parsed = [parse_segment(s) for s in segments]
        except (ValueError, UnsvgError) as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        canvas = Canvas(width, height)
        x, y = start
        try:
            for direction, length, color in parsed:
                x, y = canvas.draw_simple_line(x, y, direction, length, color)
            canvas.save(output, format=format)
        except UnsvgError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        console.print(f"[green]Saved {len(parsed)} line(s) to {output}[/]")
        console.print(f"End point: ({x}, {y})")

    @app.command()
    def palette() -> None:
        """Show the 16 palette colors."""
        table = Table(title="unsvg palette")
        table.add_column("Index", justify="right")
        table.add_column("Name")
        table.add_column("Hex")
        table.add_column("Swatch")
        for entry in PaletteColor:
            hex_value = COLORS[entry].to_hex()
            table.add_row(str(int(entry)), entry.label, hex_value, f"[on {hex_value}]    [/]")
        console.print(table)

    @app.command()
    def demo(
        output: Annotated[Path, typer.Argument(help="Destination file (.svg, .png, ...)")],
    ) -> None:
        """Draw the three-line sample image."""
        from unsvg.core.canvas import Canvas

        canvas = Canvas(200, 200)
        x1, y1 = canvas.draw_simple_line(10, 10, 120, 100, COLORS[1])
        x2, y2 = canvas.draw_simple_line(x1, y1, 240, 100, COLORS[2])
        canvas.draw_simple_line(x2, y2, 0, 100, COLORS[3])
        try:
            canvas.save(output)
        except UnsvgError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Saved demo to {output}[/]")

    return app
