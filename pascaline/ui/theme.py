"""Pascaline terminal theme: brass wheels, pewter carry gears.

All hex values live here. Renderers never hardcode colors.
"""

from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@dataclass(frozen=True)
class ColorPalette:
    """Core UI color palette."""

    bg: str = "#0c0c10"
    border: str = "#3a3226"
    text_bright: str = "#e8e8f0"
    text: str = "#b8b8cc"
    text_dim: str = "#4a4a60"
    brass: str = "#ffd700"
    brass_edge: str = "#a0522d"
    pewter: str = "#bcaaa4"
    pewter_edge: str = "#795548"
    reading_mark: str = "#e55a6e"
    carry: str = "#e5c747"
    total: str = "#34d399"
    error: str = "#e55a6e"


@dataclass(frozen=True)
class PascalineTheme:
    """Palette plus the glyphs used to draw gears."""

    palette: ColorPalette
    # One glyph per eighth of a turn, clockwise from twelve o'clock.
    gear_frames: tuple[str, ...] = (
        "│", "╱", "─", "╲",
        "│", "╱", "─", "╲",
    )

    def gear_glyph(self, angle: float) -> str:
        """Glyph for a gear turned to ``angle`` degrees."""
        step = 360 / len(self.gear_frames)
        return self.gear_frames[int(round(angle / step)) % len(self.gear_frames)]


DEFAULT_THEME = PascalineTheme(palette=ColorPalette())

console = Console()


def render_header(title: str, subtitle: str = "") -> None:
    """Render a header panel."""
    palette = DEFAULT_THEME.palette
    header_text = Text(title, style=f"bold {palette.brass}")
    if subtitle:
        header_text.append(f"\n{subtitle}", style=f"dim {palette.text}")
    panel = Panel(
        header_text,
        border_style=palette.brass_edge,
        padding=(0, 2),
        expand=False,
    )
    console.print(panel)


def render_error(message: str) -> None:
    console.print(Text(f"error: {message}", style=DEFAULT_THEME.palette.error))
