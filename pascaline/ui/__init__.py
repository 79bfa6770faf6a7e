"""Terminal UI for the Pascaline."""

from .theme import DEFAULT_THEME, console, render_header, render_error
from .wheels import render_machine, render_wheel_table, window_digits
from .live import animate

__all__ = [
    "DEFAULT_THEME",
    "console",
    "render_header",
    "render_error",
    "render_machine",
    "render_wheel_table",
    "window_digits",
    "animate",
]
