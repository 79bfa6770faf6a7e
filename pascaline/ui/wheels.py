"""Draw a :class:`Pascaline` with rich.

Wheels are laid out most significant first, left to right. Between two
wheels sits the carry gear that couples them; the decimal separator sits
between the units wheel and the first fractional wheel.
"""

import math

from rich.console import Group
from rich.table import Table
from rich.text import Text

from ..machine import Pascaline
from .theme import DEFAULT_THEME


def drum_position(machine: Pascaline, index: int) -> float:
    """How many digit steps wheel ``index`` has visibly turned."""
    config = machine.config
    return (machine.wheel_angle(index) - config.baseline_angle) / config.unit_angle


def window_digits(machine: Pascaline, index: int) -> tuple[int, int, int]:
    """Digits above, under and below the reading mark of wheel ``index``.

    Driven by the animated angle, so a turning wheel rolls through every
    digit on its way instead of jumping to the logical one.
    """
    shown = int(math.floor(drum_position(machine, index) + 0.5)) % 10
    return (shown + 1) % 10, shown, (shown - 1) % 10


def _in_motion(machine: Pascaline, index: int) -> bool:
    pos = drum_position(machine, index)
    return abs(pos - round(pos)) > 0.2


def render_machine(machine: Pascaline) -> Group:
    """Render the wheel row and the total underneath."""
    palette = DEFAULT_THEME.palette
    grid = Table.grid(padding=(0, 1))

    labels, above, window, below, flags = [], [], [], [], []

    for i in range(machine.size - 1, -1, -1):
        grid.add_column(justify="center", min_width=5)
        up, mid, down = window_digits(machine, i)
        labels.append(Text(machine.formatter.place_value(i), style=f"dim {palette.text_dim}"))
        above.append(Text(str(up), style=f"dim {palette.brass_edge}"))
        mid_style = f"bold {palette.brass}"
        if _in_motion(machine, i):
            mid_style = f"italic {palette.brass}"
        cell = Text()
        cell.append("▸", style=palette.reading_mark)
        cell.append(f" {mid} ", style=mid_style)
        cell.append("◂", style=palette.reading_mark)
        window.append(cell)
        below.append(Text(str(down), style=f"dim {palette.brass_edge}"))
        if machine.carry_active(i):
            flags.append(Text("CARRY", style=f"bold {palette.carry}"))
        else:
            flags.append(Text(""))

        if i > 0:
            grid.add_column(justify="center", min_width=1)
            separator = i == machine.config.split_index
            gear = DEFAULT_THEME.gear_glyph(machine.carry_gear_angle(i - 1))
            labels.append(Text(""))
            above.append(Text(""))
            mid_cell = Text(gear, style=palette.pewter)
            if separator:
                mid_cell.append(machine.config.decimal_separator, style=f"bold {palette.text_bright}")
            window.append(mid_cell)
            below.append(Text(""))
            flags.append(Text(""))

    for row in (labels, above, window, below, flags):
        grid.add_row(*row)

    total = Text()
    total.append("  total: ", style=f"dim {palette.text_dim}")
    total.append(machine.total, style=f"bold {palette.total}")
    return Group(grid, total)


def render_wheel_table(machine: Pascaline) -> Table:
    """Tabulate every wheel with its caption, value and angles."""
    palette = DEFAULT_THEME.palette
    table = Table(border_style=f"dim {palette.border}", header_style=f"bold {palette.brass}")
    table.add_column("wheel", justify="right")
    table.add_column("button")
    table.add_column("value", justify="right")
    table.add_column("digit", justify="right")
    table.add_column("angle", justify="right")
    table.add_column("carry gear", justify="right")

    for i in range(machine.size - 1, -1, -1):
        gear = f"{machine.carry_gear_angle(i):.0f}" if i < machine.size - 1 else "-"
        table.add_row(
            str(i),
            machine.place_label(i),
            str(machine.value(i)),
            str(machine.digit(i)),
            f"{machine.wheel_angle(i):.0f}",
            gear,
        )
    return table
