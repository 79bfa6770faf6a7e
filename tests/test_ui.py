"""Tests for pascaline.ui."""

from io import StringIO

import pytest
from rich.console import Console

from pascaline.machine import FrameScheduler, MachineConfig, ManualClock, Pascaline
from pascaline.ui import DEFAULT_THEME, animate, render_machine, render_wheel_table, window_digits


def _capture_console() -> Console:
    return Console(file=StringIO(), width=120, force_terminal=False)


def _machine(**overrides):
    clock = ManualClock()
    return clock, Pascaline(MachineConfig(**overrides), FrameScheduler(clock))


def test_window_digits_at_rest():
    _, machine = _machine()
    assert window_digits(machine, 0) == (1, 0, 9)


def test_window_follows_animated_angle():
    clock, machine = _machine()
    machine.add_unit(2, 3)
    assert window_digits(machine, 2)[1] == 0
    machine.settle()
    assert window_digits(machine, 2) == (4, 3, 2)


def test_window_wraps_after_full_turn():
    _, machine = _machine()
    machine.add_unit(0, 12)
    machine.settle()
    assert window_digits(machine, 0)[1] == machine.digit(0) == 2


def test_gear_glyph_cycles():
    theme = DEFAULT_THEME
    assert theme.gear_glyph(0) == theme.gear_glyph(360)
    assert theme.gear_glyph(180) == "│"
    assert theme.gear_glyph(45) == "╱"


def test_render_machine_shows_total():
    con = _capture_console()
    _, machine = _machine()
    machine.add_unit(3)
    machine.add_unit(0)
    machine.settle()
    con.print(render_machine(machine))
    output = con.file.getvalue()
    assert "total:" in output
    assert "1,001" in output
    assert "0,001" in output
    assert "100" in output


def test_render_machine_shows_carry_flag():
    con = _capture_console()
    _, machine = _machine()
    machine.add_unit(0, 9)
    machine.settle()
    assert window_digits(machine, 0)[1] == machine.digit(0) == 9
    machine.add_unit(0)
    con.print(render_machine(machine))
    assert "CARRY" in con.file.getvalue()


def test_render_without_fraction_wheels():
    con = _capture_console()
    _, machine = _machine(wheels=3, split_index=0)
    machine.add_unit(1)
    machine.settle()
    con.print(render_machine(machine))
    assert "10" in con.file.getvalue()


def test_render_wheel_table():
    con = _capture_console()
    _, machine = _machine()
    con.print(render_wheel_table(machine))
    output = con.file.getvalue()
    assert "+1 (units)" in output
    assert "+100 (hundreds)" in output
    assert "carry gear" in output


def test_animate_runs_until_settled():
    con = _capture_console()
    machine = Pascaline()
    machine.add_unit(0)
    frames = animate(machine, con, fps=200)
    assert frames > 0
    assert not machine.is_animating
    assert machine.wheel_angle(0) == 216


def test_animate_rejects_zero_fps():
    machine = Pascaline()
    machine.add_unit(0)
    with pytest.raises(ValueError):
        animate(machine, _capture_console(), fps=0)
