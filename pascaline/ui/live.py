"""Drive a machine's frame scheduler against a live terminal display."""

import time
from typing import Optional

from rich.console import Console
from rich.live import Live

from ..machine import Pascaline
from .theme import console as default_console
from .wheels import render_machine


def animate(
    machine: Pascaline,
    console: Optional[Console] = None,
    fps: int = 60,
    max_frames: int = 10_000,
) -> int:
    """Run frames until every gear has settled. Returns frames rendered.

    Carry indicators still lit when the gears stop are left to expire on
    their own; the caller decides whether to keep waiting for them.

    Raises ValueError when fps is below 1.
    """
    if fps < 1:
        raise ValueError(f"fps must be at least 1, got {fps}")
    con = console or default_console
    interval = 1.0 / fps
    frames = 0

    with Live(render_machine(machine), console=con, refresh_per_second=fps, transient=False) as live:
        while machine.scheduler.has_frames and frames < max_frames:
            time.sleep(interval)
            machine.scheduler.run_frame()
            live.update(render_machine(machine))
            frames += 1
    return frames
