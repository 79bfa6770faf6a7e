"""Pascaline CLI - a mechanical adding machine in the terminal."""

import logging
from typing import Iterable, Optional

import click
from rich.logging import RichHandler

from .config import ConfigManager
from .machine import Pascaline
from .ui import animate, render_error, render_header, render_machine, render_wheel_table
from .ui.theme import DEFAULT_THEME, console

_log = logging.getLogger(__name__)


class PascalineApp:
    """Main Pascaline application: one machine built from the config file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config = ConfigManager(config_path)
        try:
            machine_config = self.config.get_machine_config()
            ui_config = self.config.get_ui_config()
        except (TypeError, ValueError) as e:
            raise click.ClickException(f"Invalid config in {self.config.config_path}: {e}")
        self.fps = ui_config.fps
        self.animate = ui_config.animate
        self.machine = Pascaline(machine_config)

    def add(self, indexes: Iterable[int], amount: int = 1) -> str:
        """Turn each listed wheel in order, then show the machine."""
        size = self.machine.size
        indexes = list(indexes)
        for index in indexes:
            if not 0 <= index < size:
                raise click.ClickException(f"Wheel {index} does not exist (0-{size - 1})")
        for index in indexes:
            self.machine.add_unit(index, amount)
        self.show()
        return self.machine.total

    def reset(self) -> None:
        self.machine.reset()
        self.show()

    def show(self) -> None:
        if self.animate and console.is_terminal:
            animate(self.machine, console, fps=self.fps)
        else:
            self.machine.settle()
            console.print(render_machine(self.machine))


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Config file to use")
@click.option("--verbose", "-v", is_flag=True, help="Log carries and animation frames")
@click.pass_context
def cli(ctx, config_path, verbose):
    """PASCALINE - Blaise Pascal's adding machine, wheel by wheel.

    Wheels are numbered from 0 (the smallest place) upward.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.obj = PascalineApp(config_path)


@cli.command()
@click.argument("indexes", nargs=-1, type=int, required=True)
@click.option("--amount", "-a", default=1, show_default=True, type=click.IntRange(min=0),
              help="Steps to add on each wheel")
@click.option("--no-animate", is_flag=True, help="Print the final state only")
@click.pass_obj
def add(app, indexes, amount, no_animate):
    """Add AMOUNT steps to each wheel in INDEXES, in order."""
    if no_animate:
        app.animate = False
    total = app.add(indexes, amount)
    _log.debug("total after %d adds: %s", len(indexes), total)


@cli.command()
@click.pass_obj
def repl(app):
    """Turn wheels interactively."""
    palette = DEFAULT_THEME.palette
    render_header("PASCALINE", f"{app.machine.size} wheels . type wheel numbers, 'reset' or 'quit'")
    console.print(render_wheel_table(app.machine))

    try:
        while True:
            line = click.prompt("wheels", default="", show_default=False).strip().lower()

            if line in ("quit", "exit", "q"):
                break
            if line in ("reset", "r"):
                app.reset()
                continue
            if not line:
                continue

            try:
                indexes = [int(token) for token in line.replace(",", " ").split()]
                app.add(indexes)
            except ValueError:
                render_error(f"Not a wheel number: {line}")
            except click.ClickException as e:
                render_error(e.format_message())
    except click.Abort:
        console.print()
    console.print(f"Final total: {app.machine.total}", style=f"bold {palette.total}")


@cli.command()
@click.pass_obj
def wheels(app):
    """List the wheels and the amount each one adds."""
    console.print(render_wheel_table(app.machine))


@cli.command()
@click.pass_obj
def config(app):
    """Show configuration."""
    machine = app.machine.config
    console.print(f"Config file: {app.config.config_path}")
    console.print(f"Wheels: {machine.wheels} ({machine.split_index} after the decimal separator)")
    console.print(f"Animation: {machine.duration:g}ms per turn, {app.fps} fps")
    console.print(f"Zero reads: {app.machine.total}")


if __name__ == "__main__":
    cli()
