"""Pascaline - a mechanical adding machine with animated gears."""

__version__ = "0.1.0"

from .cli import cli, PascalineApp
from .config import ConfigManager, UIConfig
from .machine import Pascaline, MachineConfig, FrameScheduler, ManualClock

__all__ = [
    "cli",
    "PascalineApp",
    "ConfigManager",
    "UIConfig",
    "Pascaline",
    "MachineConfig",
    "FrameScheduler",
    "ManualClock",
]
