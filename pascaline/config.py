"""Configuration management for Pascaline."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any
import yaml

from .machine.settings import MachineConfig

_log = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "machine": {
        "wheels": 6,
        "split_index": 3,
        "unit_angle": 36,
        "baseline_angle": 180,
        "duration": 350,
        "carry_hold": 800,
    },
    "display": {
        "decimal_separator": ",",
        "group_separator": ".",
        "min_grouping_digits": 2,
    },
    "ui": {
        "fps": 60,
        "animate": True,
    },
}


@dataclass(frozen=True)
class UIConfig:
    """Terminal display settings."""

    fps: int = 60
    animate: bool = True

    def __post_init__(self) -> None:
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")


class ConfigManager:
    """Manage Pascaline configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        path = config_path or os.getenv("PASCALINE_CONFIG") or "~/.config/pascaline/config.yaml"
        self.config_path = Path(path).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
                return content if isinstance(content, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False)
        except OSError as e:
            _log.warning("Could not write default config %s: %s", self.config_path, e)

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str) or not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _section(self, name: str) -> Dict[str, Any]:
        defaults = DEFAULT_CONFIG[name]
        config = self.data.get(name) or {}
        if not isinstance(config, dict):
            raise ValueError(f"'{name}' must be a mapping, got {config!r}")
        merged = {**defaults, **config}
        return {key: self._resolve_env_var(value) for key, value in merged.items()}

    def get_machine_config(self) -> MachineConfig:
        """Build the machine constants from the ``machine`` and ``display`` sections.

        Raises ValueError when a value is out of range or not a number.
        """
        machine = self._section("machine")
        display = self._section("display")
        return MachineConfig(
            wheels=int(machine["wheels"]),
            split_index=int(machine["split_index"]),
            unit_angle=float(machine["unit_angle"]),
            baseline_angle=float(machine["baseline_angle"]),
            duration=float(machine["duration"]),
            carry_hold=float(machine["carry_hold"]),
            decimal_separator=str(display["decimal_separator"]),
            group_separator=str(display["group_separator"]),
            min_grouping_digits=int(display["min_grouping_digits"]),
        )

    def get_ui_config(self) -> UIConfig:
        """Get terminal UI settings (fps, animate).

        Raises ValueError when a value is out of range or of the wrong type.
        """
        ui = self._section("ui")
        animate = ui["animate"]
        if not isinstance(animate, bool):
            raise ValueError(f"animate must be true or false, got {animate!r}")
        return UIConfig(fps=int(ui["fps"]), animate=animate)

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
