"""Machine constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MachineConfig:
    """Geometry, timing and display conventions for one machine."""

    wheels: int = 6
    split_index: int = 3
    unit_angle: float = 36.0
    baseline_angle: float = 180.0
    duration: float = 350.0
    carry_hold: float = 800.0
    decimal_separator: str = ","
    group_separator: str = "."
    min_grouping_digits: int = 2

    def __post_init__(self) -> None:
        if self.wheels < 1:
            raise ValueError(f"wheels must be at least 1, got {self.wheels}")
        if not 0 <= self.split_index <= self.wheels:
            raise ValueError(
                f"split_index must be between 0 and {self.wheels}, got {self.split_index}"
            )
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.carry_hold < 0:
            raise ValueError(f"carry_hold must not be negative, got {self.carry_hold}")
        if self.min_grouping_digits < 1:
            raise ValueError("min_grouping_digits must be at least 1")
