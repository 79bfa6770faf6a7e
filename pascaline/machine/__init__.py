"""Digit-wheel engine: carries, gear animation and the total readout."""

from .animator import RotationAnimator, RotationState, ease_in_out
from .carry import CarryPropagator, CarryResult, Increment
from .clock import FrameScheduler, ManualClock, MonotonicClock
from .controller import Pascaline
from .display import DisplayFormatter, group_thousands
from .events import EventBus, MachineEvent
from .settings import MachineConfig
from .wheels import WheelStore

__all__ = [
    "RotationAnimator",
    "RotationState",
    "ease_in_out",
    "CarryPropagator",
    "CarryResult",
    "Increment",
    "FrameScheduler",
    "ManualClock",
    "MonotonicClock",
    "Pascaline",
    "DisplayFormatter",
    "group_thousands",
    "EventBus",
    "MachineEvent",
    "MachineConfig",
    "WheelStore",
]
