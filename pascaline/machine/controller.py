"""The Pascaline: wheels, carry gears and their animations in one object."""

import logging
from typing import List, Optional

from .animator import RotationAnimator, RotationState
from .carry import CarryPropagator, CarryResult
from .clock import FrameScheduler
from .display import DisplayFormatter
from .events import EventBus, MachineEvent, Listener
from .settings import MachineConfig
from .wheels import WheelStore

_log = logging.getLogger(__name__)


class Pascaline:
    """A row of digit wheels with animated gears.

    All state lives on the instance, so several machines can run side by
    side and tests can drive one with a :class:`ManualClock`.

    Usage:
        machine = Pascaline()
        machine.add_unit(3)          # +1 on the units wheel
        machine.total                # "1,000"
        machine.scheduler.run_frame()
    """

    def __init__(
        self,
        config: Optional[MachineConfig] = None,
        scheduler: Optional[FrameScheduler] = None,
    ):
        self.config = config or MachineConfig()
        self.scheduler = scheduler or FrameScheduler()
        self.events = EventBus()
        self.wheels = WheelStore(self.config.wheels)
        self.propagator = CarryPropagator(self.wheels)
        self.formatter = DisplayFormatter(
            split_index=self.config.split_index,
            decimal_separator=self.config.decimal_separator,
            group_separator=self.config.group_separator,
            min_grouping_digits=self.config.min_grouping_digits,
        )

        baseline = self.config.baseline_angle
        self.rotations: List[RotationAnimator] = [
            self._make_animator(RotationState(baseline, baseline), "wheel", i)
            for i in range(self.config.wheels)
        ]
        self.carry_gears: List[RotationAnimator] = [
            self._make_animator(RotationState(baseline, baseline), "carry_gear", i)
            for i in range(self.config.wheels - 1)
        ]
        self._carry_timers: dict[int, int] = {}
        self._total = self.formatter.format(self.wheels.digits)

    def _make_animator(self, state: RotationState, kind: str, index: int) -> RotationAnimator:
        def on_frame(angle: float) -> None:
            self.events.emit(
                MachineEvent.ROTATION_CHANGED, kind=kind, index=index, angle=angle,
            )

        return RotationAnimator(
            state,
            self.scheduler,
            duration=self.config.duration,
            on_frame=on_frame,
            name=f"{kind}[{index}]",
        )

    # -- Operations --------------------------------------------------------

    def add_unit(self, index: int, amount: int = 1) -> CarryResult:
        """Advance wheel ``index`` by ``amount`` steps, carrying as needed.

        Out-of-range indexes and negative amounts leave the machine as it
        was. The whole cascade is applied before any animation frame runs.
        """
        result = self.propagator.add_unit(index, amount)
        if not result:
            return result

        last = len(self.carry_gears)
        for inc in result.increments:
            delta = inc.amount * self.config.unit_angle
            self.rotations[inc.index].arm(delta)
            if inc.index < last:
                self.carry_gears[inc.index].arm(-delta)

        self._total = self.formatter.format(self.wheels.digits)

        for inc in result.increments:
            self.events.emit(
                MachineEvent.WHEEL_CHANGED,
                index=inc.index,
                value=self.wheels.value(inc.index),
                digit=self.wheels.digit(inc.index),
            )
            if inc.carried and inc.index + 1 < len(self.wheels):
                self._flash_carry(inc.index + 1)
                self.events.emit(MachineEvent.CARRY, source=inc.index, target=inc.index + 1)
        if result.overflow:
            self.events.emit(MachineEvent.OVERFLOW, source=len(self.wheels) - 1)
        self.events.emit(MachineEvent.TOTAL_CHANGED, total=self._total)
        return result

    def reset(self) -> None:
        """Stop every animation and return all wheels and gears to zero."""
        for handle in self._carry_timers.values():
            self.scheduler.cancel(handle)
        self._carry_timers.clear()

        baseline = self.config.baseline_angle
        for animator in self.rotations + self.carry_gears:
            animator.reset(baseline)
        self.wheels.clear()
        self._total = self.formatter.format(self.wheels.digits)

        _log.debug("machine reset")
        self.events.emit(MachineEvent.RESET)
        self.events.emit(MachineEvent.TOTAL_CHANGED, total=self._total)

    def settle(self) -> None:
        """Complete every running gear animation and carry flash immediately."""
        for animator in self.rotations + self.carry_gears:
            if animator.is_animating:
                animator.finish()
        for handle in self._carry_timers.values():
            self.scheduler.cancel(handle)
        self._carry_timers.clear()

    def subscribe(self, event: MachineEvent, listener: Listener) -> None:
        self.events.subscribe(event, listener)

    def _flash_carry(self, index: int) -> None:
        self.scheduler.cancel(self._carry_timers.get(index))

        def clear() -> None:
            self._carry_timers.pop(index, None)

        self._carry_timers[index] = self.scheduler.call_later(self.config.carry_hold, clear)

    # -- Observers ---------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.wheels)

    def value(self, index: int) -> int:
        return self.wheels.value(index)

    def digit(self, index: int) -> int:
        return self.wheels.digit(index)

    @property
    def digits(self) -> tuple[int, ...]:
        return self.wheels.digits

    def wheel_angle(self, index: int) -> float:
        return self.rotations[index].state.current_angle

    def wheel_target(self, index: int) -> float:
        return self.rotations[index].state.target_angle

    def carry_gear_angle(self, index: int) -> float:
        return self.carry_gears[index].state.current_angle

    def carry_gear_target(self, index: int) -> float:
        return self.carry_gears[index].state.target_angle

    def carry_active(self, index: int) -> bool:
        return index in self._carry_timers

    def place_label(self, index: int) -> str:
        return self.formatter.place_label(index)

    @property
    def total(self) -> str:
        return self._total

    @property
    def is_animating(self) -> bool:
        return any(a.is_animating for a in self.rotations + self.carry_gears)
