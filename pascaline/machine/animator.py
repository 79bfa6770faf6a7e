"""Rotation animation for wheels and carry gears.

Each :class:`RotationAnimator` owns one :class:`RotationState` and runs a
frame-callback chain on a :class:`FrameScheduler` while the state's current
angle trails its target.

Arming an animator that is already running only moves the target. The
start time and start angle stay where they were, so the remaining time of
the running animation has to cover the extra distance and the wheel speeds
up. This is how the machine has always behaved and callers rely on it.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .clock import FrameScheduler

_log = logging.getLogger(__name__)

DEFAULT_DURATION = 350.0


def ease_in_out(progress: float) -> float:
    """Cubic ease-in joined to a quartic ease-out at the midpoint."""
    if progress < 0.5:
        return 4 * progress * progress * progress
    return 1 - ((-2 * progress + 2) ** 4) / 2


@dataclass
class RotationState:
    """Visual angle of a gear and the angle it is heading to, in degrees."""

    current_angle: float
    target_angle: float

    @property
    def settled(self) -> bool:
        return self.current_angle == self.target_angle


class RotationAnimator:
    """Idle/Animating state machine easing one gear toward its target."""

    def __init__(
        self,
        state: RotationState,
        scheduler: FrameScheduler,
        duration: float = DEFAULT_DURATION,
        easing: Callable[[float], float] = ease_in_out,
        on_frame: Optional[Callable[[float], None]] = None,
        name: str = "gear",
    ):
        self.state = state
        self.name = name
        self._scheduler = scheduler
        self._duration = duration
        self._easing = easing
        self._on_frame = on_frame
        self._handle: Optional[int] = None
        self._start_angle = state.current_angle
        self._start_time = 0.0

    @property
    def is_animating(self) -> bool:
        return self._handle is not None

    @property
    def start_angle(self) -> float:
        return self._start_angle

    @property
    def start_time(self) -> float:
        return self._start_time

    def arm(self, delta: float) -> None:
        """Move the target by ``delta`` and start animating if idle."""
        self.state.target_angle += delta
        if self._handle is not None:
            return
        self._start_angle = self.state.current_angle
        self._start_time = self._scheduler.now()
        self._handle = self._scheduler.request_frame(self._step)
        _log.debug("%s animating from %.1f to %.1f", self.name,
                   self._start_angle, self.state.target_angle)

    def cancel(self) -> None:
        self._scheduler.cancel(self._handle)
        self._handle = None

    def finish(self) -> None:
        """Jump straight to the target, as if the duration had elapsed."""
        self.cancel()
        self.state.current_angle = self.state.target_angle
        if self._on_frame is not None:
            self._on_frame(self.state.current_angle)

    def reset(self, angle: float) -> None:
        """Cancel any running animation and park both angles at ``angle``."""
        self.cancel()
        self.state.current_angle = angle
        self.state.target_angle = angle
        self._start_angle = angle
        self._start_time = 0.0

    def _step(self) -> None:
        elapsed = self._scheduler.now() - self._start_time
        progress = min(1.0, elapsed / self._duration)
        eased = self._easing(progress)
        target = self.state.target_angle

        if elapsed >= self._duration:
            self.state.current_angle = target
            self._handle = None
        else:
            self.state.current_angle = (
                self._start_angle + (target - self._start_angle) * eased
            )
            self._handle = self._scheduler.request_frame(self._step)

        if self._on_frame is not None:
            self._on_frame(self.state.current_angle)
