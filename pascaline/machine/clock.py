"""Time sources and the cooperative frame scheduler.

The scheduler plays the role a browser's ``requestAnimationFrame`` and
``setTimeout`` play for a web page: callbacks are queued and run when the
host calls :meth:`FrameScheduler.run_frame`. Nothing here spawns threads.
"""

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

_log = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class Clock(Protocol):
    """Anything with a ``now()`` returning milliseconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Wall clock in milliseconds, backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Virtual clock advanced explicitly. Used by tests and replays."""

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("cannot move a clock backwards")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError("cannot move a clock backwards")
        self._now = float(ms)


@dataclass(frozen=True)
class _Timer:
    due: float
    callback: FrameCallback


class FrameScheduler:
    """Queue of frame callbacks and one-shot timers.

    Usage:
        scheduler = FrameScheduler(ManualClock())
        handle = scheduler.request_frame(step)
        scheduler.run_frame()   # runs ``step``
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock: Clock = clock or MonotonicClock()
        self._ids = itertools.count(1)
        self._frames: Dict[int, FrameCallback] = {}
        self._timers: Dict[int, _Timer] = {}

    def now(self) -> float:
        return self.clock.now()

    def request_frame(self, callback: FrameCallback) -> int:
        """Run ``callback`` on the next frame. Returns a cancel handle."""
        handle = next(self._ids)
        self._frames[handle] = callback
        return handle

    def call_later(self, delay: float, callback: FrameCallback) -> int:
        """Run ``callback`` on the first frame at or after ``now + delay``."""
        handle = next(self._ids)
        self._timers[handle] = _Timer(self.clock.now() + delay, callback)
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is None:
            return
        self._frames.pop(handle, None)
        self._timers.pop(handle, None)

    def cancel_all(self) -> None:
        self._frames.clear()
        self._timers.clear()

    @property
    def pending(self) -> int:
        return len(self._frames) + len(self._timers)

    @property
    def has_frames(self) -> bool:
        return bool(self._frames)

    def run_frame(self) -> int:
        """Run every due timer, then every frame callback queued so far.

        Callbacks requested while the frame runs wait for the next frame.
        A callback cancelled by an earlier one in the same frame is skipped.
        """
        now = self.clock.now()
        ran = 0

        due = sorted(
            (timer.due, handle)
            for handle, timer in self._timers.items()
            if timer.due <= now
        )
        for _, handle in due:
            timer = self._timers.pop(handle, None)
            if timer is None:
                continue
            timer.callback()
            ran += 1

        for handle in sorted(self._frames):
            callback = self._frames.pop(handle, None)
            if callback is None:
                continue
            callback()
            ran += 1

        if ran:
            _log.debug("frame at %.1fms ran %d callbacks", now, ran)
        return ran
