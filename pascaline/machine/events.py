"""Change notifications emitted by the machine.

Presentation code subscribes here instead of being called from inside the
engine, which keeps the engine free of any drawing.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List

_log = logging.getLogger(__name__)

Listener = Callable[..., None]


class MachineEvent(str, Enum):
    """Things a listener can observe."""

    WHEEL_CHANGED = "wheel_changed"
    ROTATION_CHANGED = "rotation_changed"
    CARRY = "carry"
    OVERFLOW = "overflow"
    TOTAL_CHANGED = "total_changed"
    RESET = "reset"


class EventBus:
    """Synchronous listener registry keyed by :class:`MachineEvent`."""

    def __init__(self) -> None:
        self._listeners: Dict[MachineEvent, List[Listener]] = {}

    def subscribe(self, event: MachineEvent, listener: Listener) -> None:
        listeners = self._listeners.setdefault(MachineEvent(event), [])
        if listener not in listeners:
            listeners.append(listener)

    def unsubscribe(self, event: MachineEvent, listener: Listener) -> None:
        listeners = self._listeners.get(MachineEvent(event), [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: MachineEvent) -> int:
        return len(self._listeners.get(MachineEvent(event), []))

    def emit(self, event: MachineEvent, **payload: Any) -> int:
        """Call every listener for ``event``. Returns how many succeeded.

        A listener that raises is logged and skipped; the others still run.
        """
        event = MachineEvent(event)
        ok = 0
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(**payload)
                ok += 1
            except Exception:
                _log.exception("listener %r failed on %s", listener, event.value)
        return ok
