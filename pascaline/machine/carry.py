"""Carry propagation across the wheel row."""

import logging
from dataclasses import dataclass, field
from typing import List

from .wheels import WheelStore

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Increment:
    """One wheel advanced by ``amount``; ``carried`` when it rolled 9 -> 0."""

    index: int
    amount: int
    carried: bool = False


@dataclass
class CarryResult:
    """Every wheel touched by one ``add_unit`` call, lowest index first."""

    increments: List[Increment] = field(default_factory=list)
    overflow: bool = False

    @property
    def carries(self) -> int:
        return sum(1 for inc in self.increments if inc.carried)

    def __bool__(self) -> bool:
        return bool(self.increments)


class CarryPropagator:
    """Advance a wheel and walk any carry up through the more significant ones.

    A carry is only detected for single-unit steps: adding 1 to a wheel
    showing 9. Larger amounts are added without carrying.
    """

    def __init__(self, store: WheelStore):
        self.store = store

    def add_unit(self, index: int, amount: int = 1) -> CarryResult:
        result = CarryResult()
        if not self.store.contains(index):
            _log.debug("ignoring add to wheel %d of %d", index, len(self.store))
            return result
        if amount < 0:
            _log.debug("ignoring negative amount %d on wheel %d", amount, index)
            return result

        pending = True
        while pending:
            carried = self.store.digit(index) == 9 and amount == 1
            self.store.add(index, amount)
            result.increments.append(Increment(index, amount, carried))

            pending = False
            if carried:
                if index + 1 < len(self.store):
                    index += 1
                    amount = 1
                    pending = True
                else:
                    result.overflow = True
                    _log.debug("carry out of wheel %d discarded", index)

        return result
