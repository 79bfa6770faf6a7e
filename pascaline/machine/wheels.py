"""Accumulator values of the digit wheels."""

from typing import List


class WheelStore:
    """Running totals for each wheel, index 0 being the least significant.

    A wheel's value is never wrapped; only ``value % 10`` shows through the
    window.
    """

    def __init__(self, count: int):
        if count < 1:
            raise ValueError("a machine needs at least one wheel")
        self._values: List[int] = [0] * count

    def __len__(self) -> int:
        return len(self._values)

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self._values)

    def value(self, index: int) -> int:
        return self._values[index]

    def digit(self, index: int) -> int:
        return self._values[index] % 10

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    @property
    def digits(self) -> tuple[int, ...]:
        return tuple(v % 10 for v in self._values)

    def add(self, index: int, amount: int) -> int:
        self._values[index] += amount
        return self._values[index]

    def set(self, index: int, value: int) -> None:
        if value < 0:
            raise ValueError("wheel values are non-negative")
        self._values[index] = value

    def clear(self) -> None:
        self._values = [0] * len(self._values)
