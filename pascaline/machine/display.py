"""Total readout and place-value captions.

Digits are passed least significant first, the same order the wheels are
indexed in.
"""

from typing import Sequence

# Place names by power of ten.
PLACE_NAMES = {
    -6: "millionths",
    -5: "hundred-thousandths",
    -4: "ten-thousandths",
    -3: "thousandths",
    -2: "hundredths",
    -1: "tenths",
    0: "units",
    1: "tens",
    2: "hundreds",
    3: "thousands",
    4: "ten-thousands",
    5: "hundred-thousands",
    6: "millions",
}


def group_thousands(integer: str, separator: str = ".", min_grouping_digits: int = 2) -> str:
    """Insert ``separator`` every three digits from the right.

    Nothing is grouped unless the leading group would hold at least
    ``min_grouping_digits`` more digits, i.e. ``1234`` stays as is under
    the default Spanish convention while ``12345`` becomes ``12.345``.
    """
    if len(integer) < 3 + min_grouping_digits:
        return integer
    groups = []
    while len(integer) > 3:
        groups.append(integer[-3:])
        integer = integer[:-3]
    groups.append(integer)
    return separator.join(reversed(groups))


class DisplayFormatter:
    """Format wheel digits as a decimal string such as ``"12.345,678"``."""

    def __init__(
        self,
        split_index: int = 3,
        decimal_separator: str = ",",
        group_separator: str = ".",
        min_grouping_digits: int = 2,
    ):
        self.split_index = split_index
        self.decimal_separator = decimal_separator
        self.group_separator = group_separator
        self.min_grouping_digits = min_grouping_digits

    def format(self, digits: Sequence[int]) -> str:
        split = self.split_index
        integer = "".join(str(d % 10) for d in reversed(digits[split:]))
        integer = integer.lstrip("0") or "0"
        integer = group_thousands(integer, self.group_separator, self.min_grouping_digits)
        if split == 0:
            return integer

        fraction = "".join(str(d % 10) for d in reversed(digits[:split]))
        fraction = fraction.ljust(split, "0")
        return f"{integer}{self.decimal_separator}{fraction}"

    def place_value(self, index: int) -> str:
        """The amount one step of wheel ``index`` adds, e.g. ``"0,01"``."""
        power = index - self.split_index
        if power >= 0:
            return group_thousands(
                "1" + "0" * power, self.group_separator, self.min_grouping_digits,
            )
        return f"0{self.decimal_separator}{'0' * (-power - 1)}1"

    def place_label(self, index: int) -> str:
        """Button caption for a wheel, e.g. ``"+0,01 (hundredths)"``."""
        power = index - self.split_index
        label = f"+{self.place_value(index)}"
        name = PLACE_NAMES.get(power)
        return f"{label} ({name})" if name else label
