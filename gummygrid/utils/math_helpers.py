"""Integer and number-formatting helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit integer."""
    value &= _INT32_MASK
    if value & _INT32_SIGN:
        return value - (_INT32_MASK + 1)
    return value


def round_half_up(value: float) -> int:
    """Round .5 away from -inf (not banker's rounding like ``round``)."""
    return math.floor(value + 0.5)


def decimal_places(value: float) -> int:
    """Number of digits after the decimal point in the shortest repr of ``value``.

    Integral floats count as 0. Exponent-form reprs are treated as having more
    than two decimals, which is all the weight normalization needs to know.
    """
    if float(value).is_integer():
        return 0
    text = repr(float(value))
    if "e" in text or "E" in text:
        return 3
    return len(text.split(".", 1)[1])


def next_power_of_ten(value: float) -> float:
    """Smallest power of ten >= value (1 -> 1, 5 -> 10, 10 -> 10, 11 -> 100)."""
    return 10 ** math.ceil(math.log10(value))


def binary_find_index(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in the ascending ``values``, or its insertion point.

    An exact match returns the matching index.
    """
    lower, upper = 0, len(values) - 1
    while lower <= upper:
        mid = (upper - lower) // 2 + lower
        current = values[mid]
        if target == current:
            return mid
        if target > current:
            lower = mid + 1
        else:
            upper = mid - 1
    return lower


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, integral values without '.0'."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
