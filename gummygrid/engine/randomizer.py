"""Seeded, string-hash based random engine.

The engine keeps a signed 32-bit ``hash``. Seeding folds every character of
the seed (and then the salt) into it; every draw reads a value from the hash
and then folds a dependent value back in, so the sequence of draws is a
deterministic chain:

    rand = Randomizer(salt=0)
    rand.set_seed("jarvis")
    rand.number(0, 9)        # always the same first value for "jarvis"
    rand.boolean(0.3)        # weighted 3:7 towards False
    rand.choice(["a", "b"], [1, 3])

Not a cryptographic source.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from gummygrid.engine.errors import EmptyChoiceSet, WeightLengthMismatch
from gummygrid.utils.math_helpers import (
    binary_find_index,
    decimal_places,
    next_power_of_ten,
    round_half_up,
    to_int32,
)

T = TypeVar("T")

# Weights are scaled to integers with at most this many decimals kept.
_MAX_WEIGHT_DECIMALS = 2


def _utf16_code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def normalize_weights(weights: Sequence[float]) -> list[int]:
    """Turn arbitrary non-negative weights into the smallest equivalent integers.

    [0.5, 0.5] -> [5, 5], [0.25, 0.75] -> [25, 75], [20, 40] -> [2, 4]
    """
    places = max((decimal_places(w) for w in weights), default=0)
    if places == 0:
        ints = [int(w) for w in weights]
    else:
        scale = 10 ** min(_MAX_WEIGHT_DECIMALS, places)
        ints = [round_half_up(w * scale) for w in weights]

    while any(ints) and all(w % 10 == 0 for w in ints):
        ints = [w // 10 for w in ints]
    return ints


def inverse_bias(bias: float) -> float:
    """Weight of the "False" outcome for a given "True" bias.

    Probabilities (< 1) are complemented to 1; larger values are treated as
    integer weights and complemented to the next power of ten.
    """
    if bias < 1:
        return 1 - bias
    return next_power_of_ten(bias) - bias


class Randomizer:
    """Deterministic random engine keyed by a seed string and a numeric salt."""

    def __init__(self, salt: int = 0) -> None:
        self.seed = ""
        self.hash = 0
        self.salt = int(salt)
        self._bump(self.salt)

    def set_seed(self, text: str) -> None:
        """Reset the hash and fold in ``text`` followed by the salt."""
        self.seed = text
        self.hash = 0
        for code in _utf16_code_units(text):
            self._bump(code)
        self._bump(self.salt)

    def number(self, min: int, max: int) -> int:
        """Integer in the inclusive range [min, max]."""
        value = self._pick(min, max)
        self._bump(self._pick(1, 999))
        return value

    def boolean(self, bias: float | None = None) -> bool:
        """Fair coin, or weighted towards True by ``bias``.

        ``bias`` is either a probability in [0, 1] or an integer weight
        (see :func:`inverse_bias`).
        """
        if bias is None:
            return self.number(0, 1) == 1
        return self.choice([True, False], [bias, inverse_bias(bias)])

    def choice(self, items: Sequence[T], weights: Sequence[float] | None = None) -> T:
        return items[self.get_choice_index(items, weights)]

    def get_choice_index(
        self, items: Sequence[Any], weights: Sequence[float] | None = None
    ) -> int:
        """Index of the chosen item in ``items``.

        Single-item sequences return 0 without consuming a draw. Zero-weight
        items are never chosen.
        """
        if len(items) == 0:
            raise EmptyChoiceSet("Cannot choose from an empty sequence")
        if weights is not None:
            return self._weighted_index(items, weights)
        if len(items) == 1:
            return 0
        return self.number(0, len(items) - 1)

    # Capability names used by the grid and the renderer.
    next_int = number
    next_bool = boolean
    choose_index = get_choice_index

    def _weighted_index(self, items: Sequence[Any], weights: Sequence[float]) -> int:
        if len(items) != len(weights):
            raise WeightLengthMismatch(
                f"Length of weights ({len(weights)}) must equal that of items ({len(items)})"
            )
        if len(items) == 1:
            return 0

        total = 0
        cumulative: list[int] = []
        kept: list[int] = []
        for idx, weight in enumerate(normalize_weights(weights)):
            if weight == 0:
                continue
            total += weight
            cumulative.append(total)
            kept.append(idx)

        if not kept:
            raise EmptyChoiceSet("All weights are zero")

        target = self.number(1, total)
        return kept[binary_find_index(cumulative, target)]

    def _bump(self, value: int) -> None:
        self.hash = to_int32((self.hash << 5) - self.hash + value)

    def _pick(self, min: int, max: int) -> int:
        return abs(self.hash) % (max - min + 1) + min
