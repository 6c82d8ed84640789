"""Random-source capability injected into the grid and the renderer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class RandomSource(Protocol):
    """What the grid and the renderer may ask of a random engine.

    Every call advances the engine, so the order of calls is part of the
    output.
    """

    def next_int(self, min: int, max: int) -> int: ...

    def next_bool(self, bias: float | None = None) -> bool: ...

    def choose_index(
        self, items: Sequence[Any], weights: Sequence[float] | None = None
    ) -> int: ...
