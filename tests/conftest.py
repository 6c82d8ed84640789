"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pytest

from gummygrid.engine.defaults import build_config
from gummygrid.models.config import GeneratorConfig


GOLDEN_DIR = Path(__file__).parent / "golden"

# Default configuration, salt 0, seed "jarvis"
JARVIS_MATRIX = [
    [1, 0, 1, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 1],
]
JARVIS_COLORS = {"background": "#ededfe", "cell_fill": "#fd811d"}
JARVIS_HASH = -1822928773

HELLO_MATRIX = [
    [1, 1, 1, 1, 1],
    [0, 0, 1, 0, 0],
    [1, 1, 0, 1, 1],
    [1, 1, 0, 1, 1],
    [1, 1, 1, 1, 1],
]
HELLO_CELL_FILL = "#ed1f26"

# Same seed, salt 7
JARVIS_SALT_7_MATRIX = [
    [0, 0, 1, 0, 0],
    [1, 1, 1, 1, 1],
    [0, 1, 1, 1, 0],
    [0, 1, 1, 1, 0],
    [1, 1, 0, 1, 1],
]


def read_golden(name: str) -> str:
    return (GOLDEN_DIR / name).read_text(encoding="utf-8")


class ScriptedRandom:
    """RandomSource that replays fixed answers and records what was asked.

    Running out of scripted answers is a test bug, so it raises.
    """

    def __init__(
        self,
        bools: Iterable[bool] = (),
        ints: Iterable[int] = (),
        indices: Iterable[int] = (),
    ) -> None:
        self.bools = list(bools)
        self.ints = list(ints)
        self.indices = list(indices)
        self.calls: list[tuple[str, Any]] = []

    def next_int(self, min: int, max: int) -> int:
        self.calls.append(("int", (min, max)))
        value = self.ints.pop(0)
        assert min <= value <= max
        return value

    def next_bool(self, bias: float | None = None) -> bool:
        self.calls.append(("bool", bias))
        return self.bools.pop(0)

    def choose_index(self, items: Sequence[Any], weights: Sequence[float] | None = None) -> int:
        self.calls.append(("index", len(items)))
        return self.indices.pop(0)


class ConstantRandom:
    """Answers every boolean the same way; ints are always the minimum."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer

    def next_int(self, min: int, max: int) -> int:
        return min

    def next_bool(self, bias: float | None = None) -> bool:
        return self.answer

    def choose_index(self, items: Sequence[Any], weights: Sequence[float] | None = None) -> int:
        return 0


def make_config(overrides: dict[str, Any] | None = None) -> GeneratorConfig:
    return GeneratorConfig.model_validate(build_config(overrides))


@pytest.fixture
def jarvis_svg() -> str:
    return read_golden("jarvis_5x5.svg")


@pytest.fixture
def default_config() -> GeneratorConfig:
    return make_config()
