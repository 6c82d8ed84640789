"""GummyGrid generation engine."""

from gummygrid.engine.errors import (
    EmptyChoiceSet,
    EmptyColorArray,
    GummyGridError,
    InvalidDimensions,
    InvalidRounding,
    LockedColorLengthMismatch,
    WeightLengthMismatch,
)
from gummygrid.engine.generator import GummyGrid, generate
from gummygrid.engine.grid import Grid
from gummygrid.engine.randomizer import Randomizer

__all__ = [
    "GummyGrid",
    "generate",
    "Grid",
    "Randomizer",
    "GummyGridError",
    "InvalidDimensions",
    "InvalidRounding",
    "EmptyColorArray",
    "LockedColorLengthMismatch",
    "WeightLengthMismatch",
    "EmptyChoiceSet",
]
