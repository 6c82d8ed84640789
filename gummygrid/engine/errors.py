"""Error taxonomy for avatar generation.

Every error is raised synchronously by the component that detects it and is
never retried: generation is a pure computation.
"""

from __future__ import annotations


class GummyGridError(ValueError):
    """Base class for all generation errors."""


class InvalidDimensions(GummyGridError):
    """Grid rows/columns are not positive integers."""


class InvalidRounding(GummyGridError):
    """A cell rounding fraction lies outside [0, 1]."""


class EmptyColorArray(GummyGridError):
    """A required color category has no entries."""


class LockedColorLengthMismatch(GummyGridError):
    """Locked color categories have arrays of different lengths."""


class EmptyChoiceSet(GummyGridError):
    """Nothing to choose from (empty sequence or all weights zero)."""


class WeightLengthMismatch(GummyGridError):
    """A weight vector's length differs from the sequence it weights.

    ``category`` names the offending color category when the mismatch was
    detected while resolving colors.
    """

    def __init__(self, message: str, category: str | None = None) -> None:
        super().__init__(message)
        self.category = category
