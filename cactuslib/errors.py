# cactuslib/errors.py
from __future__ import annotations

__all__ = [
    "TreeStatsError",
    "GraphCorruptionError",
    "DegenerateInputError",
    "InvariantViolationError",
]


class TreeStatsError(ValueError):
    """Base class for failures while computing net tree statistics."""


class GraphCorruptionError(TreeStatsError):
    """An end instance pairing breaks the structure the statistics rely on."""


class DegenerateInputError(TreeStatsError):
    """A sequence length or atom aggregate is zero, so its log2 is undefined."""


class InvariantViolationError(TreeStatsError):
    """The structured cost came out below the flat baseline."""
