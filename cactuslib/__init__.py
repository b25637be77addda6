# cactuslib/__init__.py
from .models.net import Net, End, EndInstance, Atom, AdjacencyComponent
from .nets.base import NetDisk, ArenaNetDisk
from .errors import TreeStatsError, GraphCorruptionError, DegenerateInputError, InvariantViolationError

# Convenience re-exports for direct functional use
from .metrics.sequence import total_contained_sequence
from .metrics.tree_bits import tree_bits
from .metrics.relative_entropy import RelativeEntropyReport, relative_entropy
