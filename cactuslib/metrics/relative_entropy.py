# cactuslib/metrics/relative_entropy.py
from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional

from ..errors import DegenerateInputError, InvariantViolationError
from ..models.net import Net
from ..nets.base import NetDisk
from .sequence import total_contained_sequence
from .tree_bits import tree_bits

__all__ = ["RelativeEntropyReport", "relative_entropy"]

_logger = logging.getLogger(__name__)


class RelativeEntropyReport(NamedTuple):
    total_p: float
    total_q: float
    entropy: float


def relative_entropy(disk: NetDisk, root: Net, *, logger: Optional[logging.Logger] = None) -> RelativeEntropyReport:
    """
    Compare the tree encoding of `root` against a flat encoding.

      total_p = tree_bits(root, 0)
      total_q = log2(L) * L, L = contained sequence of root itself
      entropy = total_p - total_q

    The flat baseline ignores nesting, so L comes from the root's own end
    pairings even when the root is internal. Raises InvariantViolationError if
    total_p < total_q and DegenerateInputError if L is zero.
    """
    log = logger or _logger

    total_p = tree_bits(disk, root, 0.0)
    i = total_contained_sequence(disk, root)
    if i <= 0:
        raise DegenerateInputError(f"root net {root.name!r} contains no sequence")
    total_q = math.log2(i) * i
    if total_p < total_q:
        raise InvariantViolationError(
            f"net {root.name!r}: tree bits {total_p!r} below flat baseline {total_q!r}"
        )

    report = RelativeEntropyReport(total_p=total_p, total_q=total_q, entropy=total_p - total_q)
    log.info(
        "The total P, Q and relative entropy of the cactus tree: %s %s %s",
        report.total_p, report.total_q, report.entropy,
    )
    return report
