# cactuslib/metrics/tree_bits.py
from __future__ import annotations

import logging
import math

from ..errors import DegenerateInputError
from ..models.net import Net
from ..nets.base import NetDisk
from .sequence import total_contained_sequence

__all__ = ["tree_bits", "atom_sequence_size"]

logger = logging.getLogger(__name__)


def atom_sequence_size(disk: NetDisk, net: Net) -> int:
    return sum(atom.size for atom in disk.atoms(net))


def tree_bits(disk: NetDisk, net: Net, path_bit_score: float = 0.0) -> float:
    """
    Bits needed to encode the sequence of `net` and everything nested in it.

    `path_bit_score` is the cost of addressing `net` from the root: each
    internal net adds log2(number of adjacency components) for its children.

    Internal net: sum over nested nets (in disk order) plus the atom sequence,
        (log2(atom_size) + path_bit_score) * atom_size
    Leaf net: (path_bit_score + log2(L)) * L for L = contained sequence.

    Zero-length sequence has no defined log2, so a zero atom size or zero
    contained sequence raises DegenerateInputError.
    """
    n = sum(1 for _ in disk.adjacency_components(net))
    if n > 0:
        following_path_bit_score = math.log2(n) + path_bit_score
        total_bit_score = 0.0
        for comp in disk.adjacency_components(net):
            total_bit_score += tree_bits(disk, disk.nested_net(comp), following_path_bit_score)
        size = atom_sequence_size(disk, net)
        if size <= 0:
            raise DegenerateInputError(f"internal net {net.name!r} has no atom sequence")
        bits = total_bit_score + (math.log2(size) + path_bit_score) * size
        logger.debug(f"net {net.name}: {n} children, atom size {size}, {bits} bits")
        return bits

    i = total_contained_sequence(disk, net)
    if i <= 0:
        raise DegenerateInputError(f"leaf net {net.name!r} contains no sequence")
    bits = (path_bit_score + math.log2(i)) * i
    logger.debug(f"net {net.name}: leaf, contained sequence {i:.0f}, {bits} bits")
    return bits
