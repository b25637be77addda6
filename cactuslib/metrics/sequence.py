# cactuslib/metrics/sequence.py
from __future__ import annotations

from ..errors import GraphCorruptionError
from ..models.net import Net
from ..nets.base import NetDisk


def total_contained_sequence(disk: NetDisk, net: Net) -> float:
    """
    Sum of the sequence lengths between paired end instances of `net`.

    Atom ends are skipped. Every positive-oriented instance with side False is
    paired with its adjacency; the gap between the two coordinates is the
    contained sequence. Raises GraphCorruptionError if the adjacency is missing,
    lies on the negative strand, or gives a negative gap.
    """
    total_length = 0.0
    for end in disk.ends(net):
        if end.atom_end:
            continue
        for inst in disk.instances(end):
            inst = inst.positive_orientation()
            if inst.side:
                continue
            other = disk.adjacency(inst)
            if other is None:
                raise GraphCorruptionError(
                    f"net {net.name!r}: end instance {inst.instance_id!r} has no adjacency"
                )
            if not other.strand:
                raise GraphCorruptionError(
                    f"net {net.name!r}: adjacency {other.instance_id!r} of "
                    f"{inst.instance_id!r} is on the negative strand"
                )
            length = other.coordinate - inst.coordinate - 1
            if length < 0:
                raise GraphCorruptionError(
                    f"net {net.name!r}: negative gap {length} between "
                    f"{inst.instance_id!r} and {other.instance_id!r}"
                )
            total_length += length
    return total_length
