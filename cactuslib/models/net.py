# cactuslib/models/net.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

__all__ = [
    "EndInstance",
    "End",
    "Atom",
    "AdjacencyComponent",
    "Net",
]


@dataclass(frozen=True, slots=True)
class EndInstance:
    """
    One occurrence of an end in a sequence.

    Conventions:
      - `orientation` True means the positive orientation; the reversed view
        inverts orientation, side and strand and keeps the coordinate.
      - `adjacency` is the identifier of the paired instance (or None). It is
        a lookup key resolved through a NetDisk, never a direct link.
    """

    instance_id: str
    coordinate: int
    strand: bool = True
    side: bool = False
    orientation: bool = True
    adjacency: Optional[str] = None

    def reverse(self) -> "EndInstance":
        return replace(
            self,
            orientation=not self.orientation,
            side=not self.side,
            strand=not self.strand,
        )

    def positive_orientation(self) -> "EndInstance":
        return self if self.orientation else self.reverse()


@dataclass(frozen=True, slots=True)
class End:
    name: str
    atom_end: bool = False
    # instance identifiers, in iteration order
    instances: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Atom:
    length: int
    instance_number: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("atom length must be ≥ 0.")
        if self.instance_number < 0:
            raise ValueError("atom instance_number must be ≥ 0.")

    @property
    def size(self) -> int:
        return self.length * self.instance_number


@dataclass(frozen=True, slots=True)
class AdjacencyComponent:
    # arena index of the nested net
    nested_net: int


@dataclass(frozen=True, slots=True)
class Net:
    """
    A node of the net tree. A net without adjacency components is a leaf.
    """

    name: str
    ends: Tuple[End, ...] = ()
    adjacency_components: Tuple[AdjacencyComponent, ...] = ()
    atoms: Tuple[Atom, ...] = ()
