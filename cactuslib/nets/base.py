# cactuslib/nets/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Protocol, Sequence

from ..models.net import AdjacencyComponent, Atom, End, EndInstance, Net

__all__ = [
    "NetDisk",
    "ArenaNetDisk",
]

class NetDisk(Protocol):
    def get_net(self, name: str) -> Net: ...
    def ends(self, net: Net) -> Iterable[End]: ...
    def instances(self, end: End) -> Iterable[EndInstance]: ...
    def adjacency_components(self, net: Net) -> Iterable[AdjacencyComponent]: ...
    def atoms(self, net: Net) -> Iterable[Atom]: ...
    def nested_net(self, component: AdjacencyComponent) -> Net: ...
    def adjacency(self, instance: EndInstance) -> Optional[EndInstance]: ...
    def close(self) -> None: ...

@dataclass
class ArenaNetDisk:
    """
    Read-only in-memory net disk:
      nets:      arena of nets; adjacency components refer to nets by index
      end_instances: every end instance referenced by an end, in any order
    Iteration follows the stored order, so repeated traversals are identical.
    Raises ValueError if the arena is not a tree or refers to unknown instances.
    """
    nets: Sequence[Net]
    end_instances: Iterable[EndInstance] = ()
    _by_name: Dict[str, int] = field(init=False, repr=False)
    _by_id: Dict[str, EndInstance] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.nets = tuple(self.nets)
        self._by_id = {}
        for inst in self.end_instances:
            if inst.instance_id in self._by_id:
                raise ValueError(f"duplicate end instance id {inst.instance_id!r}")
            self._by_id[inst.instance_id] = inst
        self._by_name = {}
        nested_once: Dict[int, str] = {}
        for idx, net in enumerate(self.nets):
            if net.name in self._by_name:
                raise ValueError(f"duplicate net name {net.name!r}")
            self._by_name[net.name] = idx
            for comp in net.adjacency_components:
                if not 0 <= comp.nested_net < len(self.nets):
                    raise ValueError(f"net {net.name!r}: nested net index {comp.nested_net} out of range")
                if comp.nested_net == idx:
                    raise ValueError(f"net {net.name!r} nests itself")
                if comp.nested_net in nested_once:
                    raise ValueError(
                        f"net index {comp.nested_net} nested by both "
                        f"{nested_once[comp.nested_net]!r} and {net.name!r}"
                    )
                nested_once[comp.nested_net] = net.name
            for end in net.ends:
                for iid in end.instances:
                    if iid not in self._by_id:
                        raise ValueError(f"end {end.name!r} refers to unknown instance {iid!r}")
        self._check_acyclic()

    def _check_acyclic(self) -> None:
        # every net has at most one parent, so a cycle cannot reach a parentless net
        parents = {c.nested_net for n in self.nets for c in n.adjacency_components}
        seen = set()
        stack = [i for i in range(len(self.nets)) if i not in parents]
        while stack:
            i = stack.pop()
            seen.add(i)
            stack.extend(c.nested_net for c in self.nets[i].adjacency_components)
        if len(seen) != len(self.nets):
            raise ValueError("adjacency components form a cycle")

    # ---------- NetDisk ----------

    def get_net(self, name: str) -> Net:
        return self.nets[self._by_name[name]]

    def ends(self, net: Net) -> Iterator[End]:
        return iter(net.ends)

    def instances(self, end: End) -> Iterator[EndInstance]:
        return (self._by_id[iid] for iid in end.instances)

    def adjacency_components(self, net: Net) -> Iterator[AdjacencyComponent]:
        return iter(net.adjacency_components)

    def atoms(self, net: Net) -> Iterator[Atom]:
        return iter(net.atoms)

    def nested_net(self, component: AdjacencyComponent) -> Net:
        return self.nets[component.nested_net]

    def adjacency(self, instance: EndInstance) -> Optional[EndInstance]:
        """
        Paired instance. If `instance` is the reversed view of its stored
        record, the target is reversed too. Returns None when there is no
        adjacency or it names an unknown instance.
        """
        if instance.adjacency is None:
            return None
        target = self._by_id.get(instance.adjacency)
        if target is None:
            return None
        stored = self._by_id.get(instance.instance_id, instance)
        if stored.orientation != instance.orientation:
            target = target.reverse()
        return target

    def close(self) -> None:
        pass

    def __enter__(self) -> "ArenaNetDisk":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
