import pytest

from cactuslib import ArenaNetDisk, AdjacencyComponent, Atom, End, EndInstance, Net

# Factory fixture for paired ends.  E.g.
#
#   def test_something(pairs):
#       ends, insts = pairs("a", 8, 4)   # two pairings, gaps 8 and 4
#
# Each pairing is a left instance (side False) at coordinate `start` joined to a
# right instance (side True) at `start + gap + 1`, on separate ends.
@pytest.fixture
def pairs():
    def _pairs(prefix, *gaps, start=0):
        ends, insts = [], []
        for k, gap in enumerate(gaps):
            left, right = f"{prefix}{k}L", f"{prefix}{k}R"
            insts.append(EndInstance(left, coordinate=start, side=False, adjacency=right))
            insts.append(EndInstance(right, coordinate=start + gap + 1, side=True, adjacency=left))
            ends.append(End(f"{prefix}{k}.5", instances=(left,)))
            ends.append(End(f"{prefix}{k}.3", instances=(right,)))
        return tuple(ends), insts
    return _pairs


@pytest.fixture
def leaf_root(pairs):
    # single leaf net, contained sequence 8
    ends, insts = pairs("r", 8)
    disk = ArenaNetDisk(nets=[Net("root", ends=ends)], end_instances=insts)
    return disk, disk.get_net("root")


@pytest.fixture
def two_child_root(pairs):
    # root: two leaf children of length 4, atoms of size 10, own pairing of 10
    root_ends, root_insts = pairs("r", 10)
    c1_ends, c1_insts = pairs("a", 4)
    c2_ends, c2_insts = pairs("b", 1, 3)
    root = Net(
        "root",
        ends=root_ends,
        adjacency_components=(AdjacencyComponent(1), AdjacencyComponent(2)),
        atoms=(Atom(length=5, instance_number=2),),
    )
    disk = ArenaNetDisk(
        nets=[root, Net("c1", ends=c1_ends), Net("c2", ends=c2_ends)],
        end_instances=root_insts + c1_insts + c2_insts,
    )
    return disk, root
