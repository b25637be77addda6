import pytest

from cactuslib import ArenaNetDisk, AdjacencyComponent, End, EndInstance, Net


def test_iteration_follows_stored_order(two_child_root):
    disk, root = two_child_root
    assert [disk.nested_net(c).name for c in disk.adjacency_components(root)] == ["c1", "c2"]
    assert [e.name for e in disk.ends(root)] == ["r0.5", "r0.3"]
    assert [a.size for a in disk.atoms(root)] == [10]
    c2 = disk.get_net("c2")
    ids = [i.instance_id for e in disk.ends(c2) for i in disk.instances(e)]
    assert ids == ["b0L", "b0R", "b1L", "b1R"]

def test_unknown_net_name_raises_keyerror(leaf_root):
    disk, _ = leaf_root
    with pytest.raises(KeyError):
        disk.get_net("nope")

def test_adjacency_lookup(leaf_root):
    disk, root = leaf_root
    (left,) = disk.instances(root.ends[0])
    right = disk.adjacency(left)
    assert right.instance_id == "r0R"
    assert right.coordinate == 9
    assert disk.adjacency(EndInstance("x", coordinate=0)) is None
    assert disk.adjacency(EndInstance("x", coordinate=0, adjacency="missing")) is None

def test_adjacency_of_reversed_view_is_reversed():
    a = EndInstance("a", coordinate=0, strand=False, side=True, orientation=False, adjacency="b")
    b = EndInstance("b", coordinate=5, strand=False, side=False, orientation=False, adjacency="a")
    disk = ArenaNetDisk(nets=[Net("n", ends=(End("e", instances=("a", "b")),))], end_instances=[a, b])
    target = disk.adjacency(a.positive_orientation())
    assert target.orientation is True
    assert target.strand is True
    assert target.side is True
    # stored view resolves to the stored target
    assert disk.adjacency(a) == b

def test_context_manager(leaf_root):
    disk, _ = leaf_root
    with disk as d:
        assert d is disk

@pytest.mark.parametrize(
    "nets, message",
    [
        ([Net("a", adjacency_components=(AdjacencyComponent(5),))], "out of range"),
        ([Net("a", adjacency_components=(AdjacencyComponent(0),))], "nests itself"),
        (
            [
                Net("a", adjacency_components=(AdjacencyComponent(2),)),
                Net("b", adjacency_components=(AdjacencyComponent(2),)),
                Net("c"),
            ],
            "nested by both",
        ),
        (
            [
                Net("a", adjacency_components=(AdjacencyComponent(1),)),
                Net("b", adjacency_components=(AdjacencyComponent(0),)),
            ],
            "cycle",
        ),
        ([Net("a"), Net("a")], "duplicate net name"),
        ([Net("a", ends=(End("e", instances=("ghost",)),))], "unknown instance"),
    ],
)
def test_arena_must_be_a_tree(nets, message):
    with pytest.raises(ValueError, match=message):
        ArenaNetDisk(nets=nets)

def test_duplicate_instance_ids():
    with pytest.raises(ValueError, match="duplicate end instance"):
        ArenaNetDisk(nets=[Net("a")], end_instances=[EndInstance("i", 0), EndInstance("i", 1)])
