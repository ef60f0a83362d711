import random

import pytest

from fmpartition.model import Net, Node
from fmpartition.placement import TreeNode, quadrature


def _netlist(count, pairs):
    nodes = [Node(f"o{i}", 1, 1) for i in range(count)]
    nets = []
    for net_index, members in enumerate(pairs):
        nets.append(Net(f"n{net_index}", list(members)))
        for member in members:
            nodes[member].add_net(net_index)
    return nodes, nets


def _walk(tree):
    yield tree
    for child in (tree.left, tree.right):
        if child is not None:
            yield from _walk(child)


def test_single_cell_becomes_leaf():
    nodes, nets = _netlist(1, [])
    tree = quadrature(nodes, nets, TreeNode(), random.Random(0))
    assert tree.is_leaf
    assert tree.node_id == "o0"


def test_empty_input_leaves_root_unnamed():
    tree = quadrature([], [], None, random.Random(0))
    assert tree.is_leaf
    assert tree.node_id == ""


def test_new_tree_node_defaults():
    tree = TreeNode()
    assert (tree.width, tree.height, tree.xlow, tree.yhigh) == (-1, -1, -1, -1)
    assert tree.cut_direction is False
    assert tree.left is None and tree.parent is None


@pytest.mark.parametrize("seed", [0, 1, 2, 7])
def test_every_cell_ends_in_exactly_one_leaf(seed, capsys):
    nodes, nets = _netlist(5, [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)])
    tree = quadrature(nodes, nets, None, random.Random(seed))
    names = [leaf.node_id for leaf in tree.leaves()]
    assert sorted(names) == [n.name for n in nodes]


def test_children_link_back_and_alternate_direction(capsys):
    nodes, nets = _netlist(4, [(0, 1), (2, 3), (1, 2)])
    root = TreeNode()
    quadrature(nodes, nets, root, random.Random(3))
    for region in _walk(root):
        for child in (region.left, region.right):
            if child is not None:
                assert child.parent is region
                assert child.cut_direction is (not region.cut_direction)
        assert (region.left is None) == (region.right is None)


def test_input_cells_are_not_modified(capsys):
    nodes, nets = _netlist(4, [(0, 1, 2, 3)])
    before = [(n.partition, list(n.connected_nets), n.crossings) for n in nodes]
    quadrature(nodes, nets, None, random.Random(5))
    after = [(n.partition, list(n.connected_nets), n.crossings) for n in nodes]
    assert after == before


def test_cells_without_nets_still_split(capsys):
    nodes, nets = _netlist(3, [])
    tree = quadrature(nodes, nets, None, random.Random(11))
    leaves = list(tree.leaves())
    assert len(leaves) == 3
    assert all(leaf.is_leaf for leaf in leaves)