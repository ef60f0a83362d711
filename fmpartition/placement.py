"""Recursive min-cut placement by repeated bipartitioning."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace

from .fm import fiduccia_mattheyses
from .model import Net, Node


@dataclass(eq=False)
class TreeNode:
    """A region of the placement tree; leaves name a single cell."""

    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)
    width: int = -1
    height: int = -1
    node_id: str = ""
    xhigh: int = -1
    xlow: int = -1
    yhigh: int = -1
    ylow: int = -1
    cut_direction: bool = False

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def leaves(self) -> Iterator[TreeNode]:
        """Yield the leaves below this region, left before right."""
        if self.is_leaf:
            yield self
            return
        for child in (self.left, self.right):
            if child is not None:
                yield from child.leaves()


def _restrict(
    nodes: Sequence[Node], nets: Sequence[Net], chosen: Iterable[int]
) -> tuple[list[Node], list[Net]]:
    """Copy the chosen cells with the nets among them, renumbered locally."""
    chosen = list(chosen)
    local = {index: position for position, index in enumerate(chosen)}
    sub_nets: list[Net] = []
    net_map: dict[int, int] = {}
    for net_index, net in enumerate(nets):
        members = [local[m] for m in net.connected_nodes if m in local]
        if members:
            net_map[net_index] = len(sub_nets)
            sub_nets.append(Net(net.name, members))
    sub_nodes = [
        replace(
            nodes[index],
            connected_nets=[net_map[n] for n in nodes[index].connected_nets if n in net_map],
            locked=False,
            crossings=0,
        )
        for index in chosen
    ]
    return sub_nodes, sub_nets


def quadrature(
    nodes: Sequence[Node],
    nets: Sequence[Net],
    current: TreeNode | None = None,
    rng: random.Random | None = None,
) -> TreeNode:
    """Split the cells recursively until each leaf of the tree holds one.

    Each level partitions its cells with Fiduccia-Mattheyses and alternates
    the cut direction. If a partition leaves one side empty, the cells are
    halved in their given order so the recursion always ends. The cells
    passed in are not modified. Returns ``current`` (a new root if None).
    """
    if current is None:
        current = TreeNode()
    if not nodes:
        return current
    if len(nodes) == 1:
        current.node_id = nodes[0].name
        return current

    work_nodes, work_nets = _restrict(nodes, nets, range(len(nodes)))
    fiduccia_mattheyses(work_nodes, work_nets, rng=rng)

    right = [index for index, node in enumerate(work_nodes) if node.partition]
    left = [index for index, node in enumerate(work_nodes) if not node.partition]
    if not left or not right:
        half = len(nodes) // 2
        left, right = list(range(half)), list(range(half, len(nodes)))

    flipped = not current.cut_direction
    left_child = TreeNode(parent=current, cut_direction=flipped)
    right_child = TreeNode(parent=current, cut_direction=flipped)
    current.left = left_child
    current.right = right_child

    left_nodes, left_nets = _restrict(nodes, nets, left)
    right_nodes, right_nets = _restrict(nodes, nets, right)
    quadrature(left_nodes, left_nets, left_child, rng)
    quadrature(right_nodes, right_nets, right_child, rng)
    return current