"""Cells and nets of a netlist being partitioned."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Node:
    """A cell (movable node, terminal or pin) of the netlist.

    ``partition`` is False for the first side and True for the second.
    ``crossings`` counts connections to cells on the other side and is what
    the cell's gain is derived from.
    """

    name: str
    width: int
    height: int
    terminal: bool = False
    connected_nets: list[int] = field(default_factory=list)
    x: int = 0
    y: int = 0
    locked: bool = False
    partition: bool = False
    crossings: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def gain(self) -> int:
        """Gain of moving this cell: ``2 * crossings - number of nets``."""
        return 2 * self.crossings - len(self.connected_nets)

    @property
    def coordinates(self) -> tuple[int, int]:
        """Lower-left corner of the cell."""
        return self.x, self.y

    def move_partition(self) -> None:
        """Move the cell to the other side of the cut."""
        self.partition = not self.partition

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False

    def add_net(self, net_index: int) -> None:
        """Record that the net at ``net_index`` connects to this cell."""
        self.connected_nets.append(net_index)


@dataclass
class Net:
    """A net: its name and the indexes of the cells it connects."""

    name: str
    connected_nodes: list[int] = field(default_factory=list)