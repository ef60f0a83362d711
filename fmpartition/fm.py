"""Fiduccia-Mattheyses min-cut bipartitioning."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from .buckets import GainBuckets, build_buckets, format_buckets
from .model import Net, Node

#: Cut size reported when a pass moves no cell at all.
NO_CUT = 2**31 - 1


@dataclass
class TimePoint:
    """State recorded just before a cell is moved and locked."""

    locked_node: int
    cut_size: int
    ratio: float


def _trace(log_level: int, threshold: int, message: str) -> None:
    if log_level > threshold:
        print(message)


def area_ratio(nodes: Sequence[Node]) -> float:
    """Area on the first side divided by area on the second side.

    Returns ``inf`` when only the first side holds area and ``nan`` when
    neither side does.
    """
    left = sum(node.area for node in nodes if not node.partition)
    right = sum(node.area for node in nodes if node.partition)
    if right == 0:
        return math.inf if left else math.nan
    return left / right


def calculate_crossings(nodes: Sequence[Node], nets: Sequence[Net]) -> int:
    """Set each cell's crossing count and return the number of cut nets.

    A cell's crossings are the members listed before it on the net that sit
    on the other side; the last net a cell appears on decides its value.
    """
    cutsize = 0
    for net in nets:
        members = net.connected_nodes
        cut = False
        for position, index in enumerate(members):
            side = nodes[index].partition
            crossings = sum(1 for other in members[:position] if nodes[other].partition != side)
            nodes[index].crossings = crossings
            if crossings:
                cut = True
        if cut:
            cutsize += 1
    return cutsize


def _print_buckets(
    left: GainBuckets,
    right: GainBuckets,
    selected: int | None,
    nodes: Sequence[Node],
    timeline: list[TimePoint],
) -> None:
    print(format_buckets(left, right, selected, nodes, timeline), end="")


def _choose_bucket(
    last_was_left: bool, left: GainBuckets, right: GainBuckets
) -> tuple[GainBuckets, bool]:
    """Alternate sides, falling back to the other side when one is empty."""
    if last_was_left:
        return (right if right else left), False
    return (left if left else right), True


def fm_pass(nodes: Sequence[Node], nets: Sequence[Net], log_level: int = 0) -> int:
    """Run one pass: move every cell once, then roll back to the best cut.

    Returns the lowest cut size seen during the pass. Raises KeyError if
    the bucket structure loses track of a cell.
    """
    for node in nodes:
        node.unlock()

    cutsize = calculate_crossings(nodes, nets)
    timeline: list[TimePoint] = []
    lowest = NO_CUT

    left, right = build_buckets(nodes)
    _trace(log_level, 2, f"Left Size: {len(left)} R Size: {len(right)}")
    if log_level > 0:
        _print_buckets(left, right, None, nodes, timeline)

    last_was_left = True
    while left or right:
        bucket, last_was_left = _choose_bucket(last_was_left, left, right)
        gain, selected = bucket.select()
        _trace(log_level, 2, f"with a gain of: {gain}")

        timeline.append(TimePoint(selected, cutsize, area_ratio(nodes)))
        _trace(log_level, 2, f"cutsize before pass: {cutsize}")

        moved = nodes[selected]
        _trace(
            log_level,
            2,
            f"Removing node[{selected}]: {moved.name} in bucket "
            f"{int(moved.partition)} with gain of {gain}",
        )
        bucket.remove(selected, gain)
        moved.lock()
        moved.move_partition()

        if log_level > 0:
            _print_buckets(left, right, selected, nodes, timeline)

        for net_index in moved.connected_nets:
            increased = decreased = False
            for member in nets[net_index].connected_nodes:
                neighbour = nodes[member]
                if member == selected or neighbour.locked:
                    continue
                _trace(
                    log_level,
                    2,
                    f"Starting search for node[{member}]: {neighbour.name} "
                    f"with gain of {neighbour.gain}",
                )
                side = left if neighbour.partition else right
                side.remove(member, neighbour.gain)

                if moved.partition != neighbour.partition:
                    if neighbour.crossings == 0:
                        increased = True
                    neighbour.crossings += 1
                else:
                    if neighbour.crossings == 1:
                        decreased = True
                    neighbour.crossings -= 1

                _trace(log_level, 2, f"\t\tNew Gain: {neighbour.gain}")
                side.push_front(member, neighbour.gain)
            if increased:
                cutsize += 1
            if decreased:
                cutsize -= 1

        _trace(log_level, 2, f"cutsize after the pass: {cutsize}")
        lowest = min(lowest, cutsize)

    if log_level > 1:
        _print_buckets(left, right, None, nodes, timeline)
    _trace(log_level, 2, "Buckets are empty")

    for point in reversed(timeline):
        if point.cut_size == lowest:
            break
        nodes[point.locked_node].move_partition()

    print(f"Final Cut size: {lowest}")
    return lowest


def fiduccia_mattheyses(
    nodes: Sequence[Node],
    nets: Sequence[Net],
    log_level: int = 0,
    rng: random.Random | None = None,
) -> int:
    """Partition the cells, repeating passes while the cut keeps shrinking.

    Cells before the first terminal get a random starting side. Returns the
    cut size of the last pass that improved on its predecessor.
    """
    rng = rng if rng is not None else random.Random()
    for node in nodes:
        if node.terminal:
            break
        node.partition = bool(rng.randrange(2))

    cut = NO_CUT
    while True:
        last_cut = cut
        cut = fm_pass(nodes, nets, log_level)
        print("\n")
        if not cut < last_cut:
            return last_cut