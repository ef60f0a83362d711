"""Gain bucket structure used by the Fiduccia-Mattheyses pass."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .model import Node


class GainBuckets:
    """Cells grouped by gain; each gain holds an ordered list of cell indexes."""

    def __init__(self) -> None:
        self._buckets: dict[int, deque[int]] = {}

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets.values())

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def __contains__(self, gain: object) -> bool:
        return gain in self._buckets

    def append(self, node_index: int, gain: int) -> None:
        """Add a cell at the end of the list for ``gain``."""
        self._buckets.setdefault(gain, deque()).append(node_index)

    def push_front(self, node_index: int, gain: int) -> None:
        """Add a cell at the head of the list for ``gain``."""
        self._buckets.setdefault(gain, deque()).appendleft(node_index)

    def remove(self, node_index: int, gain: int) -> None:
        """Take a cell out of the list for ``gain``; drop the gain once empty.

        Raises KeyError if the cell is not held under that gain.
        """
        chain = self._buckets.get(gain)
        if chain is None:
            raise KeyError(f"no cells with gain {gain}")
        try:
            chain.remove(node_index)
        except ValueError:
            raise KeyError(f"cell {node_index} not found with gain {gain}") from None
        if not chain:
            del self._buckets[gain]

    def max_gain(self) -> int:
        """Largest gain present. Raises ValueError when empty."""
        if not self._buckets:
            raise ValueError("bucket is empty")
        return max(self._buckets)

    def select(self) -> tuple[int, int]:
        """Return ``(gain, node_index)`` for the last cell at the largest gain."""
        gain = self.max_gain()
        return gain, self._buckets[gain][-1]

    def items(self) -> Iterator[tuple[int, tuple[int, ...]]]:
        """Yield ``(gain, cells)`` in increasing order of gain."""
        for gain in sorted(self._buckets):
            yield gain, tuple(self._buckets[gain])


def build_buckets(nodes: Iterable[Node]) -> tuple[GainBuckets, GainBuckets]:
    """Place every cell in a bucket according to its side and current gain.

    Returns ``(left, right)``: ``left`` holds cells whose ``partition`` flag
    is True, ``right`` those whose flag is False. Cells are appended in the
    order given.
    """
    left = GainBuckets()
    right = GainBuckets()
    for index, node in enumerate(nodes):
        bucket = left if node.partition else right
        bucket.append(index, node.gain)
    return left, right


def _format_bucket(title: str, bucket: GainBuckets, nodes: Sequence[Node]) -> list[str]:
    lines = [title]
    for gain, chain in bucket.items():
        cells = "".join(f"{nodes[index].name}->" for index in chain)
        lines.append(f"\tGain: {gain}\t\t{cells}")
    return lines


def format_buckets(
    left: GainBuckets,
    right: GainBuckets,
    selected: int | None,
    nodes: Sequence[Node],
    timeline: Iterable[Any],
) -> str:
    """Describe both buckets and the locked cells as text.

    ``selected`` is the index of the cell just moved, or None. Each entry of
    ``timeline`` must have a ``locked_node`` attribute.
    """
    if selected is not None and selected >= 0:
        lines = [f"move and lock node {nodes[selected].name}"]
    else:
        lines = ["No node selected"]
    lines += _format_bucket("Left Bucket", left, nodes)
    lines += _format_bucket("Right Bucket", right, nodes)
    locked = "".join(f"{nodes[point.locked_node].name} " for point in timeline)
    lines.append(f"Locked Nodes (In order): {locked}")
    return "\n".join(lines) + "\n"