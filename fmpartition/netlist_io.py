"""Reading benchmark netlists and writing partition reports."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .model import Net, Node

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_DIGITS = re.compile(r"\d+")


class ParseError(ValueError):
    """A benchmark file does not have the expected layout."""


@dataclass
class Benchmark:
    """Everything read from one benchmark's set of files."""

    nodes: list[Node]
    nets: list[Net]
    num_rows: int
    num_sites: int
    offset: int = 0
    num_terminals: int = 0
    name: str = field(default="")


def _lines(path: str | os.PathLike[str]) -> Iterator[str]:
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    return iter(text.splitlines())


def _skipped(line: str) -> bool:
    return not line or line.startswith("#")


def _next_line(lines: Iterator[str], path: str | os.PathLike[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ParseError(f"{os.fspath(path)}: unexpected end of file while reading {what}") from None


def _leading_int(text: str, what: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ParseError(f"expected an integer for {what}, got {text!r}")
    return int(match.group(1))


def _first_number(line: str, what: str) -> int:
    match = _DIGITS.search(line)
    if match is None:
        raise ParseError(f"no number found for {what} in {line!r}")
    return int(match.group())


def _header_count(lines: Iterator[str], path: str | os.PathLike[str], what: str) -> int:
    for line in lines:
        if _skipped(line):
            continue
        return _first_number(line, what)
    raise ParseError(f"{os.fspath(path)}: missing {what}")


def _resolve_index(name: str, offset: int, count: int) -> int:
    index = _leading_int(name[1:], f"cell {name!r}")
    if "p" in name:
        index += offset
    if not 0 <= index < count:
        raise ParseError(f"cell {name!r} refers to index {index}, outside 0..{count - 1}")
    return index


def parse_nodes(path: str | os.PathLike[str]) -> tuple[list[Node], int, int]:
    """Read a ``.nodes`` file.

    Returns ``(nodes, num_terminals, offset)`` where ``offset`` is the index
    of the first pin (a cell whose name holds ``p``), or 0 if there is none.
    """
    lines = _lines(path)
    _next_line(lines, path, "the header")
    num_nodes = _header_count(lines, path, "NumNodes")
    num_terminals = _first_number(_next_line(lines, path, "NumTerminals"), "NumTerminals")

    nodes: list[Node] = []
    offset: int | None = None
    for line in lines:
        if _skipped(line):
            continue
        fields = line.split()
        if len(fields) < 3:
            raise ParseError(f"malformed node line {line!r}")
        name = fields[0]
        width = _leading_int(fields[1], f"width of {name}")
        height = _leading_int(fields[2], f"height of {name}")
        if offset is None and "p" in name:
            offset = len(nodes)
        nodes.append(Node(name, width, height, terminal="terminal" in line))

    if len(nodes) < num_nodes:
        raise ParseError(
            f"{os.fspath(path)}: expected {num_nodes} nodes, found {len(nodes)}"
        )
    return nodes, num_terminals, 0 if offset is None else offset


def parse_nets(
    path: str | os.PathLike[str], nodes: Sequence[Node], offset: int
) -> list[Net]:
    """Read a ``.nets`` file, recording each net on the cells it connects."""
    lines = _lines(path)
    _next_line(lines, path, "the header")
    num_nets = _header_count(lines, path, "NumNets")
    _next_line(lines, path, "NumPins")

    nets: list[Net] = []
    for line in lines:
        if _skipped(line):
            continue
        fields = line.split()
        if len(fields) < 4:
            raise ParseError(f"malformed net header {line!r}")
        degree = _leading_int(fields[2], "net degree")
        name = fields[3]
        net_index = _leading_int(name[1:], f"net {name!r}")
        members: list[int] = []
        for _ in range(degree):
            member_line = _next_line(lines, path, f"the cells of net {name}")
            if _skipped(member_line):
                continue
            node_name = member_line.split()[0]
            index = _resolve_index(node_name, offset, len(nodes))
            members.append(index)
            nodes[index].add_net(net_index)
        nets.append(Net(name, members))

    if len(nets) < num_nets:
        raise ParseError(f"{os.fspath(path)}: expected {num_nets} nets, found {len(nets)}")
    return nets


def parse_scl(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Read a ``.scl`` file. Returns ``(num_rows, num_sites)``."""
    lines = _lines(path)
    _next_line(lines, path, "the header")
    num_rows = _header_count(lines, path, "NumRows")
    for line in lines:
        if _skipped(line):
            continue
        position = line.find("NumSites")
        if position != -1:
            return num_rows, _first_number(line[position:], "NumSites")
    raise ParseError(f"{os.fspath(path)}: missing NumSites")


def parse_pl(path: str | os.PathLike[str], nodes: Sequence[Node], offset: int) -> None:
    """Read a ``.pl`` file and store each cell's lower-left coordinates."""
    lines = _lines(path)
    _next_line(lines, path, "the header")
    for line in lines:
        if _skipped(line):
            continue
        fields = line.split()
        if len(fields) < 3:
            raise ParseError(f"malformed placement line {line!r}")
        index = _resolve_index(fields[0], offset, len(nodes))
        node = nodes[index]
        node.x = _leading_int(fields[1], f"x of {fields[0]}")
        node.y = _leading_int(fields[2], f"y of {fields[0]}")


def load_benchmark(base_path: str | os.PathLike[str]) -> Benchmark:
    """Read ``<base>.nodes``, ``.nets``, ``.scl`` and ``.pl``."""
    base = os.fspath(base_path)
    nodes, num_terminals, offset = parse_nodes(base + ".nodes")
    nets = parse_nets(base + ".nets", nodes, offset)
    num_rows, num_sites = parse_scl(base + ".scl")
    parse_pl(base + ".pl", nodes, offset)
    return Benchmark(
        nodes=nodes,
        nets=nets,
        num_rows=num_rows,
        num_sites=num_sites,
        offset=offset,
        num_terminals=num_terminals,
        name=Path(base).name,
    )


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return float("nan")
        return float("inf") if numerator > 0 else float("-inf")
    return numerator / denominator


def format_output(cutsize: int, nodes: Sequence[Node]) -> str:
    """Report the cut size, area balance and the cells on each side."""
    left = [node for node in nodes if not node.partition]
    right = [node for node in nodes if node.partition]
    left_area = sum(node.area for node in left)
    right_area = sum(node.area for node in right)
    total = left_area + right_area
    ratio = _divide(left_area, right_area)
    left_percent = _divide(left_area, total) * 100
    right_percent = _divide(right_area, total) * 100

    lines = [f"Cutsize: {cutsize}", f"Partition Ratio: {ratio:g}"]
    lines.append(f"Partition 1: {len(left)}\tArea: {left_area} - {left_percent:g}%")
    lines.extend(node.name for node in left)
    lines.append(f"Partition 2: {len(right)}\tArea: {right_area} - {right_percent:g}%")
    lines.extend(node.name for node in right)
    return "\n".join(lines) + "\n"


def write_output(path: str | os.PathLike[str], cutsize: int, nodes: Sequence[Node]) -> None:
    """Write the partition report to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_output(cutsize, nodes))