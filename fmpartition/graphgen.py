"""Random benchmark generator: writes .nodes, .nets, .scl and .pl files."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Sequence

_NODES_HEADER = "SBU ESE 566 WKK nodes 1.0"
_NETS_HEADER = "SBU ESE 566 WKK nets 1.0"
_SCL_HEADER = "SBU ESE 566 WKK scl 1.0"
_PL_HEADER = "SBU ESE 566 WKK PL 1.0"

_ROW_START = 18
_ROW_HEIGHT = 9
_SITE_WIDTH = 1
_SITE_SPACING = 1
_SITE_ORIENT = "N"
_SITE_SYMMETRY = "Y"
_SUBROW_ORIGIN = 18


def _cell_size(rng: random.Random) -> int:
    return rng.randrange(11) + 1


def _position(rng: random.Random) -> int:
    return rng.randrange(101) + 1


def generate_nodes(
    path: str | os.PathLike[str],
    nodes: int,
    num_pins: int,
    npt: int,
    rng: random.Random,
) -> None:
    """Write a ``.nodes`` file: movable cells, terminal cells, then pins."""
    movable = nodes - (num_pins + npt)
    lines = [
        _NODES_HEADER,
        f"NumNodes : {nodes}",
        f"NumTerminals : {num_pins + npt}",
    ]
    for i in range(movable):
        lines.append(f"o{i}\t{_cell_size(rng)}\t{_cell_size(rng)}")
    for i in range(max(movable, 0), nodes - num_pins):
        lines.append(f"o{i}\t{_cell_size(rng)}\t{_cell_size(rng)}\tterminal")
    for i in range(num_pins):
        lines.append(f"p{i}\t{_cell_size(rng)}\t{_cell_size(rng)}\tterminal_NI")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def generate_nets(
    path: str | os.PathLike[str],
    nodes: int,
    nets: int,
    pins: int,
    rng: random.Random,
) -> None:
    """Write a ``.nets`` file of random nets, each joining distinct cells.

    A net's degree is between 2 and ``nodes``. The last ``pins`` cell
    indexes are written as pins. Raises ValueError without any cells.
    """
    if nets > 0 and nodes <= 0:
        raise ValueError("nets need at least one cell to connect")
    lines = [_NETS_HEADER, f"NumNets : {nets}", f"NumPins : {pins}"]
    movable = nodes - pins
    for i in range(nets):
        degree = min(rng.randrange(nodes) + 2, nodes)
        lines.append(f"NetDegree\t:\t\t{degree}\tn{i}")
        for member in rng.sample(range(nodes), degree):
            if member < movable:
                lines.append(f"\to{member}")
            else:
                lines.append(f"\tp{member - movable}")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def generate_scl(path: str | os.PathLike[str], rows: int, sites: int) -> None:
    """Write a ``.scl`` file of ``rows`` horizontal rows of ``sites`` sites."""
    lines = [_SCL_HEADER, "", f"NumRows : {rows}", ""]
    for row in range(rows):
        coordinate = _ROW_START + row * _ROW_HEIGHT
        lines += [
            "CoreRow Horizontal",
            f"\tCoordinate\t\t:{coordinate}",
            f"\tHeight\t\t\t:{_ROW_HEIGHT}",
            f"\tSiteWidth\t\t:{_SITE_WIDTH}",
            f"\tSiteSpacing\t\t:{_SITE_SPACING}",
            f"\tSiteOrient\t\t:{_SITE_ORIENT}",
            f"\tSiteSymmetry\t:{_SITE_SYMMETRY}",
            f"\tSubRowOrigin\t:{_SUBROW_ORIGIN}\t NumSites\t:{sites}",
            "End",
        ]
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def generate_pl(
    path: str | os.PathLike[str],
    nodes: int,
    num_pins: int,
    npt: int,
    rng: random.Random,
) -> None:
    """Write a ``.pl`` file: movable cells at the origin, terminals fixed."""
    movable = nodes - (num_pins + npt)
    lines = [_PL_HEADER, ""]
    for i in range(movable):
        lines.append(f"o{i}\t0\t0\t:N")
    for i in range(max(movable, 0), nodes - num_pins):
        lines.append(f"o{i}\t{_position(rng)}\t{_position(rng)}\t:N\t/FIXED")
    for i in range(num_pins):
        lines.append(f"p{i}\t{_position(rng)}\t{_position(rng)}\t:N\t/FIXED_NI")
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def _ask_int(prompt: str) -> int:
    print(prompt)
    return int(input().strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the sizes on standard input and write the Test benchmark."""
    parser = argparse.ArgumentParser(
        prog="fmpartition-graphgen",
        description="Generate a random benchmark under ../Benchmarks/Test.",
    )
    parser.parse_args(argv)

    benchmark = "Test"
    base = f"../Benchmarks/{benchmark}/{benchmark}"
    rng = random.Random()

    try:
        num_nodes = _ask_int("Enter the number of nodes")
        num_nets = _ask_int("Enter the number of nets in the graph")
        num_rows = _ask_int("Enter the total number of rows")
        num_sites = _ask_int("Enter number of sites per row")
    except (ValueError, EOFError):
        print("Expected a whole number.", file=sys.stderr)
        return 1

    if num_nodes < 1:
        print("At least one node is needed.", file=sys.stderr)
        return 1
    pins = rng.randrange(num_nodes // 3 + 1) + 1
    spread = (num_nodes - pins) // 5
    if spread <= 0:
        print("Too few nodes to choose terminals from.", file=sys.stderr)
        return 1
    npt = rng.randrange(spread) + 1

    if num_rows * num_sites < num_nodes:
        print("Not enough sites to place all the nodes.")
        return 1

    try:
        generate_nodes(base + ".nodes", num_nodes, pins, npt, rng)
        generate_nets(base + ".nets", num_nodes, num_nets, pins, rng)
        generate_scl(base + ".scl", num_rows, num_sites)
        generate_pl(base + ".pl", num_nodes, pins, npt, rng)
    except OSError as error:
        print(f"Can't open file: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())