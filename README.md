# fmpartition

`fmpartition` splits a circuit netlist into two partitions with the
Fiduccia-Mattheyses (FM) min-cut heuristic. It reads benchmarks in a simple
Bookshelf-style format (`.nodes`, `.nets`, `.scl`, `.pl`) and writes the final
cut size, the area ratio and the members of each partition to a text report.
A small generator writes random benchmarks to try it on.

## Installation

```
pip install .
```

Install the `test` extra (`pip install ".[test]"`) to run the test suite with
`pytest`.

## Benchmark layout

A benchmark called `NAME` is a set of four files sharing one base path:

| File          | Contents                                                        |
|---------------|-----------------------------------------------------------------|
| `NAME.nodes`  | a header line, `NumNodes`, `NumTerminals`, then one `id width height` per line; a line containing `terminal` marks a terminal |
| `NAME.nets`   | a header line, `NumNets`, `NumPins`, then `NetDegree : k nX` followed by `k` lines of cell ids |
| `NAME.scl`    | a header line, `NumRows`, and rows of which the first `NumSites` value is read |
| `NAME.pl`     | a header line, then `id x y` lower-left coordinates per line    |

Cell ids start with `o` (ordinary cells and terminals) or `p` (pins); pins are
listed after all `o` cells, and a pin's number counts from the first pin. Blank
lines and lines starting with `#` are skipped. Malformed or truncated files,
and cell ids outside the list of cells, raise `fmpartition.netlist_io.ParseError`.

## Partitioning a benchmark

```
fmpartition -log 0 -input Test
```

Both options take a value; an unknown option, a missing value or fewer than two
arguments print an error and exit with status 1.

- `-input NAME` – the benchmark to partition. Its files are read from
  `../Benchmarks/NAME/NAME.*` and the report is written to
  `../Output/NAME_Output.txt`, both relative to the working directory.
- `-log N` – verbosity. `0` prints only the final cut size of each FM pass.
  `1` also prints the benchmark's counts and the gain buckets before and after
  every move, `2` adds the buckets at the end of each pass, and `3` traces
  every bucket operation.

The starting partition is random: cells before the first terminal get a random
side, so separate runs may end with different cuts. Passes repeat for as long
as the cut size keeps falling. The report looks like this:

```
Cutsize: 12
Partition Ratio: 0.970006
Partition 1: 40	Area: 1520 - 49.2387%
o0
...
Partition 2: 42	Area: 1567 - 50.7613%
...
```

## Generating a random benchmark

```
fmpartition-graphgen
```

The generator asks on standard input for the number of nodes, nets, rows and
sites per row, then writes `../Benchmarks/Test/Test.nodes`, `.nets`, `.scl` and
`.pl`. Up to a third of the cells (at least one) become fixed pins and a few
more become fixed terminals; movable cells are placed at the origin. It stops
with exit status 1 when an answer is not a whole number, when there are too few
cells to choose terminals from, or when there are fewer sites than cells.

## Library use

```python
import random

from fmpartition.netlist_io import load_benchmark, write_output
from fmpartition.fm import fiduccia_mattheyses

bench = load_benchmark("../Benchmarks/Test/Test")
cut = fiduccia_mattheyses(bench.nodes, bench.nets, 0, random.Random(1))
write_output("Test_Output.txt", cut, bench.nodes)
```

`fiduccia_mattheyses` changes the cells' `partition` flags in place and prints
each pass's cut size to standard output.

Modules:

- `fmpartition.model` – `Node` (size, area, side, crossings, gain, lock,
  coordinates) and `Net`.
- `fmpartition.buckets` – `GainBuckets`, the gain-indexed structure FM picks
  moves from, with `build_buckets` and `format_buckets`.
- `fmpartition.fm` – `calculate_crossings`, `area_ratio`, `TimePoint`, a single
  `fm_pass` and the repeating `fiduccia_mattheyses` loop.
- `fmpartition.netlist_io` – `parse_nodes`, `parse_nets`, `parse_scl`,
  `parse_pl`, `load_benchmark` (returning a `Benchmark`), `format_output`,
  `write_output` and `ParseError`.
- `fmpartition.placement` – `TreeNode` and `quadrature`, which bisects a
  netlist with FM again and again into a binary cut tree whose leaves each name
  one cell, alternating the cut direction at each level.
- `fmpartition.graphgen` – `generate_nodes`, `generate_nets`, `generate_scl`
  and `generate_pl` for writing random benchmarks.
- `fmpartition.cli` – `parse_arguments`, `Options` and `main` behind the
  `fmpartition` command.

## What it does not do

- `quadrature` only builds the cut tree. It does not assign regions: the
  `xlow`, `xhigh`, `ylow`, `yhigh`, `width` and `height` of every `TreeNode`
  stay at `-1`, and no placement is written out. It is not reachable from the
  `fmpartition` command.
- The row and site counts read from `.scl` files and the coordinates read from
  `.pl` files are stored but not used by the partitioner.
- The input and output paths of both commands are fixed relative to the working
  directory and cannot be changed from the command line.