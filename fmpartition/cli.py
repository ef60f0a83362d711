"""Command-line entry point: partition a benchmark and write the report."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .fm import fiduccia_mattheyses
from .netlist_io import ParseError, load_benchmark, write_output

_PROG = "fmpartition"
_USAGE = f"Usage: {_PROG} -log X -input Test"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ArgumentError(ValueError):
    """The command line could not be understood."""


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    benchmark: str = ""
    log_level: int = 0

    @property
    def input_base(self) -> str:
        """Common path of the benchmark's files, without extension."""
        return f"../Benchmarks/{self.benchmark}/{self.benchmark}"

    @property
    def output_path(self) -> str:
        """Path the partition report is written to."""
        return f"../Output/{self.benchmark}_Output.txt"


def _lenient_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_arguments(argv: Sequence[str]) -> Options:
    """Read ``-log X`` and ``-input NAME`` from ``argv`` (program name excluded).

    Raises ArgumentError on too few arguments, a missing value or an
    unknown option.
    """
    args = list(argv)
    if len(args) < 2:
        raise ArgumentError(_USAGE)

    benchmark = ""
    log_level = 0
    tokens = iter(args)
    for token in tokens:
        if token == "-log":
            value = next(tokens, None)
            if value is None:
                raise ArgumentError("Error: -log option requires an argument.")
            log_level = _lenient_int(value)
        elif token == "-input":
            value = next(tokens, None)
            if value is None:
                raise ArgumentError("Error: -input option requires an argument.")
            benchmark = value
        else:
            raise ArgumentError(f"Unknown option: {token}")
    return Options(benchmark=benchmark, log_level=log_level)


def main(argv: Sequence[str] | None = None) -> int:
    """Partition the chosen benchmark; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_arguments(argv)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        bench = load_benchmark(options.input_base)
    except FileNotFoundError as error:
        print(f"{error.filename} not found", file=sys.stderr)
        return 1
    except (OSError, ParseError) as error:
        print(error, file=sys.stderr)
        return 1

    if options.log_level > 0:
        print(f"Number of nodes: {len(bench.nodes)}")
        print(f"Number of nets: {len(bench.nets)}")
        print(f"Number of rows: {bench.num_rows}")
        print(f"Number of sites: {bench.num_sites}")
        if bench.nodes:
            x, y = bench.nodes[bench.offset].coordinates
            print(f"xcoord: {x} ycoord: {y}")

    cut = fiduccia_mattheyses(bench.nodes, bench.nets, options.log_level, random.Random())

    try:
        write_output(options.output_path, cut, bench.nodes)
    except OSError:
        print(f"{options.output_path} not found", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())