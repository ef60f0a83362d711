"""Fiduccia-Mattheyses min-cut partitioning of circuit netlists, with benchmark I/O,
a recursive cut tree and a random benchmark generator."""

__version__ = "0.1.0"