import pytest

from fmpartition.model import Node
from fmpartition.netlist_io import (
    Benchmark,
    ParseError,
    format_output,
    load_benchmark,
    parse_nets,
    parse_nodes,
    parse_pl,
    parse_scl,
    write_output,
)

NODES = (
    "SBU ESE 566 WKK nodes 1.0\n"
    "NumNodes : 4\n"
    "NumTerminals : 2\n"
    "o0\t2\t3\n"
    "\n"
    "# a comment\n"
    "o1\t1\t1\n"
    "o2\t4\t2\tterminal\n"
    "p0\t1\t2\tterminal_NI\n"
)

NETS = (
    "SBU ESE 566 WKK nets 1.0\n"
    "NumNets : 2\n"
    "NumPins : 1\n"
    "NetDegree\t:\t\t2\tn0\n"
    "\to0\n"
    "\tp0\n"
    "NetDegree\t:\t\t3\tn1\n"
    "\to1\n"
    "\to2\n"
    "\to0\n"
)

SCL = (
    "SBU ESE 566 WKK scl 1.0\n"
    "\n"
    "NumRows : 2\n"
    "\n"
    "CoreRow Horizontal\n"
    "\tCoordinate\t\t:18\n"
    "\tSubRowOrigin\t:18\t NumSites\t:10\n"
    "End\n"
)

PL = (
    "SBU ESE 566 WKK PL 1.0\n"
    "\n"
    "o0\t0\t0\t:N\n"
    "o1\t5\t7\t:N\n"
    "o2\t20\t30\t:N\t/FIXED\n"
    "p0\t40\t50\t:N\t/FIXED_NI\n"
)


@pytest.fixture
def bench(tmp_path):
    base = tmp_path / "Test"
    for suffix, text in ((".nodes", NODES), (".nets", NETS), (".scl", SCL), (".pl", PL)):
        (tmp_path / f"Test{suffix}").write_text(text)
    return base


def test_parse_nodes_reads_cells(bench):
    nodes, num_terminals, offset = parse_nodes(str(bench) + ".nodes")
    assert [n.name for n in nodes] == ["o0", "o1", "o2", "p0"]
    assert num_terminals == 2
    assert offset == [n.name for n in nodes].index("p0")
    assert [n.terminal for n in nodes] == [False, False, True, True]
    assert (nodes[0].width, nodes[0].height) == (2, 3)


def test_parse_nodes_without_pins_has_zero_offset(tmp_path):
    path = tmp_path / "x.nodes"
    path.write_text("h\nNumNodes : 1\nNumTerminals : 0\no0\t1\t1\n")
    nodes, _, offset = parse_nodes(path)
    assert offset == 0
    assert len(nodes) == 1


def test_parse_nodes_too_few(tmp_path):
    path = tmp_path / "x.nodes"
    path.write_text("h\nNumNodes : 3\nNumTerminals : 0\no0\t1\t1\n")
    with pytest.raises(ParseError):
        parse_nodes(path)


def test_parse_nets_links_cells(bench):
    nodes, _, offset = parse_nodes(str(bench) + ".nodes")
    nets = parse_nets(str(bench) + ".nets", nodes, offset)
    assert [net.name for net in nets] == ["n0", "n1"]
    assert nets[0].connected_nodes == [0, offset]
    assert nets[1].connected_nodes == [1, 2, 0]
    assert nodes[0].connected_nets == [0, 1]
    assert nodes[offset].connected_nets == [0]


def test_parse_nets_unknown_cell(tmp_path, bench):
    nodes, _, offset = parse_nodes(str(bench) + ".nodes")
    path = tmp_path / "bad.nets"
    path.write_text("h\nNumNets : 1\nNumPins : 0\nNetDegree : 1 n0\n\to9\n")
    with pytest.raises(ParseError):
        parse_nets(path, nodes, offset)


def test_parse_nets_truncated(tmp_path, bench):
    nodes, _, offset = parse_nodes(str(bench) + ".nodes")
    path = tmp_path / "bad.nets"
    path.write_text("h\nNumNets : 1\nNumPins : 0\nNetDegree : 3 n0\n\to0\n")
    with pytest.raises(ParseError):
        parse_nets(path, nodes, offset)


def test_parse_scl(bench):
    assert parse_scl(str(bench) + ".scl") == (2, 10)


def test_parse_scl_missing_sites(tmp_path):
    path = tmp_path / "x.scl"
    path.write_text("h\nNumRows : 2\nCoreRow Horizontal\nEnd\n")
    with pytest.raises(ParseError):
        parse_scl(path)


def test_parse_pl_sets_coordinates(bench):
    nodes, _, offset = parse_nodes(str(bench) + ".nodes")
    parse_pl(str(bench) + ".pl", nodes, offset)
    assert nodes[1].coordinates == (5, 7)
    assert nodes[offset].coordinates == (40, 50)


def test_load_benchmark(bench):
    result = load_benchmark(bench)
    assert isinstance(result, Benchmark)
    assert len(result.nodes) == 4
    assert len(result.nets) == 2
    assert (result.num_rows, result.num_sites) == (2, 10)
    assert result.nodes[2].coordinates == (20, 30)
    assert result.name == "Test"


def test_load_benchmark_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_benchmark(tmp_path / "absent")


def test_format_output_balanced():
    nodes = [Node("a", 1, 1, partition=False), Node("b", 1, 1, partition=True)]
    assert format_output(5, nodes) == (
        "Cutsize: 5\n"
        "Partition Ratio: 1\n"
        "Partition 1: 1\tArea: 1 - 50%\n"
        "a\n"
        "Partition 2: 1\tArea: 1 - 50%\n"
        "b\n"
    )


def test_format_output_lists_every_cell_once():
    nodes = [Node(f"o{i}", i + 1, 2, partition=bool(i % 2)) for i in range(6)]
    lines = format_output(0, nodes).splitlines()
    names = [line for line in lines if line.startswith("o")]
    assert sorted(names) == sorted(n.name for n in nodes)


def test_format_output_empty_right_side():
    nodes = [Node("a", 2, 2)]
    lines = format_output(0, nodes).splitlines()
    assert lines[1] == "Partition Ratio: inf"


def test_write_output_matches_format(tmp_path):
    nodes = [Node("a", 3, 1), Node("b", 1, 1, partition=True)]
    path = tmp_path / "out.txt"
    write_output(path, 2, nodes)
    assert path.read_text() == format_output(2, nodes)