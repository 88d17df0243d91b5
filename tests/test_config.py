import pytest

from graphbench.config import (
    Algorithm,
    ConfigError,
    Mode,
    Representation,
    parse_args,
)


def test_help_mode():
    config = parse_args(["--help"])
    assert config.mode is Mode.HELP


def test_file_mode_prim():
    config = parse_args(["--file", "0", "in.txt", "out.txt", "1", "3"])
    assert config.mode is Mode.FILE
    assert config.algorithm is Algorithm.PRIM
    assert config.input_file == "in.txt"
    assert config.output_file == "out.txt"
    assert config.representation is Representation.MATRIX
    assert config.source_vertex == 3
    assert config.destination_vertex == -1


def test_file_mode_kruskal_needs_no_vertices():
    config = parse_args(["--file", "1", "in.txt", "out.txt", "0"])
    assert config.algorithm is Algorithm.KRUSKAL
    assert config.representation is Representation.LIST
    assert config.source_vertex == -1


@pytest.mark.parametrize(
    "code, algorithm",
    [("2", Algorithm.DIJKSTRA), ("3", Algorithm.BELLMAN_FORD)],
)
def test_file_mode_shortest_path(code, algorithm):
    config = parse_args(["--file", code, "in.txt", "out.txt", "0", "4", "7"])
    assert config.algorithm is algorithm
    assert (config.source_vertex, config.destination_vertex) == (4, 7)


def test_test_mode():
    config = parse_args(["--test", "2", "0", "50", "10", "5", "out.txt", "0", "9"])
    assert config.mode is Mode.TEST
    assert config.algorithm is Algorithm.DIJKSTRA
    assert config.density == 50
    assert config.vertex_count == 10
    assert config.count == 5
    assert config.output_file == "out.txt"
    assert (config.source_vertex, config.destination_vertex) == (0, 9)


def test_numbers_read_like_atoi():
    config = parse_args(["--file", "0", "in.txt", "out.txt", "0", "12xyz"])
    assert config.source_vertex == 12
    config = parse_args(["--file", "0", "in.txt", "out.txt", "0", "abc"])
    assert config.source_vertex == 0


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--bogus"],
        ["--file", "0", "in.txt", "out.txt"],
        ["--file", "7", "in.txt", "out.txt", "0", "1"],
        ["--file", "0", "in.txt", "out.txt", "2", "1"],
        ["--file", "0", "in.txt", "out.txt", "0"],
        ["--file", "2", "in.txt", "out.txt", "0", "1"],
        ["--test", "1", "0", "50", "10", "5"],
        ["--test", "1", "0", "0", "10", "5", "out.txt"],
        ["--test", "1", "0", "101", "10", "5", "out.txt"],
        ["--test", "1", "0", "50", "1", "5", "out.txt"],
        ["--test", "0", "0", "50", "10", "5", "out.txt"],
        ["--test", "3", "0", "50", "10", "5", "out.txt", "1"],
    ],
)
def test_invalid_arguments(argv):
    with pytest.raises(ConfigError):
        parse_args(argv)