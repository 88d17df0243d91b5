"""Command line: run one algorithm on a graph file or benchmark it on random graphs."""

from __future__ import annotations

import random
import sys
from typing import Sequence

from graphbench.config import (
    Algorithm,
    Config,
    ConfigError,
    Mode,
    Representation,
    parse_args,
)
from graphbench.generator import generate_connected_graph
from graphbench.graph import AdjacencyList, IncidenceMatrix
from graphbench.loader import load_list, load_matrix
from graphbench.mst import kruskal, prim
from graphbench.shortest_paths import bellman_ford, dijkstra
from graphbench.timer import Timer
from graphbench.writer import write_mst, write_sp

_USAGE = """\
FILE TEST MODE
Usage:
graphbench --file <algorithm> <inputFile> <outputFile> <representation> [sourceVertex] [endVertex]
<algorithm> 0-Prim, 1-Kruskal, 2-Dijkstra, 3-Bellman-Ford
<inputFile> input file with data
<outputFile> output file with results
<representation> 0-adjacency list, 1-incidence matrix
[sourceVertex] source vertex in Prim, Dijkstra and Bellman-Ford algorithms
[endVertex] end vertex in Dijkstra and Bellman-Ford algorithms
BENCHMARK MODE
Usage:
graphbench --test <algorithm> <representation> <density> <vertexCount> <count> <outputFile> [sourceVertex] [endVertex]
<algorithm> 0-Prim, 1-Kruskal, 2-Dijkstra, 3-Bellman-Ford
<representation> 0-adjacency list, 1-incidence matrix
<density> density of edges
<vertexCount> number of nodes
<count> number of repeats of the test
<outputFile> output file with results
[sourceVertex] source vertex in Prim, Dijkstra and Bellman-Ford algorithms
[endVertex] end vertex in Dijkstra and Bellman-Ford algorithms
HELP MODE
Usage:
graphbench --help
Displays this message."""


def _is_directed(algorithm: Algorithm) -> bool:
    return algorithm in (Algorithm.DIJKSTRA, Algorithm.BELLMAN_FORD)


def _solve_and_write(
    config: Config,
    graph_list: AdjacencyList,
    graph_matrix: IncidenceMatrix,
    converted: AdjacencyList,
) -> None:
    """Run the chosen algorithm on the chosen representation and write the result."""
    graph = graph_list if config.representation is Representation.LIST else graph_matrix
    output = config.output_file
    if config.algorithm is Algorithm.PRIM:
        tree = prim(graph, config.source_vertex)
        total = sum(edge.weight for edge in tree)
        write_mst(output, tree, total, graph_list, config.representation)
    elif config.algorithm is Algorithm.KRUSKAL:
        tree = kruskal(graph)
        total = sum(edge.weight for edge in tree)
        write_mst(output, tree, total, converted, config.representation)
    elif config.algorithm is Algorithm.DIJKSTRA:
        result = dijkstra(graph, config.source_vertex, config.destination_vertex)
        write_sp(output, result.path, result.cost, graph_list, config.representation)
    elif config.algorithm is Algorithm.BELLMAN_FORD:
        result = bellman_ford(graph, config.source_vertex, config.destination_vertex)
        write_sp(output, result.path, result.cost, converted, config.representation)


def run_file(config: Config) -> int:
    """Load a graph file, run the algorithm, write the result; return elapsed ms."""
    directed = _is_directed(config.algorithm)
    graph_list = load_list(config.input_file, directed)
    graph_matrix = load_matrix(config.input_file, directed)
    converted = graph_matrix.to_list()

    timer = Timer()
    timer.start()
    _solve_and_write(config, graph_list, graph_matrix, converted)
    timer.stop()
    return timer.result()


def run_benchmark(config: Config, rng: random.Random | None = None) -> list[int]:
    """Run the algorithm on fresh random graphs; return elapsed ms for each run."""
    rng = rng if rng is not None else random.Random()
    directed = _is_directed(config.algorithm)
    timings = []
    for _ in range(config.count):
        graph_list = AdjacencyList(config.vertex_count, directed)
        generate_connected_graph(graph_list, config.density, directed, rng)
        graph_matrix = graph_list.to_matrix()
        converted = graph_matrix.to_list()

        timer = Timer()
        timer.start()
        _solve_and_write(config, graph_list, graph_matrix, converted)
        timer.stop()
        timings.append(timer.result())
    return timings


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_args(argv)
    except ConfigError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        if config.mode is Mode.HELP:
            print(_USAGE)
        elif config.mode is Mode.FILE:
            run_file(config)
        elif config.mode is Mode.TEST:
            run_benchmark(config)
    except (OSError, ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())