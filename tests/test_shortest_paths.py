import random

import pytest

from graphbench.graph import AdjacencyList, IncidenceMatrix
from graphbench.shortest_paths import (
    NegativeCycleError,
    NegativeWeightError,
    PathError,
    ShortestPath,
    bellman_ford,
    dijkstra,
)

ALGORITHMS = [dijkstra, bellman_ford]


def _chain():
    graph = AdjacencyList(3, True)
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 2, 3)
    graph.add_edge(0, 2, 10)
    return graph


def _random_graph(vertex_count, edge_count, directed, seed):
    rng = random.Random(seed)
    graph = AdjacencyList(vertex_count, directed)
    weights = {}
    while len(weights) < edge_count * (1 if directed else 2):
        source = rng.randrange(vertex_count)
        destination = rng.randrange(vertex_count)
        if source == destination or (source, destination) in weights:
            continue
        weight = rng.randint(1, 50)
        graph.add_edge(source, destination, weight)
        weights[(source, destination)] = weight
        if not directed:
            weights[(destination, source)] = weight
    return graph, weights


def _outcome(algorithm, graph, start, end):
    try:
        return algorithm(graph, start, end)
    except PathError:
        return None


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_chain_prefers_cheaper_route(algorithm):
    result = algorithm(_chain(), 0, 2)
    assert result == ShortestPath((0, 1, 2), 5)
    assert result.length == 3


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_chain_on_matrix(algorithm):
    result = algorithm(_chain().to_matrix(), 0, 2)
    assert result.path == (0, 1, 2)
    assert result.cost == algorithm(_chain(), 0, 2).cost


def test_dijkstra_start_equals_end():
    assert dijkstra(_chain(), 1, 1) == ShortestPath((1,), 0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_unreachable_raises(algorithm):
    with pytest.raises(PathError):
        algorithm(_chain(), 2, 0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("vertices", [(-1, 0), (0, 3), (5, 1)])
def test_out_of_range_vertices(algorithm, vertices):
    with pytest.raises(IndexError):
        algorithm(_chain(), *vertices)


def test_bellman_ford_without_edges():
    with pytest.raises(PathError):
        bellman_ford(AdjacencyList(3, True), 0, 0)


def test_bellman_ford_negative_cycle():
    matrix = IncidenceMatrix(3, 3, True)
    matrix.add_edge(0, 1, 1)
    matrix.add_edge(1, 2, -3)
    matrix.add_edge(2, 1, 1)
    with pytest.raises(NegativeCycleError):
        bellman_ford(matrix, 0, 2)


def test_bellman_ford_negative_weight_without_cycle():
    matrix = IncidenceMatrix(3, 3, True)
    matrix.add_edge(0, 1, 5)
    matrix.add_edge(0, 2, 2)
    matrix.add_edge(2, 1, -4)
    assert bellman_ford(matrix, 0, 1) == ShortestPath((0, 2, 1), -2)


def test_dijkstra_rejects_negative_weight():
    matrix = IncidenceMatrix(2, 1, True)
    matrix.add_edge(0, 1, -4)
    with pytest.raises(NegativeWeightError):
        dijkstra(matrix, 0, 1)
    with pytest.raises(PathError):
        dijkstra(matrix, 0, 1)


@pytest.mark.parametrize("directed", [True, False])
@pytest.mark.parametrize("seed", range(4))
def test_algorithms_agree_on_random_graphs(directed, seed):
    graph, weights = _random_graph(8, 14, directed, seed)
    matrix = graph.to_matrix()
    found = 0
    for start in range(graph.vertex_count):
        for end in range(graph.vertex_count):
            results = [
                _outcome(algorithm, representation, start, end)
                for algorithm in ALGORITHMS
                for representation in (graph, matrix)
            ]
            costs = {None if r is None else r.cost for r in results}
            assert len(costs) == 1
            for result in results:
                if result is None:
                    continue
                found += 1
                assert result.path[0] == start
                assert result.path[-1] == end
                assert result.cost == sum(
                    weights[pair] for pair in zip(result.path, result.path[1:])
                )
    assert found > 0