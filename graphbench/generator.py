"""Random connected graphs of a given edge density."""

from __future__ import annotations

import random

from graphbench.graph import AdjacencyList

_MAX_WEIGHT = 2**31 - 1


def max_edges(vertex_count: int, directed: bool) -> int:
    """Largest number of edges without loops or parallel edges."""
    pairs = vertex_count * (vertex_count - 1)
    return pairs if directed else pairs // 2


def target_edges(vertex_count: int, density: int, directed: bool) -> int:
    """Edge count for a density given in whole percent, rounded down."""
    return density * max_edges(vertex_count, directed) // 100


def generate_connected_graph(
    graph: AdjacencyList,
    density: int,
    directed: bool,
    rng: random.Random | None = None,
) -> None:
    """Fill a graph with a random spanning tree, then random edges up to the density."""
    if not 1 <= density <= 100:
        raise ValueError("density must be between 1 and 100 percent")
    vertex_count = graph.vertex_count
    if vertex_count <= 0:
        raise ValueError("graph must have at least one vertex")
    rng = rng if rng is not None else random.Random()
    goal = target_edges(vertex_count, density, directed)
    used: set[tuple[int, int]] = set()

    def is_used(source: int, destination: int) -> bool:
        return (source, destination) in used or (
            not directed and (destination, source) in used
        )

    order = list(range(vertex_count))
    rng.shuffle(order)
    for position in range(1, vertex_count):
        source = order[rng.randint(0, position - 1)]
        destination = order[position]
        if not is_used(source, destination):
            graph.add_edge(source, destination, rng.randint(1, _MAX_WEIGHT))
            used.add((source, destination))

    while graph.edge_count() < goal:
        source = rng.randrange(vertex_count)
        destination = rng.randrange(vertex_count)
        if source == destination or is_used(source, destination):
            continue
        graph.add_edge(source, destination, rng.randint(1, _MAX_WEIGHT))
        used.add((source, destination))