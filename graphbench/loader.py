"""Reading graphs from text files.

The first line holds the edge count and the vertex count separated by one
character; each further line holds source, destination and weight. Empty
lines and lines starting with '#' are skipped.
"""

from __future__ import annotations

import os
import re

from graphbench.graph import AdjacencyList, Edge, IncidenceMatrix

_INTEGER = re.compile(r"[+-]?\d+")


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be understood."""


def _read_ints(text: str, count: int) -> list[int]:
    """Read integers, each followed by one separator character."""
    values = []
    position = 0
    for _ in range(count):
        while position < len(text) and text[position].isspace():
            position += 1
        match = _INTEGER.match(text, position)
        if match is None:
            raise GraphFormatError(f"malformed line: {text!r}")
        values.append(int(match.group()))
        position = match.end() + 1
    return values


def _read_graph(
    filename: str | os.PathLike[str],
) -> tuple[int, int, list[Edge]]:
    with open(filename, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    if not lines:
        raise GraphFormatError("empty file")
    declared_edges, vertex_count = _read_ints(lines[0], 2)

    edges = []
    for line in lines[1:]:
        if not line.strip() or line.startswith("#"):
            continue
        source, destination, weight = _read_ints(line, 3)
        if not (0 <= source < vertex_count and 0 <= destination < vertex_count):
            raise GraphFormatError(f"invalid vertices: {source}->{destination}")
        if weight <= 0:
            raise GraphFormatError(f"weight must be positive: {weight}")
        edges.append(Edge(source, destination, weight))
    return declared_edges, vertex_count, edges


def load_list(filename: str | os.PathLike[str], directed: bool) -> AdjacencyList:
    """Load a graph file into an adjacency list."""
    _, vertex_count, edges = _read_graph(filename)
    graph = AdjacencyList(vertex_count, directed)
    for edge in edges:
        graph.add_edge(edge.source, edge.destination, edge.weight)
    return graph


def load_matrix(filename: str | os.PathLike[str], directed: bool) -> IncidenceMatrix:
    """Load a graph file into an incidence matrix.

    The matrix has room for one edge more than the header declares; lines
    past that capacity are checked but not stored.
    """
    declared_edges, vertex_count, edges = _read_graph(filename)
    graph = IncidenceMatrix(vertex_count, declared_edges + 1, directed)
    for edge in edges[: graph.capacity]:
        graph.add_edge(edge.source, edge.destination, edge.weight)
    return graph