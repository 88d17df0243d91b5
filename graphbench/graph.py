"""Weighted graphs stored as adjacency lists or incidence matrices."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """A weighted edge; edges order by weight alone."""

    source: int = 0
    destination: int = 0
    weight: int = 0

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight


@dataclass(frozen=True)
class Neighbour:
    """An entry of an adjacency list: the vertex reached and the edge weight."""

    destination: int
    weight: int


def _max_edges(vertex_count: int, directed: bool) -> int:
    pairs = vertex_count * (vertex_count - 1)
    return pairs if directed else pairs // 2


def _write_lines(lines: Iterator[str]) -> None:
    out = sys.stdout
    for line in lines:
        out.write(line)
        out.write("\n")
    out.flush()


class AdjacencyList:
    """A graph kept as one list of neighbours per vertex."""

    def __init__(self, vertex_count: int, directed: bool) -> None:
        if vertex_count <= 0:
            raise ValueError("vertex count must be positive")
        self.vertex_count = vertex_count
        self.directed = directed
        self._adjacency: list[list[Neighbour]] = [[] for _ in range(vertex_count)]
        self._entries = 0

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Add an edge; an undirected graph also gets the reverse entry."""
        self._check_vertex(source)
        self._check_vertex(destination)
        if weight <= 0:
            raise ValueError("weight must be positive")
        self._adjacency[source].append(Neighbour(destination, weight))
        self._entries += 1
        if not self.directed:
            self._adjacency[destination].append(Neighbour(source, weight))
            self._entries += 1

    def neighbours(self, vertex: int) -> Iterator[Neighbour]:
        """Neighbours of a vertex, most recently added first."""
        self._check_vertex(vertex)
        return reversed(self._adjacency[vertex])

    def edge_count(self) -> int:
        """Number of edges; an undirected edge counts once."""
        return self._entries if self.directed else self._entries // 2

    def density(self) -> float:
        """Edge count as a percentage of the largest possible edge count."""
        possible = _max_edges(self.vertex_count, self.directed)
        if possible == 0:
            return 0.0
        return self.edge_count() / possible * 100.0

    def to_matrix(self) -> IncidenceMatrix:
        """Build an incidence matrix with one column per list entry."""
        matrix = IncidenceMatrix(self.vertex_count, self._entries, self.directed)
        for vertex in range(self.vertex_count):
            for neighbour in self.neighbours(vertex):
                matrix.add_edge(vertex, neighbour.destination, neighbour.weight)
        return matrix

    def _lines(self) -> Iterator[str]:
        yield "Lista sasiedztwa:"
        for vertex in range(self.vertex_count):
            entries = "".join(
                f" -> ({n.destination}, {n.weight})" for n in self.neighbours(vertex)
            )
            yield f"{vertex}:{entries}"

    def render(self) -> str:
        """The adjacency list as text, one vertex per line."""
        return "\n".join(self._lines()) + "\n"

    def display(self) -> None:
        """Write the adjacency list to standard output."""
        _write_lines(self._lines())


class IncidenceMatrix:
    """A graph kept as a vertex-by-edge matrix with a fixed edge capacity."""

    def __init__(self, vertex_count: int, max_edges: int, directed: bool) -> None:
        if vertex_count < 0 or max_edges < 0:
            raise ValueError("vertex count and edge capacity must not be negative")
        self.vertex_count = vertex_count
        self.capacity = max_edges
        self.directed = directed
        self._matrix = [[0] * max_edges for _ in range(vertex_count)]
        self._edges: list[Edge] = []

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """Add an edge as a new column; a directed edge is negative at its head."""
        for vertex in (source, destination):
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        if len(self._edges) >= self.capacity:
            raise ValueError("edge capacity exceeded")
        column = len(self._edges)
        self._edges.append(Edge(source, destination, weight))
        self._matrix[source][column] = weight
        self._matrix[destination][column] = -weight if self.directed else weight

    def weight(self, vertex: int, edge_index: int) -> int:
        """The matrix entry for a vertex and an edge column."""
        return self._matrix[vertex][edge_index]

    def edge(self, index: int) -> Edge:
        """The edge in a column, or Edge(-1, -1, -1) past the last edge."""
        if 0 <= index < len(self._edges):
            return self._edges[index]
        return Edge(-1, -1, -1)

    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def density(self) -> float:
        possible = _max_edges(self.vertex_count, self.directed)
        if possible == 0:
            return 0.0
        return len(self._edges) / possible * 100.0

    def to_list(self) -> AdjacencyList:
        """Build an adjacency list holding every stored edge."""
        result = AdjacencyList(self.vertex_count, self.directed)
        for edge in self._edges:
            result.add_edge(edge.source, edge.destination, edge.weight)
        return result

    def _lines(self) -> Iterator[str]:
        count = len(self._edges)
        yield "Macierz incydencji:"
        for row in self._matrix:
            yield "".join(f"{value:4d}" for value in row[:count])

    def render(self) -> str:
        """The used columns of the matrix as text, one vertex per line."""
        return "\n".join(self._lines()) + "\n"

    def display(self) -> None:
        """Write the matrix to standard output."""
        _write_lines(self._lines())