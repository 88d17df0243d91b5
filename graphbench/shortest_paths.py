"""Single-pair shortest paths: Dijkstra's and Bellman-Ford's algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from graphbench.graph import AdjacencyList, Edge, IncidenceMatrix

_INF = 2**31 - 1


class PathError(ValueError):
    """Raised when no shortest path can be given."""


class NegativeWeightError(PathError):
    """Raised when Dijkstra's algorithm meets a negative weight."""


class NegativeCycleError(PathError):
    """Raised when a negative cycle is reachable from the start vertex."""


@dataclass(frozen=True)
class ShortestPath:
    """Vertices from start to end and the total cost."""

    path: tuple[int, ...]
    cost: int

    @property
    def length(self) -> int:
        return len(self.path)


def _check_vertices(vertex_count: int, start_vertex: int, end_vertex: int) -> None:
    for vertex in (start_vertex, end_vertex):
        if not 0 <= vertex < vertex_count:
            raise IndexError(f"vertex {vertex} out of range")


def _trace(previous: list[int | None], end_vertex: int) -> tuple[int, ...]:
    path = []
    vertex: int | None = end_vertex
    while vertex is not None:
        path.append(vertex)
        vertex = previous[vertex]
    return tuple(reversed(path))


def _reject_negative(weights: Iterable[int]) -> None:
    if any(weight < 0 for weight in weights):
        raise NegativeWeightError("negative edge weight")


def dijkstra(
    graph: AdjacencyList | IncidenceMatrix, start_vertex: int, end_vertex: int
) -> ShortestPath:
    """Shortest path by Dijkstra's algorithm, stopping once the end vertex is settled."""
    _check_vertices(graph.vertex_count, start_vertex, end_vertex)
    if isinstance(graph, IncidenceMatrix):
        _reject_negative(edge.weight for edge in graph.edges())
        graph = graph.to_list()
    vertex_count = graph.vertex_count
    _reject_negative(
        n.weight for vertex in range(vertex_count) for n in graph.neighbours(vertex)
    )

    distance = [_INF] * vertex_count
    previous: list[int | None] = [None] * vertex_count
    visited = [False] * vertex_count
    distance[start_vertex] = 0

    while True:
        current = min(
            (
                vertex
                for vertex in range(vertex_count)
                if not visited[vertex] and distance[vertex] < _INF
            ),
            key=distance.__getitem__,
            default=None,
        )
        if current is None or current == end_vertex:
            break
        visited[current] = True
        for neighbour in graph.neighbours(current):
            target = neighbour.destination
            candidate = distance[current] + neighbour.weight
            if not visited[target] and candidate < distance[target]:
                distance[target] = candidate
                previous[target] = current

    if distance[end_vertex] == _INF:
        raise PathError(f"vertex {end_vertex} is unreachable from {start_vertex}")
    return ShortestPath(_trace(previous, end_vertex), distance[end_vertex])


def bellman_ford(
    graph: AdjacencyList | IncidenceMatrix, start_vertex: int, end_vertex: int
) -> ShortestPath:
    """Shortest path by Bellman-Ford relaxation over every stored edge."""
    _check_vertices(graph.vertex_count, start_vertex, end_vertex)
    edges: tuple[Edge, ...] = (
        graph.to_matrix().edges() if isinstance(graph, AdjacencyList) else graph.edges()
    )
    if not edges:
        raise PathError("graph has no edges")
    vertex_count = graph.vertex_count

    distance = [_INF] * vertex_count
    previous: list[int | None] = [None] * vertex_count
    distance[start_vertex] = 0

    for _ in range(vertex_count - 1):
        changed = False
        for edge in edges:
            origin = distance[edge.source]
            if origin != _INF and origin + edge.weight < distance[edge.destination]:
                distance[edge.destination] = origin + edge.weight
                previous[edge.destination] = edge.source
                changed = True
        if not changed:
            break

    for edge in edges:
        origin = distance[edge.source]
        if origin != _INF and origin + edge.weight < distance[edge.destination]:
            raise NegativeCycleError("graph contains a negative cycle")

    if distance[end_vertex] == _INF:
        raise PathError(f"vertex {end_vertex} is unreachable from {start_vertex}")
    return ShortestPath(_trace(previous, end_vertex), distance[end_vertex])