"""Minimum spanning trees: Prim's and Kruskal's algorithms."""

from __future__ import annotations

from operator import attrgetter

from graphbench.graph import AdjacencyList, Edge, IncidenceMatrix

_INF = 2**31 - 1


class DisjointSet:
    """Union-find over the integers 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Representative of the set holding an item."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def unite(self, first: int, second: int) -> None:
        """Merge the sets holding two items."""
        first = self.find(first)
        second = self.find(second)
        if first == second:
            return
        if self._rank[first] < self._rank[second]:
            self._parent[first] = second
        elif self._rank[first] > self._rank[second]:
            self._parent[second] = first
        else:
            self._parent[second] = first
            self._rank[first] += 1


def prim(graph: AdjacencyList | IncidenceMatrix, start_vertex: int) -> list[Edge]:
    """Spanning tree of the start vertex's component, ordered by the vertex each edge reaches."""
    if isinstance(graph, IncidenceMatrix):
        graph = graph.to_list()
    vertex_count = graph.vertex_count
    if not 0 <= start_vertex < vertex_count:
        raise IndexError(f"start vertex {start_vertex} out of range")
    if vertex_count <= 1:
        return []

    visited = [False] * vertex_count
    key = [_INF] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    key[start_vertex] = 0

    for _ in range(vertex_count - 1):
        candidates = [
            (key[vertex], vertex)
            for vertex in range(vertex_count)
            if not visited[vertex] and key[vertex] < _INF
        ]
        if not candidates:
            break
        _, current = min(candidates)
        visited[current] = True
        for neighbour in graph.neighbours(current):
            target = neighbour.destination
            if not visited[target] and neighbour.weight < key[target]:
                key[target] = neighbour.weight
                parent[target] = current

    return [
        Edge(origin, vertex, key[vertex])
        for vertex, origin in enumerate(parent)
        if origin is not None
    ]


def kruskal(graph: AdjacencyList | IncidenceMatrix) -> list[Edge]:
    """Minimum spanning forest edges in the order they were chosen, at most V-1 of them."""
    if isinstance(graph, AdjacencyList):
        graph = graph.to_matrix()
    vertex_count = graph.vertex_count
    ordered = sorted(graph.edges(), key=attrgetter("weight"))
    sets = DisjointSet(vertex_count)
    result: list[Edge] = []
    for edge in ordered:
        if len(result) >= vertex_count - 1:
            break
        if sets.find(edge.source) != sets.find(edge.destination):
            result.append(edge)
            sets.unite(edge.source, edge.destination)
    return result