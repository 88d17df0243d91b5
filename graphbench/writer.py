"""Writing algorithm results and the graph they came from to text files."""

from __future__ import annotations

import os
from typing import Sequence

from graphbench.config import Representation
from graphbench.graph import AdjacencyList, Edge


def _graph_section(graph: AdjacencyList, representation: Representation) -> str:
    if representation is Representation.LIST:
        lines = ["Lista sasiedztwa:"]
        for vertex in range(graph.vertex_count):
            entries = "".join(
                f"-> ({n.destination}, {n.weight})" for n in graph.neighbours(vertex)
            )
            lines.append(f"{vertex}:{entries}")
    else:
        matrix = graph.to_matrix()
        columns = range(matrix.edge_count())
        lines = ["Macierz incydencji:"]
        lines.extend(
            "".join(f"{matrix.weight(vertex, column)} " for column in columns)
            for vertex in range(matrix.vertex_count)
        )
    return "\n".join(lines) + "\n"


def _edge_lines(edges: Sequence[Edge]) -> str:
    return "".join(f"{e.source}\t{e.destination}\t{e.weight}\n" for e in edges)


def write_result(
    filename: str | os.PathLike[str], edges: Sequence[Edge], vertex_count: int
) -> None:
    """Write edges in the loader's format: a count header, then one edge per line."""
    if not edges or vertex_count <= 0:
        raise ValueError("nothing to write")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(f"{len(edges)}\t{vertex_count}\n")
        handle.write(_edge_lines(edges))


def write_mst(
    filename: str | os.PathLike[str],
    edges: Sequence[Edge],
    total_weight: int,
    graph: AdjacencyList,
    representation: Representation,
) -> None:
    """Write spanning tree edges, their total weight and the graph."""
    if not edges:
        raise ValueError("spanning tree has no edges")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(
            f"MST Krawedzi ({len(edges)} krawedzi, koszt: {total_weight}):\n"
        )
        handle.write(_edge_lines(edges))
        handle.write("\n")
        handle.write(_graph_section(graph, representation))


def write_sp(
    filename: str | os.PathLike[str],
    path: Sequence[int] | None,
    total: int,
    graph: AdjacencyList,
    representation: Representation,
) -> None:
    """Write a shortest path, its cost and the graph."""
    if path is None:
        raise ValueError("no path to write")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(f"Najkrotsza sciezka (koszt: {total}):\n")
        handle.write(" -> ".join(str(vertex) for vertex in path) + "\n")
        handle.write(_graph_section(graph, representation))