# graphbench

Graph algorithms on two graph representations, with a command that runs
them on a graph file or times them on randomly generated connected graphs.

Algorithms (as numbered on the command line):

- `0` – Prim (minimum spanning tree, needs a start vertex)
- `1` – Kruskal (minimum spanning tree)
- `2` – Dijkstra (shortest path, needs start and end vertices)
- `3` – Bellman-Ford (shortest path, needs start and end vertices)

Representations:

- `0` – adjacency list
- `1` – incidence matrix

On the command line, Prim and Kruskal load or generate the graph as
undirected; Dijkstra and Bellman-Ford load or generate it as directed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Run an algorithm on a graph read from a file:

```
graphbench --file <algorithm> <inputFile> <outputFile> <representation> [sourceVertex] [endVertex]
```

Time an algorithm on random connected graphs:

```
graphbench --test <algorithm> <representation> <density> <vertexCount> <count> <outputFile> [sourceVertex] [endVertex]
```

`density` is a whole percentage from 1 to 100 of the largest possible number
of edges, and `vertexCount` must be at least 2. `count` is how many times the
test is repeated; each run generates a fresh graph, overwrites the output
file and prints its time in whole milliseconds. In file mode the time of the
single run is printed the same way.

Show the usage text:

```
graphbench --help
```

The command exits with status 1 and a message on standard error when the
arguments cannot be understood, a file cannot be read or is malformed, a
vertex is out of range, or no path exists; otherwise it exits with 0.

### Input file format

The first line gives the number of edges and the number of vertices. Each
line after that gives one edge as `source destination weight`. Numbers are
separated by a single character (a space or a tab, for instance). Empty
lines and lines that start with `#` are skipped. Vertices must lie in range
and weights must be positive, or the file is rejected.

```
3 3
0 1 4
1 2 2
0 2 7
```

When a file is loaded into an incidence matrix, the matrix has room for one
edge more than the header declares; edge lines beyond that are checked but
not stored.

### Output

The output file starts with the result: for a spanning tree, the number of
edges, the total cost and one `source<TAB>destination<TAB>weight` line per
edge; for a shortest path, the cost and the vertices joined by ` -> `. After
that comes the graph, either as an adjacency list or as an incidence matrix,
depending on the chosen representation.

## Library use

```python
from graphbench.graph import AdjacencyList
from graphbench.mst import prim, kruskal
from graphbench.shortest_paths import dijkstra, bellman_ford

graph = AdjacencyList(3, directed=False)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 2)
graph.add_edge(0, 2, 7)

tree = prim(graph, 0)
print(sum(edge.weight for edge in tree))   # 6
print(kruskal(graph))

directed = AdjacencyList(3, directed=True)
directed.add_edge(0, 1, 4)
directed.add_edge(1, 2, 2)
result = dijkstra(directed, 0, 2)
print(result.path, result.cost)            # (0, 1, 2) 6
print(bellman_ford(directed, 0, 2).length) # 3
```

Modules:

- `graphbench.graph` – `Edge`, `Neighbour`, `AdjacencyList` and
  `IncidenceMatrix`, with conversion between the two (`to_matrix`,
  `to_list`), edge counts, density in percent, and text rendering
  (`render`, `display`).
- `graphbench.mst` – `prim`, `kruskal` and the `DisjointSet` union-find
  they use. Both accept either representation.
- `graphbench.shortest_paths` – `dijkstra` and `bellman_ford`, returning a
  `ShortestPath` with `path`, `cost` and `length`. They raise `IndexError`
  for an out-of-range vertex and `PathError` when the end vertex is
  unreachable; `dijkstra` raises `NegativeWeightError` for a negative weight
  and `bellman_ford` raises `NegativeCycleError` for a reachable negative
  cycle, and `PathError` for a graph without edges.
- `graphbench.loader` – `load_list` and `load_matrix` read the file format
  above and raise `GraphFormatError` on malformed input.
- `graphbench.generator` – `generate_connected_graph` fills an adjacency
  list with a random spanning tree and then random edges up to the density,
  with weights from 1 to 2147483647; pass a `random.Random` for
  reproducible graphs. `max_edges` and `target_edges` give the edge counts
  it aims for.
- `graphbench.writer` – `write_mst` and `write_sp` write the output files
  described above; `write_result` writes edges in the input file format.
- `graphbench.config` – `parse_args` turns command-line arguments into a
  `Config`, raising `ConfigError` when they are incomplete or invalid.
- `graphbench.timer` – `Timer`, a stopwatch reporting whole milliseconds.
- `graphbench.cli` – `main`, `run_file` and `run_benchmark`.

## Limits

The benchmark mode prints only the time of each run; it does not collect
timings into a summary or a results file. The adjacency list rejects
non-positive weights, so negative weights (and negative cycles) can only be
given to the shortest-path functions through an `IncidenceMatrix` built
directly.