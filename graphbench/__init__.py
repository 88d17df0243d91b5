"""Spanning tree and shortest path algorithms on adjacency lists and incidence matrices, with a benchmark command."""

__version__ = "0.1.0"