[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphbench"
version = "0.1.0"
description = "Minimum spanning tree and shortest path algorithms on adjacency lists and incidence matrices, with a benchmark runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "prim", "kruskal", "dijkstra", "bellman-ford", "benchmark", "incidence matrix", "adjacency list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphbench = "graphbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
