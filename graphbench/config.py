"""Command-line options for the file and benchmark modes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Algorithm(Enum):
    NONE = "none"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman-ford"


class Representation(Enum):
    LIST = "list"
    MATRIX = "matrix"


class Mode(Enum):
    NONE = "none"
    HELP = "help"
    FILE = "file"
    TEST = "test"


class ConfigError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class Config:
    """Options chosen on the command line."""

    mode: Mode = Mode.NONE
    algorithm: Algorithm = Algorithm.NONE
    representation: Representation = Representation.LIST
    input_file: str | None = None
    output_file: str | None = None
    source_vertex: int = -1
    destination_vertex: int = -1
    density: int = 0
    vertex_count: int = 0
    count: int = 1


_ALGORITHMS = {
    "0": Algorithm.PRIM,
    "1": Algorithm.KRUSKAL,
    "2": Algorithm.DIJKSTRA,
    "3": Algorithm.BELLMAN_FORD,
}

_REPRESENTATIONS = {"0": Representation.LIST, "1": Representation.MATRIX}

_SHORTEST_PATH = (Algorithm.DIJKSTRA, Algorithm.BELLMAN_FORD)


def _to_int(text: str) -> int:
    """Leading integer of a string, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _algorithm(text: str) -> Algorithm:
    try:
        return _ALGORITHMS[text]
    except KeyError:
        raise ConfigError(f"Nieznany algorytm {text}") from None


def _representation(text: str) -> Representation:
    try:
        return _REPRESENTATIONS[text]
    except KeyError:
        raise ConfigError(f"Nieznana reprezentacja {text}") from None


def _read_vertices(config: Config, extra: Sequence[str]) -> None:
    """Fill in start and end vertices from the arguments after the fixed ones."""
    if config.algorithm in _SHORTEST_PATH:
        if len(extra) < 2:
            raise ConfigError(
                "Podaj dodatkowo dla problemu najkrotszej sciezki "
                "wierzcholki poczatky i koncowy!"
            )
        config.source_vertex = _to_int(extra[0])
        config.destination_vertex = _to_int(extra[1])
    elif config.algorithm is Algorithm.PRIM:
        if not extra:
            raise ConfigError("Podaj dodatkowo wierzcholek poczatkowy!")
        config.source_vertex = _to_int(extra[0])


def parse_args(argv: Sequence[str]) -> Config:
    """Parse arguments that follow the program name."""
    if not argv:
        raise ConfigError("Brak argumentow. Uzyj --help")
    config = Config()
    mode = argv[0]

    if mode == "--help":
        config.mode = Mode.HELP
        return config

    if mode == "--file":
        if len(argv) < 5:
            raise ConfigError("Brak wszystkich argumentow dla trybu --file")
        config.mode = Mode.FILE
        config.algorithm = _algorithm(argv[1])
        config.input_file = argv[2]
        config.output_file = argv[3]
        config.representation = _representation(argv[4])
        _read_vertices(config, argv[5:])
        return config

    if mode == "--test":
        if len(argv) < 7:
            raise ConfigError("Brak wszystkich argumentow dla trybu --test")
        config.mode = Mode.TEST
        config.algorithm = _algorithm(argv[1])
        config.representation = _representation(argv[2])
        config.density = _to_int(argv[3])
        config.vertex_count = _to_int(argv[4])
        if not 1 <= config.density <= 100 or config.vertex_count <= 1:
            raise ConfigError("Niepoprawna gestosc badz liczba wierzcholkow")
        config.count = _to_int(argv[5])
        config.output_file = argv[6]
        _read_vertices(config, argv[7:])
        return config

    raise ConfigError(f"Nieznany tryb {mode}")