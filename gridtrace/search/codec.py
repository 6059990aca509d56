"""Coordinate keys and neighbour generation."""

from __future__ import annotations

from typing import Iterator

from gridtrace.search.contracts import Coordinate, GridDimensions

# Up, Down, Left, Right. Order shapes DFS paths and heap tie-breaks.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def encode_key(coord: Coordinate | tuple[int, int]) -> str:
    row, col = coord
    return f"{row},{col}"


def decode_key(key: str) -> Coordinate:
    row, col = key.split(",")
    return Coordinate(int(row), int(col))


def in_bounds(coord: Coordinate, dimensions: GridDimensions) -> bool:
    return dimensions.contains(coord)


def neighbors(coord: Coordinate, dimensions: GridDimensions) -> Iterator[Coordinate]:
    for d_row, d_col in DIRECTIONS:
        candidate = Coordinate(coord.row + d_row, coord.col + d_col)
        if in_bounds(candidate, dimensions):
            yield candidate


def manhattan(a: Coordinate, b: Coordinate) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)
