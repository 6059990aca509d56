"""Core data contracts for grid search traces."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_serializer,
    field_validator,
)


class Coordinate(NamedTuple):
    row: int
    col: int


class GridDimensions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: PositiveInt
    cols: PositiveInt

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols


class AlgorithmType(str, Enum):
    BFS = "BFS"
    DFS = "DFS"
    DIJKSTRA = "Dijkstra"
    ASTAR = "A*"


class Step(BaseModel):
    """One recorded instant of a search run.

    Sets and maps are copied on construction, so a Step never changes after
    it is appended to a trace.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    visited: frozenset[str] = Field(default_factory=frozenset)
    frontier: frozenset[str] = Field(default_factory=frozenset)
    current: Coordinate | None = None
    path: tuple[Coordinate, ...] | None = None
    depth: int | None = None
    cost_map: Mapping[str, int] | None = None

    @field_validator("cost_map", mode="after")
    @classmethod
    def freeze_cost_map(
        cls, value: Mapping[str, int] | None
    ) -> Mapping[str, int] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @field_serializer("cost_map")
    def dump_cost_map(self, value: Mapping[str, int] | None) -> dict[str, int] | None:
        return dict(value) if value is not None else None

    @property
    def has_path(self) -> bool:
        return self.path is not None
