"""Application entry for running and recording grid searches."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path

from gridtrace.db.trace_log import create_run_folder, write_header, write_trace
from gridtrace.render.trace_viewer import play_trace
from gridtrace.search.algorithms import resolve_algorithm, run_algorithm
from gridtrace.search.contracts import AlgorithmType, Coordinate, GridDimensions, Step
from gridtrace.search.summary import TraceSummary, summarize_trace

DEFAULT_ALGORITHM = AlgorithmType.BFS
DEFAULT_ROWS = 15
DEFAULT_COLS = 20
DEFAULT_START = Coordinate(0, 0)
DEFAULT_TICK_DELAY = 0.05


@dataclass(frozen=True)
class SearchRun:
    algorithm: AlgorithmType
    dimensions: GridDimensions
    start: Coordinate
    goal: Coordinate
    steps: list[Step]
    summary: TraceSummary


def run_search(
    *,
    algorithm: AlgorithmType | str | None = None,
    rows: int | None = None,
    cols: int | None = None,
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
    rng: random.Random | None = None,
) -> SearchRun:
    resolved = resolve_algorithm(
        algorithm or os.getenv("GRIDTRACE_ALGORITHM") or DEFAULT_ALGORITHM
    )
    dimensions = GridDimensions(
        rows=rows if rows is not None else _env_int("GRIDTRACE_ROWS", DEFAULT_ROWS),
        cols=cols if cols is not None else _env_int("GRIDTRACE_COLS", DEFAULT_COLS),
    )
    start_coord = Coordinate(*start) if start is not None else DEFAULT_START
    goal_coord = (
        Coordinate(*goal)
        if goal is not None
        else generate_goal(dimensions, start_coord, rng=rng)
    )
    steps = run_algorithm(resolved, dimensions, start_coord, goal_coord)
    return SearchRun(
        algorithm=resolved,
        dimensions=dimensions,
        start=start_coord,
        goal=goal_coord,
        steps=steps,
        summary=summarize_trace(steps),
    )


def run_and_record(base_dir: Path, **kwargs) -> tuple[SearchRun, Path]:
    run = run_search(**kwargs)
    run_dir, log_path = create_run_folder(base_dir)
    write_header(
        log_path,
        metadata={
            "run_id": run_dir.name,
            "algorithm": run.algorithm.value,
            "rows": run.dimensions.rows,
            "cols": run.dimensions.cols,
            "start": list(run.start),
            "goal": list(run.goal),
            "steps": len(run.steps),
        },
    )
    write_trace(log_path, run.steps)
    return run, run_dir


def run_with_viewer(*, tick_delay: float | None = None, **kwargs) -> SearchRun:
    run = run_search(**kwargs)
    play_trace(
        run.steps,
        run.dimensions,
        start=run.start,
        goal=run.goal,
        title=run.algorithm.value,
        tick_delay=resolve_tick_delay(tick_delay),
    )
    return run


def generate_goal(
    dimensions: GridDimensions,
    start: Coordinate,
    *,
    rng: random.Random | None = None,
) -> Coordinate:
    """Pick a random cell other than start (start itself on a 1x1 grid)."""
    if dimensions.rows * dimensions.cols == 1:
        return start
    rng = rng or random.Random()
    while True:
        candidate = Coordinate(
            rng.randrange(dimensions.rows), rng.randrange(dimensions.cols)
        )
        if candidate != start:
            return candidate


def resolve_tick_delay(tick_delay: float | None) -> float:
    if tick_delay is not None:
        return tick_delay
    raw = os.getenv("GRIDTRACE_TICK_DELAY")
    if raw is None:
        return DEFAULT_TICK_DELAY
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"GRIDTRACE_TICK_DELAY must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
