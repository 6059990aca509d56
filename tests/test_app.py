import random
from pathlib import Path

import pytest

from gridtrace.app import (
    DEFAULT_TICK_DELAY,
    generate_goal,
    resolve_tick_delay,
    run_and_record,
    run_search,
)
from gridtrace.db.trace_log import TRACE_LOG_NAME
from gridtrace.render.trace_reader import read_header, read_steps
from gridtrace.search.contracts import AlgorithmType, Coordinate, GridDimensions


def test_run_search_uses_arguments() -> None:
    run = run_search(algorithm="A*", rows=4, cols=6, start=(0, 0), goal=(3, 5))

    assert run.algorithm == AlgorithmType.ASTAR
    assert run.dimensions == GridDimensions(rows=4, cols=6)
    assert run.goal == Coordinate(3, 5)
    assert run.summary.reached_goal
    assert run.summary.path_length == 8
    assert run.summary.step_count == len(run.steps)


def test_run_search_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("GRIDTRACE_ALGORITHM", "dijkstra")
    monkeypatch.setenv("GRIDTRACE_ROWS", "5")
    monkeypatch.setenv("GRIDTRACE_COLS", "7")

    run = run_search(goal=(4, 6))

    assert run.algorithm == AlgorithmType.DIJKSTRA
    assert run.dimensions == GridDimensions(rows=5, cols=7)
    assert run.start == Coordinate(0, 0)


def test_run_search_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GRIDTRACE_ALGORITHM", raising=False)
    monkeypatch.delenv("GRIDTRACE_ROWS", raising=False)
    monkeypatch.delenv("GRIDTRACE_COLS", raising=False)

    run = run_search(rng=random.Random(3))

    assert run.algorithm == AlgorithmType.BFS
    assert run.dimensions == GridDimensions(rows=15, cols=20)
    assert run.goal != run.start
    assert run.summary.reached_goal


def test_run_search_rejects_bad_input(monkeypatch) -> None:
    with pytest.raises(ValueError):
        run_search(rows=0, cols=3, goal=(0, 0))
    with pytest.raises(ValueError):
        run_search(rows=3, cols=3, start=(0, 0), goal=(9, 9))
    monkeypatch.setenv("GRIDTRACE_ROWS", "many")
    with pytest.raises(ValueError, match="GRIDTRACE_ROWS"):
        run_search(cols=3, goal=(0, 0))


def test_generate_goal_avoids_start() -> None:
    dims = GridDimensions(rows=2, cols=2)
    rng = random.Random(0)
    for _ in range(50):
        goal = generate_goal(dims, Coordinate(0, 0), rng=rng)
        assert goal != Coordinate(0, 0)
        assert dims.contains(goal)

    single = GridDimensions(rows=1, cols=1)
    assert generate_goal(single, Coordinate(0, 0)) == Coordinate(0, 0)


def test_resolve_tick_delay(monkeypatch) -> None:
    monkeypatch.delenv("GRIDTRACE_TICK_DELAY", raising=False)
    assert resolve_tick_delay(None) == DEFAULT_TICK_DELAY
    assert resolve_tick_delay(0.5) == 0.5
    monkeypatch.setenv("GRIDTRACE_TICK_DELAY", "0.2")
    assert resolve_tick_delay(None) == 0.2
    monkeypatch.setenv("GRIDTRACE_TICK_DELAY", "fast")
    with pytest.raises(ValueError):
        resolve_tick_delay(None)


def test_run_and_record_writes_trace(tmp_path: Path) -> None:
    run, run_dir = run_and_record(
        tmp_path, algorithm="DFS", rows=3, cols=3, start=(0, 0), goal=(2, 2)
    )
    log_path = run_dir / TRACE_LOG_NAME

    header = read_header(log_path)
    assert header is not None
    assert header["algorithm"] == "DFS"
    assert header["rows"] == 3
    assert header["goal"] == [2, 2]
    assert header["steps"] == len(run.steps)
    assert list(read_steps(log_path)) == run.steps
