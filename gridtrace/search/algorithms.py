"""Grid search drivers that record a replayable trace of Steps."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable

from gridtrace.search.codec import decode_key, encode_key, manhattan, neighbors
from gridtrace.search.contracts import AlgorithmType, Coordinate, GridDimensions, Step
from gridtrace.search.priority_queue import PriorityQueue

Runner = Callable[[GridDimensions, Coordinate, Coordinate], list[Step]]

_UNKNOWN = float("inf")


def reconstruct_path(parents: dict[str, str], goal_key: str) -> tuple[Coordinate, ...]:
    path: list[Coordinate] = []
    key: str | None = goal_key
    while key is not None:
        path.append(decode_key(key))
        key = parents.get(key)
    path.reverse()
    return tuple(path)


def run_bfs(
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> list[Step]:
    start, goal = _validate_endpoints(dimensions, start, goal)
    steps: list[Step] = []
    start_key = encode_key(start)
    goal_key = encode_key(goal)

    queue: deque[Coordinate] = deque([start])
    visited: set[str] = {start_key}
    frontier: set[str] = {start_key}
    parents: dict[str, str] = {}

    while queue:
        current = queue.popleft()
        current_key = encode_key(current)
        frontier.discard(current_key)
        steps.append(_snapshot(visited, frontier, current=current))

        if current_key == goal_key:
            path = reconstruct_path(parents, goal_key)
            steps.append(_snapshot(visited, frontier, path=path))
            return steps

        for neighbor in neighbors(current, dimensions):
            neighbor_key = encode_key(neighbor)
            if neighbor_key in visited:
                continue
            visited.add(neighbor_key)
            parents[neighbor_key] = current_key
            frontier.add(neighbor_key)
            queue.append(neighbor)

    return steps


@dataclass
class _DfsFrame:
    coord: Coordinate
    depth: int
    candidates: list[Coordinate]
    cursor: int = 0


def run_dfs(
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> list[Step]:
    """Depth-first walk with recursive entry/backtrack Steps.

    Frames stand in for call-stack recursion so large grids do not hit the
    interpreter's recursion limit. The path found is whatever the fixed
    neighbour order leads to first and is usually far from shortest.
    """
    start, goal = _validate_endpoints(dimensions, start, goal)
    steps: list[Step] = []
    goal_key = encode_key(goal)

    visited: set[str] = set()
    active: set[str] = set()
    parents: dict[str, str] = {}
    stack: list[_DfsFrame] = []

    def enter(coord: Coordinate, depth: int) -> bool:
        key = encode_key(coord)
        visited.add(key)
        active.add(key)
        steps.append(_snapshot(visited, active, current=coord, depth=depth))
        if key == goal_key:
            path = reconstruct_path(parents, goal_key)
            steps.append(_snapshot(visited, active, path=path))
            return True
        stack.append(_DfsFrame(coord, depth, list(neighbors(coord, dimensions))))
        return False

    if enter(start, 0):
        return steps

    while stack:
        frame = stack[-1]
        child: Coordinate | None = None
        while frame.cursor < len(frame.candidates):
            candidate = frame.candidates[frame.cursor]
            frame.cursor += 1
            if encode_key(candidate) not in visited:
                child = candidate
                break

        if child is not None:
            parents[encode_key(child)] = encode_key(frame.coord)
            if enter(child, frame.depth + 1):
                return steps
            continue

        stack.pop()
        active.discard(encode_key(frame.coord))
        steps.append(
            _snapshot(visited, active, current=frame.coord, depth=frame.depth - 1)
        )

    return steps


def run_dijkstra(
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> list[Step]:
    start, goal = _validate_endpoints(dimensions, start, goal)
    return _run_best_first(dimensions, start, goal, heuristic=None)


def run_astar(
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> list[Step]:
    start, goal = _validate_endpoints(dimensions, start, goal)
    return _run_best_first(dimensions, start, goal, heuristic=manhattan)


ALGORITHMS: dict[AlgorithmType, Runner] = {
    AlgorithmType.BFS: run_bfs,
    AlgorithmType.DFS: run_dfs,
    AlgorithmType.DIJKSTRA: run_dijkstra,
    AlgorithmType.ASTAR: run_astar,
}


def run_algorithm(
    algorithm: AlgorithmType | str,
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> list[Step]:
    return ALGORITHMS[resolve_algorithm(algorithm)](dimensions, start, goal)


def resolve_algorithm(value: AlgorithmType | str) -> AlgorithmType:
    if isinstance(value, AlgorithmType):
        return value
    for algorithm in AlgorithmType:
        if value.lower() in {algorithm.value.lower(), algorithm.name.lower()}:
            return algorithm
    choices = ", ".join(algorithm.value for algorithm in AlgorithmType)
    raise ValueError(f"Unknown algorithm {value!r}; expected one of: {choices}")


def _run_best_first(
    dimensions: GridDimensions,
    start: Coordinate,
    goal: Coordinate,
    *,
    heuristic: Callable[[Coordinate, Coordinate], int] | None,
) -> list[Step]:
    steps: list[Step] = []
    start_key = encode_key(start)
    goal_key = encode_key(goal)

    queue: PriorityQueue[str] = PriorityQueue()
    queue.enqueue(start_key, 0)
    costs: dict[str, int] = {start_key: 0}
    parents: dict[str, str] = {}
    visited: set[str] = set()
    frontier: set[str] = {start_key}

    while not queue.is_empty():
        current_key = queue.dequeue()
        if current_key is None or current_key in visited:
            # Stale entry superseded by a cheaper push.
            continue
        current = decode_key(current_key)
        frontier.discard(current_key)
        visited.add(current_key)
        steps.append(_snapshot(visited, frontier, current=current, cost_map=costs))

        if current_key == goal_key:
            path = reconstruct_path(parents, goal_key)
            steps.append(_snapshot(visited, frontier, path=path, cost_map=costs))
            return steps

        for neighbor in neighbors(current, dimensions):
            neighbor_key = encode_key(neighbor)
            tentative = costs[current_key] + 1
            if tentative >= costs.get(neighbor_key, _UNKNOWN):
                continue
            costs[neighbor_key] = tentative
            parents[neighbor_key] = current_key
            priority = tentative
            if heuristic is not None:
                priority += heuristic(neighbor, goal)
            queue.enqueue(neighbor_key, priority)
            frontier.add(neighbor_key)

    return steps


def _snapshot(
    visited: set[str],
    frontier: set[str],
    *,
    current: Coordinate | None = None,
    path: tuple[Coordinate, ...] | None = None,
    depth: int | None = None,
    cost_map: dict[str, int] | None = None,
) -> Step:
    return Step(
        visited=frozenset(visited),
        frontier=frozenset(frontier),
        current=current,
        path=path,
        depth=depth,
        cost_map=dict(cost_map) if cost_map is not None else None,
    )


def _validate_endpoints(
    dimensions: GridDimensions,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
) -> tuple[Coordinate, Coordinate]:
    return (
        _coerce_endpoint("start", start, dimensions),
        _coerce_endpoint("goal", goal, dimensions),
    )


def _coerce_endpoint(
    name: str, value: Coordinate | tuple[int, int], dimensions: GridDimensions
) -> Coordinate:
    coord = Coordinate(*value)
    # bool is an int subclass but would encode as "True,0".
    if any(type(part) is not int for part in coord):
        raise ValueError(f"{name} {tuple(coord)} must have integer row and col")
    if not dimensions.contains(coord):
        raise ValueError(
            f"{name} {tuple(coord)} is outside a {dimensions.rows}x{dimensions.cols} grid"
        )
    return coord
