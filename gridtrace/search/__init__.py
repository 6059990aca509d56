"""Grid search engine and trace model."""

from gridtrace.search.algorithms import (
    ALGORITHMS,
    reconstruct_path,
    resolve_algorithm,
    run_algorithm,
    run_astar,
    run_bfs,
    run_dfs,
    run_dijkstra,
)
from gridtrace.search.codec import DIRECTIONS, decode_key, encode_key, neighbors
from gridtrace.search.contracts import AlgorithmType, Coordinate, GridDimensions, Step
from gridtrace.search.priority_queue import PriorityQueue
from gridtrace.search.summary import TraceSummary, summarize_trace

__all__ = [
    "ALGORITHMS",
    "AlgorithmType",
    "Coordinate",
    "DIRECTIONS",
    "GridDimensions",
    "PriorityQueue",
    "Step",
    "TraceSummary",
    "decode_key",
    "encode_key",
    "neighbors",
    "reconstruct_path",
    "resolve_algorithm",
    "run_algorithm",
    "run_astar",
    "run_bfs",
    "run_dfs",
    "run_dijkstra",
    "summarize_trace",
]
