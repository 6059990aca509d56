"""Module entry point for `python -m gridtrace`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from gridtrace.app import SearchRun, run_and_record, run_search, run_with_viewer
from gridtrace.db.trace_log import TRACE_LOG_NAME
from gridtrace.render.grid_view import render_step, render_summary
from gridtrace.render.trace_reader import read_header, read_steps
from gridtrace.search.contracts import AlgorithmType, Coordinate, GridDimensions
from gridtrace.search.summary import summarize_trace

DEFAULT_TRACE_DIR = Path("trace")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.replay is not None:
        _replay_run(args.replay)
        return

    options = {
        "algorithm": args.algorithm,
        "rows": args.rows,
        "cols": args.cols,
        "start": args.start,
        "goal": args.goal,
    }
    try:
        if args.view:
            run_with_viewer(tick_delay=args.tick_delay, **options)
            return
        if args.save:
            run, run_dir = run_and_record(args.trace_dir, **options)
            _print_run(run)
            print(f"Trace saved to {run_dir}")
            return
        _print_run(run_search(**options))
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a traced grid search.")
    parser.add_argument(
        "--algorithm",
        default=None,
        help="Search algorithm: "
        + ", ".join(algorithm.value for algorithm in AlgorithmType)
        + " (defaults to $GRIDTRACE_ALGORITHM or BFS).",
    )
    parser.add_argument("--rows", type=int, default=None, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=None, help="Grid columns.")
    parser.add_argument(
        "--start",
        type=parse_coordinate,
        default=None,
        help="Start cell as ROW,COL (defaults to 0,0).",
    )
    parser.add_argument(
        "--goal",
        type=parse_coordinate,
        default=None,
        help="Goal cell as ROW,COL (defaults to a random cell).",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Play the trace step by step in the terminal viewer.",
    )
    parser.add_argument(
        "--tick-delay",
        type=float,
        default=None,
        help="Seconds between viewer steps.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Record the trace as JSONL under the trace directory.",
    )
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=DEFAULT_TRACE_DIR,
        help="Base directory for recorded traces.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Print the final step of a recorded run folder.",
    )
    return parser


def parse_coordinate(value: str) -> Coordinate:
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL but got {value!r}"
        ) from exc
    return Coordinate(row, col)


def _print_run(run: SearchRun) -> None:
    console = Console()
    if run.steps:
        console.print(
            render_step(
                run.steps[-1],
                run.dimensions,
                start=run.start,
                goal=run.goal,
                title=run.algorithm.value,
                index=len(run.steps) - 1,
                total=len(run.steps),
            )
        )
    console.print(render_summary(run.summary, algorithm=run.algorithm.value))


def _replay_run(run_folder: Path) -> None:
    log_path = run_folder / TRACE_LOG_NAME
    if not log_path.exists():
        raise SystemExit(f"No trace found in {run_folder}.")
    header = read_header(log_path) or {}
    steps = list(read_steps(log_path))
    algorithm = header.get("algorithm", "unknown")
    console = Console()
    if steps and {"rows", "cols", "start", "goal"} <= header.keys():
        console.print(
            render_step(
                steps[-1],
                GridDimensions(rows=header["rows"], cols=header["cols"]),
                start=Coordinate(*header["start"]),
                goal=Coordinate(*header["goal"]),
                title=algorithm,
                index=len(steps) - 1,
                total=len(steps),
            )
        )
    console.print(render_summary(summarize_trace(steps), algorithm=algorithm))


if __name__ == "__main__":
    main()
