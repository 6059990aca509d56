import argparse
from pathlib import Path

import pytest

from gridtrace.__main__ import build_parser, main, parse_coordinate
from gridtrace.db.trace_log import TRACE_LOG_NAME
from gridtrace.search.contracts import Coordinate


def test_parse_coordinate() -> None:
    assert parse_coordinate("2,3") == Coordinate(2, 3)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coordinate("2")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coordinate("a,b")


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.algorithm is None
    assert args.start is None
    assert args.trace_dir == Path("trace")
    assert not args.view


def test_main_prints_final_step(capsys) -> None:
    main(["--algorithm", "BFS", "--rows", "3", "--cols", "3", "--goal", "2,2"])
    output = capsys.readouterr().out

    assert "BFS" in output
    assert "Summary" in output
    assert "Path 4 moves" in output


def test_main_save_and_replay(tmp_path: Path, capsys) -> None:
    main(
        [
            "--algorithm",
            "A*",
            "--rows",
            "4",
            "--cols",
            "4",
            "--goal",
            "3,3",
            "--save",
            "--trace-dir",
            str(tmp_path),
        ]
    )
    run_dirs = [path for path in tmp_path.iterdir() if path.is_dir()]
    assert len(run_dirs) == 1
    assert (run_dirs[0] / TRACE_LOG_NAME).exists()
    capsys.readouterr()

    main(["--replay", str(run_dirs[0])])
    output = capsys.readouterr().out
    assert "A*" in output
    assert "Path 6 moves" in output


def test_main_rejects_out_of_bounds_goal() -> None:
    with pytest.raises(SystemExit, match="goal"):
        main(["--rows", "3", "--cols", "3", "--goal", "5,5"])


def test_main_replay_missing_folder(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="No trace found"):
        main(["--replay", str(tmp_path / "missing")])
