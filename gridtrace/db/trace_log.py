"""Trace logging helpers (JSONL)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from gridtrace.search.contracts import Step

SCHEMA_VERSION = 1
TRACE_LOG_NAME = "trace.jsonl"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    run_id = timestamp or _format_timestamp(datetime.now(timezone.utc))
    run_dir = base_dir / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir, run_dir / TRACE_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    record: dict[str, Any] = {
        "type": "header",
        "schema_version": SCHEMA_VERSION,
        "metadata": metadata,
    }
    _append_record(path, record)


def append_step(path: Path, index: int, step: Step) -> None:
    record: dict[str, Any] = {
        "type": "step",
        "schema_version": SCHEMA_VERSION,
        "index": index,
        "step": step.model_dump(mode="json"),
    }
    _append_record(path, record)


def write_trace(path: Path, steps: Iterable[Step]) -> int:
    count = 0
    for index, step in enumerate(steps):
        append_step(path, index, step)
        count += 1
    return count


def _append_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record))
        handle.write("\n")


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H-%M-%SZ")
