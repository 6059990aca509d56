"""Read trace logs and yield Steps."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from gridtrace.search.contracts import Step


def read_steps(path: Path) -> Iterator[Step]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if not record:
                continue
            if record.get("type") != "step":
                continue
            step = record.get("step")
            if step is None:
                continue
            yield Step.model_validate(step)


def read_header(path: Path) -> dict[str, Any] | None:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if record and record.get("type") == "header":
                return record.get("metadata", {})
    return None


def _parse_record(line: str) -> dict | None:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None
