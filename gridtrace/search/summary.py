"""Aggregate figures for a finished trace."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from gridtrace.search.contracts import Step


class TraceSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    step_count: int
    reached_goal: bool
    path_length: int
    visited_count: int
    max_depth: int | None = None


def summarize_trace(steps: list[Step]) -> TraceSummary:
    if not steps:
        return TraceSummary(
            step_count=0, reached_goal=False, path_length=0, visited_count=0
        )
    final = steps[-1]
    depths = [step.depth for step in steps if step.depth is not None]
    return TraceSummary(
        step_count=len(steps),
        reached_goal=final.path is not None,
        path_length=len(final.path) - 1 if final.path else 0,
        visited_count=len(final.visited),
        max_depth=max(depths) if depths else None,
    )
