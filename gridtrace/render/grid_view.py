"""Rich rendering of a single trace Step on its grid."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridtrace.search.codec import encode_key
from gridtrace.search.contracts import Coordinate, GridDimensions, Step
from gridtrace.search.summary import TraceSummary

CELL_GLYPHS = {
    "path": ("*", "bold bright_yellow"),
    "current": ("@", "bold bright_magenta"),
    "start": ("S", "bold bright_green"),
    "goal": ("G", "bold bright_red"),
    "frontier": ("o", "bright_blue"),
    "visited": (".", "grey70"),
    "empty": (" ", ""),
}

LEGEND_ORDER = ["start", "goal", "current", "frontier", "visited", "path"]


def classify_cell(
    coord: Coordinate,
    step: Step,
    *,
    start: Coordinate,
    goal: Coordinate,
    path_keys: set[str] | None = None,
) -> str:
    key = encode_key(coord)
    if path_keys is None:
        path_keys = {encode_key(point) for point in step.path or ()}
    if key in path_keys:
        return "path"
    if step.current is not None and coord == step.current:
        return "current"
    if coord == start:
        return "start"
    if coord == goal:
        return "goal"
    if key in step.frontier:
        return "frontier"
    if key in step.visited:
        return "visited"
    return "empty"


def render_grid_lines(
    step: Step,
    dimensions: GridDimensions,
    *,
    start: Coordinate,
    goal: Coordinate,
) -> list[Text]:
    path_keys = {encode_key(point) for point in step.path or ()}
    lines: list[Text] = []
    for row in range(dimensions.rows):
        line = Text()
        for col in range(dimensions.cols):
            kind = classify_cell(
                Coordinate(row, col), step, start=start, goal=goal, path_keys=path_keys
            )
            glyph, style = CELL_GLYPHS[kind]
            line.append(glyph, style=style)
            if col < dimensions.cols - 1:
                line.append(" ")
        lines.append(line)
    return lines


def render_step(
    step: Step,
    dimensions: GridDimensions,
    *,
    start: Coordinate,
    goal: Coordinate,
    title: str = "Search",
    index: int | None = None,
    total: int | None = None,
) -> RenderableType:
    lines = render_grid_lines(step, dimensions, start=start, goal=goal)
    grid = Text("\n").join(lines)
    return Panel(
        Group(grid, Text(""), _render_status(step, index, total), _render_legend()),
        title=title,
    )


def _render_status(step: Step, index: int | None, total: int | None) -> Text:
    parts: list[str] = []
    if index is not None:
        parts.append(f"Step {index + 1}/{total}" if total else f"Step {index + 1}")
    parts.append(f"Visited {len(step.visited)}")
    parts.append(f"Frontier {len(step.frontier)}")
    if step.depth is not None:
        parts.append(f"Depth {step.depth}")
    if step.current is not None and step.cost_map is not None:
        cost = step.cost_map.get(encode_key(step.current))
        if cost is not None:
            parts.append(f"Cost {cost}")
    if step.path is not None:
        parts.append(f"Path {len(step.path) - 1} moves")
    return Text(" | ".join(parts), style="bold")


def _render_legend() -> Text:
    legend = Text()
    for kind in LEGEND_ORDER:
        glyph, style = CELL_GLYPHS[kind]
        legend.append(glyph, style=style)
        legend.append(f" {kind}  ")
    return legend


def render_summary(summary: TraceSummary, *, algorithm: str) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Algorithm", algorithm)
    table.add_row("Steps", str(summary.step_count))
    table.add_row("Reached goal", "yes" if summary.reached_goal else "no")
    table.add_row("Path length", str(summary.path_length))
    table.add_row("Visited", str(summary.visited_count))
    if summary.max_depth is not None:
        table.add_row("Max depth", str(summary.max_depth))
    return Panel(table, title="Summary")
