"""Timed playback of a precomputed trace (Textual)."""

from __future__ import annotations

from dataclasses import dataclass

from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Static

from gridtrace.render.grid_view import render_step
from gridtrace.search.contracts import Coordinate, GridDimensions, Step


@dataclass
class PlaybackController:
    total: int
    playing: bool = True
    index: int = 0

    def advance(self) -> None:
        if not self.playing or self.total == 0:
            return
        self.index = min(self.index + 1, self.total - 1)
        if self.index == self.total - 1:
            self.playing = False

    def step(self) -> None:
        self.playing = False
        if self.total:
            self.index = min(self.index + 1, self.total - 1)

    def toggle(self) -> None:
        if self.index == self.total - 1:
            return
        self.playing = not self.playing

    def reset(self) -> None:
        self.playing = False
        self.index = 0


class TraceViewerScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #trace-view {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("space", "toggle", "Play/pause"),
        Binding("n", "step", "Step"),
        Binding("r", "restart", "Restart"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        steps: list[Step],
        dimensions: GridDimensions,
        *,
        start: Coordinate,
        goal: Coordinate,
        title: str = "Search",
        tick_delay: float = 0.05,
    ) -> None:
        super().__init__()
        self._steps = steps
        self._dimensions = dimensions
        self._start = start
        self._goal = goal
        self._title = title
        self._tick_delay = tick_delay
        self._controller = PlaybackController(total=len(steps))
        self._view: Static | None = None
        self._timer: Timer | None = None

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static(id="trace-view")
        yield Footer()

    def on_mount(self) -> None:
        self._view = self.query_one("#trace-view", Static)
        self._refresh_view()
        self._timer = self.set_interval(self._tick_delay, self._on_tick)

    def action_toggle(self) -> None:
        self._controller.toggle()
        self._refresh_view()

    def action_step(self) -> None:
        self._controller.step()
        self._refresh_view()

    def action_restart(self) -> None:
        self._controller.reset()
        self._refresh_view()

    def action_quit(self) -> None:
        self.app.exit()

    def _on_tick(self) -> None:
        if not self._controller.playing:
            return
        self._controller.advance()
        self._refresh_view()

    def _refresh_view(self) -> None:
        if self._view is None:
            return
        if not self._steps:
            self._view.update(Panel(Text("Trace is empty."), title=self._title))
            return
        index = self._controller.index
        self._view.update(
            render_step(
                self._steps[index],
                self._dimensions,
                start=self._start,
                goal=self._goal,
                title=self._title,
                index=index,
                total=len(self._steps),
            )
        )


class TraceViewerApp(App):
    """Hosts the viewer screen; the window title names the algorithm."""

    def __init__(self, screen: TraceViewerScreen, *, algorithm: str) -> None:
        super().__init__()
        self._viewer = screen
        self.title = f"gridtrace: {algorithm}"
        self.sub_title = f"{screen.step_count} steps"

    def on_mount(self) -> None:
        self.push_screen(self._viewer)


def play_trace(
    steps: list[Step],
    dimensions: GridDimensions,
    *,
    start: Coordinate,
    goal: Coordinate,
    title: str = "Search",
    tick_delay: float = 0.05,
) -> None:
    TraceViewerApp(
        TraceViewerScreen(
            steps,
            dimensions,
            start=start,
            goal=goal,
            title=title,
            tick_delay=tick_delay,
        ),
        algorithm=title,
    ).run()
