from gridtrace.render.trace_viewer import (
    PlaybackController,
    TraceViewerApp,
    TraceViewerScreen,
)
from gridtrace.search.algorithms import run_bfs
from gridtrace.search.contracts import Coordinate, GridDimensions


def test_playback_advances_and_stops_at_end() -> None:
    controller = PlaybackController(total=3)
    controller.advance()
    assert controller.index == 1
    assert controller.playing

    controller.advance()
    assert controller.index == 2
    assert not controller.playing

    controller.advance()
    assert controller.index == 2


def test_playback_step_pause_and_reset() -> None:
    controller = PlaybackController(total=4)
    controller.step()
    assert controller.index == 1
    assert not controller.playing

    controller.advance()
    assert controller.index == 1

    controller.toggle()
    assert controller.playing
    controller.advance()
    assert controller.index == 2

    controller.reset()
    assert controller.index == 0
    assert not controller.playing


def test_toggle_is_ignored_on_last_step() -> None:
    controller = PlaybackController(total=1, playing=False)
    controller.toggle()
    assert not controller.playing

    empty = PlaybackController(total=0)
    empty.advance()
    empty.step()
    assert empty.index == 0


def test_viewer_app_titles_with_algorithm() -> None:
    dims = GridDimensions(rows=2, cols=2)
    steps = run_bfs(dims, (0, 0), (1, 1))
    screen = TraceViewerScreen(
        steps, dims, start=Coordinate(0, 0), goal=Coordinate(1, 1), title="BFS"
    )
    app = TraceViewerApp(screen, algorithm="BFS")

    assert screen.step_count == len(steps)
    assert app.title == "gridtrace: BFS"
    assert app.sub_title == f"{len(steps)} steps"
