import itertools

import pytest

from replay import Frame, play, reveal, summary
from strategies import MISSING_ENDPOINT, SearchResult, run_bfs


def test_reveal_frames(sample_grid):
    res = run_bfs(sample_grid)
    frames = list(reveal(res))
    assert len(frames) == len(res.visited_order) + len(res.path) + 1
    assert frames[0] == Frame(((0, 0),), (), "visited")
    assert frames[len(res.visited_order) - 1].visited == res.visited_order
    assert frames[len(res.visited_order)] == Frame(res.visited_order, ((0, 0),), "path")
    assert frames[-1] == Frame(res.visited_order, res.path, "done")


def test_reveal_no_path(walled_in_grid):
    frames = list(reveal(run_bfs(walled_in_grid)))
    assert [f.phase for f in frames] == ["visited"] * 4 + ["done"]


def test_reveal_empty_result():
    assert list(reveal(SearchResult("BFS", error=MISSING_ENDPOINT))) == [Frame((), (), "done")]


def test_play_sleeps_between_cells(sample_grid):
    res = run_bfs(sample_grid)
    waits = []
    frames = list(play(res, 200, sleep=waits.append))
    assert len(waits) == len(frames) - 1
    assert set(waits) == {0.2}


def test_play_stops_when_caller_stops(sample_grid):
    waits = []
    frames = list(itertools.islice(play(run_bfs(sample_grid), 50, sleep=waits.append), 3))
    assert len(frames) == 3
    assert len(waits) == 3


def test_play_rejects_negative_interval(sample_grid):
    with pytest.raises(ValueError):
        list(play(run_bfs(sample_grid), -1))


def test_summary(sample_grid, walled_in_grid):
    assert summary(run_bfs(sample_grid)) == "Path Length: 5 steps | Cells Explored: 7"
    assert summary(run_bfs(walled_in_grid)) == "No path found | Cells Explored: 4"
    assert summary(SearchResult("DFS", error=MISSING_ENDPOINT)).startswith("Invalid maze")
