import logging

import pytest

import editor
from grid import CellState, Grid
from strategies import MISSING_ENDPOINT, SearchResult, run_astar, run_bfs, run_dfs
from strategies.common import find_endpoints, manhattan, reconstruct_path

ALL = [run_bfs, run_dfs, run_astar]

SAMPLE_PATH = ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (2, 3))


def assert_valid_path(grid, result):
    """Path runs start to goal through adjacent, open, distinct cells."""
    path = result.path
    assert path[0] == grid.locate(CellState.START)
    assert path[-1] == grid.locate(CellState.GOAL)
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert grid.is_traversable(b)


# =============================================================================
# Fixed scenario on the default maze
# =============================================================================

def test_bfs_sample(sample_grid):
    res = run_bfs(sample_grid)
    assert res.strategy == "BFS"
    assert res.path == SAMPLE_PATH
    assert res.visited_order == ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (2, 0), (2, 3))
    assert res.steps == 5
    assert res.error is None


def test_dfs_sample(sample_grid):
    res = run_dfs(sample_grid)
    assert res.strategy == "DFS"
    assert res.path == SAMPLE_PATH
    # (2, 0) is pushed after (2, 2), so it is explored first
    assert res.visited_order == ((0, 0), (0, 1), (1, 1), (2, 1), (2, 0), (2, 2), (2, 3))


def test_astar_sample(sample_grid):
    res = run_astar(sample_grid)
    assert res.strategy == "A*"
    assert res.path == SAMPLE_PATH
    # (2, 0) has priority 7 and is never settled
    assert res.visited_order == ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (2, 3))


@pytest.mark.parametrize("run_fn", ALL)
def test_goal_recorded_last(run_fn, sample_grid):
    res = run_fn(sample_grid)
    assert res.visited_order[-1] == (2, 3)


# =============================================================================
# Tie-breaking and frontier discipline
# =============================================================================

def test_bfs_expands_right_before_down():
    grid = Grid.from_rows(["S0", "0G"])
    res = run_bfs(grid)
    assert res.visited_order == ((0, 0), (0, 1), (1, 0), (1, 1))
    assert res.path == ((0, 0), (0, 1), (1, 1))


def test_dfs_explores_last_pushed_first():
    grid = Grid.from_rows(["S0", "0G"])
    res = run_dfs(grid)
    # down is pushed after right, so it is popped first
    assert res.visited_order == ((0, 0), (1, 0), (1, 1))
    assert res.path == ((0, 0), (1, 0), (1, 1))


def test_dfs_skips_stale_duplicates(walled_in_grid):
    res = run_dfs(walled_in_grid)
    # (0, 1) is pushed twice; the second copy is dropped unrecorded
    assert res.visited_order == ((0, 0), (1, 0), (1, 1), (0, 1))
    assert res.path == ()


def test_astar_stable_ties(walled_in_grid):
    res = run_astar(walled_in_grid)
    assert res.visited_order == ((0, 0), (0, 1), (1, 0), (1, 1))


def test_astar_ties_served_in_insertion_order():
    grid = Grid.from_rows(["S00", "000", "00G"])
    res = run_astar(grid)
    # every cell on a monotone route has priority 4; right is inserted before down
    assert res.path == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))


# =============================================================================
# Unreachable and missing endpoints
# =============================================================================

@pytest.mark.parametrize("run_fn", ALL)
def test_unreachable_visits_start_component(run_fn, walled_in_grid):
    res = run_fn(walled_in_grid)
    assert res.path == ()
    assert not res.found
    assert res.error is None
    assert set(res.visited_order) == {(0, 0), (0, 1), (1, 0), (1, 1)}


@pytest.mark.parametrize("run_fn", ALL)
def test_isolated_start(run_fn):
    grid = Grid.from_rows(["S1G", "100"])
    res = run_fn(grid)
    assert res.visited_order == ((0, 0),)
    assert res.path == ()


@pytest.mark.parametrize("run_fn", ALL)
def test_missing_goal(run_fn, caplog):
    grid = Grid.from_rows(["S00", "010"])
    with caplog.at_level(logging.WARNING):
        res = run_fn(grid)
    assert res.visited_order == ()
    assert res.path == ()
    assert res.error == MISSING_ENDPOINT
    assert "no goal" in caplog.text


@pytest.mark.parametrize("run_fn", ALL)
def test_missing_start(run_fn):
    res = run_fn(Grid.from_rows(["00G"]))
    assert res == SearchResult(res.strategy, error=MISSING_ENDPOINT)


@pytest.mark.parametrize("run_fn", ALL)
def test_single_cell_grid_is_missing_endpoint(run_fn):
    res = run_fn(Grid.from_rows(["S"]))
    assert res.error == MISSING_ENDPOINT
    assert res.visited_order == ()


@pytest.mark.parametrize("run_fn", ALL)
def test_adjacent_start_and_goal(run_fn):
    res = run_fn(Grid.from_rows(["SG"]))
    assert res.path == ((0, 0), (0, 1))
    assert res.steps == 1


@pytest.mark.parametrize("run_fn", ALL)
def test_duplicate_start_uses_first(run_fn):
    grid = Grid.from_rows(["S0S", "00G"])
    res = run_fn(grid)
    assert res.path[0] == (0, 0)


# =============================================================================
# Properties over random mazes
# =============================================================================

@pytest.mark.parametrize("seed", range(25))
def test_random_maze_properties(seed):
    grid = editor.random_maze(8, 11, wall_density=0.3, seed=seed)
    bfs, dfs, astar = run_bfs(grid), run_dfs(grid), run_astar(grid)

    assert bfs.found == dfs.found == astar.found
    for res in (bfs, dfs, astar):
        assert len(set(res.visited_order)) == len(res.visited_order)
        if res.found:
            assert_valid_path(grid, res)
            assert set(res.path) <= set(res.visited_order) | {res.path[-1]}

    if bfs.found:
        assert bfs.steps <= dfs.steps
        assert bfs.steps == astar.steps
    else:
        # every strategy settles the whole start component
        assert set(bfs.visited_order) == set(dfs.visited_order) == set(astar.visited_order)


@pytest.mark.parametrize("run_fn", ALL)
def test_deterministic(run_fn):
    grid = editor.random_maze(10, 10, seed=7)
    assert run_fn(grid) == run_fn(grid)


@pytest.mark.parametrize("run_fn", ALL)
def test_input_grid_untouched(run_fn, sample_grid):
    before = str(sample_grid)
    run_fn(sample_grid)
    assert str(sample_grid) == before


# =============================================================================
# Shared helpers
# =============================================================================

def test_manhattan():
    assert manhattan((0, 0), (2, 3)) == 5
    assert manhattan((4, 1), (1, 4)) == 6


def test_find_endpoints(sample_grid):
    assert find_endpoints(sample_grid) == ((0, 0), (2, 3))
    assert find_endpoints(Grid.from_rows(["S0"])) is None


def test_reconstruct_path():
    came_from = {(0, 1): (0, 0), (1, 1): (0, 1)}
    assert reconstruct_path(came_from, (1, 1)) == [(0, 0), (0, 1), (1, 1)]
    assert reconstruct_path({}, (0, 0)) == [(0, 0)]


def test_result_helpers(sample_grid):
    res = run_bfs(sample_grid)
    assert res.found
    assert res.cells_explored == 7
    d = res.as_dict()
    assert d["strategy"] == "BFS"
    assert d["path"][0] == [0, 0]
    assert SearchResult("BFS").steps == 0
