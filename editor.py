"""Maze editing operations used by the app.

Every function returns a new Grid; the input grid is never changed. The editor
keeps at most one start and one goal: placing either one clears the old cell.
"""
import random

import constants
from grid import CellState, Grid, InvalidGrid


def empty_maze(rows, cols):
    """A rows x cols grid with the start top-left, the goal bottom-right and no walls."""
    _check_size(rows, cols)
    cells = [[CellState.EMPTY] * cols for _ in range(rows)]
    cells[0][0] = CellState.START
    cells[rows - 1][cols - 1] = CellState.GOAL
    return Grid(cells)


def random_maze(rows, cols, wall_density=constants.RANDOM_WALL_DENSITY, seed=None):
    """Random walls, with the start forced to (0, 0) and the goal to the opposite corner.

    The result is not guaranteed to be solvable.
    """
    _check_size(rows, cols)
    if not 0.0 <= wall_density <= 1.0:
        raise ValueError(f"wall_density must be between 0 and 1, got {wall_density}")
    rng = random.Random(seed)
    cells = [
        [CellState.WALL if rng.random() < wall_density else CellState.EMPTY for _ in range(cols)]
        for _ in range(rows)
    ]
    cells[0][0] = CellState.START
    cells[rows - 1][cols - 1] = CellState.GOAL
    return Grid(cells)


def toggle_wall(grid, pos):
    """Flips a cell between wall and empty. Start and goal cells are left alone."""
    state = grid[pos]
    if state is CellState.WALL:
        return grid.with_cell(pos, CellState.EMPTY)
    if state is CellState.EMPTY:
        return grid.with_cell(pos, CellState.WALL)
    return grid


def place(grid, pos, state):
    """Puts state at pos. A new start or goal replaces the previous one."""
    state = CellState.parse(state)
    if state in (CellState.START, CellState.GOAL):
        previous = grid.locate(state)
        if previous is not None and previous != pos:
            grid = grid.with_cell(previous, CellState.EMPTY)
    return grid.with_cell(pos, state)


def resize(grid, rows, cols):
    """Grows or shrinks the grid, keeping cells that still fit.

    A start or goal that falls outside is put back at its default corner.
    """
    _check_size(rows, cols)
    cells = [
        [grid[(r, c)] if r < grid.rows and c < grid.cols else CellState.EMPTY for c in range(cols)]
        for r in range(rows)
    ]
    resized = Grid(cells)
    if resized.locate(CellState.START) is None and grid.locate(CellState.START) is not None:
        resized = place(resized, (0, 0), CellState.START)
    if resized.locate(CellState.GOAL) is None and grid.locate(CellState.GOAL) is not None:
        corner = (rows - 1, cols - 1)
        # a 1x1 grid has no room for both
        if resized[corner] is not CellState.START:
            resized = place(resized, corner, CellState.GOAL)
    return resized


def _check_size(rows, cols):
    if not (1 <= rows <= constants.MAX_GRID_SIZE and 1 <= cols <= constants.MAX_GRID_SIZE):
        raise InvalidGrid(f"Grid size must be between 1 and {constants.MAX_GRID_SIZE}, got {rows}x{cols}")
