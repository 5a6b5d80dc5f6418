import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from grid import CellState, Position

logger = logging.getLogger(__name__)

MISSING_ENDPOINT = "MissingEndpoint"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search: cells in the order they were settled, and the path found.

    `path` is empty when the goal is unreachable. `error` is only set when the grid
    lacks a start or goal, in which case both sequences are empty.
    """
    strategy: str
    visited_order: Tuple[Position, ...] = ()
    path: Tuple[Position, ...] = ()
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> int:
        """Number of moves along the path."""
        return max(len(self.path) - 1, 0)

    @property
    def cells_explored(self) -> int:
        return len(self.visited_order)

    def as_dict(self):
        return {
            "strategy": self.strategy,
            "visited_order": [list(p) for p in self.visited_order],
            "path": [list(p) for p in self.path],
            "error": self.error,
        }


def manhattan(a, b):
    """Manhattan distance between (row, col) tuples a and b."""
    (r1, c1), (r2, c2) = a, b
    return abs(r1 - r2) + abs(c1 - c2)


def find_endpoints(grid):
    """Returns (start, goal) or None if either is missing from the grid."""
    start = grid.locate(CellState.START)
    goal = grid.locate(CellState.GOAL)
    if start is None or goal is None:
        return None
    return start, goal


def missing_endpoint(strategy, grid):
    logger.warning("%s: grid %r has no %s cell", strategy, grid,
                   "start" if grid.locate(CellState.START) is None else "goal")
    return SearchResult(strategy, error=MISSING_ENDPOINT)


def finish(strategy, visited_order, path):
    """Packs the search output into a SearchResult and logs a summary."""
    logger.debug("%s settled %d cells, path of %d cells", strategy, len(visited_order), len(path))
    return SearchResult(strategy, tuple(visited_order), tuple(path))


def reconstruct_path(came_from, current):
    """Reconstructs path (list of positions) from came_from map."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
