"""Staged reveal of a finished search, one cell at a time.

The search itself returns immediately; this module only decides how quickly the
caller shows what it found. Stopping the iteration cancels the replay.
"""
import time
from dataclasses import dataclass
from typing import Tuple

from grid import Position


@dataclass(frozen=True)
class Frame:
    visited: Tuple[Position, ...]
    path: Tuple[Position, ...]
    phase: str  # "visited" | "path" | "done"


def reveal(result):
    """Yields one frame per visited cell, then one per path cell, then a final 'done' frame."""
    visited = result.visited_order
    for i in range(1, len(visited) + 1):
        yield Frame(visited[:i], (), "visited")
    for i in range(1, len(result.path) + 1):
        yield Frame(visited, result.path[:i], "path")
    yield Frame(visited, result.path, "done")


def play(result, interval_ms, sleep=time.sleep):
    """Same frames as reveal(), waiting interval_ms before each revealed cell."""
    if interval_ms < 0:
        raise ValueError(f"interval_ms must be >= 0, got {interval_ms}")
    for frame in reveal(result):
        if frame.phase != "done":
            sleep(interval_ms / 1000.0)
        yield frame


def summary(result):
    if result.error:
        return "Invalid maze: place one start and one goal"
    if not result.found:
        return f"No path found | Cells Explored: {result.cells_explored}"
    return f"Path Length: {result.steps} steps | Cells Explored: {result.cells_explored}"
