"""Package exposing maze search strategy implementations."""

from .dfs import run_dfs
from .bfs import run_bfs
from .astar import run_astar
from .common import SearchResult, MISSING_ENDPOINT

__all__ = ["run_dfs", "run_bfs", "run_astar", "SearchResult", "MISSING_ENDPOINT"]
