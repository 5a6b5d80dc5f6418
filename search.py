import logging
import sys
from enum import Enum

import pandas as pd

import constants

# Import search strategies implemented in the `strategies` package
from strategies.dfs import run_dfs
from strategies.bfs import run_bfs
from strategies.astar import run_astar
from strategies.common import MISSING_ENDPOINT
from file_reader import parse_maze_file
from grid import InvalidGrid
from util import FormatBytes, execute_with_metrics

logger = logging.getLogger(__name__)


class Strategy(Enum):
    BFS = "BFS"
    DFS = "DFS"
    ASTAR = "A*"

    @classmethod
    def parse(cls, name):
        """Maps a strategy name (BFS, DFS, AS, ASTAR, A*) to a Strategy."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace("-", "")
        if key not in constants.ALGORITHM_ALIASES:
            raise ValueError(f"Unknown method: {name}")
        return cls(constants.ALGORITHM_ALIASES[key])


RUNNERS = {
    Strategy.BFS: run_bfs,
    Strategy.DFS: run_dfs,
    Strategy.ASTAR: run_astar,
}


def search(grid, strategy):
    """Runs one strategy on grid and returns its SearchResult."""
    return RUNNERS[Strategy.parse(strategy)](grid)


def compare_strategies(grid):
    """Runs every strategy on grid and tabulates path length and cells explored."""
    rows = []
    for strategy, run_fn in RUNNERS.items():
        res = run_fn(grid)
        rows.append({
            'Strategy': strategy.value,
            'Path Length': len(res.path) if res.found else float('inf'),
            'Steps': res.steps if res.found else float('inf'),
            'Cells Explored': res.cells_explored,
        })
    df = pd.DataFrame(rows, columns=['Strategy', 'Path Length', 'Steps', 'Cells Explored'])
    # stable sort keeps BFS, DFS, A* order among ties
    df = df.sort_values(by='Path Length', kind='stable').reset_index(drop=True)
    for col in ('Path Length', 'Steps'):
        df[col] = df[col].apply(lambda v: 'No Path Found' if v == float('inf') else int(v)).astype(object)
    return df


def format_path(path):
    return " -> ".join(f"({r},{c})" for r, c in path)


def _print_metrics(metrics_mode, method, result, runtime_s, peak_bytes, rss_after):
    if metrics_mode not in ("stderr", "stdout"):
        return
    metrics_line = (
        f"Metrics: method={method} cells_visited={result.cells_explored} "
        f"path_steps={result.steps if result.found else 'N/A'} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)} "
        f"rss_now={FormatBytes(rss_after)}"
    )
    if metrics_mode == "stdout":
        print(metrics_line)
    else:
        print(metrics_line, file=sys.stderr)


def main(filename, method, metrics_mode="none", plot=None):
    """Main function to run the search algorithm on a maze file.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output
    plot: optional PNG path to save a rendering of the result to

    Returns the process exit status.
    """
    try:
        strategy = Strategy.parse(method)
    except ValueError as e:
        print(e)
        return 1

    try:
        config = parse_maze_file(filename)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 1
    except InvalidGrid as e:
        print(f"Invalid maze: {e}")
        return 1

    grid = config.grid
    logger.debug("Loaded %s: %dx%d grid", filename, grid.rows, grid.cols)

    result, runtime_s, peak_bytes, rss_after = execute_with_metrics(search, grid, strategy)

    # Expected output:
    # <filename> <method>
    # Path length:<n>
    # Number of cells visited:<n>
    # <path>
    print(f"{filename} {strategy.value}")
    if result.error == MISSING_ENDPOINT:
        print("Invalid maze: start or goal cell missing")
    elif not result.found:
        print("No path found")
        print(f"Number of cells visited:{result.cells_explored}")
    else:
        print(f"Path length:{result.steps}")
        print(f"Number of cells visited:{result.cells_explored}")
        print(format_path(result.path))

    _print_metrics(metrics_mode, strategy.value, result, runtime_s, peak_bytes, rss_after)

    if plot:
        # matplotlib is only needed when saving a picture
        import seemaze
        seemaze.plot_maze(grid, result.visited_order, result.path,
                          title=f"{strategy.value}: {filename}", save_path=plot)
        print(f"Saved plot to {plot}")

    return 0


def cli(argv=None):
    # e.g., python search.py maze.txt BFS --metrics --plot out.png
    argv = list(sys.argv[1:] if argv is None else argv)

    plot = None
    lowered = [a.lower() for a in argv]
    if "--plot" in lowered:
        # --plot takes the following argument as its value, whatever it looks like
        idx = lowered.index("--plot")
        if idx + 1 >= len(argv):
            print("Error: --plot needs an output file")
            return 1
        plot = argv[idx + 1]
        del argv[idx:idx + 2]

    args = [a for a in argv if not a.startswith("-")]
    flags = [a.lower() for a in argv if a.startswith("-")]

    if len(args) != 2:
        print("Usage: python search.py <filename> <method> [--metrics | --metrics-stdout] [--plot FILE] [--verbose]")
        print("Methods: BFS, DFS, AS")
        return 1

    metrics_mode = "none"
    for flag in flags:
        if flag in ("--metrics", "-m"):
            metrics_mode = "stderr"
        elif flag == "--metrics-stdout":
            metrics_mode = "stdout"
        elif flag in ("--verbose", "-v"):
            pass
        else:
            print(f"Warning: unknown flag '{flag}'. Ignored.", file=sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if ("--verbose" in flags or "-v" in flags) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    filename, method = args
    return main(filename, method, metrics_mode, plot)


if __name__ == "__main__":
    sys.exit(cli())
