import heapq
import itertools
from strategies.common import find_endpoints, finish, manhattan, missing_endpoint, reconstruct_path

NAME = "A*"


def run_astar(grid):
    """
    Performs A* search from the start cell to the goal cell of a maze grid.

    Priority is g + h, where g is the number of moves from the start and h the
    Manhattan distance to the goal. Equal priorities are served in insertion
    order. A cell is settled the first time it is popped and is never reopened,
    even if a cheaper route to it turns up later.
    Args:
        grid: Grid with one start and one goal cell
    Returns:
        SearchResult
    """
    endpoints = find_endpoints(grid)
    if endpoints is None:
        return missing_endpoint(NAME, grid)
    start, goal = endpoints

    came_from = {}
    closed = set()
    visited_order = []
    counter = itertools.count()
    heap = []

    heapq.heappush(heap, (manhattan(start, goal), next(counter), 0, start, None))

    while heap:
        _f, _cnt, g, pos, parent = heapq.heappop(heap)
        if pos in closed:
            continue
        closed.add(pos)
        visited_order.append(pos)
        if parent is not None:
            came_from[pos] = parent

        if pos == goal:
            return finish(NAME, visited_order, reconstruct_path(came_from, pos))

        for n in grid.neighbors(pos):
            if grid.is_traversable(n) and n not in closed:
                f_score = g + 1 + manhattan(n, goal)
                heapq.heappush(heap, (f_score, next(counter), g + 1, n, pos))

    return finish(NAME, visited_order, [])
