from collections import deque
from strategies.common import find_endpoints, finish, missing_endpoint, reconstruct_path

NAME = "BFS"


def run_bfs(grid):
    """Breadth-First Search over a maze grid.

    Cells are marked visited when enqueued, so each one enters the queue once and
    the first path to reach the goal is a shortest one.
    """
    endpoints = find_endpoints(grid)
    if endpoints is None:
        return missing_endpoint(NAME, grid)
    start, goal = endpoints

    q = deque([start])
    came_from = {}
    visited = {start}
    visited_order = []

    while q:
        pos = q.popleft()
        visited_order.append(pos)

        if pos == goal:
            return finish(NAME, visited_order, reconstruct_path(came_from, pos))

        for n in grid.neighbors(pos):
            if grid.is_traversable(n) and n not in visited:
                visited.add(n)
                came_from[n] = pos
                q.append(n)

    return finish(NAME, visited_order, [])
