from strategies.common import find_endpoints, finish, missing_endpoint, reconstruct_path

NAME = "DFS"


def run_dfs(grid):
    """Depth-First Search over a maze grid: returns a SearchResult.

    Visited is checked when a cell is popped, so the stack may hold stale
    duplicates; those are dropped without being recorded.
    """
    endpoints = find_endpoints(grid)
    if endpoints is None:
        return missing_endpoint(NAME, grid)
    start, goal = endpoints

    stack = [(start, None)]  # (pos, parent)
    came_from = {}
    visited = set()
    visited_order = []

    while stack:
        pos, parent = stack.pop()
        if pos in visited:
            continue
        visited.add(pos)
        visited_order.append(pos)
        if parent is not None:
            came_from[pos] = parent

        if pos == goal:
            return finish(NAME, visited_order, reconstruct_path(came_from, pos))

        # pushed right, down, left, up: the last one pushed (up) is expanded first
        for n in grid.neighbors(pos):
            if grid.is_traversable(n) and n not in visited:
                stack.append((n, pos))

    return finish(NAME, visited_order, [])
