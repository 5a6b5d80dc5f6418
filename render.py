import plotly.graph_objects as go

import constants
from grid import CellState

# Drawing order of roles; index is the heatmap value
ROLES = ["empty", "visited", "path", "wall", "start", "goal"]
ROLE_CODE = {role: i for i, role in enumerate(ROLES)}


def cell_roles(grid, visited=(), path=()):
    """Role name for every cell; start, goal and walls win over path, path over visited."""
    visited = set(visited)
    path = set(path)
    roles = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            state = grid[(r, c)]
            if state is CellState.START:
                row.append("start")
            elif state is CellState.GOAL:
                row.append("goal")
            elif state is CellState.WALL:
                row.append("wall")
            elif (r, c) in path:
                row.append("path")
            elif (r, c) in visited:
                row.append("visited")
            else:
                row.append("empty")
        roles.append(row)
    return roles


def _discrete_colorscale():
    n = len(ROLES)
    scale = []
    for i, role in enumerate(ROLES):
        color = constants.CELL_COLORS[role]
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def build_figure(grid, visited=(), path=(), title=None):
    """Draw the maze with visited and path cells as a plotly heatmap

    Args:
        grid: Grid to draw
        visited: positions revealed as explored so far
        path: positions revealed as path so far
        title: optional figure title
    """
    roles = cell_roles(grid, visited, path)
    z = [[ROLE_CODE[role] for role in row] for row in roles]
    labels = [["S" if role == "start" else "G" if role == "goal" else "" for role in row] for row in roles]

    fig = go.Figure(go.Heatmap(
        z=z,
        text=labels,
        texttemplate="%{text}",
        colorscale=_discrete_colorscale(),
        zmin=-0.5,
        zmax=len(ROLES) - 0.5,
        showscale=False,
        xgap=2,
        ygap=2,
        hovertemplate="row %{y}, col %{x}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        plot_bgcolor="#374151",
        height=max(300, 60 * grid.rows + 80),
        margin={"r": 10, "t": 40 if title else 10, "l": 10, "b": 10},
    )
    # row 0 at the top, one square per cell
    fig.update_yaxes(autorange="reversed", showticklabels=False, scaleanchor="x")
    fig.update_xaxes(showticklabels=False)
    return fig
