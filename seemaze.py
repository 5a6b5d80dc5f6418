import sys

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch

import constants
from render import ROLES, ROLE_CODE, cell_roles


def plot_maze(grid, visited=(), path=(), title="Maze", save_path=None):
    """Draw the maze with matplotlib; saves to save_path if given, otherwise returns the open figure."""
    roles = cell_roles(grid, visited, path)
    z = [[ROLE_CODE[role] for role in row] for row in roles]
    cmap = ListedColormap([constants.CELL_COLORS[role] for role in ROLES])

    fig, ax = plt.subplots(figsize=(max(4, grid.cols), max(3, grid.rows)))
    ax.imshow(z, cmap=cmap, vmin=-0.5, vmax=len(ROLES) - 0.5)

    # Cell borders
    ax.set_xticks([c - 0.5 for c in range(1, grid.cols)], minor=True)
    ax.set_yticks([r - 0.5 for r in range(1, grid.rows)], minor=True)
    ax.grid(which='minor', color='#374151', linewidth=2)
    ax.tick_params(which='both', bottom=False, left=False, labelbottom=False, labelleft=False)

    for r, row in enumerate(roles):
        for c, role in enumerate(row):
            if role in ("start", "goal"):
                ax.text(c, r, "S" if role == "start" else "G", ha='center', va='center',
                        color='white', fontsize=16, fontweight='bold')

    # Draw the path as a line through cell centres
    if len(path) > 1:
        ax.plot([c for _, c in path], [r for r, _ in path], color='darkorange', linewidth=2, zorder=3)

    legend = [Patch(facecolor=constants.CELL_COLORS[role], edgecolor='gray', label=role.capitalize())
              for role in ("start", "goal", "wall", "visited", "path")]
    ax.legend(handles=legend, loc='upper left', bbox_to_anchor=(1.01, 1.0), fontsize=9)
    ax.set_title(title, fontsize=14, fontweight='bold')
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path)
        plt.close(fig)
        return None
    return fig


if __name__ == "__main__":
    from file_reader import parse_maze_file
    from search import search

    # Get filename from command line argument or use default
    if len(sys.argv) > 1:
        filename = sys.argv[1]
    else:
        filename = f"{constants.MAZE_FOLDER}/{constants.DEFAULT_MAZE_FILE}"
        print(f"No file specified, using default: {filename}")
    config = parse_maze_file(filename)
    method = sys.argv[2] if len(sys.argv) > 2 else config.algorithm

    result = search(config.grid, method)
    plot_maze(config.grid, result.visited_order, result.path, title=f"{method}: {filename}")
    plt.show()
