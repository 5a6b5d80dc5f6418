MAZE_FOLDER = "mazes"
DEFAULT_MAZE_FILE = "default.txt"

ENUM_ALGORITHMS = ["BFS", "DFS", "A*"]
DEFAULT_ALGORITHM = "BFS"

# Accepted spellings (upper-cased, dashes removed) -> display name
ALGORITHM_ALIASES = {"BFS": "BFS", "DFS": "DFS", "AS": "A*", "ASTAR": "A*", "A*": "A*"}

# Reveal speed in milliseconds per cell
DEFAULT_SPEED_MS = 200
MIN_SPEED_MS = 50
MAX_SPEED_MS = 500
SPEED_STEP_MS = 50

DEFAULT_MAZE = [
    ["S", "0", "1", "0"],
    ["1", "0", "1", "0"],
    ["0", "0", "0", "G"],
]

MAX_GRID_SIZE = 30
RANDOM_WALL_DENSITY = 0.3

# Display colours per cell role
CELL_COLORS = {
    "start": "#22c55e",
    "goal": "#ef4444",
    "wall": "#1f2937",
    "visited": "#93c5fd",
    "path": "#facc15",
    "empty": "#ffffff",
}

RELOAD_DEBOUNCE_S = 1.0
