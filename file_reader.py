import re
from dataclasses import dataclass

import constants
from grid import Grid, InvalidGrid


@dataclass
class MazeConfig:
    """A maze loaded from file plus the run settings stored beside it."""
    grid: Grid
    algorithm: str = constants.DEFAULT_ALGORITHM
    speed_ms: int = constants.DEFAULT_SPEED_MS


def split_row(line):
    """Splits a maze row written as 'S,0,1', 'S 0 1' or 'S01' into symbols."""
    if re.search(r"[,\s]", line):
        return [p for p in re.split(r"[,\s]+", line) if p]
    return list(line)


def parse_maze_file(path):
    """Parses a maze file

    Args:
        path (string): Filepath to the maze txt file

    Returns:
        MazeConfig: the grid, plus algorithm and speed from the [META] section
    """
    section = "[MAZE]"
    rows = []
    meta = {}

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            if section == "[MAZE]":
                rows.append(split_row(line))

            elif section == "[META]":
                p = [x.strip() for x in line.split(",")]
                if len(p) < 2:
                    raise InvalidGrid(f"{path}:{lineno}: expected 'KEY, value', got '{line}'")
                key = p[0].upper()
                if key == "ALGORITHM":
                    name = p[1].upper().replace("-", "")
                    if name not in constants.ALGORITHM_ALIASES:
                        raise InvalidGrid(f"{path}:{lineno}: unknown algorithm '{p[1]}', "
                                          f"expected one of {', '.join(constants.ENUM_ALGORITHMS)}")
                    meta["algorithm"] = constants.ALGORITHM_ALIASES[name]
                elif key == "SPEED":
                    try:
                        speed = int(p[1])
                    except ValueError:
                        raise InvalidGrid(f"{path}:{lineno}: speed must be an integer, got '{p[1]}'") from None
                    if not constants.MIN_SPEED_MS <= speed <= constants.MAX_SPEED_MS:
                        raise InvalidGrid(f"{path}:{lineno}: speed must be between {constants.MIN_SPEED_MS} "
                                          f"and {constants.MAX_SPEED_MS} ms, got {speed}")
                    meta["speed_ms"] = speed

    if not rows:
        raise InvalidGrid(f"{path}: no maze rows found")
    try:
        grid = Grid.from_rows(rows)
    except InvalidGrid as e:
        raise InvalidGrid(f"{path}: {e}") from None
    return MazeConfig(grid, **meta)


def write_maze_file(path, grid, algorithm=None, speed_ms=None):
    """Writes grid (and optional run settings) in the format parse_maze_file reads."""
    lines = ["[MAZE]"]
    lines += [",".join(row) for row in grid.to_rows()]
    if algorithm is not None or speed_ms is not None:
        lines.append("")
        lines.append("[META]")
        if algorithm is not None:
            lines.append(f"ALGORITHM, {algorithm}")
        if speed_ms is not None:
            lines.append(f"SPEED, {speed_ms}")
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
