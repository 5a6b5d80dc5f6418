from enum import Enum
from typing import Iterable, List, Optional, Tuple

import pandas as pd

Position = Tuple[int, int]  # (row, col)

# Neighbour order: right, down, left, up. Every strategy expands in this order,
# so it decides tie-breaks and must not change.
MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))


class InvalidGrid(ValueError):
    """Raised when a grid cannot be built from the given cells."""


class CellState(Enum):
    """The four states a maze cell can be in, keyed by their file symbol."""
    START = "S"
    GOAL = "G"
    WALL = "1"
    EMPTY = "0"

    @classmethod
    def parse(cls, value):
        """Converts a symbol (or an existing CellState) into a CellState."""
        if isinstance(value, cls):
            return value
        symbol = str(value).strip().upper()
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidGrid(f"Unknown cell symbol: {value!r}") from None


class Grid:
    """Immutable rows x cols view over cell states."""

    def __init__(self, cells: Iterable[Iterable[CellState]]):
        rows = tuple(tuple(CellState.parse(c) for c in row) for row in cells)
        if not rows or not rows[0]:
            raise InvalidGrid("Grid must have at least one row and one column")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(f"Row {i} has {len(row)} cells, expected {width}")
        self._cells = rows

    @classmethod
    def from_rows(cls, rows):
        """Builds a grid from rows of symbols such as [['S', '0'], ['1', 'G']] or ['S0', '1G']."""
        return cls(rows)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame):
        """Builds a grid from a DataFrame of symbols (one DataFrame row per grid row)."""
        return cls(df.astype(str).values.tolist())

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, pos: Position) -> CellState:
        r, c = pos
        return self._cells[r][c]

    def __eq__(self, other):
        return isinstance(other, Grid) and self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols})"

    def __str__(self):
        return "\n".join("".join(cell.value for cell in row) for row in self._cells)

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def locate(self, state: CellState) -> Optional[Position]:
        """Returns the first row-major position holding `state`, or None when absent."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell is state:
                    return (r, c)
        return None

    def is_traversable(self, pos: Position) -> bool:
        """True if pos is in bounds and not a wall (start and goal are traversable)."""
        return self.in_bounds(pos) and self[pos] is not CellState.WALL

    def neighbors(self, pos: Position) -> List[Position]:
        """In-bounds orthogonal neighbours of pos, ordered right, down, left, up."""
        r, c = pos
        out = []
        for dr, dc in MOVES:
            n = (r + dr, c + dc)
            if self.in_bounds(n):
                out.append(n)
        return out

    def with_cell(self, pos: Position, state) -> "Grid":
        """Returns a copy of the grid with one cell replaced."""
        if not self.in_bounds(pos):
            raise InvalidGrid(f"Position {pos} is outside a {self.rows}x{self.cols} grid")
        r, c = pos
        cells = [list(row) for row in self._cells]
        cells[r][c] = CellState.parse(state)
        return Grid(cells)

    def to_rows(self) -> List[List[str]]:
        """Rows of cell symbols."""
        return [[cell.value for cell in row] for row in self._cells]

    def to_dataframe(self) -> pd.DataFrame:
        """DataFrame of cell symbols with one column per grid column."""
        return pd.DataFrame(self.to_rows(), columns=[str(c) for c in range(self.cols)])
