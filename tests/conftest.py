import pytest

from grid import Grid

SAMPLE_ROWS = [
    ["S", "0", "1", "0"],
    ["1", "0", "1", "0"],
    ["0", "0", "0", "G"],
]


@pytest.fixture
def sample_grid():
    return Grid.from_rows(SAMPLE_ROWS)


@pytest.fixture
def walled_in_grid():
    # start can only reach its own pocket of four cells
    return Grid.from_rows([
        "S01G",
        "0010",
        "1110",
    ])
