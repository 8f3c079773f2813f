"""Grid building, reading and rendering utilities."""

from typing import Dict, List, Sequence, Tuple

from .models import Difficulty, Placement


# Side length of the square grid for each difficulty
SIZE_TABLE: Dict[str, int] = {
    "easy": 8,
    "medium": 12,
    "hard": 15,
}

EMPTY = ""

Grid = List[List[str]]
Cell = Tuple[int, int]


def grid_size(difficulty: Difficulty) -> int:
    """Look up the grid side length for a difficulty."""
    if difficulty not in SIZE_TABLE:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")
    return SIZE_TABLE[difficulty]


def build_grid(difficulty: Difficulty) -> Grid:
    """Allocate an N x N grid of empty cells."""
    size = grid_size(difficulty)
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def word_cells(row: int, col: int, d_row: int, d_col: int, length: int) -> List[Cell]:
    """Cells covered by a word of `length` letters starting at (row, col)."""
    return [(row + d_row * i, col + d_col * i) for i in range(length)]


def placement_cells(placement: Placement) -> List[Cell]:
    """Cells covered by a recorded placement."""
    vector = placement.vector
    return word_cells(placement.row, placement.col, vector.d_row, vector.d_col, len(placement.word))


def in_bounds(grid: Sequence[Sequence[str]], cell: Cell) -> bool:
    row, col = cell
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def read_cells(grid: Sequence[Sequence[str]], cells: Sequence[Cell]) -> str:
    """Concatenate the letters found at `cells`."""
    return "".join(grid[row][col] for row, col in cells)


def trace_line(start: Cell, end: Cell) -> List[Cell]:
    """
    Walk the cells between two grid positions with Bresenham's algorithm.

    Used for turning a player's start/end selection into a sequence of cells.
    Both endpoints are included; for horizontal, vertical and diagonal lines
    this yields exactly the cells a placed word occupies.
    """
    r0, c0 = start
    r1, c1 = end
    dr = abs(r1 - r0)
    dc = abs(c1 - c0)
    sr = 1 if r0 < r1 else -1
    sc = 1 if c0 < c1 else -1
    err = dr - dc

    cells: List[Cell] = []
    row, col = r0, c0
    while True:
        cells.append((row, col))
        if row == r1 and col == c1:
            break
        e2 = 2 * err
        if e2 > -dc:
            err -= dc
            row += sr
        if e2 < dr:
            err += dr
            col += sc
    return cells


def render_grid(grid: Sequence[Sequence[str]]) -> str:
    """Render the grid to a string, one row per line, empty cells as '.'."""
    return "\n".join(
        " ".join(cell or "." for cell in row)
        for row in grid
    )
