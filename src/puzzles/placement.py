"""
Randomized word placement.

Each word gets a bounded number of independent trials. A trial picks one of
the four directions and a start cell uniformly at random and succeeds when
the whole word fits inside the grid and every cell it crosses is either empty
or already holds the same letter. Words that fail every trial are skipped;
there is no backtracking.
"""

import random
from typing import List, Optional, Sequence

import structlog

from .grid import EMPTY, Grid, word_cells
from .models import DIRECTIONS, Direction, Placement


logger = structlog.get_logger()

MAX_ATTEMPTS = 100


def can_place_word(grid: Grid, word: str, row: int, col: int, direction: Direction) -> bool:
    """Check bounds and letter compatibility for one trial."""
    size = len(grid)
    last_row = row + direction.d_row * (len(word) - 1)
    last_col = col + direction.d_col * (len(word) - 1)

    if not (0 <= row < size and 0 <= col < size):
        return False
    if not (0 <= last_row < size and 0 <= last_col < size):
        return False

    for letter, (r, c) in zip(word, word_cells(row, col, direction.d_row, direction.d_col, len(word))):
        cell = grid[r][c]
        if cell != EMPTY and cell != letter:
            return False

    return True


def write_word(grid: Grid, word: str, row: int, col: int, direction: Direction) -> Placement:
    """Write a word's letters into the grid and return its placement."""
    for letter, (r, c) in zip(word, word_cells(row, col, direction.d_row, direction.d_col, len(word))):
        grid[r][c] = letter
    return Placement(word=word, row=row, col=col, direction=direction.name)


def place_word(
    grid: Grid,
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Placement]:
    """
    Try to lay one word onto the grid.

    Returns the placement on the first successful trial, or None once
    `max_attempts` trials have failed. The grid is only modified on success.
    """
    size = len(grid)
    for _ in range(max_attempts):
        direction = rng.choice(DIRECTIONS)
        row = rng.randrange(size)
        col = rng.randrange(size)

        if can_place_word(grid, word, row, col, direction):
            return write_word(grid, word, row, col, direction)

    return None


def place_words(
    grid: Grid,
    words: Sequence[str],
    word_count: int,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> List[Placement]:
    """
    Place words in input order until `word_count` of them are on the grid.

    Args:
        grid: The grid to write into (mutated in place)
        words: Upper-cased candidate words, in priority order
        word_count: Number of words wanted
        rng: Random source used for every trial
        max_attempts: Trials per word before it is skipped

    Returns:
        Placements of the words that made it onto the grid, in input order
    """
    placements: List[Placement] = []

    for word in words:
        if len(placements) >= word_count:
            break

        placement = place_word(grid, word, rng, max_attempts=max_attempts)
        if placement is None:
            logger.debug("word skipped", word=word, attempts=max_attempts)
            continue

        placements.append(placement)

    return placements
