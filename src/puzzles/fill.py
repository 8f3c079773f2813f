"""Noise letters for the cells no word uses."""

import random
import string

from .grid import EMPTY, Grid


ALPHABET = string.ascii_uppercase


def fill_grid(grid: Grid, rng: random.Random, alphabet: str = ALPHABET) -> Grid:
    """Overwrite every empty cell with a uniformly random letter."""
    for row in grid:
        for j, cell in enumerate(row):
            if cell == EMPTY:
                row[j] = rng.choice(alphabet)
    return grid
