"""
Puzzle assembly: the pure generation entry point.

Builds an empty grid for the difficulty, places the candidate words, fills
the remaining cells with noise and packages the result.
"""

import random
from typing import List, Optional, Sequence

import structlog

from .fill import fill_grid
from .grid import Grid, build_grid
from .models import Difficulty, Placement, Puzzle
from .parsing import normalize_words
from .placement import MAX_ATTEMPTS, place_words


logger = structlog.get_logger()


def assemble_puzzle(
    grid: Grid,
    placements: List[Placement],
    difficulty: Difficulty,
    book_id: str,
) -> Puzzle:
    """Package a filled grid and its placements into an immutable Puzzle."""
    return Puzzle(
        grid=tuple(tuple(row) for row in grid),
        words=[p.word for p in placements],
        placements=placements,
        difficulty=difficulty,
        size=len(grid),
        book_id=book_id,
    )


def generate_puzzle(
    book_id: str,
    difficulty: Difficulty,
    words: Sequence[str],
    word_count: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Puzzle:
    """
    Generate a word-search puzzle from candidate words.

    Args:
        book_id: Identifier of the book the vocabulary came from
        difficulty: Controls the grid size
        words: Candidate words in priority order (any case)
        word_count: Maximum number of words to place
        rng: Random source; pass a seeded Random for reproducible puzzles
        max_attempts: Placement trials per word

    Returns:
        A Puzzle whose word list may be shorter than `word_count`
        (possibly empty) when words do not fit

    Raises:
        ValueError: If word_count is negative or difficulty is unknown
    """
    if word_count < 0:
        raise ValueError(f"word_count must be non-negative, got {word_count}")

    if rng is None:
        rng = random.Random()

    candidates = normalize_words(words)
    grid = build_grid(difficulty)
    placements = place_words(grid, candidates, word_count, rng, max_attempts=max_attempts)
    fill_grid(grid, rng)

    puzzle = assemble_puzzle(grid, placements, difficulty, book_id)

    logger.info(
        "puzzle generated",
        book_id=book_id,
        difficulty=difficulty,
        size=puzzle.size,
        requested=word_count,
        candidates=len(candidates),
        placed=len(puzzle.words),
    )
    if not puzzle.words and candidates and word_count > 0:
        logger.warning("no words placed", book_id=book_id, difficulty=difficulty)

    return puzzle
