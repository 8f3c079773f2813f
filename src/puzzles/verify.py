"""
Puzzle verification module for checking generated word-search puzzles.

Validates:
1. Grid shape (square, side length matching the difficulty)
2. Cell contents (every cell holds exactly one upper-case letter)
3. Placements (each placed word lies inside the grid and spells itself)
4. Overlaps (words sharing a cell agree on its letter)
"""

from typing import Dict, List, Tuple

from .grid import SIZE_TABLE, Cell, in_bounds, placement_cells, read_cells
from .models import Puzzle, VerificationError, VerificationResult
from .parsing import is_grid_word


def validate_shape(puzzle: Puzzle) -> List[VerificationError]:
    """Validate the grid dimensions and cell contents."""
    errors: List[VerificationError] = []

    expected = SIZE_TABLE[puzzle.difficulty]
    if puzzle.size != expected:
        errors.append(VerificationError(
            code="SIZE_MISMATCH",
            message=f"Size {puzzle.size} does not match {puzzle.difficulty} ({expected})",
        ))

    if len(puzzle.grid) != puzzle.size or any(len(row) != puzzle.size for row in puzzle.grid):
        errors.append(VerificationError(
            code="GRID_NOT_SQUARE",
            message=f"Grid is not {puzzle.size}x{puzzle.size}",
        ))

    for r, row in enumerate(puzzle.grid):
        for c, cell in enumerate(row):
            if len(cell) != 1 or not is_grid_word(cell):
                errors.append(VerificationError(
                    code="INVALID_CELL",
                    message=f"Cell {(r, c)} holds {cell!r}, expected one upper-case letter",
                    cell=(r, c),
                ))

    return errors


def validate_placements(puzzle: Puzzle) -> Tuple[List[VerificationError], Dict[Cell, str]]:
    """Check every placement against the grid and against each other."""
    errors: List[VerificationError] = []
    covered: Dict[Cell, str] = {}

    placed = [p.word for p in puzzle.placements]
    if placed != list(puzzle.words):
        errors.append(VerificationError(
            code="WORDS_MISMATCH",
            message=f"Word list {list(puzzle.words)} does not match placements {placed}",
        ))

    for placement in puzzle.placements:
        cells = placement_cells(placement)

        if not all(in_bounds(puzzle.grid, cell) for cell in cells):
            errors.append(VerificationError(
                code="OUT_OF_BOUNDS",
                message=f"'{placement.word}' runs off the grid",
                word=placement.word,
            ))
            continue

        spelled = read_cells(puzzle.grid, cells)
        if spelled != placement.word:
            errors.append(VerificationError(
                code="WORD_MISMATCH",
                message=f"Cells for '{placement.word}' spell '{spelled}'",
                word=placement.word,
            ))

        for letter, cell in zip(placement.word, cells):
            if cell in covered and covered[cell] != letter:
                errors.append(VerificationError(
                    code="GRID_CONFLICT",
                    message=f"Cell conflict at {cell}: existing '{covered[cell]}' vs new '{letter}' from '{placement.word}'",
                    word=placement.word,
                    cell=cell,
                ))
            covered[cell] = letter

    return errors, covered


def verify_puzzle(puzzle: Puzzle) -> VerificationResult:
    """
    Main verification function: checks a generated puzzle.

    Returns a VerificationResult with:
    - valid: True if the puzzle passes all checks
    - errors: List of problems found
    - words: The puzzle's placed words
    - letters_used: Number of distinct cells covered by placed words
    """
    errors = validate_shape(puzzle)
    placement_errors, covered = validate_placements(puzzle)
    errors.extend(placement_errors)

    return VerificationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=list(puzzle.words),
        letters_used=len(covered),
    )
