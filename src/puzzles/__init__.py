"""Word-search puzzle generation and verification."""

from .models import (
    DIRECTIONS,
    Difficulty,
    Direction,
    Placement,
    Puzzle,
    VerificationError,
    VerificationResult,
)
from .grid import SIZE_TABLE, build_grid, render_grid, trace_line, read_cells, placement_cells
from .parsing import normalize_word, normalize_words
from .placement import MAX_ATTEMPTS, can_place_word, place_word, place_words
from .fill import ALPHABET, fill_grid
from .generator import assemble_puzzle, generate_puzzle
from .verify import verify_puzzle

__all__ = [
    # Models
    "DIRECTIONS",
    "Difficulty",
    "Direction",
    "Placement",
    "Puzzle",
    "VerificationError",
    "VerificationResult",
    # Grid utilities
    "SIZE_TABLE",
    "build_grid",
    "render_grid",
    "trace_line",
    "read_cells",
    "placement_cells",
    # Normalization
    "normalize_word",
    "normalize_words",
    # Placement
    "MAX_ATTEMPTS",
    "can_place_word",
    "place_word",
    "place_words",
    # Filling
    "ALPHABET",
    "fill_grid",
    # Generation
    "assemble_puzzle",
    "generate_puzzle",
    # Verification
    "verify_puzzle",
]
