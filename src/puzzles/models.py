"""Data models for puzzle generation and verification."""

from typing import Dict, List, Literal, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .parsing import is_grid_word


Difficulty = Literal["easy", "medium", "hard"]
DirectionName = Literal["right", "down", "down_right", "up_right"]


class Direction(NamedTuple):
    """A unit step (row delta, col delta) a word is written along."""
    name: DirectionName
    d_row: int
    d_col: int


# Closed set: reverse directions are never attempted
DIRECTIONS: Tuple[Direction, ...] = (
    Direction("right", 0, 1),
    Direction("down", 1, 0),
    Direction("down_right", 1, 1),
    Direction("up_right", -1, 1),
)

DIRECTIONS_BY_NAME: Dict[str, Direction] = {d.name: d for d in DIRECTIONS}


class Placement(BaseModel):
    """Where a word was written on the grid."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    direction: DirectionName

    @field_validator("word")
    @classmethod
    def word_is_uppercase_letters(cls, v: str) -> str:
        if not is_grid_word(v):
            raise ValueError(f"word must be upper-case letters only, got {v!r}")
        return v

    @property
    def vector(self) -> Direction:
        return DIRECTIONS_BY_NAME[self.direction]


class Puzzle(BaseModel):
    """
    A generated word-search puzzle.

    The grid is stored as nested tuples so the puzzle cannot be changed
    after assembly.
    """
    model_config = ConfigDict(frozen=True)

    grid: Tuple[Tuple[str, ...], ...]
    words: List[str] = Field(default_factory=list)
    placements: List[Placement] = Field(default_factory=list)
    difficulty: Difficulty
    size: int = Field(..., gt=0)
    book_id: str


class VerificationError(BaseModel):
    """A single problem found while checking a puzzle."""
    code: str
    message: str
    word: Optional[str] = None
    cell: Optional[Tuple[int, int]] = None


class VerificationResult(BaseModel):
    """Result of puzzle verification."""
    valid: bool
    errors: List[VerificationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    letters_used: int = 0  # cells covered by placed words
