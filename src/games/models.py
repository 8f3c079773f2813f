"""
Pydantic models for the games layer.

This module contains the vocabulary, score and leaderboard records plus the
application configuration. The logic (sessions, scoring, ranking, services)
lives in the neighbouring modules.
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..puzzles.models import Difficulty
from ..puzzles.placement import MAX_ATTEMPTS


# Type aliases
GameType = Literal["matching"]
SessionState = Literal["idle", "in_progress", "completed"]

ANONYMOUS = "Anonymous"


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class WordPair(BaseModel):
    """A vocabulary word and its translation, as supplied for a book."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    word: str = Field(..., min_length=1)
    translation: str = Field(..., min_length=1)
    difficulty: Difficulty
    book_id: str
    context: Optional[str] = None


class MatchingSubmission(BaseModel):
    """A finished matching game, before the player is attached."""
    model_config = ConfigDict(frozen=True)

    book_id: str
    game_type: GameType = "matching"
    difficulty: Difficulty
    score: int = Field(..., ge=0)
    time_spent: int = Field(..., ge=0)  # seconds
    mistakes: int = Field(..., ge=0)
    completed_at: datetime

    @field_validator("completed_at")
    @classmethod
    def completed_at_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class GameScore(MatchingSubmission):
    """A stored matching-game score."""
    id: Optional[str] = None
    user_id: str = Field(..., min_length=1)


class LeaderboardEntry(GameScore):
    """A matching-game score with the player's display name."""
    user_name: str = ANONYMOUS


class WordSearchSubmission(BaseModel):
    """A finished word search, before the player is attached."""
    model_config = ConfigDict(frozen=True)

    book_id: str
    difficulty: Difficulty
    time_seconds: int = Field(..., ge=0)
    words_found: int = Field(..., ge=0)
    total_words: int = Field(..., ge=0)
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def timestamp_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class WordSearchScore(WordSearchSubmission):
    """A stored word-search score."""
    id: Optional[str] = None
    user_id: str = Field(..., min_length=1)


class AppConfig(BaseModel):
    """Configuration for generation and leaderboards, loaded from YAML."""
    seed: Optional[int] = None
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    word_count: int = Field(default=8, ge=0)
    leaderboard_limit: int = Field(default=10, ge=0)
    vocabulary: List[WordPair] = Field(default_factory=list)
