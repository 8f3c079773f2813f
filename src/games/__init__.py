"""Vocabulary games: sessions, scoring, leaderboards and services."""

from .models import (
    ANONYMOUS,
    AppConfig,
    GameScore,
    GameType,
    LeaderboardEntry,
    MatchingSubmission,
    SessionState,
    WordPair,
    WordSearchScore,
    WordSearchSubmission,
)
from .auth import AuthError, AuthenticationRequired, IdentityProvider, StaticIdentity
from .scoring import compute_score
from .store import (
    InMemoryScoreRepository,
    InMemoryUserDirectory,
    InMemoryVocabulary,
    ScoreRepository,
    UserDirectory,
    VocabularyProvider,
)
from .leaderboard import LeaderboardService, rank_matching_scores, rank_word_search_scores
from .session import MatchingSession, WordSearchSession
from .service import PuzzleGenerator, ScoreService

__all__ = [
    "ANONYMOUS",
    "AppConfig",
    "GameScore",
    "GameType",
    "LeaderboardEntry",
    "MatchingSubmission",
    "SessionState",
    "WordPair",
    "WordSearchScore",
    "WordSearchSubmission",
    "AuthError",
    "AuthenticationRequired",
    "IdentityProvider",
    "StaticIdentity",
    "compute_score",
    "InMemoryScoreRepository",
    "InMemoryUserDirectory",
    "InMemoryVocabulary",
    "ScoreRepository",
    "UserDirectory",
    "VocabularyProvider",
    "LeaderboardService",
    "rank_matching_scores",
    "rank_word_search_scores",
    "MatchingSession",
    "WordSearchSession",
    "PuzzleGenerator",
    "ScoreService",
]
