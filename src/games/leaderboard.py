"""
Leaderboards over stored scores.

The two game types rank on different metrics: matching games by score
(higher is better), word searches by completion time (lower is better).
Each has its own sort key. Ties go to whoever finished first.
"""

import asyncio
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from ..puzzles.models import Difficulty
from .models import ANONYMOUS, GameScore, LeaderboardEntry, WordSearchScore
from .store import ScoreRepository, UserDirectory


logger = structlog.get_logger()

DEFAULT_LIMIT = 10


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


def _matching_key(score: GameScore) -> Tuple:
    return (-score.score, score.completed_at)


def _word_search_key(score: WordSearchScore) -> Tuple:
    return (score.time_seconds, score.timestamp)


def rank_matching_scores(
    scores: Iterable[GameScore],
    book_id: str,
    difficulty: Difficulty,
    limit: int = DEFAULT_LIMIT,
) -> List[GameScore]:
    """Matching scores for one book and difficulty, highest score first."""
    _check_limit(limit)
    scoped = [
        s for s in scores
        if s.book_id == book_id and s.difficulty == difficulty and s.game_type == "matching"
    ]
    return sorted(scoped, key=_matching_key)[:limit]


def rank_word_search_scores(
    scores: Iterable[WordSearchScore],
    book_id: str,
    difficulty: Difficulty,
    limit: int = DEFAULT_LIMIT,
) -> List[WordSearchScore]:
    """Word-search scores for one book and difficulty, fastest first."""
    _check_limit(limit)
    scoped = [s for s in scores if s.book_id == book_id and s.difficulty == difficulty]
    return sorted(scoped, key=_word_search_key)[:limit]


class LeaderboardService:
    """Query stored scores and shape them into leaderboards."""

    def __init__(
        self,
        repository: ScoreRepository,
        users: UserDirectory,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        _check_limit(default_limit)
        self._repository = repository
        self._users = users
        self._default_limit = default_limit

    async def matching_leaderboard(
        self,
        book_id: str,
        difficulty: Difficulty,
        limit: Optional[int] = None,
    ) -> List[LeaderboardEntry]:
        """Top matching scores with display names resolved."""
        limit = self._default_limit if limit is None else limit
        _check_limit(limit)
        scores = await self._repository.list_game_scores(book_id, difficulty, game_type="matching")
        ranked = rank_matching_scores(scores, book_id, difficulty, limit)

        names = await self._resolve_names(s.user_id for s in ranked)
        entries = [
            LeaderboardEntry(**score.model_dump(), user_name=names[score.user_id])
            for score in ranked
        ]
        logger.debug("matching leaderboard", book_id=book_id, difficulty=difficulty, entries=len(entries))
        return entries

    async def word_search_leaderboard(
        self,
        book_id: str,
        difficulty: Difficulty,
        limit: Optional[int] = None,
    ) -> List[WordSearchScore]:
        """Fastest word-search completions."""
        limit = self._default_limit if limit is None else limit
        _check_limit(limit)
        scores = await self._repository.list_word_search_scores(book_id, difficulty)
        ranked = rank_word_search_scores(scores, book_id, difficulty, limit)
        logger.debug("word search leaderboard", book_id=book_id, difficulty=difficulty, entries=len(ranked))
        return ranked

    async def _resolve_names(self, user_ids: Iterable[str]) -> Dict[str, str]:
        """Look up each distinct user once, concurrently."""
        unique = list(dict.fromkeys(user_ids))
        names = await asyncio.gather(*(self._users.get_display_name(uid) for uid in unique))
        return {uid: name or ANONYMOUS for uid, name in zip(unique, names)}
