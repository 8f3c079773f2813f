"""
Interfaces for the external collaborators, plus in-memory implementations.

The core never owns storage: vocabulary, score records and user profiles
live behind these abstract classes and are injected into the services.
The in-memory versions back the CLI and the tests.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

import structlog

from ..puzzles.models import Difficulty
from .models import GameScore, GameType, WordPair, WordSearchScore


logger = structlog.get_logger()


class VocabularyProvider(ABC):
    """Abstract source of word/translation pairs for a book."""

    @abstractmethod
    async def get_word_pairs(self, book_id: str, difficulty: Difficulty, count: int) -> List[WordPair]: ...


class ScoreRepository(ABC):
    """Abstract interface for score persistence.

    Implementations return records scoped to a book and difficulty; ordering
    and truncation are done by the leaderboard ranker.
    """

    @abstractmethod
    async def add_game_score(self, score: GameScore) -> GameScore: ...

    @abstractmethod
    async def add_word_search_score(self, score: WordSearchScore) -> WordSearchScore: ...

    @abstractmethod
    async def list_game_scores(
        self,
        book_id: str,
        difficulty: Difficulty,
        game_type: GameType = "matching",
        user_id: Optional[str] = None,
    ) -> List[GameScore]: ...

    @abstractmethod
    async def list_word_search_scores(
        self,
        book_id: str,
        difficulty: Difficulty,
        user_id: Optional[str] = None,
    ) -> List[WordSearchScore]: ...


class UserDirectory(ABC):
    """Abstract lookup of user display names."""

    @abstractmethod
    async def get_display_name(self, user_id: str) -> Optional[str]: ...


class InMemoryVocabulary(VocabularyProvider):
    """Vocabulary held in a list, returned in insertion order."""

    def __init__(self, pairs: Optional[Iterable[WordPair]] = None) -> None:
        self._pairs: List[WordPair] = list(pairs or [])

    async def get_word_pairs(self, book_id: str, difficulty: Difficulty, count: int) -> List[WordPair]:
        matches = [p for p in self._pairs if p.book_id == book_id and p.difficulty == difficulty]
        return matches[:max(0, count)]


class InMemoryScoreRepository(ScoreRepository):
    """Score records kept in process memory."""

    def __init__(self) -> None:
        self._game_scores: List[GameScore] = []
        self._word_search_scores: List[WordSearchScore] = []

    async def add_game_score(self, score: GameScore) -> GameScore:
        stored = score.model_copy(update={"id": uuid4().hex})
        self._game_scores.append(stored)
        logger.debug("stored game score", score_id=stored.id, user_id=stored.user_id)
        return stored

    async def add_word_search_score(self, score: WordSearchScore) -> WordSearchScore:
        stored = score.model_copy(update={"id": uuid4().hex})
        self._word_search_scores.append(stored)
        logger.debug("stored word search score", score_id=stored.id, user_id=stored.user_id)
        return stored

    async def list_game_scores(
        self,
        book_id: str,
        difficulty: Difficulty,
        game_type: GameType = "matching",
        user_id: Optional[str] = None,
    ) -> List[GameScore]:
        return [
            s for s in self._game_scores
            if s.book_id == book_id
            and s.difficulty == difficulty
            and s.game_type == game_type
            and (user_id is None or s.user_id == user_id)
        ]

    async def list_word_search_scores(
        self,
        book_id: str,
        difficulty: Difficulty,
        user_id: Optional[str] = None,
    ) -> List[WordSearchScore]:
        return [
            s for s in self._word_search_scores
            if s.book_id == book_id
            and s.difficulty == difficulty
            and (user_id is None or s.user_id == user_id)
        ]


class InMemoryUserDirectory(UserDirectory):
    """Display names from a dict keyed by user id."""

    def __init__(self, names: Optional[Dict[str, str]] = None) -> None:
        self._names: Dict[str, str] = dict(names or {})

    async def get_display_name(self, user_id: str) -> Optional[str]:
        return self._names.get(user_id)
