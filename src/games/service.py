"""Services wiring the core logic to the injected collaborators."""

import random
from typing import List, Optional, Union

import structlog

from ..puzzles.generator import generate_puzzle
from ..puzzles.models import Difficulty, Puzzle
from ..puzzles.placement import MAX_ATTEMPTS
from .auth import IdentityProvider
from .models import (
    GameScore,
    MatchingSubmission,
    WordPair,
    WordSearchScore,
    WordSearchSubmission,
)
from .store import ScoreRepository, VocabularyProvider


logger = structlog.get_logger()


class PuzzleGenerator:
    """Generate puzzles from a book's vocabulary."""

    def __init__(
        self,
        vocabulary: VocabularyProvider,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._vocabulary = vocabulary
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts = max_attempts

    async def generate(self, book_id: str, difficulty: Difficulty, word_count: int) -> Puzzle:
        """Fetch up to `word_count` pairs and build a puzzle from their words."""
        if word_count < 0:
            raise ValueError(f"word_count must be non-negative, got {word_count}")

        pairs: List[WordPair] = await self._vocabulary.get_word_pairs(book_id, difficulty, word_count)
        return generate_puzzle(
            book_id,
            difficulty,
            [pair.word for pair in pairs],
            word_count,
            rng=self._rng,
            max_attempts=self._max_attempts,
        )


class ScoreService:
    """Attach the signed-in user to finished games and persist them."""

    def __init__(self, repository: ScoreRepository, identity: IdentityProvider) -> None:
        self._repository = repository
        self._identity = identity

    async def submit_matching_score(self, submission: MatchingSubmission) -> GameScore:
        user_id = self._identity.require_user_id("submit_matching_score")
        score = GameScore(**submission.model_dump(), user_id=user_id)
        stored = await self._repository.add_game_score(score)
        logger.info(
            "matching score saved",
            score_id=stored.id,
            user_id=user_id,
            book_id=stored.book_id,
            difficulty=stored.difficulty,
            score=stored.score,
        )
        return stored

    async def submit_word_search_score(self, submission: WordSearchSubmission) -> WordSearchScore:
        user_id = self._identity.require_user_id("submit_word_search_score")
        score = WordSearchScore(**submission.model_dump(), user_id=user_id)
        stored = await self._repository.add_word_search_score(score)
        logger.info(
            "word search score saved",
            score_id=stored.id,
            user_id=user_id,
            book_id=stored.book_id,
            difficulty=stored.difficulty,
            time_seconds=stored.time_seconds,
        )
        return stored

    async def submit_score(
        self,
        submission: Union[MatchingSubmission, WordSearchSubmission],
    ) -> Union[GameScore, WordSearchScore]:
        """Persist either kind of finished game."""
        if isinstance(submission, MatchingSubmission):
            return await self.submit_matching_score(submission)
        if isinstance(submission, WordSearchSubmission):
            return await self.submit_word_search_score(submission)
        raise TypeError(f"Unsupported submission type: {type(submission).__name__}")

    async def get_user_best_score(self, book_id: str, difficulty: Difficulty) -> Optional[GameScore]:
        """The signed-in user's highest matching score, or None."""
        user_id = self._identity.require_user_id("get_user_best_score")
        scores = await self._repository.list_game_scores(
            book_id, difficulty, game_type="matching", user_id=user_id
        )
        if not scores:
            return None
        return max(scores, key=lambda s: s.score)
