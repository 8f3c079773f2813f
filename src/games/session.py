"""
Game sessions for the matching and word-search mini-games.

Each session is a small state machine that holds one game in memory and
produces a submission record when the game completes.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..puzzles.grid import in_bounds, read_cells, trace_line
from ..puzzles.models import Difficulty, Puzzle
from .models import MatchingSubmission, SessionState, WordPair, WordSearchSubmission
from .scoring import compute_score


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def elapsed_seconds(started_at: datetime, now: datetime) -> int:
    """Whole seconds between two instants, never negative."""
    return max(0, int((now - started_at).total_seconds()))


class _Session(BaseModel):
    """
    Lifecycle shared by both games.

    idle -> in_progress on start, in_progress -> completed on the terminal
    condition or an explicit end(), and back to idle on reset().
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    book_id: str
    difficulty: Difficulty
    state: SessionState = "idle"
    started_at: Optional[datetime] = None
    clock: Callable[[], datetime] = Field(default=utcnow, exclude=True)

    def _require_state(self, expected: SessionState, action: str) -> None:
        if self.state != expected:
            raise ValueError(f"Cannot {action}: session is {self.state}, expected {expected}")

    def _begin(self) -> None:
        self._require_state("idle", "start")
        self.state = "in_progress"
        self.started_at = self.clock()


class MatchingSession(_Session):
    """
    Matching game: pair each word with its translation.

    Attributes:
        pairs: The word pairs in play
        matched: Indices into `pairs` already resolved
        mistakes: Wrong pairings so far
        selected_word: Word currently selected, if any
        selected_translation: Translation currently selected, if any
        result: The finished game, once completed
    """

    pairs: List[WordPair] = Field(default_factory=list)
    matched: List[int] = Field(default_factory=list)
    mistakes: int = Field(default=0, ge=0)
    selected_word: Optional[str] = None
    selected_translation: Optional[str] = None
    result: Optional[MatchingSubmission] = None

    def start(self, pairs: List[WordPair]) -> None:
        """Load a set of pairs and start the clock."""
        if not pairs:
            raise ValueError("Cannot start a matching game without word pairs")
        self._begin()
        self.pairs = list(pairs)
        self.matched = []
        self.mistakes = 0

    @property
    def unresolved(self) -> List[WordPair]:
        return [p for i, p in enumerate(self.pairs) if i not in self.matched]

    def select_word(self, word: str) -> Optional[bool]:
        """
        Select (or deselect) a word.

        Returns True for a match, False for a mistake, or None when the
        selection is still incomplete.
        """
        self._require_state("in_progress", "select a word")
        if not any(p.word == word for p in self.unresolved):
            raise ValueError(f"'{word}' is not an unmatched word in this game")

        if self.selected_word == word:
            self.selected_word = None
            return None

        self.selected_word = word
        return self._resolve_selection()

    def select_translation(self, translation: str) -> Optional[bool]:
        """Select (or deselect) a translation; see select_word."""
        self._require_state("in_progress", "select a translation")
        if not any(p.translation == translation for p in self.unresolved):
            raise ValueError(f"'{translation}' is not an unmatched translation in this game")

        if self.selected_translation == translation:
            self.selected_translation = None
            return None

        self.selected_translation = translation
        return self._resolve_selection()

    def _resolve_selection(self) -> Optional[bool]:
        if self.selected_word is None or self.selected_translation is None:
            return None

        match = next(
            (
                i for i, p in enumerate(self.pairs)
                if i not in self.matched
                and p.word == self.selected_word
                and p.translation == self.selected_translation
            ),
            None,
        )

        # Selections clear whatever the outcome
        self.selected_word = None
        self.selected_translation = None

        if match is None:
            self.mistakes += 1
            return False

        self.matched.append(match)
        if len(self.matched) == len(self.pairs):
            self._complete()
        return True

    def _complete(self) -> MatchingSubmission:
        now = self.clock()
        time_spent = elapsed_seconds(self.started_at, now)
        self.result = MatchingSubmission(
            book_id=self.book_id,
            difficulty=self.difficulty,
            score=compute_score(self.mistakes, time_spent),
            time_spent=time_spent,
            mistakes=self.mistakes,
            completed_at=now,
        )
        self.state = "completed"
        self.selected_word = None
        self.selected_translation = None
        return self.result

    def end(self) -> MatchingSubmission:
        """Finish the game now and score it."""
        if self.state == "completed":
            return self.result
        self._require_state("in_progress", "end the game")
        return self._complete()

    def reset(self) -> None:
        """Return to idle, discarding the current game."""
        self.state = "idle"
        self.started_at = None
        self.pairs = []
        self.matched = []
        self.mistakes = 0
        self.selected_word = None
        self.selected_translation = None
        self.result = None

    def replay(self, pairs: List[WordPair]) -> None:
        """Reset and start again with a fresh set of pairs."""
        self.reset()
        self.start(pairs)


class WordSearchSession(_Session):
    """
    Word search: find the puzzle's words by selecting start and end cells.

    Attributes:
        puzzle: The puzzle in play
        found_words: Words found so far, in the order they were found
        result: The finished game, once completed
    """

    puzzle: Optional[Puzzle] = None
    found_words: List[str] = Field(default_factory=list)
    result: Optional[WordSearchSubmission] = None

    def start(self, puzzle: Puzzle) -> None:
        """Load a puzzle and start the clock."""
        if puzzle.book_id != self.book_id or puzzle.difficulty != self.difficulty:
            raise ValueError(
                f"Puzzle for {puzzle.book_id}/{puzzle.difficulty} does not belong to "
                f"session {self.book_id}/{self.difficulty}"
            )
        self._begin()
        self.puzzle = puzzle
        self.found_words = []
        if not puzzle.words:
            # Nothing to find: every word is already found
            self._complete()

    def select_cells(self, start: Tuple[int, int], end: Tuple[int, int]) -> Optional[str]:
        """
        Read the letters on the line from `start` to `end`.

        Returns the word if the selection spells a puzzle word not yet found.
        """
        self._require_state("in_progress", "select cells")
        for cell in (start, end):
            if not in_bounds(self.puzzle.grid, cell):
                raise ValueError(f"Cell {cell} is outside the {self.puzzle.size}x{self.puzzle.size} grid")

        word = read_cells(self.puzzle.grid, trace_line(start, end))
        return self.find_word(word)

    def find_word(self, word: str) -> Optional[str]:
        """Mark a word as found; returns it, or None if it does not count."""
        self._require_state("in_progress", "find a word")
        if word not in self.puzzle.words or word in self.found_words:
            return None

        self.found_words.append(word)
        if len(self.found_words) == len(self.puzzle.words):
            self._complete()
        return word

    @property
    def is_complete(self) -> bool:
        return self.puzzle is not None and len(self.found_words) == len(self.puzzle.words)

    def _complete(self) -> WordSearchSubmission:
        now = self.clock()
        self.result = WordSearchSubmission(
            book_id=self.book_id,
            difficulty=self.difficulty,
            time_seconds=elapsed_seconds(self.started_at, now),
            words_found=len(self.found_words),
            total_words=len(self.puzzle.words),
            timestamp=now,
        )
        self.state = "completed"
        return self.result

    def end(self) -> WordSearchSubmission:
        """Finish the search now, counting the words found so far."""
        if self.state == "completed":
            return self.result
        self._require_state("in_progress", "end the game")
        return self._complete()

    def reset(self) -> None:
        """Return to idle, discarding the current puzzle."""
        self.state = "idle"
        self.started_at = None
        self.puzzle = None
        self.found_words = []
        self.result = None

    def replay(self, puzzle: Puzzle) -> None:
        """Reset and start again on a new puzzle."""
        self.reset()
        self.start(puzzle)
