"""Tests for randomized word placement."""

import random
from unittest.mock import Mock

import pytest

from src.puzzles import DIRECTIONS, build_grid, can_place_word, place_word, place_words
from src.puzzles.models import DIRECTIONS_BY_NAME

RIGHT = DIRECTIONS_BY_NAME["right"]
DOWN = DIRECTIONS_BY_NAME["down"]
DOWN_RIGHT = DIRECTIONS_BY_NAME["down_right"]
UP_RIGHT = DIRECTIONS_BY_NAME["up_right"]


def scripted_rng(*trials):
    """A random source that replays (direction, row, col) trials in order."""
    rng = Mock()
    rng.choice.side_effect = [t[0] for t in trials]
    rng.randrange.side_effect = [v for t in trials for v in t[1:]]
    return rng


class TestDirections:
    """The fixed direction set."""

    def test_four_forward_directions(self):
        assert [(d.d_row, d.d_col) for d in DIRECTIONS] == [(0, 1), (1, 0), (1, 1), (-1, 1)]


class TestCanPlaceWord:
    """Bounds and letter compatibility for a single trial."""

    def test_fits_on_empty_grid(self):
        grid = build_grid("easy")
        assert can_place_word(grid, "CAT", 0, 0, RIGHT) is True

    def test_runs_off_right_edge(self):
        grid = build_grid("easy")
        assert can_place_word(grid, "CAT", 0, 6, RIGHT) is False
        assert can_place_word(grid, "CAT", 0, 5, RIGHT) is True

    def test_runs_off_bottom(self):
        grid = build_grid("easy")
        assert can_place_word(grid, "BIRD", 5, 0, DOWN) is False
        assert can_place_word(grid, "BIRD", 4, 0, DOWN) is True

    def test_up_right_needs_room_above(self):
        grid = build_grid("easy")
        assert can_place_word(grid, "DOG", 1, 0, UP_RIGHT) is False
        assert can_place_word(grid, "DOG", 2, 0, UP_RIGHT) is True

    def test_word_longer_than_grid(self):
        grid = build_grid("easy")
        assert all(
            not can_place_word(grid, "ELEPHANTS", r, c, d)
            for d in DIRECTIONS for r in range(8) for c in range(8)
        )

    def test_shared_letter_allowed(self):
        """Crossing a cell that already holds the same letter is fine."""
        grid = build_grid("easy")
        grid[0][2] = "T"
        assert can_place_word(grid, "CAT", 0, 0, RIGHT) is True

    def test_mismatched_letter_rejected(self):
        grid = build_grid("easy")
        grid[1][1] = "X"
        assert can_place_word(grid, "CAT", 0, 0, DOWN_RIGHT) is False

    def test_start_outside_grid(self):
        grid = build_grid("easy")
        assert can_place_word(grid, "A", 8, 0, RIGHT) is False
        assert can_place_word(grid, "A", -1, 0, RIGHT) is False


class TestPlaceWord:
    """Bounded retries for one word."""

    def test_first_trial_success_writes_letters(self):
        grid = build_grid("easy")
        rng = scripted_rng((DOWN, 1, 2))

        placement = place_word(grid, "DOG", rng)

        assert placement.word == "DOG"
        assert (placement.row, placement.col, placement.direction) == (1, 2, "down")
        assert [grid[r][2] for r in range(1, 4)] == ["D", "O", "G"]
        assert rng.choice.call_count == 1

    def test_retries_after_failed_trial(self):
        grid = build_grid("easy")
        rng = scripted_rng((RIGHT, 0, 7), (RIGHT, 3, 0))

        placement = place_word(grid, "CAT", rng)

        assert (placement.row, placement.col) == (3, 0)
        assert "".join(grid[3][:3]) == "CAT"
        assert all(cell == "" for cell in grid[0])

    def test_gives_up_after_max_attempts(self):
        """An impossible word is tried exactly max_attempts times, leaving the grid untouched."""
        grid = build_grid("easy")
        rng = Mock(wraps=random.Random(0))

        placement = place_word(grid, "ABCDEFGHIJ", rng, max_attempts=100)

        assert placement is None
        assert rng.choice.call_count == 100
        assert all(cell == "" for row in grid for cell in row)

    def test_custom_attempt_budget(self):
        grid = build_grid("easy")
        rng = Mock(wraps=random.Random(0))

        assert place_word(grid, "ABCDEFGHIJ", rng, max_attempts=5) is None
        assert rng.choice.call_count == 5

    def test_crossing_existing_word(self):
        grid = build_grid("easy")
        place_word(grid, "CAT", scripted_rng((RIGHT, 0, 0)))
        placement = place_word(grid, "TOE", scripted_rng((DOWN, 0, 2)))

        assert placement is not None
        assert grid[0][2] == "T"
        assert grid[2][2] == "E"


class TestPlaceWords:
    """Placing a list of words."""

    def test_places_in_input_order(self, rng):
        grid = build_grid("easy")
        placements = place_words(grid, ["CAT", "DOG", "BIRD"], 3, rng)
        assert [p.word for p in placements] == ["CAT", "DOG", "BIRD"]

    def test_stops_at_word_count(self, rng):
        grid = build_grid("easy")
        placements = place_words(grid, ["CAT", "DOG", "BIRD"], 2, rng)
        assert [p.word for p in placements] == ["CAT", "DOG"]

    def test_zero_word_count_places_nothing(self, rng):
        grid = build_grid("easy")
        assert place_words(grid, ["CAT", "DOG"], 0, rng) == []
        assert all(cell == "" for row in grid for cell in row)

    def test_unplaceable_word_is_skipped(self, rng):
        """Words that cannot fit are dropped and later words still get placed."""
        grid = build_grid("easy")
        placements = place_words(grid, ["CAT", "HIPPOPOTAMUS", "DOG"], 3, rng)
        assert [p.word for p in placements] == ["CAT", "DOG"]

    def test_skipped_word_does_not_count(self, rng):
        grid = build_grid("easy")
        placements = place_words(grid, ["HIPPOPOTAMUS", "CAT", "DOG"], 2, rng)
        assert [p.word for p in placements] == ["CAT", "DOG"]

    def test_more_candidates_than_needed(self, rng):
        grid = build_grid("hard")
        words = ["ONE", "TWO", "SIX", "TEN", "FOUR", "FIVE"]
        placements = place_words(grid, words, 4, rng)
        assert len(placements) == 4
        assert [p.word for p in placements] == words[:4]
