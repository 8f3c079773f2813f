"""Matching-game scoring."""

BASE_SCORE = 1000
MISTAKE_PENALTY = 50
SECOND_PENALTY = 2


def compute_score(mistakes: int, time_spent_seconds: int) -> int:
    """
    Score a completed matching game.

    Starts from 1000, loses 50 per mistake and 2 per second, and never
    drops below zero.
    """
    return max(0, BASE_SCORE - mistakes * MISTAKE_PENALTY - time_spent_seconds * SECOND_PENALTY)
