"""Candidate word normalization."""

import unicodedata
from typing import Iterable, List, Optional


def is_grid_word(word: str) -> bool:
    """True when every character is an upper-case letter, accented ones included."""
    return bool(word) and all(ch.isalpha() and ch.isupper() for ch in word)


def normalize_word(word: str) -> Optional[str]:
    """
    Upper-case a candidate word for placement.

    Returns None when the word cannot sit in the grid, i.e. it is empty or
    contains anything other than letters (spaces, digits, punctuation).
    Accented letters such as É or Ñ are kept, composed to one character each.
    """
    normalized = unicodedata.normalize("NFC", word.strip().upper())
    if not is_grid_word(normalized):
        return None
    return normalized


def normalize_words(words: Iterable[str]) -> List[str]:
    """Normalize candidates, dropping unusable ones and repeats, keeping order."""
    seen = set()
    result: List[str] = []
    for word in words:
        normalized = normalize_word(word)
        if normalized is None or normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)
    return result
