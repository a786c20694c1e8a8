"""
Lightweight input validation for the UI layer.

This module answers: "Can this raw input become a Guess?"
  - a guess word is valid iff it is a string of a–z letters with exact
    length N (and, when an `allowed` list is given, appears in it)
  - a feedback pattern is valid iff it has exactly N tokens, each one of
    g / y / b (case-insensitive)

The engine types reject bad input themselves; these helpers let a prompt
loop check first and re-prompt instead of catching exceptions.
"""

from typing import Iterable, Optional, Set

from .feedback import WORD_LENGTH

FEEDBACK_TOKENS = frozenset("gybGYB")


def validate_guess(word: str, allowed: Optional[Iterable[str]] = None, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a usable guess.

    Notes:
      - The `allowed` parameter can be a large list; we build a local set
        here for O(1) membership checks. If you're calling this in a tight
        loop, precompute the set once at a higher level.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set


def validate_pattern(pattern: str, N: int = WORD_LENGTH) -> bool:
    if not isinstance(pattern, str):
        return False
    p = pattern.strip()
    return len(p) == N and all(ch in FEEDBACK_TOKENS for ch in p)
