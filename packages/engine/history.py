"""
Guess history for one session.

An ordered, append-only log of Guess objects, capped at Wordle's six turns.
Adding past the cap raises CapacityExceeded and leaves the log untouched.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .feedback import Guess

# Wordle turn budget.
MAX_GUESSES = 6


class CapacityExceeded(ValueError):
    """Raised when a guess is added to a full history."""

    def __init__(self, max_guesses: int):
        super().__init__(f"You can't enter more than {max_guesses} guesses")
        self.max_guesses = max_guesses


class History:
    def __init__(self, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {max_guesses}")
        self.max_guesses = max_guesses
        self._guesses: List[Guess] = []

    def add(self, guess: Guess) -> None:
        if not isinstance(guess, Guess):
            raise TypeError(f"expected Guess, got {type(guess).__name__}")
        if self.is_full:
            raise CapacityExceeded(self.max_guesses)
        self._guesses.append(guess)

    def all(self) -> Tuple[Guess, ...]:
        """Read-only snapshot in the order guesses were added."""
        return tuple(self._guesses)

    @property
    def is_full(self) -> bool:
        return len(self._guesses) >= self.max_guesses

    def __len__(self) -> int:
        return len(self._guesses)

    def __iter__(self) -> Iterator[Guess]:
        return iter(tuple(self._guesses))

    def __repr__(self) -> str:
        words = ", ".join(f"{g.word}:{g.pattern}" for g in self._guesses)
        return f"History([{words}], max_guesses={self.max_guesses})"
