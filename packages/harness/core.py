"""
Replay harness: play the assistant against a known answer.

- run_case:  one puzzle. Each turn guesses the opener (turn 1, if given) or the
             first word still matching, scores it against the answer, and
             feeds the feedback back through History -> aggregate -> filter.
- run_batch: many puzzles in sequence (optionally a sample prefix).

The game ends on an all-green guess, when nothing matches any more (the
known multiplicity limitation can cause this), or when the History is full.

These functions are UI-agnostic so the CLI, tests, or a notebook can reuse
them unchanged.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence
from packages.engine import (
    MAX_GUESSES,
    WORD_LENGTH,
    History,
    aggregate,
    filter_words,
    score_guess,
)


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a turn budget other than 6."""
    if max_turns != MAX_GUESSES:
        raise ValueError(f"max_turns must be {MAX_GUESSES} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        words: Sequence[str],
        *,
        opener: str | None = None,
        max_turns: int = MAX_GUESSES,
) -> Dict:
    """
    Execute one game until solved, stuck, or out of turns.

    Args:
        answer:    the hidden word for this case
        words:     candidate word list (immutable, in display order)
        opener:    optional fixed first guess (e.g. "arose")
        max_turns: must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str), opener,
            remaining (int: matches left after the last guess)
    """
    _assert_wordle_turns(max_turns)

    words = tuple(words)
    history = History(max_turns)
    matches = filter_words(words, aggregate(history))
    success = False

    t0 = time.perf_counter()
    while not history.is_full:
        if opener and len(history) == 0:
            guess_word = opener
        else:
            guess_word = next(iter(matches), None)
            if guess_word is None:
                break

        guess = score_guess(guess_word, answer)
        history.add(guess)
        matches = filter_words(words, aggregate(history))

        if guess.solved:
            success = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": [(g.word, g.pattern) for g in history],
        "answer": answer,
        "opener": opener,
        "remaining": matches.count(),
    }


def run_batch(
        answers: Sequence[str],
        words: Sequence[str],
        *,
        opener: str | None = None,
        max_turns: int = MAX_GUESSES,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to WORD_LENGTH) are used.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == WORD_LENGTH]
    if sample is not None:
        pool = pool[:sample]

    words = tuple(words)
    return [run_case(ans, words, opener=opener, max_turns=max_turns) for ans in pool]
