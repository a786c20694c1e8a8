"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the bundled word list)
  - a history of guesses with per-letter feedback

Return:
  - words that satisfy every constraint the history implies.

Constraints are rebuilt from the full history each time (aggregate), never
updated in place. Per position we keep the required letter (first 'G' seen
wins; later disagreeing 'G's are ignored) and the letters forbidden there
(every 'Y' at that slot). Globally we keep letters seen as 'B' (absent) and
letters seen as 'Y' (must appear somewhere).

Known simplification: letter multiplicity is not modelled. If a guess has a
letter twice and feedback marks one copy 'G'/'Y' and the other 'B', that
letter still goes into the absent set and the true answer is filtered out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from .feedback import WORD_LENGTH, Feedback, Guess


@dataclass(frozen=True)
class PositionConstraint:
    required: Optional[str] = None
    forbidden: FrozenSet[str] = frozenset()

    def allows(self, ch: str) -> bool:
        if self.required is not None and ch != self.required:
            return False
        return ch not in self.forbidden


@dataclass(frozen=True)
class AggregateConstraints:
    absent: FrozenSet[str]
    present: FrozenSet[str]
    positions: Tuple[PositionConstraint, ...]

    @property
    def N(self) -> int:
        return len(self.positions)

    def matches(self, word: str) -> bool:
        return matches(self, word)


def aggregate(history: Iterable[Guess]) -> AggregateConstraints:
    """
    Derive all constraints implied by `history` (a History or any iterable of
    Guess, oldest first). Pure: calling it twice gives equal results.
    """
    guesses = list(history)

    absent: Set[str] = set()
    present: Set[str] = set()
    positions: List[PositionConstraint] = []

    for p in range(WORD_LENGTH):
        required: Optional[str] = None
        forbidden: Set[str] = set()

        for g in guesses:
            gl = g.letters[p]
            if gl.feedback is Feedback.CORRECT:
                if required is None:
                    required = gl.letter
            elif gl.feedback is Feedback.MISPLACED:
                forbidden.add(gl.letter)
                present.add(gl.letter)
            else:
                absent.add(gl.letter)

        positions.append(PositionConstraint(required, frozenset(forbidden)))

    return AggregateConstraints(frozenset(absent), frozenset(present), tuple(positions))


def matches(constraints: AggregateConstraints, candidate: str) -> bool:
    """
    True iff `candidate` avoids every absent letter, contains every present
    letter, and satisfies each position's required/forbidden letters.
    """
    if len(candidate) != constraints.N:
        return False

    # Global checks first; they reject most of the list cheaply
    if any(ch in constraints.absent for ch in candidate):
        return False
    if not constraints.present.issubset(candidate):
        return False

    return all(pc.allows(ch) for pc, ch in zip(constraints.positions, candidate))


class Matches:
    """
    Lazy, restartable view of the words that satisfy `constraints`.

    Each iteration re-applies the predicate over the same immutable word tuple,
    so the view can be walked any number of times and always yields the same
    words in list order.
    """

    def __init__(self, words: Iterable[str], constraints: AggregateConstraints):
        self.words: Tuple[str, ...] = tuple(words)
        self.constraints = constraints

    def __iter__(self) -> Iterator[str]:
        return (w for w in self.words if matches(self.constraints, w))

    def head(self, n: int) -> List[str]:
        """First `n` matches (fewer if the list runs out)."""
        out: List[str] = []
        if n <= 0:
            return out
        for w in self:
            out.append(w)
            if len(out) == n:
                break
        return out

    def count(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return next(iter(self), None) is not None


def filter_words(words: Iterable[str], constraints: AggregateConstraints) -> Matches:
    return Matches(words, constraints)


def filter_candidates(words: Iterable[str], history: Iterable[Guess], N: int = WORD_LENGTH) -> List[str]:
    """
    Keep only words (length == N) consistent with every guess in `history`.

    Args:
      words   : iterable of candidate words
      history : History or iterable of Guess seen so far
      N       : expected word length; must equal WORD_LENGTH

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    if N != WORD_LENGTH:
        raise ValueError(f"N must be {WORD_LENGTH}; guesses are always {WORD_LENGTH} letters, got {N}")

    # Basic hygiene: skip anything that isn't a clean N-letter alpha token
    clean = (w.strip().lower() for w in words)
    pool = [w for w in clean if len(w) == N and w.isalpha()]
    return list(filter_words(pool, aggregate(history)))
