from .feedback import WORD_LENGTH, Feedback, GuessedLetter, Guess
from .history import MAX_GUESSES, CapacityExceeded, History
from .constraints import (
    PositionConstraint,
    AggregateConstraints,
    Matches,
    aggregate,
    matches,
    filter_words,
    filter_candidates,
)
from .scoring import score, score_guess
from .validation import validate_guess, validate_pattern

__all__ = [
    "WORD_LENGTH", "Feedback", "GuessedLetter", "Guess",
    "MAX_GUESSES", "CapacityExceeded", "History",
    "PositionConstraint", "AggregateConstraints", "Matches",
    "aggregate", "matches", "filter_words", "filter_candidates",
    "score", "score_guess", "validate_guess", "validate_pattern",
]
