"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - 'B'  : black  = letter not present (or present fewer times than guessed)

This is what a real game would report, so it is duplicate-safe (respects
true letter multiplicities in the answer). The replay harness and tests use
it to produce honest feedback for a known answer.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter

from .feedback import Feedback, Guess

GREEN = Feedback.CORRECT.value
YELLOW = Feedback.MISPLACED.value
BLACK = Feedback.ABSENT.value


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Returns:
      - string of the same length composed only of 'G', 'Y', 'B'

    Examples:
      score("belle", "level") -> "BGYYY"
      score("lemon", "level") -> "GGBBB"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    pattern = [BLACK] * len(guess)

    # Pass 1: greens, and a count of the answer letters left unmatched
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the true multiplicity in the answer
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)


def score_guess(guess: str, answer: str) -> Guess:
    """Same as score(), but packaged as a Guess ready for a History."""
    return Guess.from_pattern(guess.strip().lower(), score(guess, answer))
