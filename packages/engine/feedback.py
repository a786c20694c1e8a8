"""
Per-letter feedback types.

Conventions:
  - 'G' : green  = letter is in the target at exactly this position
  - 'Y' : yellow = letter is in the target, but not at this position
  - 'B' : black  = letter does not occur in the target

A Guess is always exactly WORD_LENGTH letters, each carrying a Feedback.
Malformed input (bad tokens, wrong length) is rejected here with ValueError,
so anything downstream can assume a well-formed Guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

# Single source of truth for word length.
WORD_LENGTH = 5


class Feedback(Enum):
    ABSENT = "B"
    MISPLACED = "Y"
    CORRECT = "G"

    @classmethod
    def from_token(cls, token: str) -> "Feedback":
        """
        Map an input token to Feedback (case-insensitive).

        Examples:
          Feedback.from_token("g") -> Feedback.CORRECT
          Feedback.from_token("Y") -> Feedback.MISPLACED
        """
        t = token.strip().upper() if isinstance(token, str) else ""
        for fb in cls:
            if fb.value == t:
                return fb
        raise ValueError(f"Unknown feedback token {token!r}; expected one of g, y, b")

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    Feedback.ABSENT: "black",
    Feedback.MISPLACED: "yellow",
    Feedback.CORRECT: "green",
}


@dataclass(frozen=True)
class GuessedLetter:
    letter: str
    feedback: Feedback

    def __post_init__(self):
        if not isinstance(self.letter, str) or len(self.letter) != 1 or not self.letter.isalpha():
            raise ValueError(f"letter must be a single alphabetic character; got {self.letter!r}")
        if not isinstance(self.feedback, Feedback):
            raise TypeError(f"feedback must be Feedback, got {type(self.feedback).__name__}")
        # Frozen dataclass: go through object.__setattr__ to normalize case
        object.__setattr__(self, "letter", self.letter.lower())

    def __str__(self) -> str:
        return f"[{self.letter.upper()} - {self.feedback.color}]"


@dataclass(frozen=True)
class Guess:
    """One submitted word with its feedback, in position order."""
    letters: Tuple[GuessedLetter, ...]

    def __post_init__(self):
        letters = tuple(self.letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"a guess must have exactly {WORD_LENGTH} letters; got {len(letters)}")
        object.__setattr__(self, "letters", letters)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Feedback]]) -> "Guess":
        return cls(tuple(GuessedLetter(ch, fb) for ch, fb in pairs))

    @classmethod
    def from_pattern(cls, word: str, pattern: str) -> "Guess":
        """
        Build a Guess from a word and a token string, e.g. ("cargo", "ygybb").

        Raises ValueError if lengths disagree or a token is not g/y/b.
        """
        word = word.strip()
        pattern = pattern.strip()
        if len(word) != len(pattern):
            raise ValueError(f"word {word!r} and pattern {pattern!r} differ in length")
        return cls.from_pairs(zip(word, (Feedback.from_token(t) for t in pattern)))

    @property
    def word(self) -> str:
        return "".join(gl.letter for gl in self.letters)

    @property
    def pattern(self) -> str:
        return "".join(gl.feedback.value for gl in self.letters)

    @property
    def solved(self) -> bool:
        return all(gl.feedback is Feedback.CORRECT for gl in self.letters)

    def __iter__(self):
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return " ".join(str(gl) for gl in self.letters)
