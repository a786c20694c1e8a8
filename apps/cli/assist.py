# apps/cli/assist.py
"""
CLI entry point for the Wordle assistant.

Two modes:
  - interactive (default): prompt for each guessed word and its per-letter
    colors, then print up to --limit words still consistent with everything
    entered so far. Repeats until solved, stuck, or out of guesses.
  - one-shot: pass the game so far with repeated --guess WORD:PATTERN
    (pattern letters g/y/b), print the matches, and exit.

Examples:
    python -m apps.cli.assist
    python -m apps.cli.assist --guess arose:bbbbb --guess cargo:ygybb
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Sequence

from packages.datasets import DEFAULT_WORDS, load_words, pretty_summary, validate_wordlist
from packages.engine import (
    WORD_LENGTH,
    CapacityExceeded,
    Feedback,
    Guess,
    History,
    aggregate,
    filter_words,
    validate_guess,
    validate_pattern,
)

DEFAULT_LIMIT = 10

NO_MATCHES = "There are no words that match the results you entered. Did you make a mistake entering them?"

Reader = Callable[[], str]
Writer = Callable[[str], None]


def _prompt_color(read: Reader, write: Writer) -> Feedback:
    """Read lines until one starts with g, y, or b."""
    while True:
        token = read().strip()[:1]
        try:
            return Feedback.from_token(token)
        except ValueError:
            write("Please enter [G]reen, [Y]ellow, or [B]lack: ")


def _prompt_word(read: Reader, write: Writer) -> str:
    write("Please enter the word you guessed:")
    while True:
        word = read().strip().lower()
        if validate_guess(word, N=WORD_LENGTH):
            return word
        write(f"Please enter a {WORD_LENGTH} letter word:")


def _prompt_guess(read: Reader, write: Writer) -> Guess:
    word = _prompt_word(read, write)
    while True:
        pairs = []
        for ch in word:
            write(f'Enter the result for the letter "{ch}": [G]reen, [Y]ellow, or [B]lack ')
            pairs.append((ch, _prompt_color(read, write)))
        guess = Guess.from_pairs(pairs)

        write(f"You entered {guess}\nIs this correct? Please enter y or n")
        reply = read().strip().lower()[:1]
        while reply not in ("y", "n"):
            write("Please only enter characters 'y' or 'n': ")
            reply = read().strip().lower()[:1]
        if reply == "y":
            return guess


def run_session(
        words: Sequence[str],
        *,
        limit: int = DEFAULT_LIMIT,
        read: Reader = input,
        write: Writer = print,
) -> int:
    """
    Interactive loop. Returns a process exit code:
      0 = solved or input ended, 1 = no consistent word or out of guesses.
    """
    words = tuple(words)
    history = History()
    write('Guess any five letter word- "arose" is a good choice!')

    while True:
        try:
            guess = _prompt_guess(read, write)
        except EOFError:
            return 0

        try:
            history.add(guess)
        except CapacityExceeded as e:
            write(str(e))
            return 1

        if guess.solved:
            write(f"Solved in {len(history)}: {guess.word}")
            return 0

        shown = filter_words(words, aggregate(history)).head(limit)
        if not shown:
            write(NO_MATCHES)
            return 1

        write("If the word was correct, press CTRL+C to quit. Otherwise, make a guess with one of the following:")
        for w in shown:
            write(w)


def _parse_guess_arg(raw: str) -> Guess:
    """'cargo:ygybb' -> Guess. Raises ValueError on malformed input."""
    word, sep, pattern = raw.partition(":")
    if not sep or not validate_guess(word) or not validate_pattern(pattern):
        raise ValueError(
            f"bad --guess {raw!r}; expected WORD:PATTERN with {WORD_LENGTH} letters and g/y/b tokens"
        )
    return Guess.from_pattern(word.lower(), pattern)


def run_once(words: Sequence[str], raw_guesses: List[str], *, limit: int = DEFAULT_LIMIT) -> int:
    history = History()
    try:
        for raw in raw_guesses:
            history.add(_parse_guess_arg(raw))
    except ValueError as e:
        # CapacityExceeded is a ValueError too
        print(f"error: {e}", file=sys.stderr)
        return 1

    matches = filter_words(words, aggregate(history))
    shown = matches.head(limit)
    if not shown:
        print(NO_MATCHES, file=sys.stderr)
        return 1

    for w in shown:
        print(w)
    print(f"{matches.count()} matching word(s)", file=sys.stderr)
    return 0


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-assistant — narrow down Wordle answers from your feedback")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to word list (one word per line)")
    ap.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                    help="max number of matches to show")
    ap.add_argument("--guess", action="append", default=[], metavar="WORD:PATTERN",
                    help="a guess and its feedback, e.g. cargo:ygybb (g=green, y=yellow, b=black); repeatable")
    args = ap.parse_args(argv)

    # Word lists with problems still load (bad lines are skipped); just warn
    rep = validate_wordlist(WORD_LENGTH, args.words)
    if not rep["exists"]:
        print(pretty_summary(rep), file=sys.stderr)
        return 2
    if not rep["passed"]:
        print(pretty_summary(rep), file=sys.stderr)

    words = load_words(args.words)

    if args.guess:
        return run_once(words, args.guess, limit=args.limit)

    try:
        return run_session(words, limit=args.limit)
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
