from __future__ import annotations
from pathlib import Path
from typing import List, Tuple

from packages.engine.feedback import WORD_LENGTH

# Bundled word list shipped with the package.
DEFAULT_WORDS = Path(__file__).resolve().parent / "data" / f"words_{WORD_LENGTH}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str | None = None, N: int = WORD_LENGTH) -> Tuple[str, ...]:
    """
    Load a word list as an immutable tuple: lowercased, blanks and entries
    that aren't N alphabetic letters dropped, first occurrence kept on
    duplicates. Defaults to the bundled list.
    """
    seen = set()
    out: List[str] = []
    for ln in read_lines(DEFAULT_WORDS if p is None else p):
        w = ln.strip().lower()
        if len(w) != N or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)
