# apps/cli/run.py
"""
CLI entry point for replaying the assistant against known answers.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the word list and the answers to replay (defaults to the word list itself).
  3) Plays every answer with a live progress bar and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from packages.datasets import DEFAULT_WORDS, load_words, pretty_summary, validate_wordlist
from packages.engine import MAX_GUESSES, WORD_LENGTH, validate_guess
from packages.harness import run_case
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-assistant — replay the assistant against known answers")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to the candidate word list")
    ap.add_argument("--answers",
                    help="path to answers to replay (default: the word list itself)")
    ap.add_argument("--opener", default="arose",
                    help="fixed first guess; pass an empty string to start from the first candidate")
    ap.add_argument("--sample", type=int,
                    help="replay only a random subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    args = ap.parse_args(argv)

    if args.opener and not validate_guess(args.opener, N=WORD_LENGTH):
        ap.error(f"--opener must be a {WORD_LENGTH} letter word")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(WORD_LENGTH, args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load lists into memory
    words = load_words(args.words)
    answers = list(load_words(args.answers)) if args.answers else list(words)

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        rng = random.Random(args.seed)
        rng.shuffle(answers)
        answers = answers[: args.sample]

    # 4) Replay with progress on stderr
    results = []
    for ans in tqdm(answers, ncols=80, desc="Replaying", unit="game", disable=args.no_progress):
        results.append(run_case(ans, words, opener=args.opener or None))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=MAX_GUESSES)
    solved = sum(1 for r in results if r["success"])
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "num_solved": solved,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {solved}/{len(results)}", file=sys.stderr)
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
