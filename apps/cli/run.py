# apps/cli/run.py
"""
Offline evaluation: let the assistant play every word in the list.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the list and, for each word (or a seeded sample), runs a full
     session with the scorer standing in for the operator.
  3) Shows a progress bar and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, word-list report, git commit, etc.

Usage:
    python -m apps.cli.run --wordlist real_wordles.csv --sample 200
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordle_assistant.datasets import DEFAULT_WORDLIST, load_dictionary, pretty_summary, validate_wordlist
from wordle_assistant.engine.constraints import RULES
from wordle_assistant.session import SessionConfig, run_batch
from wordle_assistant.session.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_assistant.solvers import get_solver_ids


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-assistant — offline batch run")
    ap.add_argument("--solver", choices=get_solver_ids(), default="distinct_letters",
                    help="guess selection strategy")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget per game")
    ap.add_argument("--rule", choices=sorted(RULES), default="counts",
                    help="how repeated letters are judged")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST, help="comma-separated word list")
    ap.add_argument("--sample", type=int, help="run only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    args = ap.parse_args(argv)

    try:
        config = SessionConfig(
            word_length=args.N,
            max_guesses=args.max_guesses,
            wordlist_path=args.wordlist,
            rule=args.rule,
            solver=args.solver,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 0

    # 1) Validate and summarize the word list
    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))

    # 2) Load (set -> sorted list so sampling is reproducible)
    words = sorted(load_dictionary(args.wordlist, args.N))
    if not words:
        print("No words to play; nothing written.", file=sys.stderr)
        return 0

    cases = list(words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    # 3) Run with a progress bar on stderr
    progress = None
    if not args.no_progress:
        progress = lambda it: tqdm(it, ncols=80, desc="Running", unit="game", file=sys.stderr)  # noqa: E731
    results = run_batch(cases, words=words, config=config, progress=progress)
    for r in results:
        r["solver_id"] = args.solver
        r["rule"] = args.rule

    solved = sum(1 for r in results if r["success"])
    print(f"Solved {solved}/{len(results)}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=args.max_guesses, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": solved,
        "solver_id": args.solver,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
