# apps/cli/play.py
"""
Interactive assistant: suggests a guess, you type back the colours.

This script:
  1) Loads the word list (default real_wordles.csv) and keeps words of length N.
  2) Each round prints the suggested word and how many candidates remain.
  3) Reads the feedback line (g = green, y = yellow, e = empty), re-asking
     until it is N characters of g/y/e, and narrows the candidates.
  4) Stops when you report all greens, one word is left, no word fits, or
     the guess budget is spent.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --N 6 --wordlist words_6.csv --rule containment
"""

from __future__ import annotations

import argparse
import sys

from wordle_assistant.datasets import DEFAULT_WORDLIST, load_dictionary
from wordle_assistant.engine import LEGEND
from wordle_assistant.session import ConsoleFeedbackReader, Outcome, Session, SessionConfig
from wordle_assistant.solvers import get_solver_ids
from wordle_assistant.engine.constraints import RULES


def _announce_round(attempt: int, guess: str, remaining: int) -> None:
    print(f"Attempt #{attempt} Try this word : {guess} (out of {remaining} words)")
    print(LEGEND)


def _announce_result(session: Session) -> None:
    r = session.result()
    if r.outcome is Outcome.SOLVED:
        print(f"Solved in {r.guesses} guess(es): {r.answer}")
    elif r.outcome is Outcome.IDENTIFIED:
        print(f"The word must be: {r.answer}")
    elif r.outcome is Outcome.NO_CANDIDATES and r.guesses == 0:
        print("Nothing to guess from (0 candidates left)")
    elif r.outcome is Outcome.NO_CANDIDATES:
        print("No word in the list matches that feedback (0 candidates left)")
    else:
        print(f"Out of guesses; {r.remaining} candidate(s) left")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assistant — suggest guesses from your feedback")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST,
                    help="comma-separated word list (may span several lines)")
    ap.add_argument("--rule", choices=sorted(RULES), default="counts",
                    help="how repeated letters are judged (containment = simple letter check)")
    ap.add_argument("--solver", choices=get_solver_ids(), default="distinct_letters",
                    help="guess selection strategy")
    ap.add_argument("--seed", type=int, help="RNG seed for randomized solvers")
    ap.add_argument("--keep-going", action="store_true",
                    help="keep asking for feedback even when a single word is left")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = SessionConfig(
            word_length=args.N,
            max_guesses=args.max_guesses,
            wordlist_path=args.wordlist,
            rule=args.rule,
            solver=args.solver,
            stop_on_single=not args.keep_going,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 0

    dictionary = load_dictionary(config.wordlist_path, config.word_length)
    print(f"Loaded {len(dictionary)} words")

    session = Session(dictionary, config)
    try:
        session.play(ConsoleFeedbackReader(config.word_length), on_round=_announce_round)
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, stopping.", file=sys.stderr)
        return 0

    _announce_result(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
