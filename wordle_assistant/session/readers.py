"""
Feedback readers: where each round's g/y/e string comes from.

- ConsoleFeedbackReader:  the operator types it; bad lines are re-requested.
- ScoringFeedbackReader:  the answer is known, so the scorer produces it.

Every reader hands the session a feedback string that already passed
validate_feedback().
"""

from __future__ import annotations
from typing import Callable

from wordle_assistant.engine import score, validate_feedback


class ConsoleFeedbackReader:
    def __init__(self, N: int, *, input_fn: Callable[[], str] | None = None,
                 print_fn: Callable[[str], None] | None = None):
        self.N = N
        self.input_fn = input_fn or input
        self.print_fn = print_fn or print

    def read(self, guess: str, attempt: int) -> str:
        # Keep asking until the line is usable; EOFError from input() propagates.
        while True:
            line = self.input_fn().strip().lower()
            ok, msg = validate_feedback(line, self.N)
            if ok:
                return line
            self.print_fn(msg)


class ScoringFeedbackReader:
    def __init__(self, answer: str):
        self.answer = answer.strip().lower()

    def read(self, guess: str, attempt: int) -> str:
        return score(guess, self.answer)

