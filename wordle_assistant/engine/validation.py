"""
Feedback validation at the input boundary.

This module answers the question: "Can this line be handed to the engine?"
A feedback line is valid iff:
  - it has exact length N
  - every character is one of the marks g / y / e

The engine itself never re-checks; readers call this and re-prompt on
failure, so invalid feedback never reaches the candidate filter.
"""

from typing import Optional, Tuple

from .marks import MARKS, LEGEND


def validate_feedback(line: str, N: int) -> Tuple[bool, Optional[str]]:
    """
    Return (True, None) if `line` is a usable feedback string, otherwise
    (False, message) with a message suitable for showing to the operator.

    The caller is expected to have stripped surrounding whitespace.
    """
    if not isinstance(line, str):
        return False, "Try again, feedback must be text"

    if len(line) != N:
        return False, f"Try again, the guess must be {N} chars long"

    if any(ch not in MARKS for ch in line):
        return False, f"Try again, the guess must be a combination of these chars {LEGEND}"

    return True, None
