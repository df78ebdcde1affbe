"""
Distinct-Letter solver (the assistant's default).

Idea:
  - Score each remaining candidate by how many DIFFERENT letters it contains
    ("arose" -> 5, "spoon" -> 4). More distinct letters means more letters
    tested per guess, which tends to shrink the candidate set fastest.
  - Pick the maximum over the whole set.

Determinism:
  - Ties are broken by the lexicographically smallest word, so the same
    candidate set always yields the same guess regardless of set ordering.
  - No state is carried between calls.
"""

from __future__ import annotations
from typing import Collection

from .base import BaseSolver, NoCandidatesAvailable, register


def distinct_letter_score(word: str) -> int:
    """Count of unique letters: radio -> 5, mamma -> 2, aabbc -> 3."""
    return len(set(word))


@register
class DistinctLettersSolver(BaseSolver):
    id = "distinct_letters"
    name = "Distinct Letters (max coverage)"
    version = "1.0.0"

    def select(self, candidates: Collection[str]) -> str:
        best_word = None
        max_score = -1

        for w in candidates:
            s = distinct_letter_score(w)
            if s > max_score or (s == max_score and w < best_word):
                max_score = s
                best_word = w

        if best_word is None:
            raise NoCandidatesAvailable("cannot pick a guess from an empty candidate set")
        return best_word
