"""
Feedback marks, one per letter of a guess.

  - 'g' : green  = Hit, correct letter in the correct position
  - 'y' : yellow = Present, letter is in the word but elsewhere
  - 'e' : empty  = Miss, letter is not in the word (beyond the copies
          already accounted for by Hit/Present marks)

A feedback string is simply N of these characters, e.g. "geeye".
"""

from typing import Literal

Mark = Literal["g", "y", "e"]

HIT: Mark = "g"
PRESENT: Mark = "y"
MISS: Mark = "e"

MARKS = frozenset((HIT, PRESENT, MISS))

# Shown to the operator every round.
LEGEND = "(g = green, y = yellow, e = empty)"


def all_hits(N: int) -> str:
    return HIT * N
