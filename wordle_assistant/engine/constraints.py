"""
Feedback evaluation: is a candidate still a possible answer?

Given:
  - a guess that was shown to the operator
  - the feedback string the operator typed back
  - a candidate word from the current pool

Decide whether the candidate could have produced that feedback. Two rules
are available:

  "counts" (default)
      Wordle-faithful multiplicity. Positions are checked first (a hit needs
      the same letter, a present or miss needs a different one). Then, per
      guessed letter, hits + presents give the minimum number of copies the
      candidate must hold, and any miss for that letter caps it at exactly
      that minimum. Guessing "sassy" and seeing one 's' green and another
      grey therefore means the answer has exactly one 's'.

  "containment"
      The simpler per-position check: a present needs the letter somewhere
      in the candidate, a miss needs it nowhere. Repeated letters in the
      guess are not reconciled, so a grey duplicate of a green letter
      rejects every candidate.
"""

from collections import Counter
from typing import Callable, Dict, Iterable, List, Tuple

from .marks import HIT, PRESENT, MISS

# History is a sequence of (guess, feedback) tuples.
History = Iterable[Tuple[str, str]]


def _consistent_containment(candidate: str, guess: str, feedback: str) -> bool:
    for c, g, mark in zip(candidate, guess, feedback):
        if mark == HIT and c != g:
            return False
        if mark == PRESENT and (c == g or g not in candidate):
            return False
        if mark == MISS and g in candidate:
            return False
    return True


def _consistent_counts(candidate: str, guess: str, feedback: str) -> bool:
    minimum = Counter()
    capped = set()

    for c, g, mark in zip(candidate, guess, feedback):
        if mark == HIT:
            if c != g:
                return False
            minimum[g] += 1
        else:
            # Neither a present nor a miss can sit where the guess put it.
            if c == g:
                return False
            if mark == PRESENT:
                minimum[g] += 1
            else:
                capped.add(g)

    have = Counter(candidate)
    for letter, need in minimum.items():
        if have[letter] < need:
            return False
    for letter in capped:
        if have[letter] != minimum[letter]:
            return False
    return True


RULES: Dict[str, Callable[[str, str, str], bool]] = {
    "counts": _consistent_counts,
    "containment": _consistent_containment,
}


def is_consistent(candidate: str, guess: str, feedback: str, rule: str = "counts") -> bool:
    """
    Return True if `candidate` agrees with `feedback` for `guess`.

    All three strings are assumed to have the same length; the feedback has
    already been validated by whoever read it.
    """
    try:
        check = RULES[rule]
    except KeyError as e:
        raise ValueError(f"Unknown rule: {rule}. Available: {sorted(RULES)}") from e
    return check(candidate, guess, feedback)


def filter_candidates(words: Iterable[str], history: History, N: int,
                      rule: str = "counts") -> List[str]:
    """
    Keep only words (length == N) consistent with every (guess, feedback)
    pair in `history`. Order is preserved as in `words`.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()
        if len(w) != N:
            continue
        if all(is_consistent(w, g, fb, rule) for g, fb in history):
            out.append(w)

    return out
