"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Used wherever the hidden word is known (offline simulation, tests) to play
the operator's role and produce the same g/y/e string a human would type.

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all hits and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks presents only if the letter still has remaining count,
     scanning left to right.
"""

from collections import Counter

from .marks import HIT, PRESENT, MISS


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "egyyy"
      score("lemon", "level") -> "ggeee"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = [MISS] * len(guess)

    # Pass 1: hits, and leftover counts from the answer for pass 2.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = HIT
        else:
            remaining[a] += 1

    # Pass 2: presents, capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == HIT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)
