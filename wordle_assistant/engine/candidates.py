"""
The candidate store: every word still possibly equal to the hidden word.

A store is never edited in place. Each round produces a fresh store from the
previous one and the caller swaps its reference, so a store handed out
earlier (to a solver, a report, a test) keeps describing the round it came
from.
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional

from .constraints import filter_candidates


class CandidateStore:
    __slots__ = ("_words",)

    def __init__(self, words: FrozenSet[str] = frozenset()):
        self._words = frozenset(words)

    @classmethod
    def initialize(cls, words: Iterable[str]) -> "CandidateStore":
        """
        Seed a store. Word length is the dictionary loader's contract, so
        nothing is validated here.
        """
        return cls(frozenset(words))

    def filter(self, predicate: Callable[[str], bool]) -> "CandidateStore":
        """Return a new store with exactly the words satisfying `predicate`."""
        return CandidateStore(frozenset(w for w in self._words if predicate(w)))

    def narrow(self, guess: str, feedback: str, rule: str = "counts") -> "CandidateStore":
        """Keep the words consistent with one round of feedback."""
        kept = filter_candidates(self._words, [(guess, feedback)], len(guess), rule)
        return CandidateStore(frozenset(kept))

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    @property
    def is_empty(self) -> bool:
        return not self._words

    @property
    def only(self) -> Optional[str]:
        """The single remaining word, or None if zero or several remain."""
        if len(self._words) == 1:
            return next(iter(self._words))
        return None

    def sorted(self) -> List[str]:
        return sorted(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CandidateStore):
            return self._words == other._words
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"CandidateStore({len(self._words)} words)"
