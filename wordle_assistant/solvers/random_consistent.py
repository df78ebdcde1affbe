"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline for offline runs; the candidates are sorted before drawing so
    the seed alone fixes the pick, independent of set iteration order.
"""

from __future__ import annotations

from typing import Collection

from .base import BaseSolver, NoCandidatesAvailable, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def select(self, candidates: Collection[str]) -> str:
        pool = sorted(candidates)
        if not pool:
            raise NoCandidatesAvailable("cannot pick a guess from an empty candidate set")
        return pool[self.rng.randrange(len(pool))]
