from __future__ import annotations
import random
from typing import Collection, Dict, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


class NoCandidatesAvailable(LookupError):
    """Raised when a guess is requested from an empty candidate set."""


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def select(self, candidates: Collection[str]) -> str:
        raise NotImplementedError("Override in subclass")

    def next_guess(self, state: dict) -> str:
        """
        Session hook: pick a guess from the state's current candidates.
        """
        candidates = state["candidates"]
        if not candidates:
            raise NoCandidatesAvailable("no word is consistent with the feedback so far")
        return self.select(candidates)
