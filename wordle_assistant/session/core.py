"""
Session loop: one game between the assistant and whoever knows the answer.

- SessionConfig: word length, guess budget, word list path, filter rule, solver.
- Session:       a small state machine (AWAITING_GUESS -> AWAITING_FEEDBACK ->
                 ... -> TERMINATED) that owns the candidate store.
- run_case:      play one session offline against a known answer.
- run_batch:     run many offline sessions in sequence.

Sessions never read the console or the file system themselves. Words come in
through the constructor (or a dictionary loader in from_config) and feedback
through a reader object, so the same loop drives the interactive CLI, the
offline harness and the tests.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Set, Tuple

from wordle_assistant.datasets.io import DEFAULT_WORDLIST, load_dictionary
from wordle_assistant.engine import CandidateStore, validate_feedback
from wordle_assistant.engine.constraints import RULES
from wordle_assistant.engine.marks import all_hits
from wordle_assistant.solvers import BaseSolver, NoCandidatesAvailable, create_solver

from .readers import ScoringFeedbackReader

DEFAULT_MAX_GUESSES = 6
DEFAULT_WORD_LENGTH = 5

DictionaryLoader = Callable[[str, int], Set[str]]


class FeedbackReader(Protocol):
    def read(self, guess: str, attempt: int) -> str:
        """Return a validated feedback string for `guess`."""
        ...


class SessionStateError(RuntimeError):
    """An operation was called in a state that does not allow it."""


class State(Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    TERMINATED = "terminated"


class Outcome(str, Enum):
    SOLVED = "solved"                  # operator reported all hits
    IDENTIFIED = "identified"          # one candidate left, no need to guess it
    OUT_OF_GUESSES = "out_of_guesses"
    NO_CANDIDATES = "no_candidates"    # feedback ruled out every word


@dataclass
class SessionConfig:
    word_length: int = DEFAULT_WORD_LENGTH
    max_guesses: int = DEFAULT_MAX_GUESSES
    wordlist_path: str = DEFAULT_WORDLIST
    rule: str = "counts"
    solver: str = "distinct_letters"
    stop_on_single: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {self.max_guesses}")
        if self.rule not in RULES:
            raise ValueError(f"Unknown rule: {self.rule}. Available: {sorted(RULES)}")


@dataclass
class SessionResult:
    outcome: Outcome
    answer: Optional[str]
    guesses: int
    remaining: int
    history: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.outcome in (Outcome.SOLVED, Outcome.IDENTIFIED)


class Session:
    def __init__(
            self,
            words: Iterable[str],
            config: SessionConfig | None = None,
            *,
            solver: BaseSolver | None = None,
    ):
        self.config = config or SessionConfig()
        self.solver = solver or create_solver(self.config.solver)
        self.solver.reset(seed=self.config.seed)

        self.candidates = CandidateStore.initialize(words)
        self.history: List[Tuple[str, str]] = []
        self.state = State.AWAITING_GUESS
        self.outcome: Optional[Outcome] = None
        self.answer: Optional[str] = None
        self._pending: Optional[str] = None

    @classmethod
    def from_config(cls, config: SessionConfig,
                    loader: DictionaryLoader = load_dictionary) -> "Session":
        """Build a session whose dictionary comes from `config.wordlist_path`."""
        return cls(loader(config.wordlist_path, config.word_length), config)

    @property
    def attempt(self) -> int:
        """1-based number of the round in progress."""
        return len(self.history) + 1

    @property
    def terminated(self) -> bool:
        return self.state is State.TERMINATED

    def _require(self, state: State) -> None:
        if self.state is not state:
            raise SessionStateError(f"expected state {state.value}, session is {self.state.value}")

    def _terminate(self, outcome: Outcome, answer: Optional[str] = None) -> None:
        self.state = State.TERMINATED
        self.outcome = outcome
        self.answer = answer
        self._pending = None

    def propose(self) -> str:
        """
        Pick the next guess. Raises NoCandidatesAvailable (and terminates the
        session) if nothing is left to guess.
        """
        self._require(State.AWAITING_GUESS)

        try:
            guess = self.solver.next_guess({"candidates": self.candidates})
        except NoCandidatesAvailable:
            self._terminate(Outcome.NO_CANDIDATES)
            raise

        self._pending = guess
        self.state = State.AWAITING_FEEDBACK
        return guess

    def submit(self, feedback: str) -> None:
        """
        Apply feedback for the pending guess and decide whether to go on.
        """
        self._require(State.AWAITING_FEEDBACK)
        ok, msg = validate_feedback(feedback, self.config.word_length)
        if not ok:
            raise ValueError(msg)

        guess = self._pending
        self.history.append((guess, feedback))
        self.candidates = self.candidates.narrow(guess, feedback, self.config.rule)

        if feedback == all_hits(self.config.word_length):
            self._terminate(Outcome.SOLVED, guess)
        elif self.candidates.is_empty:
            self._terminate(Outcome.NO_CANDIDATES)
        elif self.config.stop_on_single and self.candidates.only is not None:
            self._terminate(Outcome.IDENTIFIED, self.candidates.only)
        elif len(self.history) >= self.config.max_guesses:
            self._terminate(Outcome.OUT_OF_GUESSES)
        else:
            self._pending = None
            self.state = State.AWAITING_GUESS

    def play(self, reader: FeedbackReader,
             on_round: Callable[[int, str, int], None] | None = None) -> SessionResult:
        """
        Run rounds until the session terminates.

        on_round(attempt, guess, remaining) is called after each guess is
        chosen and before feedback is read.
        """
        while not self.terminated:
            try:
                guess = self.propose()
            except NoCandidatesAvailable:
                break
            if on_round is not None:
                on_round(self.attempt, guess, len(self.candidates))
            self.submit(reader.read(guess, self.attempt))
        return self.result()

    def result(self) -> SessionResult:
        if not self.terminated:
            raise SessionStateError("session is still running")
        return SessionResult(
            outcome=self.outcome,
            answer=self.answer,
            guesses=len(self.history),
            remaining=len(self.candidates),
            history=list(self.history),
        )


def run_case(
        answer: str,
        *,
        words: Iterable[str],
        config: SessionConfig | None = None,
        solver: BaseSolver | None = None,
) -> Dict:
    """
    Play one session against a known `answer`, with the scorer standing in
    for the operator.

    Returns:
        dict with keys:
            answer, outcome, success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)])
    """
    session = Session(words, config, solver=solver)

    t0 = time.perf_counter()
    r = session.play(ScoringFeedbackReader(answer))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "outcome": r.outcome.value,
        # An identified word only counts if it is the right one.
        "success": r.success and r.answer == answer,
        "guesses": r.guesses,
        "time_ms": dt,
        "history": r.history,
    }


def run_batch(
        answers: Iterable[str],
        *,
        words: Iterable[str],
        config: SessionConfig | None = None,
        sample: int | None = None,
        progress: Callable[[Iterable[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to the configured length) are used.

    Each case gets a fresh solver seeded from the config's seed + index, so
    runs are reproducible but not identical across cases.
    """
    config = config or SessionConfig()
    words = list(words)

    pool = [w for w in answers if len(w) == config.word_length]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    iterator = progress(pool) if progress is not None else pool
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if config.seed is None else config.seed + idx
        case_config = replace(config, seed=case_seed)
        out.append(run_case(ans, words=words, config=case_config))
    return out
