from .core import (
    Outcome, Session, SessionConfig, SessionResult, SessionStateError, State,
    run_batch, run_case,
)
from .readers import ConsoleFeedbackReader, ScoringFeedbackReader
from .io import write_csv, write_manifest

__all__ = [
    "Outcome", "Session", "SessionConfig", "SessionResult", "SessionStateError", "State",
    "run_batch", "run_case",
    "ConsoleFeedbackReader", "ScoringFeedbackReader",
    "write_csv", "write_manifest",
]
