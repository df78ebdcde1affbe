from .marks import HIT, PRESENT, MISS, LEGEND
from .scoring import score
from .constraints import is_consistent, filter_candidates
from .candidates import CandidateStore
from .validation import validate_feedback

__all__ = [
    "HIT", "PRESENT", "MISS", "LEGEND",
    "score", "is_consistent", "filter_candidates",
    "CandidateStore", "validate_feedback",
]
