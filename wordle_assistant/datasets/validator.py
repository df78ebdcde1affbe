"""
Word-list validator for the assistant.

What this module does:
- Validate a comma-separated word list (the real_wordles.csv layout) for length N.
- Count tokens that are usable as-is (lowercase, a–z only, exact length N)
  and tokens that are not.
- Detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The assistant itself only needs the loader's length filter; this report is
for checking a list before an offline run.

Typical use:
    from wordle_assistant.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "real_wordles.csv")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import read_wordlist


@dataclass
class ValidationReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_tokens: int  # tokens rejected by the format rules
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _split_tokens(tokens: List[str], N: int) -> Tuple[List[str], int]:
    """
    Rules:
      - must be lowercase a–z once surrounding whitespace is stripped
      - must have exact length N

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for raw in tokens:
        w = raw.strip()
        if w == w.lower() and w.isalpha() and w.isascii() and len(w) == N:
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate the word list at `path` for words of length N.

    Returns a JSON-serializable dict (see ValidationReport). `passed` is
    strict: the file exists, holds at least one valid word, no invalid
    tokens and no duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(N, path, False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _split_tokens(read_wordlist(p), N)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid token(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate(s)")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_tokens=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_tokens']}, sha={sha}) | {status}"
    )
