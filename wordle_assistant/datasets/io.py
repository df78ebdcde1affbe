"""
Dictionary loading for the assistant.

The word list lives in a comma-separated file with no header; a record may
hold one word or many and the list may span any number of lines:

    cigar,rebut,sissy,humph
    awake,blush
"""

from __future__ import annotations
import sys
from pathlib import Path
from typing import Iterable, List, Set

DEFAULT_WORDLIST = "real_wordles.csv"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_wordlist(p: Path | str) -> List[str]:
    """
    Split every line on commas and return the raw tokens, in file order.
    Blank tokens are dropped; no other cleanup happens here.
    """
    out: List[str] = []
    for line in read_lines(p):
        out.extend(tok for tok in line.split(",") if tok.strip())
    return out


def write_wordlist(words: Iterable[str], p: Path | str, per_line: int = 10) -> str:
    """
    Write words in the comma-separated layout read_wordlist() expects.
    Returns the string path written.
    """
    words = list(words)
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    rows = [",".join(words[i:i + per_line]) for i in range(0, len(words), per_line)]
    p.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str, N: int) -> Set[str]:
    """
    Load the set of length-N words from a word list file.

    Tokens are stripped and lowercased. An unreadable file is reported on
    stderr and yields an empty dictionary rather than aborting the session.
    """
    try:
        tokens = read_wordlist(p)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read word list {p}: {e}", file=sys.stderr)
        return set()

    words = (t.strip().lower() for t in tokens)
    return {w for w in words if len(w) == N}
