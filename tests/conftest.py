from typing import Iterable, List

import pytest


class ScriptedFeedbackReader:
    """Replays a fixed list of feedback lines, recording each guess it was asked about."""

    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = list(lines)
        self.calls: List[str] = []

    def read(self, guess: str, attempt: int) -> str:
        if not self._lines:
            raise IndexError(f"no scripted feedback left for attempt {attempt}")
        self.calls.append(guess)
        return self._lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedFeedbackReader
