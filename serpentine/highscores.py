"""Persistent top-ten score table."""

from __future__ import annotations

import contextlib
import os
import struct
from pathlib import Path

_SCORE = struct.Struct("<i")
MAX_SCORES = 10
DEFAULT_PATH = "highscores.dat"


class HighScoreManager:
    """Keeps the best scores in a binary file of 32-bit integers."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._scores: list[int] = []
        self.load_scores()

    def load_scores(self) -> None:
        """Append every whole score stored in the file; a missing file adds nothing."""
        try:
            data = self.path.read_bytes()
        except OSError:
            return
        usable = len(data) - len(data) % _SCORE.size
        self._scores.extend(value for (value,) in _SCORE.iter_unpack(data[:usable]))

    def save_scores(self) -> None:
        """Write the current scores; an unwritable file is silently skipped."""
        payload = b"".join(_SCORE.pack(score) for score in self._scores)
        with contextlib.suppress(OSError):
            self.path.write_bytes(payload)

    def add_score(self, score: int) -> None:
        """Record a score, keep the best ten in descending order, and save."""
        self._scores.append(score)
        self._scores.sort(reverse=True)
        del self._scores[MAX_SCORES:]
        self.save_scores()

    @property
    def high_score(self) -> int:
        """The first stored score, or 0 when there is none."""
        return self._scores[0] if self._scores else 0

    @property
    def scores(self) -> tuple[int, ...]:
        """The stored scores in their current order."""
        return tuple(self._scores)