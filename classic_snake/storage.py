"""
storage.py — High-score persistence.

The game only ever keeps one number across sessions, stored as a single
named entry in a small JSON file.
"""

import json
import logging
import os

from .config import HIGHSCORE_FILE, HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and writes the high score as ``{"high_score": <int>}``."""

    def __init__(self, path: str = HIGHSCORE_FILE):
        self.path = path

    def load(self) -> int:
        """Return the saved high score, or 0 when nothing usable is on disk."""
        if not os.path.isfile(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            score = int(data.get(HIGHSCORE_KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        return max(0, score)

    def save(self, score: int) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({HIGHSCORE_KEY: int(score)}, f)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return
        logger.debug("Saved high score %d to %s", score, self.path)


class MemoryHighScoreStore:
    """Same interface as HighScoreStore, kept only for this process."""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = int(score)
        self.saves += 1
