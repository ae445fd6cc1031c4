"""
Session score and persisted high score for the Snake game.
"""

import logging
from typing import Optional

from .constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


def parse_high_score(raw_value: Optional[str]) -> int:
    """
    Parse a stored high score.

    Missing or non-numeric values count as 0 rather than raising.
    """
    # Strict: "12abc" and "12.5" are rejected, not truncated to 12
    if raw_value is None:
        return 0
    try:
        return int(str(raw_value).strip())
    except ValueError:
        logger.warning(f"Ignoring malformed stored high score: {raw_value!r}")
        return 0


class Scoreboard:
    """
    Tracks the current session score and the best score ever recorded.

    The high score is read from the key-value store on construction and
    written back immediately every time it is beaten.
    """

    def __init__(self, store):
        self.store = store
        self.score = 0
        self.high_score = parse_high_score(store.get(HIGH_SCORE_KEY))

    def get_score(self) -> int:
        return self.score

    def get_high_score(self) -> int:
        return self.high_score

    def increment_score(self) -> None:
        """Add one point, persisting the high score when it is beaten."""
        self.score += 1

        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()

    def _save_high_score(self) -> None:
        self.store.set(HIGH_SCORE_KEY, str(self.high_score))
        logger.info(f"New high score: {self.high_score}")

    def __repr__(self):
        return f"<Scoreboard score={self.score}, high_score={self.high_score}>"
