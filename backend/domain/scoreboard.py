"""
Scoreboard - current score plus the persisted high score.

The scoreboard only knows a key-value store with get(key) and set(key, value);
which backend sits behind it (memory, sqlite) is decided by the caller.
"""

import logging
from typing import Any, Callable, Optional

from .constants import HIGH_SCORE_KEY, HIGH_SCORE_OWNER_KEY, POINTS_PER_APPLE

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    Attributes:
        score: points in the current run, zeroed on every death
        high_score: best score ever banked, loaded from the store
        high_score_owner: name attached to the high score, may be empty
        points_per_apple: points added by increase_score()
        on_change: called with (score, high_score) after every mutation
        owner_prompt: called when a new high score is banked; returns a name or None
    """

    def __init__(
        self,
        store: Any,
        points_per_apple: int = POINTS_PER_APPLE,
        on_change: Optional[Callable[[int, int], None]] = None,
        owner_prompt: Optional[Callable[[int], Optional[str]]] = None,
    ):
        self.store = store
        self.points_per_apple = points_per_apple
        self.on_change = on_change
        self.owner_prompt = owner_prompt

        self.score = 0
        self.high_score = self._load_high_score()
        self.high_score_owner = self._read(HIGH_SCORE_OWNER_KEY) or ""

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.store.get(key)
        except Exception as e:
            logger.warning("Could not read %s from store, using default: %s", key, e)
            return None

    def _write(self, key: str, value: str) -> bool:
        try:
            self.store.set(key, value)
            return True
        except Exception as e:
            logger.warning("Could not write %s to store, keeping it in memory only: %s", key, e)
            return False

    def _load_high_score(self) -> int:
        raw = self._read(HIGH_SCORE_KEY)
        if raw is None or raw == "":
            return 0
        try:
            return max(0, int(raw))
        except (TypeError, ValueError):
            logger.warning("Ignoring unparseable high score %r", raw)
            return 0

    def refresh(self):
        if self.on_change is not None:
            self.on_change(self.score, self.high_score)

    def increase_score(self, points: Optional[int] = None):
        self.score += self.points_per_apple if points is None else points
        self.refresh()

    def save_high_score(self) -> bool:
        """
        Bank the current score if it beats the high score.

        A failed store write is logged; the new high score still holds for
        the rest of the process.

        Returns:
            True if the score beat the previous high score.
        """
        if self.score <= self.high_score:
            return False

        self.high_score = self.score
        self._write(HIGH_SCORE_KEY, str(self.high_score))

        if self.owner_prompt is not None:
            owner = self.owner_prompt(self.high_score)
            self.high_score_owner = (owner or "").strip()
            self._write(HIGH_SCORE_OWNER_KEY, self.high_score_owner)

        logger.info("New high score: %d %s", self.high_score, self.high_score_owner)
        return True

    def reset(self):
        self.save_high_score()
        self.score = 0
        self.refresh()

    def clear_high_score(self):
        """Administrative wipe of the persisted high score."""
        self.high_score = 0
        self.high_score_owner = ""
        self.store.set(HIGH_SCORE_KEY, "0")
        self.store.set(HIGH_SCORE_OWNER_KEY, "")
        logger.info("High score cleared")
        self.refresh()

    def __repr__(self):
        return f"<Scoreboard score={self.score}, high_score={self.high_score}>"
