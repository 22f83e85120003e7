"""High-score persistence."""

from __future__ import annotations

from pathlib import Path
import logging

from .utils import SCORES_FILE, load_json, save_json

logger = logging.getLogger(__name__)


class HighScoreStore:
    """One non-negative integer per game, kept in a shared JSON file.

    Failures never propagate: a missing or unreadable file reads as 0 and a
    failed write is logged, leaving the caller's in-memory value authoritative.
    """

    def __init__(self, key: str, path: Path = SCORES_FILE) -> None:
        self.key = key
        self.path = path

    def load(self) -> int:
        """Return the stored high score, or 0 when absent or invalid."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            return 0
        try:
            value = int(raw.get(self.key, 0))
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring invalid high score %r in %s", raw.get(self.key), self.path)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        """Write ``value`` under this store's key, keeping other entries."""
        raw = load_json(self.path, {})
        payload = raw if isinstance(raw, dict) else {}
        payload[self.key] = int(value)
        try:
            save_json(self.path, payload)
        except OSError:
            logger.warning("Could not persist high score to %s", self.path, exc_info=True)
