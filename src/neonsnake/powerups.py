"""Power-up kinds and the single-slot expiry timer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .food import FoodKind
from .settings import POWERUP_DURATION_MS


class PowerUpKind(str, Enum):
    """Effect currently suspending one of the loss conditions."""

    NONE = "none"
    GHOST = "ghost"
    WRAP = "wrap"


POWERUP_FOR_FOOD = {
    FoodKind.NORMAL: PowerUpKind.NONE,
    FoodKind.GHOST: PowerUpKind.GHOST,
    FoodKind.WRAP: PowerUpKind.WRAP,
}

POWERUP_LABELS = {
    PowerUpKind.GHOST: "GHOST MODE (NO CLIP)",
    PowerUpKind.WRAP: "WARP MODE (WALL PASS)",
}


@dataclass(slots=True)
class PowerUpTimer:
    """Holds at most one active power-up and the play-clock time it ends.

    ``now`` is always play-clock milliseconds, which stand still while the
    game is paused. The timer never fires on its own; the session polls
    :meth:`tick` at the start of every step.
    """

    duration_ms: int = POWERUP_DURATION_MS
    kind: PowerUpKind = PowerUpKind.NONE
    expires_at: float = 0.0

    def activate(self, kind: PowerUpKind, now: float) -> None:
        """Start ``kind``, replacing whatever was active."""
        if kind == PowerUpKind.NONE:
            return
        self.kind = kind
        self.expires_at = now + self.duration_ms

    def tick(self, now: float) -> None:
        """Expire the active power-up once its deadline has passed."""
        if self.kind != PowerUpKind.NONE and now >= self.expires_at:
            self.clear()

    def clear(self) -> None:
        self.kind = PowerUpKind.NONE
        self.expires_at = 0.0

    def current(self) -> PowerUpKind:
        return self.kind

    def remaining(self, now: float) -> float:
        """Milliseconds left on the active power-up, 0 when inactive."""
        if self.kind == PowerUpKind.NONE:
            return 0.0
        return max(0.0, self.expires_at - now)

    @property
    def active(self) -> bool:
        return self.kind != PowerUpKind.NONE
