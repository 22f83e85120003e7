"""Keyboard and swipe translation into session commands."""

from __future__ import annotations

from dataclasses import dataclass
import pygame

from .utils import DOWN, LEFT, RIGHT, UP, Direction

SWIPE_THRESHOLD = 30

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

START_KEYS = frozenset({pygame.K_SPACE, pygame.K_RETURN})
PAUSE_KEYS = frozenset({pygame.K_p, pygame.K_ESCAPE})


def direction_for_key(key: int) -> Direction | None:
    return KEY_DIRECTIONS.get(key)


def swipe_direction(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """Classify a drag as a swipe along its dominant axis.

    Returns None for drags shorter than ``threshold`` on both axes. Ties go
    to the vertical axis.
    """
    if max(abs(dx), abs(dy)) < threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


@dataclass(slots=True)
class SwipeTracker:
    """Remembers where a touch or drag began."""

    threshold: float = SWIPE_THRESHOLD
    origin: tuple[float, float] | None = None

    def begin(self, position: tuple[float, float]) -> None:
        self.origin = position

    def end(self, position: tuple[float, float]) -> Direction | None:
        """Finish the gesture and return its direction, if any."""
        if self.origin is None:
            return None
        dx = position[0] - self.origin[0]
        dy = position[1] - self.origin[1]
        self.origin = None
        return swipe_direction(dx, dy, self.threshold)
