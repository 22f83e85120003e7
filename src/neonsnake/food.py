"""Food definitions and the weighted food spawner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable
import logging
import math
import random

from .utils import Position

logger = logging.getLogger(__name__)

GHOST_THRESHOLD = 0.85
WRAP_THRESHOLD = 0.70
MAX_PLACEMENT_ATTEMPTS = 2000


class FoodKind(str, Enum):
    """Food variants; the non-normal ones grant a power-up when eaten."""

    NORMAL = "normal"
    GHOST = "ghost"
    WRAP = "wrap"


@dataclass(frozen=True, slots=True)
class Food:
    """The single food item on the board."""

    position: Position
    kind: FoodKind = FoodKind.NORMAL


def kind_for_draw(draw: float) -> FoodKind:
    """Map a uniform draw in [0, 1) onto the 70/15/15 kind partition."""
    if draw > GHOST_THRESHOLD:
        return FoodKind.GHOST
    if draw > WRAP_THRESHOLD:
        return FoodKind.WRAP
    return FoodKind.NORMAL


class FoodSpawner:
    """Places food on a width x height grid.

    Every call is an independent categorical draw, so the same kind may come
    up many times in a row. By default the spawner does not look at the snake
    at all and food can land on an occupied cell; pass ``avoid_occupied`` to
    redraw positions that collide with ``occupied``.
    """

    def __init__(self, width: int, height: int, avoid_occupied: bool = False) -> None:
        self.width = width
        self.height = height
        self.avoid_occupied = avoid_occupied

    def spawn(self, rng: random.Random, occupied: Iterable[Position] = ()) -> Food:
        """Draw a new food position and kind."""
        position = self._draw_position(rng)
        if self.avoid_occupied:
            occupied_set = set(occupied)
            attempts = 1
            while position in occupied_set and attempts < MAX_PLACEMENT_ATTEMPTS:
                position = self._draw_position(rng)
                attempts += 1
            if position in occupied_set:
                logger.debug("No free cell found after %d attempts; placing food on %s", attempts, position)
        kind = kind_for_draw(rng.random())
        return Food(position=position, kind=kind)

    def _draw_position(self, rng: random.Random) -> Position:
        return (
            math.floor(rng.random() * self.width),
            math.floor(rng.random() * self.height),
        )
