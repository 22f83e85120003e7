"""Snake body, movement and collision rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .food import Food, FoodKind
from .powerups import PowerUpKind
from .utils import RIGHT, Direction, Position, add_direction, in_bounds, wrap


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one engine step: either a move (maybe growing) or death."""

    died: bool
    grew: bool = False
    ate_kind: FoodKind | None = None
    head: Position | None = None

    @classmethod
    def moved(cls, head: Position, ate_kind: FoodKind | None = None) -> StepResult:
        return cls(died=False, grew=ate_kind is not None, ate_kind=ate_kind, head=head)

    @classmethod
    def death(cls, head: Position) -> StepResult:
        return cls(died=True, head=head)


@dataclass(slots=True)
class SnakeEngine:
    """Owns the snake body, its heading and the food on a fixed grid.

    The body is stored head first. :meth:`step` validates the candidate head
    before touching any state, so a step that ends in death leaves the body,
    direction and food exactly as they were for the final frame.
    """

    width: int
    height: int
    body: list[Position] = field(default_factory=list)
    direction: Direction = RIGHT
    food: Food | None = None

    def reset(self, body: Sequence[Position], direction: Direction = RIGHT) -> None:
        """Place a fresh snake; consecutive cells need not be adjacent."""
        if not body:
            raise ValueError("Snake body needs at least one cell.")
        self.body = list(body)
        self.direction = direction
        self.food = None

    @property
    def head(self) -> Position:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def step(self, pending_direction: Direction, powerup: PowerUpKind) -> StepResult:
        """Advance the snake one cell along ``pending_direction``.

        Turn legality is checked when the direction is queued, not here.
        """
        candidate = add_direction(self.head, pending_direction)

        if powerup == PowerUpKind.WRAP:
            candidate = wrap(candidate, self.width, self.height)
        elif not in_bounds(candidate, self.width, self.height):
            return StepResult.death(candidate)

        # The tail still counts as occupied here even though a non-growing
        # move vacates it.
        if powerup != PowerUpKind.GHOST and candidate in self.body:
            return StepResult.death(candidate)

        ate_kind = None
        if self.food is not None and candidate == self.food.position:
            ate_kind = self.food.kind

        self.body.insert(0, candidate)
        if ate_kind is None:
            self.body.pop()
        self.direction = pending_direction
        return StepResult.moved(candidate, ate_kind)
