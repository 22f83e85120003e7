"""Game lifecycle, scoring and the fixed-tick driver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random

from .food import Food, FoodSpawner
from .powerups import POWERUP_FOR_FOOD, PowerUpKind, PowerUpTimer
from .scores import HighScoreStore
from .settings import GameConfig
from .snake import SnakeEngine, StepResult
from .utils import DIRECTIONS, RIGHT, Direction, Position, is_same_axis

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Finite states of a play session."""

    START = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class GameEvent(str, Enum):
    """Fire-and-forget cues for audio and effects collaborators."""

    ATE = "ate"
    DIED = "died"
    POWER_UP = "powerup"
    UI_CLICK = "click"
    NEW_HIGH_SCORE = "new_high_score"


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only copy of everything the renderer needs for one frame."""

    state: GameState
    body: tuple[Position, ...]
    direction: Direction
    food: Food | None
    powerup: PowerUpKind
    powerup_remaining_ms: float
    score: int
    high_score: int
    variant_name: str
    grid_width: int
    grid_height: int
    pause_enabled: bool


class GameSession:
    """Single-player session wrapping the snake engine.

    The session is the only writer of game state. Input handlers call the
    command methods, which either buffer a direction or switch state; the
    body and food only change inside :meth:`step`.
    """

    def __init__(
        self,
        config: GameConfig,
        store: HighScoreStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.store = store
        self.rng = rng if rng is not None else random.Random()

        self.engine = SnakeEngine(config.grid_width, config.grid_height)
        self.spawner = FoodSpawner(
            config.grid_width,
            config.grid_height,
            avoid_occupied=config.food_avoids_snake,
        )
        self.timer = PowerUpTimer(duration_ms=config.powerup_duration_ms)

        self.state = GameState.START
        self.score = 0
        self.high_score = store.load() if store is not None else 0
        self.pending_direction: Direction = RIGHT
        self.clock_ms = 0.0
        self.tick_accumulator_ms = 0.0
        self.ticks = 0
        self.events: list[GameEvent] = []
        self.death_cell: Position | None = None

        self.engine.reset(config.initial_body(), RIGHT)

    @property
    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms

    # --- commands ------------------------------------------------------------

    def start(self) -> None:
        """Begin a new run from START or GAME_OVER."""
        if self.state not in {GameState.START, GameState.GAME_OVER}:
            return
        self._reset_run()
        self.state = GameState.PLAYING
        self.events.append(GameEvent.UI_CLICK)
        logger.debug("Run started (%s)", self.config.name)

    def pause(self) -> None:
        if self.config.pause_enabled and self.state == GameState.PLAYING:
            self.state = GameState.PAUSED
            self.events.append(GameEvent.UI_CLICK)

    def resume(self) -> None:
        if self.state == GameState.PAUSED:
            self.state = GameState.PLAYING
            self.events.append(GameEvent.UI_CLICK)

    def toggle_pause(self) -> None:
        if self.state == GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def queue_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next tick; the latest legal one wins.

        Legality is judged against the direction the snake is actually
        moving in, so two quick turns inside one tick cannot add up to a
        reversal.
        """
        if self.state != GameState.PLAYING or direction not in DIRECTIONS:
            return
        if is_same_axis(self.engine.direction, direction):
            return
        self.pending_direction = direction

    # --- simulation ----------------------------------------------------------

    def update(self, dt_ms: float) -> None:
        """Advance play time by ``dt_ms`` and run every tick that is due."""
        if self.state != GameState.PLAYING:
            return
        self.clock_ms += dt_ms
        self.tick_accumulator_ms += dt_ms
        while self.tick_accumulator_ms >= self.tick_interval_ms:
            self.tick_accumulator_ms -= self.tick_interval_ms
            self.step()
            if self.state != GameState.PLAYING:
                break
        self.timer.tick(self.clock_ms)

    def step(self) -> StepResult | None:
        """Run exactly one tick. Returns None when not PLAYING."""
        if self.state != GameState.PLAYING:
            return None

        self.timer.tick(self.clock_ms)
        powerup = self.timer.current()
        result = self.engine.step(self.pending_direction, powerup)
        self.ticks += 1

        if result.died:
            self._game_over(result)
            return result

        if result.grew and result.ate_kind is not None:
            self.score += self.config.score_per_food
            self.events.append(GameEvent.ATE)
            granted = POWERUP_FOR_FOOD[result.ate_kind]
            if granted != PowerUpKind.NONE:
                self.timer.activate(granted, self.clock_ms)
                self.events.append(GameEvent.POWER_UP)
            self._spawn_food()
        return result

    def drain_events(self) -> list[GameEvent]:
        """Hand queued events to the caller and forget them."""
        events, self.events = self.events, []
        return events

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            body=tuple(self.engine.body),
            direction=self.engine.direction,
            food=self.engine.food,
            powerup=self.timer.current(),
            powerup_remaining_ms=self.timer.remaining(self.clock_ms),
            score=self.score,
            high_score=self.high_score,
            variant_name=self.config.name,
            grid_width=self.config.grid_width,
            grid_height=self.config.grid_height,
            pause_enabled=self.config.pause_enabled,
        )

    # --- internals -----------------------------------------------------------

    def _reset_run(self) -> None:
        self.engine.reset(self.config.initial_body(), RIGHT)
        self.pending_direction = RIGHT
        self.timer.clear()
        self.score = 0
        self.clock_ms = 0.0
        self.tick_accumulator_ms = 0.0
        self.ticks = 0
        self.death_cell = None
        self._spawn_food()

    def _spawn_food(self) -> None:
        self.engine.food = self.spawner.spawn(self.rng, self.engine.body)

    def _game_over(self, result: StepResult) -> None:
        self.state = GameState.GAME_OVER
        self.tick_accumulator_ms = 0.0
        self.death_cell = result.head
        self.timer.clear()
        self.events.append(GameEvent.DIED)
        logger.info(
            "Snake died at %s after %d ticks with score %d.",
            result.head,
            self.ticks,
            self.score,
        )

        if self.score > self.high_score:
            self.high_score = self.score
            if self.store is not None:
                self.store.save(self.score)
            self.events.append(GameEvent.NEW_HIGH_SCORE)
            logger.info("New high score: %d", self.score)
