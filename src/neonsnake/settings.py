"""Variant tuning and persisted user settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from pathlib import Path
import logging

from .utils import SETTINGS_FILE, Position, clamp, in_bounds, load_json, save_json

logger = logging.getLogger(__name__)

POWERUP_DURATION_MS = 7000
DEFAULT_TICK_INTERVAL_MS = 100


class GameVariant(str, Enum):
    """The two shipped skins of the game."""

    CLASSIC = "classic"
    ARCADE = "arcade"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Tuning constants that distinguish one variant from another."""

    name: str
    grid_width: int
    grid_height: int
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    score_per_food: int = 10
    pause_enabled: bool = False
    initial_length: int = 1
    start: Position = (10, 10)
    powerup_duration_ms: int = POWERUP_DURATION_MS
    food_avoids_snake: bool = False
    high_score_key: str = "neon-snake-high-score"

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("Grid dimensions must be positive.")
        if self.tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive.")
        if self.score_per_food <= 0:
            raise ValueError("Score per food must be positive.")
        if self.initial_length < 1:
            raise ValueError("Initial snake length must be at least 1.")
        for cell in self.initial_body():
            if not in_bounds(cell, self.grid_width, self.grid_height):
                raise ValueError(f"Initial body cell {cell} lies outside the grid.")

    def initial_body(self) -> list[Position]:
        """Straight body trailing left of the start cell, head first."""
        x, y = self.start
        return [(x - offset, y) for offset in range(self.initial_length)]


CLASSIC = GameConfig(name="Neon Snake", grid_width=30, grid_height=20)

ARCADE = GameConfig(
    name="Neon Snake Arcade",
    grid_width=20,
    grid_height=20,
    score_per_food=50,
    pause_enabled=True,
    initial_length=3,
    high_score_key="neon-snake-arcade-high-score",
)

VARIANTS: dict[GameVariant, GameConfig] = {
    GameVariant.CLASSIC: CLASSIC,
    GameVariant.ARCADE: ARCADE,
}


def config_for(variant: GameVariant, food_avoids_snake: bool = False) -> GameConfig:
    """Return the preset for a variant, optionally with food exclusion."""
    base = VARIANTS[variant]
    if not food_avoids_snake:
        return base
    return replace(base, food_avoids_snake=True)


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    show_grid: bool = True
    glow: bool = True


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    variant: GameVariant = GameVariant.CLASSIC
    master_volume: float = 0.8
    sfx_volume: float = 0.8
    food_avoids_snake: bool = False
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @property
    def config(self) -> GameConfig:
        """Return the tuning for the selected variant."""
        return config_for(self.variant, self.food_avoids_snake)


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            raw = {}
        settings = GameSettings()

        if raw.get("variant") in {e.value for e in GameVariant}:
            settings.variant = GameVariant(raw["variant"])

        settings.master_volume = float(raw.get("master_volume", settings.master_volume))
        settings.sfx_volume = float(raw.get("sfx_volume", settings.sfx_volume))
        settings.food_avoids_snake = bool(raw.get("food_avoids_snake", settings.food_avoids_snake))

        display = raw.get("display", {})
        if not isinstance(display, dict):
            display = {}
        settings.display.show_grid = bool(display.get("show_grid", settings.display.show_grid))
        settings.display.glow = bool(display.get("glow", settings.display.glow))
        return settings

    def save(self) -> None:
        """Persist settings to disk."""
        payload = asdict(self.settings)
        payload["variant"] = self.settings.variant.value
        try:
            save_json(self.path, payload)
        except OSError:
            logger.warning("Could not write settings to %s", self.path, exc_info=True)

    def set_variant(self, variant: GameVariant) -> None:
        """Update the game variant and persist settings."""
        self.settings.variant = variant
        self.save()

    def cycle_variant(self) -> GameVariant:
        """Cycle to the next variant and persist settings."""
        order = list(GameVariant)
        idx = order.index(self.settings.variant)
        self.set_variant(order[(idx + 1) % len(order)])
        return self.settings.variant

    def adjust_volume(self, field_name: str, delta: float) -> None:
        """Adjust a volume setting and save."""
        value = float(getattr(self.settings, field_name))
        setattr(self.settings, field_name, clamp(value + delta, 0.0, 1.0))
        self.save()
