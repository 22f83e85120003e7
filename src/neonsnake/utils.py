"""Shared constants, grid geometry and file helpers for Neon Snake."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple
import json

FPS = 60
CELL_SIZE = 20
HUD_HEIGHT = 82
FOOTER_HEIGHT = 36

BG_COLOR = (5, 5, 5)
GRID_COLOR = (17, 17, 17)
TEXT_COLOR = (220, 238, 255)
SHADOW_COLOR = (15, 24, 45)
MUTED_COLOR = (110, 110, 120)

CYAN = (0, 255, 255)
MAGENTA = (255, 0, 255)
YELLOW = (255, 255, 0)
RED = (239, 68, 68)
PURPLE = (168, 85, 247)
GHOST_BLUE = (96, 165, 250)
WRAP_PINK = (244, 114, 182)

Direction = Tuple[int, int]
Position = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTIONS: tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

DATA_DIR = Path(".neonsnake")
SETTINGS_FILE = DATA_DIR / "settings.json"
SCORES_FILE = DATA_DIR / "scores.json"


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def is_same_axis(current: Direction, proposed: Direction) -> bool:
    """Return whether a proposed turn stays on the current movement axis.

    Covers both the 180 degree reversal and the no-op repeat of the current
    heading; neither counts as a turn.
    """
    if current[0] != 0 and proposed[0] != 0:
        return True
    return current[1] != 0 and proposed[1] != 0


def add_direction(position: Position, direction: Direction) -> Position:
    """Move a grid cell one step along direction."""
    return (position[0] + direction[0], position[1] + direction[1])


def in_bounds(position: Position, width: int, height: int) -> bool:
    """Check if a grid cell is inside a width x height playfield."""
    x, y = position
    return 0 <= x < width and 0 <= y < height


def wrap(position: Position, width: int, height: int) -> Position:
    """Fold a cell back into the playfield, each axis independently."""
    return (position[0] % width, position[1] % height)


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
