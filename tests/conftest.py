"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws, then 0.0."""

    def __init__(self, values: list[float] | None = None) -> None:
        self.values = list(values or [])

    def random(self) -> float:
        return self.values.pop(0) if self.values else 0.0


@pytest.fixture
def scripted_random():
    return ScriptedRandom
