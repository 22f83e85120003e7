from __future__ import annotations

import pygame
import pytest

from neonsnake.controls import SwipeTracker, direction_for_key, swipe_direction
from neonsnake.utils import DOWN, LEFT, RIGHT, UP, add_direction, in_bounds, is_same_axis, wrap


@pytest.mark.parametrize(
    ("dx", "dy", "expected"),
    [
        (29, 0, None),
        (30, 0, RIGHT),
        (-45, 12, LEFT),
        (5, 31, DOWN),
        (-10, -60, UP),
        (40, 40, DOWN),
    ],
)
def test_swipe_direction(dx, dy, expected) -> None:
    assert swipe_direction(dx, dy) == expected


def test_swipe_tracker_needs_a_start() -> None:
    tracker = SwipeTracker()
    assert tracker.end((100, 100)) is None
    tracker.begin((100, 100))
    assert tracker.end((100, 40)) == UP
    assert tracker.origin is None


def test_arrow_and_wasd_keys() -> None:
    assert direction_for_key(pygame.K_LEFT) == LEFT
    assert direction_for_key(pygame.K_d) == RIGHT
    assert direction_for_key(pygame.K_q) is None


def test_same_axis_covers_reversal_and_repeat() -> None:
    assert is_same_axis(RIGHT, LEFT)
    assert is_same_axis(RIGHT, RIGHT)
    assert is_same_axis(UP, DOWN)
    assert not is_same_axis(RIGHT, UP)
    assert not is_same_axis(DOWN, LEFT)


def test_grid_geometry() -> None:
    assert add_direction((3, 4), UP) == (3, 3)
    assert in_bounds((29, 19), 30, 20)
    assert not in_bounds((30, 0), 30, 20)
    assert not in_bounds((0, -1), 30, 20)
    assert wrap((-1, 20), 30, 20) == (29, 0)
    assert wrap((30, -1), 30, 20) == (0, 19)
