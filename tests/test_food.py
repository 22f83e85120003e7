from __future__ import annotations

from collections import Counter
import random

import pytest

from neonsnake.food import Food, FoodKind, FoodSpawner, kind_for_draw


@pytest.mark.parametrize(
    ("draw", "kind"),
    [
        (0.0, FoodKind.NORMAL),
        (0.70, FoodKind.NORMAL),
        (0.7001, FoodKind.WRAP),
        (0.85, FoodKind.WRAP),
        (0.8501, FoodKind.GHOST),
        (0.999, FoodKind.GHOST),
    ],
)
def test_kind_partition_boundaries(draw, kind) -> None:
    assert kind_for_draw(draw) == kind


def test_spawn_uses_floor_of_scaled_draws(scripted_random) -> None:
    spawner = FoodSpawner(30, 20)
    food = spawner.spawn(scripted_random([0.999, 0.5, 0.9]))
    assert food == Food((29, 10), FoodKind.GHOST)


def test_kind_distribution_converges() -> None:
    spawner = FoodSpawner(30, 20)
    rng = random.Random(1234)
    total = 20_000
    counts = Counter(spawner.spawn(rng).kind for _ in range(total))
    assert abs(counts[FoodKind.NORMAL] / total - 0.70) < 0.02
    assert abs(counts[FoodKind.GHOST] / total - 0.15) < 0.02
    assert abs(counts[FoodKind.WRAP] / total - 0.15) < 0.02


def test_spawn_positions_stay_on_grid() -> None:
    spawner = FoodSpawner(7, 3)
    rng = random.Random(99)
    for _ in range(500):
        x, y = spawner.spawn(rng).position
        assert 0 <= x < 7
        assert 0 <= y < 3


def test_known_gap_food_may_land_on_snake_by_default(scripted_random) -> None:
    # Default placement ignores the snake entirely; this pins that behavior.
    spawner = FoodSpawner(30, 20)
    food = spawner.spawn(scripted_random([0.35, 0.525, 0.1]), occupied=[(10, 10)])
    assert food.position == (10, 10)


def test_avoid_occupied_redraws_until_free(scripted_random) -> None:
    spawner = FoodSpawner(30, 20, avoid_occupied=True)
    food = spawner.spawn(scripted_random([0.35, 0.525, 0.0, 0.0, 0.1]), occupied=[(10, 10)])
    assert food.position == (0, 0)
    assert food.kind == FoodKind.NORMAL


def test_avoid_occupied_gives_up_on_full_board() -> None:
    spawner = FoodSpawner(2, 1, avoid_occupied=True)
    food = spawner.spawn(random.Random(3), occupied=[(0, 0), (1, 0)])
    assert food.position in {(0, 0), (1, 0)}
