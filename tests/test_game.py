from __future__ import annotations

from pathlib import Path

import pygame
import pytest

from neonsnake.game import NeonSnakeGame
from neonsnake.session import GameState
from neonsnake.settings import ARCADE, GameVariant
from neonsnake.utils import CELL_SIZE, DOWN, LEFT, RIGHT


def _game(tmp_path: Path, variant: GameVariant | None = None) -> NeonSnakeGame:
    return NeonSnakeGame(root=tmp_path, data_dir=tmp_path / "data", variant=variant)


def test_integration_run_to_game_over(tmp_path: Path) -> None:
    game = _game(tmp_path)
    assert game.session.state == GameState.START

    assert game._handle_key(pygame.K_SPACE)
    assert game.session.state == GameState.PLAYING

    engine = game.session.engine
    engine.body = [(0, 5), (1, 5)]
    engine.direction = LEFT
    game.session.pending_direction = LEFT
    game.session.score = 30

    game.session.step()
    assert game.session.state == GameState.GAME_OVER

    game._dispatch_events()
    assert game.celebrated
    assert len(game.particles) > 0
    assert (tmp_path / "data" / "scores.json").exists()

    game._render()


def test_keys_queue_directions_while_playing(tmp_path: Path) -> None:
    game = _game(tmp_path)
    game._handle_key(pygame.K_RETURN)
    game._handle_key(pygame.K_DOWN)
    assert game.session.pending_direction == DOWN
    game._handle_key(pygame.K_LEFT)
    assert game.session.pending_direction == DOWN
    assert game.session.engine.direction == RIGHT


def test_escape_pauses_arcade_and_quits_from_start(tmp_path: Path) -> None:
    game = _game(tmp_path, GameVariant.ARCADE)
    assert not game._handle_key(pygame.K_ESCAPE)

    game._handle_key(pygame.K_SPACE)
    assert game._handle_key(pygame.K_ESCAPE)
    assert game.session.state == GameState.PAUSED
    game._render()


def test_tap_starts_and_swipe_turns(tmp_path: Path) -> None:
    game = _game(tmp_path)
    game.swipe.begin((100, 100))
    game._handle_gesture(game.swipe.end((102, 101)))
    assert game.session.state == GameState.PLAYING

    game.swipe.begin((100, 100))
    game._handle_gesture(game.swipe.end((100, 20)))
    assert game.session.pending_direction == (0, -1)


def test_variant_switch_resizes_window(tmp_path: Path) -> None:
    game = _game(tmp_path)
    game._handle_key(pygame.K_v)
    assert game.session.config is ARCADE
    assert game.screen.get_width() == ARCADE.grid_width * CELL_SIZE

    reloaded = _game(tmp_path)
    assert reloaded.session.config is ARCADE


def test_volume_keys_adjust_and_persist(tmp_path: Path) -> None:
    game = _game(tmp_path)
    start = game.settings.master_volume
    game._handle_key(pygame.K_MINUS)
    assert game.settings.master_volume == pytest.approx(start - 0.1)

    for _ in range(20):
        game._handle_key(pygame.K_EQUALS)
    assert game.settings.master_volume == 1.0
    assert _game(tmp_path).settings.master_volume == 1.0


def test_crash_burst_starts_at_fatal_cell(tmp_path: Path) -> None:
    game = _game(tmp_path)
    game._handle_key(pygame.K_SPACE)
    engine = game.session.engine
    engine.body = [(29, 5)]
    game.session.pending_direction = RIGHT
    game.session.step()
    assert game.session.engine.head == (29, 5)

    game._dispatch_events()

    ox, oy = game.board_offset
    expected = (ox + 30 * CELL_SIZE + CELL_SIZE // 2, oy + 5 * CELL_SIZE + CELL_SIZE // 2)
    assert all(p.rect.center == expected for p in game.particles.particles)
