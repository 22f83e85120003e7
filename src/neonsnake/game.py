"""Pygame front end: frame loop, input dispatch and rendering."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

from .audio import AudioManager
from .controls import PAUSE_KEYS, START_KEYS, SwipeTracker, direction_for_key
from .food import FoodKind
from .particles import ParticleSystem
from .powerups import POWERUP_LABELS, PowerUpKind
from .scores import HighScoreStore
from .session import GameEvent, GameSession, GameSnapshot, GameState
from .settings import GameVariant, SettingsManager
from .utils import (
    BG_COLOR,
    CELL_SIZE,
    CYAN,
    DATA_DIR,
    FOOTER_HEIGHT,
    FPS,
    GHOST_BLUE,
    GRID_COLOR,
    HUD_HEIGHT,
    MUTED_COLOR,
    PURPLE,
    RED,
    SCORES_FILE,
    SETTINGS_FILE,
    SHADOW_COLOR,
    TEXT_COLOR,
    WRAP_PINK,
    YELLOW,
    Direction,
)

logger = logging.getLogger(__name__)

VOLUME_STEP = 0.1
VOLUME_KEYS = {
    pygame.K_MINUS: -VOLUME_STEP,
    pygame.K_EQUALS: VOLUME_STEP,
}

FOOD_COLORS = {
    FoodKind.NORMAL: YELLOW,
    FoodKind.GHOST: (59, 130, 246),
    FoodKind.WRAP: (236, 72, 153),
}

SNAKE_COLORS = {
    PowerUpKind.NONE: CYAN,
    PowerUpKind.GHOST: GHOST_BLUE,
    PowerUpKind.WRAP: WRAP_PINK,
}


class NeonSnakeGame:
    """Window, tick driver and renderer around a :class:`GameSession`."""

    def __init__(self, root: Path, data_dir: Path = DATA_DIR, variant: GameVariant | None = None) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        self.data_dir = data_dir
        self.settings_manager = SettingsManager(data_dir / SETTINGS_FILE.name)
        if variant is not None and variant != self.settings_manager.settings.variant:
            self.settings_manager.set_variant(variant)
        self.settings = self.settings_manager.settings

        self.session = self._create_session()
        self.screen = pygame.display.set_mode(self._window_size())
        pygame.display.set_caption(self.session.config.name)
        self.clock = pygame.time.Clock()

        self.title_font = pygame.font.SysFont("consolas", 40, bold=True)
        self.body_font = pygame.font.SysFont("consolas", 24, bold=True)
        self.small_font = pygame.font.SysFont("consolas", 16)

        self.audio = AudioManager(self.root)
        self.audio.load_assets()
        self.audio.set_volumes(self.settings.master_volume, self.settings.sfx_volume)

        self.particles = ParticleSystem()
        self.swipe = SwipeTracker()
        self.celebrated = False

    def _create_session(self) -> GameSession:
        config = self.settings.config
        store = HighScoreStore(config.high_score_key, self.data_dir / SCORES_FILE.name)
        return GameSession(config, store=store)

    def _window_size(self) -> tuple[int, int]:
        config = self.session.config
        return (
            config.grid_width * CELL_SIZE,
            HUD_HEIGHT + config.grid_height * CELL_SIZE + FOOTER_HEIGHT,
        )

    @property
    def board_offset(self) -> tuple[int, int]:
        return (0, HUD_HEIGHT)

    def run(self) -> None:
        """Main event/update/render loop."""
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break

            self.session.update(dt_ms)
            self._dispatch_events()
            self.particles.update()
            self._render()

        pygame.quit()

    # --- input ---------------------------------------------------------------

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if not self._handle_key(event.key):
                    return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.swipe.begin(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._handle_gesture(self.swipe.end(event.pos))
            elif event.type == pygame.FINGERDOWN:
                self.swipe.begin(self._finger_position(event))
            elif event.type == pygame.FINGERUP:
                self._handle_gesture(self.swipe.end(self._finger_position(event)))
        return True

    def _finger_position(self, event: pygame.event.Event) -> tuple[float, float]:
        width, height = self.screen.get_size()
        return (event.x * width, event.y * height)

    def _handle_key(self, key: int) -> bool:
        if key in VOLUME_KEYS:
            self._adjust_volume(VOLUME_KEYS[key])
            return True

        if self.session.state in {GameState.PLAYING, GameState.PAUSED}:
            if key in PAUSE_KEYS:
                self.session.toggle_pause()
                return True
            direction = direction_for_key(key)
            if direction is not None:
                self.session.queue_direction(direction)
            return True

        if key == pygame.K_ESCAPE:
            return False
        if key in START_KEYS:
            self._start_run()
        elif key == pygame.K_v:
            self._cycle_variant()
        elif key == pygame.K_g:
            self.settings.display.show_grid = not self.settings.display.show_grid
            self.settings_manager.save()
        return True

    def _adjust_volume(self, delta: float) -> None:
        self.settings_manager.adjust_volume("master_volume", delta)
        self.audio.set_volumes(self.settings.master_volume, self.settings.sfx_volume)
        self.audio.play("click")

    def _handle_gesture(self, direction: Direction | None) -> None:
        if direction is not None:
            self.session.queue_direction(direction)
        elif self.session.state in {GameState.START, GameState.GAME_OVER}:
            self._start_run()

    def _start_run(self) -> None:
        self.particles.clear()
        self.celebrated = False
        self.session.start()

    def _cycle_variant(self) -> None:
        variant = self.settings_manager.cycle_variant()
        logger.info("Switched to %s variant", variant.value)
        self.session = self._create_session()
        self.screen = pygame.display.set_mode(self._window_size())
        pygame.display.set_caption(self.session.config.name)
        self.audio.play("click")

    # --- collaborators -------------------------------------------------------

    def _dispatch_events(self) -> None:
        for event in self.session.drain_events():
            self.audio.handle_event(event)
            if event == GameEvent.DIED:
                cell = self.session.death_cell or self.session.engine.head
                self.particles.emit_crash(cell, self.board_offset, RED)
            elif event == GameEvent.NEW_HIGH_SCORE:
                width, height = self.screen.get_size()
                self.particles.emit_confetti((width / 2, height * 0.6))
                self.celebrated = True

    # --- rendering -----------------------------------------------------------

    def _render(self) -> None:
        snapshot = self.session.snapshot()
        self.screen.fill(BG_COLOR)
        self._render_hud(snapshot)
        self._render_board(snapshot)
        if snapshot.state != GameState.PLAYING:
            self._render_overlay(snapshot)
        self.particles.draw(self.screen)
        self._render_footer()
        pygame.display.flip()

    def _render_hud(self, snapshot: GameSnapshot) -> None:
        width = self.screen.get_width()
        title = self.body_font.render("NEON SNAKE", True, CYAN)
        self.screen.blit(title, (width // 2 - title.get_width() // 2, 6))

        high = self.small_font.render(f"HI: {snapshot.high_score}", True, YELLOW)
        score = self.small_font.render(f"SCORE: {snapshot.score}", True, TEXT_COLOR)
        self.screen.blit(high, (12, 36))
        self.screen.blit(score, (width - score.get_width() - 12, 36))

        if snapshot.powerup != PowerUpKind.NONE:
            seconds = snapshot.powerup_remaining_ms / 1000
            label = self.small_font.render(
                f"{POWERUP_LABELS[snapshot.powerup]}  {seconds:.1f}s",
                True,
                SNAKE_COLORS[snapshot.powerup],
            )
            self.screen.blit(label, (width // 2 - label.get_width() // 2, 58))

    def _render_board(self, snapshot: GameSnapshot) -> None:
        ox, oy = self.board_offset
        board_w = snapshot.grid_width * CELL_SIZE
        board_h = snapshot.grid_height * CELL_SIZE

        if self.settings.display.show_grid:
            for i in range(snapshot.grid_width + 1):
                pygame.draw.line(self.screen, GRID_COLOR, (ox + i * CELL_SIZE, oy), (ox + i * CELL_SIZE, oy + board_h))
            for j in range(snapshot.grid_height + 1):
                pygame.draw.line(self.screen, GRID_COLOR, (ox, oy + j * CELL_SIZE), (ox + board_w, oy + j * CELL_SIZE))

        layer = pygame.Surface((board_w, board_h), pygame.SRCALPHA)
        color = SNAKE_COLORS[snapshot.powerup]
        total = len(snapshot.body)
        for index, (x, y) in enumerate(snapshot.body):
            rect = pygame.Rect(x * CELL_SIZE + 1, y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
            if index == 0:
                alpha = 255
            elif snapshot.powerup == PowerUpKind.GHOST:
                alpha = 102
            else:
                alpha = max(20, int(255 * (1 - index / total)))
            if self.settings.display.glow:
                self._draw_glow_rect(layer, color, rect, 3 if index == 0 else 1, 6, alpha // 2)
            pygame.draw.rect(layer, (*color, alpha), rect)

        if snapshot.food is not None:
            food_color = FOOD_COLORS[snapshot.food.kind]
            fx, fy = snapshot.food.position
            center = (fx * CELL_SIZE + CELL_SIZE // 2, fy * CELL_SIZE + CELL_SIZE // 2)
            if self.settings.display.glow:
                pygame.draw.circle(layer, (*food_color, 60), center, CELL_SIZE // 2 + 2)
            pygame.draw.circle(layer, (*food_color, 255), center, CELL_SIZE // 3)

        self.screen.blit(layer, (ox, oy))
        pygame.draw.rect(self.screen, (31, 41, 55), pygame.Rect(ox, oy, board_w, board_h), width=2)

    @staticmethod
    def _draw_glow_rect(
        surface: pygame.Surface,
        color: tuple[int, int, int],
        rect: pygame.Rect,
        layers: int,
        spread: int,
        alpha: int,
    ) -> None:
        for i in range(layers, 0, -1):
            inflate = i * spread
            glow_rect = rect.inflate(inflate, inflate)
            glow = pygame.Surface(glow_rect.size, pygame.SRCALPHA)
            pygame.draw.rect(glow, (*color, max(8, alpha // (i + 1))), glow.get_rect(), border_radius=4)
            surface.blit(glow, glow_rect.topleft)

    def _render_overlay(self, snapshot: GameSnapshot) -> None:
        ox, oy = self.board_offset
        board = pygame.Rect(ox, oy, snapshot.grid_width * CELL_SIZE, snapshot.grid_height * CELL_SIZE)
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 205))
        self.screen.blit(overlay, board.topleft)

        if snapshot.state == GameState.START:
            lines = [
                (self.title_font, "PRESS START", CYAN),
                (self.small_font, "Space / Enter / Tap to begin", TEXT_COLOR),
                (self.small_font, f"V: variant ({snapshot.variant_name})", MUTED_COLOR),
                (self.small_font, "G: grid   -/=: volume   Esc: quit", MUTED_COLOR),
            ]
            if snapshot.pause_enabled:
                lines.append((self.small_font, "P: pause during play", MUTED_COLOR))
        elif snapshot.state == GameState.PAUSED:
            lines = [
                (self.title_font, "PAUSED", YELLOW),
                (self.small_font, "P / Esc to resume", TEXT_COLOR),
            ]
        else:
            lines = [
                (self.title_font, "SYSTEM FAILURE", RED),
                (self.body_font, f"SCORE: {snapshot.score}", TEXT_COLOR),
            ]
            if self.celebrated:
                lines.append((self.body_font, "NEW HIGH SCORE", YELLOW))
            lines.append((self.small_font, "Space / Enter / Tap to reboot", PURPLE))

        y = board.centery - 24 * len(lines)
        for font, text, color in lines:
            shadow = font.render(text, True, SHADOW_COLOR)
            surface = font.render(text, True, color)
            x = board.centerx - surface.get_width() // 2
            self.screen.blit(shadow, (x + 2, y + 2))
            self.screen.blit(surface, (x, y))
            y += surface.get_height() + 14

    def _render_footer(self) -> None:
        height = self.screen.get_height()
        y = height - FOOTER_HEIGHT // 2
        entries = [
            (FOOD_COLORS[FoodKind.GHOST], "GHOST (Pass Self)"),
            (FOOD_COLORS[FoodKind.WRAP], "WARP (Pass Walls)"),
        ]
        x = 16
        for color, text in entries:
            pygame.draw.circle(self.screen, color, (x + 6, y), 6)
            label = self.small_font.render(text, True, MUTED_COLOR)
            self.screen.blit(label, (x + 18, y - label.get_height() // 2))
            x += label.get_width() + 48
