"""Celebration confetti and crash bursts."""

from __future__ import annotations

import math
import random
import pygame

from .utils import CELL_SIZE, CYAN, MAGENTA, YELLOW, Position

CONFETTI_COLORS = (CYAN, MAGENTA, YELLOW)
CONFETTI_COUNT = 150
CONFETTI_SPREAD_DEG = 70
GRAVITY = 0.18


class Particle(pygame.sprite.Sprite):
    """Square particle that drifts, falls and fades out."""

    def __init__(
        self,
        position: tuple[float, float],
        color: tuple[int, int, int],
        velocity: tuple[float, float],
        life: int,
        size: int,
        gravity: float = 0.0,
    ) -> None:
        super().__init__()
        self.position = [float(position[0]), float(position[1])]
        self.velocity = [velocity[0], velocity[1]]
        self.gravity = gravity
        self.life = life
        self.max_life = life
        self.color = color
        self.image = pygame.Surface((size, size), pygame.SRCALPHA)
        self.rect = self.image.get_rect(center=(int(position[0]), int(position[1])))

    def update(self) -> None:
        """Advance one frame; the sprite removes itself when spent."""
        self.velocity[1] += self.gravity
        self.velocity[0] *= 0.97
        self.position[0] += self.velocity[0]
        self.position[1] += self.velocity[1]
        self.life -= 1

        alpha = max(0, int(255 * (self.life / max(1, self.max_life))))
        self.image.fill((*self.color, alpha))
        self.rect.center = (int(self.position[0]), int(self.position[1]))

        if self.life <= 0:
            self.kill()


class ParticleSystem:
    """Owns the particle group and the two emitters the game uses."""

    def __init__(self) -> None:
        self.particles = pygame.sprite.Group()

    def emit_confetti(self, origin: tuple[float, float]) -> None:
        """Fire a cone of neon confetti upwards from ``origin``."""
        half_spread = math.radians(CONFETTI_SPREAD_DEG) / 2
        for _ in range(CONFETTI_COUNT):
            angle = -math.pi / 2 + random.uniform(-half_spread, half_spread)
            speed = random.uniform(4.0, 9.0)
            self.particles.add(
                Particle(
                    position=origin,
                    color=random.choice(CONFETTI_COLORS),
                    velocity=(math.cos(angle) * speed, math.sin(angle) * speed),
                    life=random.randint(60, 110),
                    size=random.randint(3, 6),
                    gravity=GRAVITY,
                )
            )

    def emit_crash(self, cell: Position, offset: tuple[int, int], color: tuple[int, int, int]) -> None:
        """Burst outwards from a grid cell when the snake dies."""
        origin = (
            offset[0] + cell[0] * CELL_SIZE + CELL_SIZE // 2,
            offset[1] + cell[1] * CELL_SIZE + CELL_SIZE // 2,
        )
        for _ in range(45):
            velocity = (random.uniform(-3.8, 3.8), random.uniform(-3.8, 3.8))
            self.particles.add(
                Particle(
                    position=origin,
                    color=color,
                    velocity=velocity,
                    life=random.randint(18, 42),
                    size=random.randint(2, 4),
                )
            )

    def clear(self) -> None:
        self.particles.empty()

    def update(self) -> None:
        self.particles.update()

    def draw(self, surface: pygame.Surface) -> None:
        self.particles.draw(surface)

    def __len__(self) -> int:
        return len(self.particles)
