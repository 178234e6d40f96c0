"""A simple particle system updated on the CPU."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Optional

from cognitheon.geometry import Rect

_SPAWN_SPEED = 50.0
_LIFE_DECAY = 5.0


@dataclass
class Particle:
    """One particle: position, velocity and remaining life in seconds."""

    pos: tuple[float, float] = (0.0, 0.0)
    vel: tuple[float, float] = (3.0, 3.0)
    life: float = 3.0

    @classmethod
    def with_max_life(cls, max_life: float) -> Particle:
        return cls(life=max_life)

    def random_vel(self, max_vel: float) -> Particle:
        """A copy with each velocity component drawn from [0, max_vel)."""
        return replace(self, vel=(random.random() * max_vel, random.random() * max_vel))

    @property
    def alive(self) -> bool:
        return self.life > 0.0


class ParticleSystem:
    """A fixed pool of particles; dead ones are recycled when new ones spawn."""

    def __init__(
        self,
        max_particles: int,
        spawn_per_frame: int,
        max_life: float,
        max_vel: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.particles = [Particle() for _ in range(max_particles)]
        self.spawn_per_frame = spawn_per_frame
        self.max_life = max_life
        self.max_vel = max_vel
        self._rng = rng if rng is not None else random.Random()

    def update_particles(
        self, dt: float, mouse_pos: Optional[tuple[float, float]], rect: Rect
    ) -> None:
        """Age and move live particles, then spawn new ones at the pointer."""
        for particle in self.particles:
            if particle.alive:
                particle.life -= dt * _LIFE_DECAY
                if particle.alive:
                    x, y = particle.pos
                    vx, vy = particle.vel
                    particle.pos = (x + vx * dt, y + vy * dt)

        if mouse_pos is None:
            return
        for _ in range(self.spawn_per_frame):
            slot = next((p for p in self.particles if not p.alive), None)
            if slot is None:
                break
            slot.pos = (mouse_pos[0], mouse_pos[1])
            slot.vel = (
                self._rng.uniform(-_SPAWN_SPEED, _SPAWN_SPEED),
                self._rng.uniform(-_SPAWN_SPEED, _SPAWN_SPEED),
            )
            slot.life = self.max_life

    def uniform_data(self, time: float, rect: Rect) -> tuple[float, float, float, float]:
        """Per-frame values for rendering: time, area width and height, maximum life."""
        return (time, rect.width, rect.height, self.max_life)

    def alive_count(self) -> int:
        return sum(1 for particle in self.particles if particle.alive)