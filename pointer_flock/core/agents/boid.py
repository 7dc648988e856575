"""
Boid agent and flock construction.
"""

import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pygame


logger = logging.getLogger(__name__)

DEFAULT_HUE = 276


def _new_key() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Boid:
    """
    A single flocking agent.

    Identity (``key``) is stable across ticks and is only meant for matching
    boids between rendered frames. Steering never looks at it.
    """
    position: pygame.Vector2
    velocity: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0, 0))
    hue: int = DEFAULT_HUE
    key: str = field(default_factory=_new_key)

    def integrate(self, delta: float, friction: float) -> None:
        """
        Move the boid by its velocity and apply friction.

        Damping is ``friction / delta``, so at delta 1 the velocity is
        multiplied by ``friction``, and for delta below ``friction`` the
        multiplier exceeds one and velocity grows. A zero delta has no finite
        multiplier and leaves velocity unchanged.

        Args:
            delta: Elapsed time in nominal frames
            friction: Damping constant
        """
        self.position += self.velocity * delta

        if delta == 0:
            logger.debug("Zero delta for boid %s, damping skipped", self.key)
            return

        self.velocity *= friction / delta


def make_flock(count: int, spawn_point: Tuple[float, float], hue: int = DEFAULT_HUE,
               spread: float = 0.0, rng: Optional[random.Random] = None) -> List[Boid]:
    """
    Create a flock of boids at rest around a spawn point.

    With no spread every boid starts on exactly the same point.

    Args:
        count: Number of boids
        spawn_point: Starting (x, y) shared by all boids
        hue: Display hue for every boid
        spread: Half-width of the square boids are scattered over
        rng: Random generator used when spread is non-zero

    Returns:
        List of new boids
    """
    x, y = spawn_point
    if spread <= 0:
        return [Boid(position=pygame.Vector2(x, y), hue=hue) for _ in range(count)]

    rng = rng if rng else random.Random()
    return [
        Boid(position=pygame.Vector2(x + rng.uniform(-spread, spread), y + rng.uniform(-spread, spread)), hue=hue)
        for _ in range(count)
    ]
