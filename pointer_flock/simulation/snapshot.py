"""
Render-ready view of the flock.
"""

import math
from typing import NamedTuple, Tuple

from ..core.vector import euclidean_distance, magnitude
from .state import SimulationState


class BoidView(NamedTuple):
    """What a renderer needs to draw one boid."""
    key: str
    x: float
    y: float
    heading: float
    speed: float
    hue: int
    distance_to_target: float


class FlockSnapshot(NamedTuple):
    """Immutable view of the flock and the target it is steering towards."""
    boids: Tuple[BoidView, ...]
    target: Tuple[float, float]


def snapshot(state: SimulationState) -> FlockSnapshot:
    """
    Capture the current flock for rendering.

    Heading is the velocity angle in radians and speed is the L1 length of
    the velocity.
    """
    target = state.target
    views = tuple(
        BoidView(
            key=boid.key,
            x=boid.position.x,
            y=boid.position.y,
            heading=math.atan2(boid.velocity.y, boid.velocity.x),
            speed=magnitude(boid.velocity),
            hue=boid.hue,
            distance_to_target=euclidean_distance(boid.position, target),
        )
        for boid in state.flock
    )
    return FlockSnapshot(boids=views, target=(target.x, target.y))
