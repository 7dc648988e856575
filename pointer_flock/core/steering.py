"""
Steering rules for the flock.

Every rule returns a velocity increment for one boid; nothing here writes to
a boid. The caller sums the increments and commits them once every boid has
been evaluated against the same pre-tick positions.
"""

from typing import Sequence

import pygame

from .agents.boid import Boid
from .vector import subtract, absolute, normalize, sign, euclidean_distance, centroid
from .weights import ParameterStore


def move_towards(position: pygame.Vector2, target: pygame.Vector2,
                 speed: float, delta: float) -> pygame.Vector2:
    """
    Velocity increment that steers from a position towards a target.

    A negative speed steers away from the target.

    Args:
        position: Current position of the boid
        target: Point to steer towards
        speed: Rule weight
        delta: Elapsed time in nominal frames

    Returns:
        Velocity increment
    """
    distance = subtract(target, position)
    direction = normalize(absolute(distance))

    return pygame.Vector2(
        direction.x * sign(distance.x) * speed * delta,
        direction.y * sign(distance.y) * speed * delta,
    )


def flock_centre(flock: Sequence[Boid]) -> pygame.Vector2:
    """Mean position of every boid in the flock."""
    return centroid([boid.position for boid in flock])


def seek_target(boid: Boid, target: pygame.Vector2, weights: ParameterStore,
                delta: float) -> pygame.Vector2:
    """Attraction towards the pointer."""
    return move_towards(boid.position, target, weights.scaled("mousePosition"), delta)


def seek_centroid(boid: Boid, centre: pygame.Vector2, weights: ParameterStore,
                  delta: float) -> pygame.Vector2:
    """Cohesion towards the flock centre."""
    return move_towards(boid.position, centre, weights.scaled("flockCentre"), delta)


def avoid_neighbors(boid: Boid, flock: Sequence[Boid], weights: ParameterStore,
                    delta: float) -> pygame.Vector2:
    """
    Separation from every boid closer than the avoidance distance.

    Repulsion falls off linearly from full strength at zero distance to
    nothing at the avoidance distance.

    Args:
        boid: Boid being steered
        flock: Every boid in the flock, including ``boid`` itself
        weights: Current steering weights
        delta: Elapsed time in nominal frames

    Returns:
        Velocity increment
    """
    avoidance = weights.scaled("avoidance")
    avoidance_distance = weights.value("avoidanceDistance")

    steering = pygame.Vector2(0, 0)
    for other in flock:
        if other is boid:
            continue

        distance = euclidean_distance(boid.position, other.position)
        if distance < avoidance_distance:
            distance_ratio = 1 - distance / avoidance_distance
            steering += move_towards(boid.position, other.position, -avoidance * distance_ratio, delta)

    return steering


def steer(boid: Boid, flock: Sequence[Boid], target: pygame.Vector2,
          centre: pygame.Vector2, weights: ParameterStore, delta: float) -> pygame.Vector2:
    """Sum of all three rule contributions for one boid."""
    return (
        seek_target(boid, target, weights, delta)
        + seek_centroid(boid, centre, weights, delta)
        + avoid_neighbors(boid, flock, weights, delta)
    )
