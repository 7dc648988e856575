"""
2D vector primitives used by the steering rules.

Directions are normalized by their L1 (Manhattan) length, |x| + |y|, not the
Euclidean length. Euclidean distance is only used for radius tests and for
distance-to-target reporting.
"""

from typing import Sequence

import pygame


def subtract(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    """Component-wise a - b."""
    return pygame.Vector2(a.x - b.x, a.y - b.y)


def absolute(v: pygame.Vector2) -> pygame.Vector2:
    """Component-wise absolute value."""
    return pygame.Vector2(abs(v.x), abs(v.y))


def sign(number: float) -> int:
    """Sign of a number, with zero mapping to zero."""
    if number < 0:
        return -1
    elif number > 0:
        return 1
    return 0


def magnitude(v: pygame.Vector2) -> float:
    """L1 length of a vector."""
    return abs(v.x) + abs(v.y)


def normalize(v: pygame.Vector2) -> pygame.Vector2:
    """
    Scale a vector so its L1 length is one.

    Args:
        v: Vector to normalize

    Returns:
        Normalized vector, or the zero vector if v has zero length
    """
    length = magnitude(v)
    if length == 0:
        return pygame.Vector2(0, 0)
    return pygame.Vector2(v.x / length, v.y / length)


def euclidean_distance(a: pygame.Vector2, b: pygame.Vector2) -> float:
    """Straight-line distance between two points."""
    return a.distance_to(b)


def centroid(points: Sequence[pygame.Vector2]) -> pygame.Vector2:
    """Arithmetic mean of a sequence of points (zero vector if empty)."""
    center = pygame.Vector2(0, 0)
    if not points:
        return center
    for point in points:
        center += point
    return center / len(points)
