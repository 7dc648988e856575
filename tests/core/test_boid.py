import random

import pygame
import pytest

from pointer_flock.core.agents.boid import Boid, make_flock, DEFAULT_HUE


def test_integrate_moves_then_damps():
    boid = Boid(position=pygame.Vector2(0, 0), velocity=pygame.Vector2(0.5, -1))

    boid.integrate(1, 0.98)

    assert boid.position == pygame.Vector2(0.5, -1)
    assert boid.velocity.x == pytest.approx(0.49)
    assert boid.velocity.y == pytest.approx(-0.98)


def test_integrate_scales_movement_by_delta():
    boid = Boid(position=pygame.Vector2(10, 10), velocity=pygame.Vector2(1, 2))

    boid.integrate(2, 0.98)

    assert boid.position == pygame.Vector2(12, 14)
    assert boid.velocity.x == pytest.approx(0.49)


def test_small_delta_amplifies_velocity():
    boid = Boid(position=pygame.Vector2(0, 0), velocity=pygame.Vector2(1, 0))

    boid.integrate(0.5, 0.98)

    assert boid.velocity.x == pytest.approx(1.96)


def test_zero_delta_leaves_boid_unchanged():
    boid = Boid(position=pygame.Vector2(3, 4), velocity=pygame.Vector2(1, 1))

    boid.integrate(0, 0.98)

    assert (boid.position.x, boid.position.y) == (3, 4)
    assert (boid.velocity.x, boid.velocity.y) == (1, 1)


def test_make_flock_spawns_everyone_at_rest_on_one_point():
    flock = make_flock(5, (100, 50))

    assert len(flock) == 5
    assert all(b.position == pygame.Vector2(100, 50) for b in flock)
    assert all(b.velocity == pygame.Vector2(0, 0) for b in flock)
    assert all(b.hue == DEFAULT_HUE for b in flock)


def test_make_flock_keys_are_unique():
    flock = make_flock(20, (0, 0))

    assert len({b.key for b in flock}) == 20


def test_make_flock_positions_are_independent():
    flock = make_flock(2, (0, 0))

    flock[0].position.x += 5

    assert flock[1].position == pygame.Vector2(0, 0)


def test_make_flock_with_spread_scatters_around_spawn_point():
    flock = make_flock(50, (100, 50), spread=10, rng=random.Random(7))

    assert all(90 <= b.position.x <= 110 and 40 <= b.position.y <= 60 for b in flock)
    assert len({(b.position.x, b.position.y) for b in flock}) == 50


def test_make_flock_spread_is_reproducible():
    first = make_flock(5, (0, 0), spread=10, rng=random.Random(1))
    second = make_flock(5, (0, 0), spread=10, rng=random.Random(1))

    assert [(b.position.x, b.position.y) for b in first] == [(b.position.x, b.position.y) for b in second]
