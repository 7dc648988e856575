import pygame
import pytest

from pointer_flock.core.clock import FRAME_DURATION_MS
from pointer_flock.simulation.driver import FlockDriver
from pointer_flock.simulation.snapshot import FlockSnapshot


def test_flock_waits_for_first_pointer_sample(make_state):
    state = make_state([(0, 0), (5, 0)])
    driver = FlockDriver(state)

    result = driver.frame(FRAME_DURATION_MS)

    assert state.tick_count == 0
    assert [b.position for b in state.flock] == [pygame.Vector2(0, 0), pygame.Vector2(5, 0)]
    assert isinstance(result, FlockSnapshot)
    assert len(result.boids) == 2


def test_frames_before_pointer_still_advance_the_clock(make_state):
    state = make_state([(0, 0)], mousePosition=100, flockCentre=0)
    driver = FlockDriver(state)

    driver.frame(FRAME_DURATION_MS)
    driver.pointer_moved(100, 0)
    driver.frame(2 * FRAME_DURATION_MS)

    # One frame elapsed since the previous sample, not two
    assert state.tick_count == 1
    assert state.flock[0].position.x == pytest.approx(1.0)


def test_last_pointer_sample_is_reused(make_state):
    state = make_state([(0, 0)])
    driver = FlockDriver(state)

    driver.pointer_moved(40, 60)
    driver.frame(FRAME_DURATION_MS)
    driver.frame(2 * FRAME_DURATION_MS)

    assert state.tick_count == 2
    assert state.target == pygame.Vector2(40, 60)


def test_weight_change_applies_on_next_frame(make_state):
    state = make_state([(0, 0)])
    driver = FlockDriver(state)

    driver.weight_changed("avoidanceDistance", 80)
    assert state.weights.value("avoidanceDistance") == 50

    driver.frame(FRAME_DURATION_MS)
    assert state.weights.value("avoidanceDistance") == 80


def test_snapshot_reports_target(make_state):
    state = make_state([(0, 0)])
    driver = FlockDriver(state)

    driver.pointer_moved(7, 8)
    result = driver.frame(FRAME_DURATION_MS)

    assert result.target == (7, 8)
