import pygame
import pytest

from pointer_flock.simulation.dispatch import EventQueue
from pointer_flock.simulation.events import Tick, WeightChanged


def test_events_apply_in_arrival_order(make_state):
    state = make_state([(0, 0)])
    queue = EventQueue()

    queue.post(WeightChanged("flockCentre", 10))
    queue.post(WeightChanged("flockCentre", 30))
    queue.drain(state)

    assert state.weights.value("flockCentre") == 30
    assert len(queue) == 0


def test_weight_change_before_tick_is_seen_by_that_tick(make_state):
    state = make_state([(0, 0)], mousePosition=10, flockCentre=0)
    queue = EventQueue()

    queue.post(WeightChanged("mousePosition", 100))
    queue.post(Tick(1, pygame.Vector2(100, 0)))
    queue.drain(state)

    assert state.flock[0].position.x == pytest.approx(1.0)


def test_weight_change_after_tick_waits_for_next_tick(make_state):
    state = make_state([(0, 0)], mousePosition=10, flockCentre=0)
    queue = EventQueue()

    queue.post(Tick(1, pygame.Vector2(100, 0)))
    queue.post(WeightChanged("mousePosition", 100))
    queue.drain(state)

    assert state.flock[0].position.x == pytest.approx(0.1)
    assert state.weights.value("mousePosition") == 100


def test_drain_on_empty_queue_returns_state(make_state):
    state = make_state([(0, 0)])

    assert EventQueue().drain(state) is state
