"""
Simulation state and the per-tick flock update.
"""

import random
from typing import List, Optional

import pygame

from ..core.agents.boid import Boid, make_flock
from ..core.config import SimulationConfig
from ..core.steering import flock_centre, steer
from ..core.weights import ParameterStore
from .events import Event, Tick, WeightChanged


class SimulationState:
    """
    The flock, the last-known target and the current weights.

    Created once per run and mutated in place by ``apply_event``.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the state.

        Args:
            config: Simulation configuration (uses defaults if None)
            rng: Random generator for the spawn spread
        """
        self.config = config if config else SimulationConfig()
        self.flock: List[Boid] = make_flock(
            self.config.boidCount, self.config.spawn_point, self.config.boidHue,
            spread=self.config.spawnSpread, rng=rng,
        )
        self.target = pygame.Vector2(0, 0)
        self.weights = ParameterStore(self.config.weights)
        self.tick_count = 0


def step(state: SimulationState, delta: float, target: pygame.Vector2) -> List[Boid]:
    """
    Advance every boid by one tick.

    All steering is computed from positions as they stood before the tick,
    then velocities are updated and positions integrated.

    Args:
        state: Simulation state to update
        delta: Elapsed time in nominal frames
        target: Pointer position for this tick

    Returns:
        The updated flock
    """
    state.target = pygame.Vector2(target)
    centre = flock_centre(state.flock)

    steering = [
        steer(boid, state.flock, state.target, centre, state.weights, delta)
        for boid in state.flock
    ]

    for boid, velocity_change in zip(state.flock, steering):
        boid.velocity += velocity_change
        boid.integrate(delta, state.config.friction)

    state.tick_count += 1
    return state.flock


def apply_event(state: SimulationState, event: Event) -> SimulationState:
    """
    Apply one event to the state.

    Args:
        state: Simulation state to update
        event: A Tick or a WeightChanged

    Returns:
        The same state, updated
    """
    if isinstance(event, Tick):
        step(state, event.delta, event.target)
    elif isinstance(event, WeightChanged):
        state.weights.set(event.name, event.value)
    else:
        raise TypeError(f"Unsupported event: {event!r}")
    return state
