"""Shared fixtures for the flocking tests."""
import os

# Plot tests must never open a window
os.environ.setdefault("MPLBACKEND", "Agg")

import pygame
import pytest

from pointer_flock.core.agents.boid import Boid
from pointer_flock.core.config import SimulationConfig, DEFAULT_WEIGHTS
from pointer_flock.core.weights import ParameterStore
from pointer_flock.simulation.state import SimulationState


def weight_spec(**values):
    """Default weight table with some values replaced."""
    spec = {name: dict(w) for name, w in DEFAULT_WEIGHTS.items()}
    for name, value in values.items():
        spec[name]["value"] = value
    return spec


@pytest.fixture
def make_weights():
    """Build a ParameterStore from keyword overrides of the defaults."""
    def _make(**values):
        return ParameterStore(weight_spec(**values))
    return _make


@pytest.fixture
def make_state():
    """Build a SimulationState whose boids sit at the given points."""
    def _make(points, **weight_values):
        config = SimulationConfig(boidCount=len(points), weights=weight_spec(**weight_values))
        state = SimulationState(config)
        for boid, (x, y) in zip(state.flock, points):
            boid.position = pygame.Vector2(x, y)
        return state
    return _make


@pytest.fixture
def boid_at():
    def _make(x, y, key=None, vx=0.0, vy=0.0):
        boid = Boid(position=pygame.Vector2(x, y), velocity=pygame.Vector2(vx, vy))
        if key is not None:
            boid.key = key
        return boid
    return _make
