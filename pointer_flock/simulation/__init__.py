"""
Simulation module containing the flock state, event handling and headless runs.
"""

from .events import Tick, WeightChanged
from .state import SimulationState, step, apply_event
from .dispatch import EventQueue
from .snapshot import snapshot, FlockSnapshot, BoidView
from .driver import FlockDriver
from .benchmark import HeadlessSimulation

__all__ = [
    'Tick', 'WeightChanged',
    'SimulationState', 'step', 'apply_event',
    'EventQueue',
    'snapshot', 'FlockSnapshot', 'BoidView',
    'FlockDriver',
    'HeadlessSimulation',
]
