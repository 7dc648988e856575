"""
Core module containing configuration, vector math, weights, agents and steering.
"""

from .config import SimulationConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG, DEFAULT_WEIGHTS
from .clock import FrameClock, normalize_elapsed
from .weights import ParameterStore, Weight, UnknownWeightError

__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'DEFAULT_WEIGHTS',
    'FrameClock', 'normalize_elapsed',
    'ParameterStore', 'Weight', 'UnknownWeightError',
]
