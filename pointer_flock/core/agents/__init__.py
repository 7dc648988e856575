"""
Agent classes for the flocking simulation.
"""

from .boid import Boid, make_flock

__all__ = ['Boid', 'make_flock']
