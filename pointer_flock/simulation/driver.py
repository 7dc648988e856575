"""
Adapter between external input samples and simulation events.
"""

from typing import Optional

import pygame

from ..core.clock import FrameClock
from .dispatch import EventQueue
from .events import Tick, WeightChanged
from .snapshot import FlockSnapshot, snapshot
from .state import SimulationState


class FlockDriver:
    """
    Feeds pointer, control and frame samples into a simulation.

    Pointer samples are held until the next frame. The flock does not move
    until the first pointer sample has arrived; frames before that still
    advance the clock.
    """

    def __init__(self, state: SimulationState, start_ms: float = 0.0):
        """
        Initialize the driver.

        Args:
            state: Simulation state to drive
            start_ms: Timestamp of the first frame's predecessor
        """
        self.state = state
        self.clock = FrameClock(start_ms, state.config.frame_duration_ms)
        self.queue = EventQueue()
        self.pointer: Optional[pygame.Vector2] = None

    def pointer_moved(self, x: float, y: float) -> None:
        """Record the latest pointer position."""
        self.pointer = pygame.Vector2(x, y)

    def weight_changed(self, name: str, value: float) -> None:
        """Queue a weight change for the next frame."""
        self.queue.post(WeightChanged(name, value))

    def frame(self, timestamp_ms: float) -> FlockSnapshot:
        """
        Process one animation frame.

        Args:
            timestamp_ms: Frame timestamp in milliseconds

        Returns:
            Snapshot of the flock after the frame
        """
        delta = self.clock.sample(timestamp_ms)
        if self.pointer is not None:
            self.queue.post(Tick(delta, pygame.Vector2(self.pointer)))
        self.queue.drain(self.state)
        return snapshot(self.state)
