"""
Serialized event dispatch.
"""

from collections import deque
from typing import Deque

from .events import Event
from .state import SimulationState, apply_event


class EventQueue:
    """
    Applies events to a state one at a time in arrival order.

    Each event is applied completely before the next is taken, so ticks and
    weight changes never interleave.
    """

    def __init__(self):
        self._pending: Deque[Event] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def post(self, event: Event) -> None:
        """Queue an event."""
        self._pending.append(event)

    def drain(self, state: SimulationState) -> SimulationState:
        """
        Apply every pending event, including any posted while draining.

        Args:
            state: Simulation state to update

        Returns:
            The updated state
        """
        while self._pending:
            apply_event(state, self._pending.popleft())
        return state
