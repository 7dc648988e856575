"""
Events applied to the simulation state.
"""

from dataclasses import dataclass
from typing import Union

import pygame


@dataclass(frozen=True)
class Tick:
    """Advance the simulation by ``delta`` nominal frames towards ``target``."""
    delta: float
    target: pygame.Vector2


@dataclass(frozen=True)
class WeightChanged:
    """Set one steering weight to a new value, in slider units."""
    name: str
    value: float


Event = Union[Tick, WeightChanged]
