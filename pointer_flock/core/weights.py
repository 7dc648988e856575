"""
Externally adjustable steering weights.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping


logger = logging.getLogger(__name__)

# Slider units are divided by this before use as a rule multiplier
WEIGHT_SCALE = 100


class UnknownWeightError(KeyError):
    """Raised when a weight name is not part of the parameter store."""


@dataclass
class Weight:
    """
    A named tunable scalar.

    The range is advisory: it describes what the control surface allows,
    the simulation itself only ever reads ``value``.
    """
    value: float
    min: float
    max: float


class ParameterStore:
    """
    Holds the steering weights read by the simulation each tick.

    Weights are kept in the units a slider produces (e.g. 0-150).
    ``scaled`` converts them to the multiplier the rules use.
    """

    def __init__(self, weights: Mapping[str, Mapping[str, float]]):
        """
        Initialize the store.

        Args:
            weights: Mapping of weight name to {"value", "min", "max"}
        """
        self._weights: Dict[str, Weight] = {
            name: Weight(value=spec["value"], min=spec["min"], max=spec["max"])
            for name, spec in weights.items()
        }

    def __contains__(self, name: str) -> bool:
        return name in self._weights

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __getitem__(self, name: str) -> Weight:
        try:
            return self._weights[name]
        except KeyError:
            raise UnknownWeightError(name) from None

    def value(self, name: str) -> float:
        """Current value of a weight in slider units."""
        return self[name].value

    def scaled(self, name: str) -> float:
        """Current value of a weight as a rule multiplier."""
        return self[name].value / WEIGHT_SCALE

    def set(self, name: str, value: float) -> None:
        """
        Replace the value of one weight.

        Range enforcement is left to the control surface, so out-of-range
        values are stored as given.
        """
        weight = self[name]
        logger.debug("Weight %s: %s -> %s", name, weight.value, value)
        weight.value = value

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Convert weights to a plain dictionary."""
        return {
            name: {"value": w.value, "min": w.min, "max": w.max}
            for name, w in self._weights.items()
        }
