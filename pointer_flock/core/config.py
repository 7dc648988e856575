"""
Configuration classes and defaults for the flocking simulation.
"""

import json
import logging
from dataclasses import dataclass, field
from numbers import Number
from typing import Dict, Tuple


logger = logging.getLogger(__name__)

# Nominal frame rate the steering weights were tuned against
NOMINAL_FPS = 60

# Initial slider values and the ranges the control surface enforces
DEFAULT_WEIGHTS: Dict[str, Dict[str, float]] = {
    "avoidance": {"value": 110, "min": 50, "max": 150},
    "avoidanceDistance": {"value": 50, "min": 10, "max": 100},
    "flockCentre": {"value": 20, "min": 5, "max": 50},
    "mousePosition": {"value": 50, "min": 10, "max": 100},
}


@dataclass
class SimulationConfig:
    """Configuration for the flocking simulation."""

    # Screen settings
    screenWidth: int = 1200
    screenHeight: int = 650

    # Flock
    boidCount: int = 200
    boidHue: int = 276
    # Half-width of the square boids are scattered over around the spawn point
    spawnSpread: float = 0.0

    # Movement parameters
    friction: float = 0.98
    frameRate: int = NOMINAL_FPS

    # Steering weights, in slider units
    weights: Dict[str, Dict[str, float]] = field(
        default_factory=lambda: {name: dict(spec) for name, spec in DEFAULT_WEIGHTS.items()}
    )

    # Output
    reportOutputFile: str = "flock_run_report.json"

    @property
    def frame_duration_ms(self) -> float:
        """Duration of one nominal frame in milliseconds."""
        return 1000 / self.frameRate

    @property
    def spawn_point(self) -> Tuple[float, float]:
        """
        Point every boid starts at.

        Offset by one unit from the screen centre so a pointer resting at the
        centre still pulls the flock before it first moves.
        """
        return (self.screenWidth / 2 - 1, self.screenHeight / 2 - 1)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "boidCount": self.boidCount,
            "boidHue": self.boidHue,
            "spawnSpread": self.spawnSpread,
            "friction": self.friction,
            "frameRate": self.frameRate,
            "weights": {name: dict(spec) for name, spec in self.weights.items()},
            "reportOutputFile": self.reportOutputFile,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        config = cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__ and k != "weights"})
        # Partial weight overrides keep the defaults for anything not given
        for name, override in data.get("weights", {}).items():
            if name not in config.weights:
                logger.warning("Ignoring unknown weight %r in config", name)
                continue
            if isinstance(override, Number):
                override = {"value": override}
            config.weights[name].update(override)
        return config

    @classmethod
    def from_json(cls, path: str) -> "SimulationConfig":
        """Load config overrides from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))


# Default configuration for interactive use
DEFAULT_CONFIG = SimulationConfig()

# Smaller flock for headless benchmarking
BENCHMARK_CONFIG = SimulationConfig(
    boidCount=60,
    spawnSpread=20.0,
    reportOutputFile="flock_benchmark_report.json",
)
