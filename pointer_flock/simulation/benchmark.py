"""
Headless simulation for benchmarking and data collection.
"""

import itertools
import math
import random
import time
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from ..analysis.metrics import flock_metrics
from ..core.config import SimulationConfig, BENCHMARK_CONFIG
from .driver import FlockDriver
from .state import SimulationState


# Frames between recorded metric samples
METRICS_INTERVAL = 10

# Shortest simulated frame, so jitter never produces zero or negative time
MIN_FRAME_MS = 1.0

PointerPath = Iterator[Tuple[float, float]]


def fixed_pointer(x: float, y: float) -> PointerPath:
    """Pointer that never moves."""
    return itertools.repeat((x, y))


def orbit_pointer(centre: Tuple[float, float], radius: float, period_frames: int = 600) -> PointerPath:
    """
    Pointer circling a centre point, one sample per frame.

    Args:
        centre: Orbit centre (x, y)
        radius: Orbit radius
        period_frames: Frames per full revolution
    """
    cx, cy = centre
    for frame in itertools.count():
        angle = 2 * math.pi * frame / period_frames
        yield (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def default_pointer_path(config: SimulationConfig) -> PointerPath:
    """Orbit around the screen centre at a third of the smaller screen side."""
    centre = (config.screenWidth / 2, config.screenHeight / 2)
    return orbit_pointer(centre, min(config.screenWidth, config.screenHeight) / 3)


class HeadlessSimulation:
    """
    Runs the flock without a display.

    Frame timestamps are simulated at the nominal frame rate, optionally
    with Gaussian jitter to exercise the delta scaling, and every input goes
    through the same driver an interactive front end would use.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 pointer_path: Optional[PointerPath] = None,
                 jitter_ms: float = 0.0, seed: Optional[int] = None,
                 weight_schedule: Optional[Mapping[int, Mapping[str, float]]] = None):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (uses benchmark defaults if None)
            pointer_path: Iterator of pointer samples, one per frame
            jitter_ms: Standard deviation of frame time jitter
            seed: Seed for the spawn spread and frame jitter
            weight_schedule: Weight changes to post, keyed by frame number
        """
        self.config = config if config else SimulationConfig.from_dict(BENCHMARK_CONFIG.to_dict())
        self.rng = random.Random(seed)
        self.state = SimulationState(self.config, self.rng)
        self.driver = FlockDriver(self.state)
        self.pointer_path = pointer_path if pointer_path is not None else default_pointer_path(self.config)
        self.jitter_ms = jitter_ms
        self.weight_schedule = dict(weight_schedule or {})

        self.frame_count = 0
        self.timestamp_ms = 0.0
        self.start_time = time.time()

        self.stats: Dict[str, Any] = {
            "speed_total": 0.0,
            "cohesion_total": 0.0,
            "distance_total": 0.0,
            "samples": 0,
            "metrics_over_time": [],
        }

    def _next_timestamp(self) -> float:
        frame_ms = self.config.frame_duration_ms
        if self.jitter_ms > 0:
            frame_ms = max(MIN_FRAME_MS, self.rng.gauss(frame_ms, self.jitter_ms))
        self.timestamp_ms += frame_ms
        return self.timestamp_ms

    def update(self) -> None:
        """Advance the simulation by one frame."""
        for name, value in self.weight_schedule.get(self.frame_count, {}).items():
            self.driver.weight_changed(name, value)

        x, y = next(self.pointer_path)
        self.driver.pointer_moved(x, y)
        self.driver.frame(self._next_timestamp())

        self.frame_count += 1
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Record flock metrics at the sampling interval."""
        if self.frame_count % METRICS_INTERVAL != 0:
            return

        metrics = flock_metrics(self.state.flock, self.state.target)
        self.stats["speed_total"] += metrics["avg_speed"]
        self.stats["cohesion_total"] += metrics["cohesion"]
        self.stats["distance_total"] += metrics["avg_distance_to_target"]
        self.stats["samples"] += 1

        self.stats["metrics_over_time"].append({"frame": self.frame_count, **metrics})

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run for a number of frames.

        Args:
            max_frames: Frames to simulate

        Returns:
            Results dictionary with all statistics
        """
        print(f"Running headless simulation for {max_frames} frames...")

        while self.frame_count < max_frames:
            self.update()

            if self.frame_count % 1000 == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed)")

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing all statistics and derived metrics
        """
        samples = self.stats["samples"]

        return {
            "frames": self.frame_count,
            "boid_count": len(self.state.flock),
            "elapsed_time_seconds": time.time() - self.start_time,
            "avg_speed": self.stats["speed_total"] / samples if samples else 0.0,
            "avg_cohesion": self.stats["cohesion_total"] / samples if samples else 0.0,
            "avg_distance_to_target": self.stats["distance_total"] / samples if samples else 0.0,
            "final_metrics": flock_metrics(self.state.flock, self.state.target),
            "metrics_over_time": self.stats["metrics_over_time"],
            "weights": self.state.weights.to_dict(),
        }
