"""
Flock statistics computed from a simulation state.
"""

from typing import Dict, List, Sequence

import numpy as np

from ..core.agents.boid import Boid


def _positions(flock: Sequence[Boid]) -> np.ndarray:
    return np.array([(b.position.x, b.position.y) for b in flock], dtype=float).reshape(-1, 2)


def _velocities(flock: Sequence[Boid]) -> np.ndarray:
    return np.array([(b.velocity.x, b.velocity.y) for b in flock], dtype=float).reshape(-1, 2)


def flock_metrics(flock: Sequence[Boid], target) -> Dict[str, float]:
    """
    Summarize the flock at one instant.

    Args:
        flock: Boids to measure
        target: Pointer position (anything with x and y)

    Returns:
        Dictionary with avg_speed (L1, as the snapshot reports it),
        max_speed, cohesion (mean distance to the centroid) and
        avg_distance_to_target
    """
    if not flock:
        return {"avg_speed": 0.0, "max_speed": 0.0, "cohesion": 0.0, "avg_distance_to_target": 0.0}

    positions = _positions(flock)
    speeds = np.abs(_velocities(flock)).sum(axis=1)
    centre = positions.mean(axis=0)
    to_centre = np.linalg.norm(positions - centre, axis=1)
    to_target = np.linalg.norm(positions - np.array([target.x, target.y]), axis=1)

    return {
        "avg_speed": float(speeds.mean()),
        "max_speed": float(speeds.max()),
        "cohesion": float(to_centre.mean()),
        "avg_distance_to_target": float(to_target.mean()),
    }


def calculate_aggregate_stats(trial_results: List[Dict],
                              metrics: Sequence[str] = ("avg_speed", "avg_cohesion",
                                                        "avg_distance_to_target",
                                                        "elapsed_time_seconds")) -> Dict[str, float]:
    """
    Calculate mean and sample standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple runs
        metrics: Result keys to aggregate

    Returns:
        Dictionary with <metric>_mean and <metric>_std for each metric present
    """
    aggregates = {}

    for metric in metrics:
        values = np.array([r[metric] for r in trial_results if r.get(metric) is not None], dtype=float)
        if values.size:
            aggregates[f"{metric}_mean"] = float(values.mean())
            aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return aggregates
