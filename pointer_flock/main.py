"""
Main entry point for the flocking simulation.

Run with:
    python -m pointer_flock.main                           # Single headless run
    python -m pointer_flock.main --benchmark --trials 5    # Seeded trials with frame jitter
    python -m pointer_flock.main --config my_config.json   # Override configuration
"""

import logging
import os
import sys
from typing import Optional

from .core.config import SimulationConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG


def _build_pointer_path(kind: str, config: SimulationConfig):
    from .simulation.benchmark import default_pointer_path, fixed_pointer

    if kind == "fixed":
        return fixed_pointer(config.screenWidth / 2, config.screenHeight / 2)
    return default_pointer_path(config)


def run_simulation(config: SimulationConfig, frames: int = 3000, pointer: str = "orbit",
                   jitter_ms: float = 0.0, output_dir: str = ".", plot: bool = True):
    """
    Run a single headless simulation and export its results.

    Args:
        config: Simulation configuration
        frames: Duration in frames
        pointer: Pointer path ("orbit" or "fixed")
        jitter_ms: Standard deviation of frame time jitter
        output_dir: Directory for report, CSV and plot
        plot: Whether to plot metrics
    """
    from .simulation.benchmark import HeadlessSimulation
    from .analysis.export import export_run_report, export_timeseries_to_csv
    from .analysis.plotting import plot_metrics_over_time

    print("=" * 60)
    print("Pointer Flock - Headless Run")
    print("=" * 60)
    print(f"Boids: {config.boidCount}")
    print(f"Frames: {frames}")
    print(f"Pointer: {pointer}")
    print(f"Frame jitter: {jitter_ms} ms")
    if config.spawnSpread == 0 and config.boidCount > 1:
        print("Note: spawnSpread is 0, so every boid starts on one point and the flock")
        print("      moves as a single point. Set spawnSpread in --config to scatter it.")
    print()

    sim = HeadlessSimulation(config, _build_pointer_path(pointer, config), jitter_ms=jitter_ms, seed=42)
    result = sim.run(frames)
    result["config"] = config.to_dict()

    print(f"\nAvg speed: {result['avg_speed']:.3f}")
    print(f"Avg cohesion: {result['avg_cohesion']:.1f}")
    print(f"Avg distance to pointer: {result['avg_distance_to_target']:.1f}")

    export_run_report(result, os.path.join(output_dir, config.reportOutputFile))
    export_timeseries_to_csv([result], os.path.join(output_dir, "flock_metrics_timeseries.csv"))
    if plot:
        plot_metrics_over_time([result], os.path.join(output_dir, "flock_metrics_over_time.png"))

    return result


def run_benchmark(config: SimulationConfig, num_trials: int = 5, frames: int = 3000,
                  pointer: str = "orbit", jitter_ms: float = 4.0, output_dir: str = ".", plot: bool = True):
    """
    Run seeded trials with frame time jitter and report aggregate statistics.

    Args:
        config: Simulation configuration
        num_trials: Number of trials
        frames: Duration in frames per trial
        pointer: Pointer path ("orbit" or "fixed")
        jitter_ms: Standard deviation of frame time jitter
        output_dir: Directory for report, CSV and plot
        plot: Whether to plot metrics
    """
    from .simulation.benchmark import HeadlessSimulation
    from .analysis.export import export_run_report, export_timeseries_to_csv
    from .analysis.metrics import calculate_aggregate_stats
    from .analysis.plotting import plot_metrics_over_time

    print("=" * 60)
    print("FLOCK BENCHMARK")
    print("=" * 60)
    print(f"Duration per trial: {frames} frames")
    print(f"Trials: {num_trials}")
    print(f"Pointer: {pointer}")
    print(f"Frame jitter: {jitter_ms} ms")
    print()

    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        trial_config = SimulationConfig.from_dict(config.to_dict())
        sim = HeadlessSimulation(trial_config, _build_pointer_path(pointer, trial_config),
                                 jitter_ms=jitter_ms, seed=42 + trial)
        result = sim.run(frames)
        result["trial"] = trial + 1
        results.append(result)

    aggregates = calculate_aggregate_stats(results)

    print("\n" + "=" * 60)
    print("BENCHMARK COMPLETE")
    print("=" * 60)
    for key, value in aggregates.items():
        print(f"  {key}: {value:.3f}")

    report = {
        "config": config.to_dict(),
        "pointer": pointer,
        "trials": results,
        "aggregate": aggregates,
    }
    export_run_report(report, os.path.join(output_dir, config.reportOutputFile))
    export_timeseries_to_csv(results, os.path.join(output_dir, "flock_benchmark_timeseries.csv"))
    if plot:
        plot_metrics_over_time(results, os.path.join(output_dir, "flock_benchmark_over_time.png"))

    return report


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Pointer-driven flocking simulation",
        epilog="The default run spawns every boid on one point with spawnSpread 0, so the flock "
               "moves as a single point. Use --benchmark or a --config with spawnSpread to scatter it.",
    )
    parser.add_argument("--benchmark", action="store_true", help="Run seeded benchmark trials")
    parser.add_argument("--trials", type=int, default=5, help="Number of benchmark trials")
    parser.add_argument("--frames", type=int, default=3000, help="Simulation duration in frames")
    parser.add_argument("--config", help="JSON file with configuration overrides")
    parser.add_argument("--pointer", choices=["orbit", "fixed"], default="orbit", help="Pointer path")
    parser.add_argument("--jitter", type=float, default=None, help="Frame time jitter in ms")
    parser.add_argument("--output-dir", default=".", help="Directory for reports and plots")
    parser.add_argument("--no-plot", action="store_true", help="Skip plotting")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    if args.config:
        config = SimulationConfig.from_json(args.config)
    elif args.benchmark:
        config = SimulationConfig.from_dict(BENCHMARK_CONFIG.to_dict())
    else:
        config = SimulationConfig.from_dict(DEFAULT_CONFIG.to_dict())

    try:
        os.makedirs(args.output_dir, exist_ok=True)
        if args.benchmark:
            run_benchmark(config, num_trials=args.trials, frames=args.frames, pointer=args.pointer,
                          jitter_ms=4.0 if args.jitter is None else args.jitter,
                          output_dir=args.output_dir, plot=not args.no_plot)
        else:
            run_simulation(config, frames=args.frames, pointer=args.pointer,
                           jitter_ms=0.0 if args.jitter is None else args.jitter,
                           output_dir=args.output_dir, plot=not args.no_plot)
    except OSError as e:
        print(f"Error writing results: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
