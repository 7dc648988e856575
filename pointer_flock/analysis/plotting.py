"""
Plotting functions for visualizing run results.
"""

from typing import Dict, List, Any

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


TRIAL_COLORS = ['#FF6B6B', '#4ECDC4', '#FFB347', '#95E1D3', '#9B59B6']


def plot_metrics_over_time(results: List[Dict[str, Any]],
                           output_file: str = "flock_metrics_over_time.png",
                           show: bool = True) -> str:
    """
    Plot speed, cohesion and distance to pointer over time for each trial.

    Args:
        results: Results from HeadlessSimulation.get_results, one per trial
        output_file: Output filename for the plot
        show: Whether to open a window after saving

    Returns:
        Path to saved plot file, or "" if matplotlib is missing
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return ""

    panels = [
        ("avg_speed", "Average speed (|vx| + |vy|)"),
        ("cohesion", "Cohesion (avg dist to centroid)"),
        ("avg_distance_to_target", "Avg distance to pointer"),
    ]

    fig, axes = plt.subplots(len(panels), 1, figsize=(12, 10), sharex=True)

    for index, result in enumerate(results):
        samples = result["metrics_over_time"]
        frames = [s["frame"] for s in samples]
        color = TRIAL_COLORS[index % len(TRIAL_COLORS)]
        label = f"Trial {result.get('trial', index + 1)}"

        for ax, (key, _) in zip(axes, panels):
            ax.plot(frames, [s[key] for s in samples], label=label,
                    linewidth=2, color=color, alpha=0.8)

    for ax, (_, ylabel) in zip(axes, panels):
        ax.set_ylabel(ylabel, fontsize=10)
        ax.grid(True, alpha=0.3, linestyle='--')
    axes[0].legend(fontsize=8, loc='upper right')
    axes[-1].set_xlabel('Frame Number', fontsize=10)

    plt.suptitle('Flock Behaviour Over Time', fontsize=14, fontweight='bold')
    plt.tight_layout()

    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
