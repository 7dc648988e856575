"""
Export functions for saving run results to CSV and JSON.
"""

import csv
import json
from typing import Dict, List, Any


TIMESERIES_FIELDS = ['frame', 'avg_speed', 'max_speed', 'cohesion', 'avg_distance_to_target']


def export_timeseries_to_csv(results: List[Dict[str, Any]],
                             filename: str = "flock_metrics_timeseries.csv") -> str:
    """
    Export per-frame metrics of one or more runs to CSV.

    Args:
        results: Results from HeadlessSimulation.get_results, one per trial
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=['trial'] + TIMESERIES_FIELDS)
        writer.writeheader()

        for index, result in enumerate(results, start=1):
            trial = result.get("trial", index)
            for sample in result["metrics_over_time"]:
                row = {'trial': trial, 'frame': sample['frame']}
                for name in TIMESERIES_FIELDS[1:]:
                    row[name] = f"{sample[name]:.4f}"
                writer.writerow(row)

    print(f"  Metrics time-series saved to: {filename}")
    return filename


def export_run_report(results: Dict[str, Any], filename: str = "flock_run_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        results: Complete results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename
