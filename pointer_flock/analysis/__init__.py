"""
Analysis module for flock metrics, plotting and exporting run results.
"""

from .metrics import flock_metrics, calculate_aggregate_stats
from .plotting import plot_metrics_over_time
from .export import export_timeseries_to_csv, export_run_report

__all__ = [
    'flock_metrics',
    'calculate_aggregate_stats',
    'plot_metrics_over_time',
    'export_timeseries_to_csv',
    'export_run_report',
]
