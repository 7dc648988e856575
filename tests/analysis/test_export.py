import csv
import json

import pytest

from pointer_flock.analysis.export import export_timeseries_to_csv, export_run_report


@pytest.fixture
def results():
    sample = {"avg_speed": 1.5, "max_speed": 2.0, "cohesion": 10.0, "avg_distance_to_target": 42.123456}
    return [
        {"trial": 1, "metrics_over_time": [{"frame": 10, **sample}, {"frame": 20, **sample}]},
        {"trial": 2, "metrics_over_time": [{"frame": 10, **sample}]},
    ]


def test_timeseries_csv_has_one_row_per_sample(tmp_path, results):
    path = export_timeseries_to_csv(results, str(tmp_path / "series.csv"))

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 3
    assert [r["trial"] for r in rows] == ["1", "1", "2"]
    assert rows[0]["frame"] == "10"
    assert rows[0]["avg_distance_to_target"] == "42.1235"


def test_timeseries_csv_numbers_trials_when_missing(tmp_path, results):
    for result in results:
        del result["trial"]

    path = export_timeseries_to_csv(results, str(tmp_path / "series.csv"))

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert rows[-1]["trial"] == "2"


def test_run_report_is_json(tmp_path):
    report = {"frames": 5, "weights": {"avoidance": {"value": 110, "min": 50, "max": 150}}}

    path = export_run_report(report, str(tmp_path / "report.json"))

    with open(path) as f:
        assert json.load(f) == report
