import pytest

pytest.importorskip("matplotlib")

from pointer_flock.analysis import plotting


def test_plot_metrics_over_time_writes_file(tmp_path):
    samples = [
        {"frame": f, "avg_speed": f / 10, "max_speed": f / 5, "cohesion": 5.0, "avg_distance_to_target": 100 - f}
        for f in (10, 20, 30)
    ]
    output = tmp_path / "metrics.png"

    path = plotting.plot_metrics_over_time([{"metrics_over_time": samples}], str(output), show=False)

    assert path == str(output)
    assert output.exists()


def test_plot_is_skipped_without_matplotlib(tmp_path, monkeypatch):
    monkeypatch.setattr(plotting, "MATPLOTLIB_AVAILABLE", False)

    assert plotting.plot_metrics_over_time([], str(tmp_path / "none.png")) == ""
    assert not (tmp_path / "none.png").exists()
