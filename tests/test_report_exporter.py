import json
from unittest.mock import patch

import pandas as pd
import pytest

from benchman import BenchMan, ReportConfig
from benchman.report import ReportBuilder, ReportExporter
from benchman.store import SampleStore


def build_report():
    store = SampleStore()
    store.record("x", 0.1)
    store.record("x", 0.3)
    store.reserve("idle")
    return ReportBuilder(ReportConfig()).build(store, "run")


def test_save_writes_csv_and_json(tmp_path) -> None:
    with patch("benchman.report.report_exporter.wandb") as mock_wandb:
        mock_wandb.run = None
        ReportExporter(ReportConfig()).save(build_report(), str(tmp_path / "out"))

    df = pd.read_csv(tmp_path / "out" / "run_stats.csv")
    assert df["Label"].tolist() == ["x", "idle"]
    assert df.loc[0, "count"] == 2

    with open(tmp_path / "out" / "run_stats.json") as f:
        data = json.load(f)
    assert data["tag"] == "run"
    assert data["entries"][0]["mean"] == pytest.approx(0.2)
    assert data["entries"][1]["mean"] is None
    mock_wandb.log.assert_not_called()


def test_save_logs_to_active_wandb_run(tmp_path) -> None:
    with patch("benchman.report.report_exporter.wandb") as mock_wandb:
        ReportExporter(ReportConfig()).save(build_report(), str(tmp_path))

    stats = mock_wandb.log.call_args_list[0].args[0]
    assert stats["x_count"] == 2
    assert "idle_count" not in stats
    table_log = mock_wandb.log.call_args_list[1].args[0]
    assert "run_stats_table" in table_log
    mock_wandb.Table.assert_called_once()


def test_save_skips_wandb_table_when_disabled(tmp_path) -> None:
    with patch("benchman.report.report_exporter.wandb") as mock_wandb:
        config = ReportConfig(save_table_to_wandb=False)
        ReportExporter(config).save(build_report(), str(tmp_path))

    assert mock_wandb.log.call_count == 1
    mock_wandb.Table.assert_not_called()


def test_benchman_save(tmp_path, clock) -> None:
    benchman = BenchMan("bm", clock=clock)
    with benchman.get_stopwatch("x"):
        clock.advance(1)

    with patch("benchman.report.report_exporter.wandb") as mock_wandb:
        mock_wandb.run = None
        benchman.save(str(tmp_path))

    assert (tmp_path / "bm_stats.csv").exists()
    assert (tmp_path / "bm_stats.json").exists()
