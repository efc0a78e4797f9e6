"""Tests for the hrv-complexity command line interface."""

import json
from pathlib import Path

import numpy as np
import polars as pl
from typer.testing import CliRunner

from hrv.complexity.cli import app

runner = CliRunner()


def _write_series(tmp_path: Path, values, name: str = "rr.csv", column: str = "value") -> Path:
    path = tmp_path / name
    df = pl.DataFrame({column: values})
    if path.suffix == ".parquet":
        df.write_parquet(path)
    else:
        df.write_csv(path)
    return path


class TestMSECommand:
    """Tests for the mse CLI command."""

    def test_writes_json_output(self, tmp_path: Path, rr_intervals: np.ndarray) -> None:
        series_path = _write_series(tmp_path, rr_intervals.tolist())
        out_path = tmp_path / "mse.json"

        result = runner.invoke(app, ["mse", str(series_path), "--max-scale", "5", "--output", str(out_path)])
        assert result.exit_code == 0
        payload = json.loads(out_path.read_text())
        assert payload["original"]["scales"] == [1, 2, 3, 4, 5]
        assert len(payload["original"]["entropy_values"]) == 5
        assert "shuffled" not in payload

    def test_shuffled_baseline(self, tmp_path: Path, rr_intervals: np.ndarray) -> None:
        series_path = _write_series(tmp_path, rr_intervals.tolist(), name="rr.parquet")
        out_path = tmp_path / "mse.json"

        result = runner.invoke(
            app,
            ["mse", str(series_path), "--max-scale", "3", "--shuffled", "--seed", "1", "--output", str(out_path)],
        )
        assert result.exit_code == 0
        payload = json.loads(out_path.read_text())
        assert payload["shuffled"]["scales"] == [1, 2, 3]

    def test_prints_table(self, tmp_path: Path, rr_intervals: np.ndarray) -> None:
        series_path = _write_series(tmp_path, rr_intervals.tolist())
        result = runner.invoke(app, ["mse", str(series_path), "--max-scale", "2"])
        assert result.exit_code == 0
        assert "MSE" in result.output
        assert "Complexity index" in result.output

    def test_json_input_with_custom_column(self, tmp_path: Path, rr_intervals: np.ndarray) -> None:
        series_path = tmp_path / "rr.json"
        series_path.write_text(json.dumps({"rr": rr_intervals.tolist()}))
        result = runner.invoke(app, ["mse", str(series_path), "--column", "rr", "--max-scale", "2"])
        assert result.exit_code == 0

    def test_constant_series_fails(self, tmp_path: Path) -> None:
        series_path = _write_series(tmp_path, [0.8] * 50)
        result = runner.invoke(app, ["mse", str(series_path), "--max-scale", "2"])
        assert result.exit_code == 1
        assert "zero variance" in result.output

    def test_invalid_max_scale_fails(self, tmp_path: Path, rr_intervals: np.ndarray) -> None:
        series_path = _write_series(tmp_path, rr_intervals.tolist())
        result = runner.invoke(app, ["mse", str(series_path), "--max-scale", "0"])
        assert result.exit_code == 1

    def test_missing_column(self, tmp_path: Path) -> None:
        series_path = _write_series(tmp_path, [1.0, 2.0, 3.0], column="other")
        result = runner.invoke(app, ["mse", str(series_path)])
        assert result.exit_code == 1
        assert "Expected column" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["mse", str(tmp_path / "absent.csv")])
        assert result.exit_code == 1
        assert "Could not read series file" in result.output

    def test_malformed_json(self, tmp_path: Path) -> None:
        series_path = tmp_path / "rr.json"
        series_path.write_text("{not json")
        result = runner.invoke(app, ["mse", str(series_path)])
        assert result.exit_code == 1


def test_sampen_command(tmp_path: Path) -> None:
    series_path = _write_series(tmp_path, [1.0, 2.0] * 10)
    result = runner.invoke(app, ["sampen", str(series_path), "--m", "2", "--r", "0.2"])
    assert result.exit_code == 0
    assert "Sample entropy" in result.output
    assert "0.0000" in result.output


def test_sampen_missing_column(tmp_path: Path) -> None:
    series_path = _write_series(tmp_path, [1.0, 2.0] * 10, column="rr")
    result = runner.invoke(app, ["sampen", str(series_path)])
    assert result.exit_code == 1


def test_sampen_invalid_r(tmp_path: Path) -> None:
    series_path = _write_series(tmp_path, [1.0, 2.0] * 10)
    result = runner.invoke(app, ["sampen", str(series_path), "--r", "0"])
    assert result.exit_code == 1
