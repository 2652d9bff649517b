"""Tests for the resource and feature pipelines and their CLI commands."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import typer
from typer.testing import CliRunner

from logmel.cli.base import BaseCLI, format_result
from logmel.cli.main import app
from logmel.global_config import FILTERBANK_FILENAME, WINDOW_FILENAME
from logmel.pipeline.features import _resolve_sample_files, run_features
from logmel.pipeline.resources import run_build_resources, run_check_resources

runner = CliRunner()


class TestResourcePipeline:
    """Integration-style tests for run_build_resources / run_check_resources."""

    @pytest.mark.integration
    def test_build_then_check(self, tmp_path: Path) -> None:
        out_dir = tmp_path / "res"
        result = run_build_resources(directory=out_dir, n_fft=64, n_mels=10, sample_rate=8000)
        assert result["success"] is True
        assert result["succeeded"] == 2
        assert (out_dir / FILTERBANK_FILENAME).exists()
        assert (out_dir / WINDOW_FILENAME).exists()

        check = run_check_resources(directory=out_dir, n_fft=64, hop_length=16, n_mels=10)
        assert check["success"] is True
        assert check["items"][0]["detail"] == "shape=(10, 33)"

    @pytest.mark.integration
    def test_build_dry_run_writes_nothing(self, tmp_path: Path) -> None:
        out_dir = tmp_path / "res"
        result = run_build_resources(directory=out_dir, dry_run=True)
        assert result["success"] is True
        assert result["skipped"] == 2
        assert not out_dir.exists()

    @pytest.mark.unit
    def test_build_unknown_dtype(self, tmp_path: Path) -> None:
        result = run_build_resources(directory=tmp_path, dtype="int8")
        assert result["success"] is False
        assert "Unknown dtype" in result["message"]

    @pytest.mark.integration
    def test_check_reports_geometry_mismatch(self, small_resources: Path) -> None:
        result = run_check_resources(directory=small_resources, n_fft=32, n_mels=5)
        assert result["success"] is False
        assert result["failures"][0]["reason"].startswith("SizeMismatch")


class TestFeaturesPipeline:
    @pytest.mark.unit
    def test_resolve_sample_files(self, tmp_path: Path) -> None:
        (tmp_path / "a.npy").touch()
        (tmp_path / "b.npy").touch()
        (tmp_path / "notes.txt").touch()
        got = _resolve_sample_files(None, tmp_path)
        assert [p.name for p in got] == ["a.npy", "b.npy"]
        assert _resolve_sample_files(None, tmp_path / "missing") == []
        assert _resolve_sample_files(None, None) == []

    @pytest.mark.integration
    def test_run_features(
        self, tmp_path: Path, small_resources: Path, small_geometry: dict[str, int]
    ) -> None:
        good = tmp_path / "good.npy"
        short = tmp_path / "short.npy"
        np.save(good, np.random.default_rng(17).standard_normal(64))
        np.save(short, np.zeros(4))

        result = run_features(
            sample_files=[good, short, tmp_path / "missing.npy"],
            resources_dir=small_resources,
            **small_geometry,
        )

        assert result["total"] == 3
        assert result["succeeded"] == 1
        assert result["failed"] == 2
        assert result["success"] is False
        assert result["items"][0]["status"] == "success"
        assert "shape=(1, 17, 5)" in result["items"][0]["detail"]

    @pytest.mark.unit
    def test_run_features_no_files(self, small_resources: Path) -> None:
        result = run_features(sample_files=[], resources_dir=small_resources)
        assert result["success"] is True
        assert result["total"] == 0


@pytest.mark.unit
def test_format_result_dict() -> None:
    text = format_result(
        {
            "success": False,
            "total": 1,
            "succeeded": 0,
            "failed": 1,
            "message": "Processed 1 file(s).",
            "failures": [{"item": "x.npy", "reason": "boom"}],
        },
        operation="features",
    )
    assert text.splitlines()[0] == "✗ features"
    assert "total: 1 | succeeded: 0 | failed: 1" in text
    assert "• x.npy: boom" in text


@pytest.mark.unit
def test_format_result_items_use_file_key() -> None:
    text = format_result(
        {"success": True, "items": [{"file": "a.npy", "status": "success", "detail": "shape=(1, 3, 5)"}]},
        operation="features",
    )
    assert text.splitlines()[0] == "✓ features"
    assert "• a.npy: success (shape=(1, 3, 5))" in text


class TestBaseCLI:
    @pytest.mark.unit
    def test_returns_successful_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = BaseCLI().handle_cli_operation(
            operation="check",
            op_callable=lambda: {"success": True, "total": 0},
            success_message="all good",
        )
        assert result == {"success": True, "total": 0}
        out = capsys.readouterr().out
        assert "all good" in out
        assert "✓ check" in out

    @pytest.mark.unit
    def test_failed_result_exits_nonzero(self) -> None:
        with pytest.raises(typer.Exit) as excinfo:
            BaseCLI().handle_cli_operation(operation="check", op_callable=lambda: {"success": False})
        assert excinfo.value.exit_code == 1

    @pytest.mark.unit
    def test_raised_error_exits_nonzero(self) -> None:
        def _boom() -> dict:
            raise RuntimeError("boom")

        with pytest.raises(typer.Exit) as excinfo:
            BaseCLI().handle_cli_operation(operation="check", op_callable=_boom)
        assert excinfo.value.exit_code == 1


class TestCli:
    @pytest.mark.integration
    def test_resources_build_and_check(self, tmp_path: Path) -> None:
        out_dir = tmp_path / "res"
        result = runner.invoke(app, ["resources", "build", str(out_dir), "--dtype", "float64"])
        assert result.exit_code == 0, result.output
        assert "✓ build" in result.output

        result = runner.invoke(app, ["resources", "check", str(out_dir)])
        assert result.exit_code == 0, result.output
        assert "valid" in result.output

    @pytest.mark.integration
    def test_resources_build_short_options(self, tmp_path: Path) -> None:
        out_dir = tmp_path / "res"
        result = runner.invoke(app, ["resources", "build", str(out_dir), "-s", "8000", "-N", "64", "-m", "10"])
        assert result.exit_code == 0, result.output

        check = run_check_resources(directory=out_dir, n_fft=64, hop_length=16, n_mels=10)
        assert check["success"] is True

    @pytest.mark.integration
    def test_resources_check_missing_exits_nonzero(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["resources", "check", str(tmp_path / "nothing")])
        assert result.exit_code == 1
        assert "ResourceLoadFailed" in result.output

    @pytest.mark.integration
    def test_features_command(self, tmp_path: Path, small_resources: Path) -> None:
        samples = tmp_path / "chunk.npy"
        np.save(samples, np.zeros(32))
        result = runner.invoke(
            app,
            ["features", str(samples), "-r", str(small_resources), "-N", "16", "-H", "4", "-m", "5"],
        )
        assert result.exit_code == 0, result.output
        assert "chunk.npy: success" in result.output

    @pytest.mark.integration
    def test_features_bad_resources_exits_nonzero(self, tmp_path: Path) -> None:
        samples = tmp_path / "chunk.npy"
        np.save(samples, np.zeros(32))
        result = runner.invoke(app, ["features", str(samples), "--resources", str(tmp_path / "none")])
        assert result.exit_code == 1
        assert "features failed" in result.output
