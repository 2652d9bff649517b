from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from logmel.global_config import FILTERBANK_FILENAME, WINDOW_FILENAME


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    (root / "resources").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    This ensures relative-path operations go into the temp directory by default.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def small_geometry() -> dict[str, int]:
    """Reduced geometry so extractor tests stay fast."""
    return {"n_fft": 16, "hop_length": 4, "n_mels": 5}


@pytest.fixture
def small_resources(project_root: Path, small_geometry: dict[str, int]) -> Path:
    """
    Resource directory with a random non-negative filterbank and a Hann window,
    saved as float64 .npy files.
    """
    n_fft = small_geometry["n_fft"]
    n_mels = small_geometry["n_mels"]
    rng = np.random.default_rng(0)
    directory = project_root / "resources"
    np.save(directory / FILTERBANK_FILENAME, rng.random((n_mels, n_fft // 2 + 1)))
    np.save(directory / WINDOW_FILENAME, np.hanning(n_fft + 1)[:-1])
    return directory
