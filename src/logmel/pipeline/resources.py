"""Pipeline for building and validating resource directories."""

from __future__ import annotations

from pathlib import Path

from ..errors import ResourceError
from ..extractor import FeatureExtractor
from ..global_config import (
    FILTERBANK_FILENAME,
    FMAX,
    FMIN,
    HOP_LENGTH,
    N_FFT,
    N_MELS,
    RESOURCES_DIR,
    SAMPLE_RATE,
    WINDOW_FILENAME,
)
from ..resources import build_resources
from ..resources.builder import RESOURCE_DTYPES


def run_build_resources(
    *,
    directory: Path = RESOURCES_DIR,
    sample_rate: int = SAMPLE_RATE,
    n_fft: int = N_FFT,
    n_mels: int = N_MELS,
    fmin: float = FMIN,
    fmax: float | None = FMAX,
    dtype: str = "float32",
    dry_run: bool = False,
) -> dict:
    """Write filterbank.npy and hann_window.npy into ``directory``.

    Returns:
        Dict with success, total, succeeded, failed, skipped, message, items, failures.
    """
    if dtype not in RESOURCE_DTYPES:
        return {
            "success": False,
            "total": 0,
            "succeeded": 0,
            "failed": 0,
            "skipped": 0,
            "message": f"Unknown dtype: {dtype}. Use one of: {sorted(RESOURCE_DTYPES)}",
            "items": [],
            "failures": [],
        }

    directory = Path(directory)
    if dry_run:
        items = [
            {"file": name, "status": "skipped", "detail": "dry run"}
            for name in (FILTERBANK_FILENAME, WINDOW_FILENAME)
        ]
        return {
            "success": True,
            "total": 2,
            "succeeded": 0,
            "failed": 0,
            "skipped": 2,
            "message": f"Would write resources to {directory}. [DRY RUN]",
            "items": items,
            "failures": [],
        }

    fb_path, win_path = build_resources(
        directory,
        sample_rate=sample_rate,
        n_fft=n_fft,
        n_mels=n_mels,
        fmin=fmin,
        fmax=fmax,
        dtype=dtype,
    )
    return {
        "success": True,
        "total": 2,
        "succeeded": 2,
        "failed": 0,
        "skipped": 0,
        "message": f"Wrote resources to {directory} (sr={sample_rate}, n_fft={n_fft}, n_mels={n_mels}, {dtype}).",
        "items": [
            {"file": fb_path.name, "status": "success", "detail": f"shape=({n_mels}, {n_fft // 2 + 1})"},
            {"file": win_path.name, "status": "success", "detail": f"shape=({n_fft},)"},
        ],
        "failures": [],
    }


def run_check_resources(
    *,
    directory: Path = RESOURCES_DIR,
    n_fft: int = N_FFT,
    hop_length: int = HOP_LENGTH,
    n_mels: int = N_MELS,
) -> dict:
    """Load a resource directory the way the extractor does and report the result."""
    directory = Path(directory)
    try:
        extractor = FeatureExtractor(directory, n_fft=n_fft, hop_length=hop_length, n_mels=n_mels)
    except ResourceError as e:
        return {
            "success": False,
            "total": 2,
            "succeeded": 0,
            "failed": 2,
            "skipped": 0,
            "message": f"Resources in {directory} are unusable.",
            "items": [],
            "failures": [{"item": str(directory), "reason": f"{type(e).__name__}: {e}"}],
        }

    return {
        "success": True,
        "total": 2,
        "succeeded": 2,
        "failed": 0,
        "skipped": 0,
        "message": f"Resources in {directory} are valid.",
        "items": [
            {"file": FILTERBANK_FILENAME, "status": "success", "detail": f"shape={extractor.filterbank.shape}"},
            {"file": WINDOW_FILENAME, "status": "success", "detail": f"shape={extractor.window.shape}"},
        ],
        "failures": [],
    }
