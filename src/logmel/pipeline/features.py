"""Pipeline for running the extractor on sample arrays stored as .npy."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from ..errors import LogmelError
from ..extractor import FeatureExtractor
from ..global_config import HOP_LENGTH, N_FFT, N_MELS, RESOURCES_DIR


def _resolve_sample_files(files: list[Path] | None, samples_dir: Path | None) -> list[Path]:
    """Return list of sample paths: explicit if given, else all .npy in samples_dir."""
    if files:
        return [Path(p).resolve() for p in files]
    if samples_dir is None or not samples_dir.exists():
        return []
    return sorted(samples_dir.glob("*.npy"))


def run_features(
    *,
    sample_files: list[Path] | None = None,
    samples_dir: Path | None = None,
    resources_dir: Path = RESOURCES_DIR,
    n_fft: int = N_FFT,
    hop_length: int = HOP_LENGTH,
    n_mels: int = N_MELS,
) -> dict:
    """Compute log-mel tensors for 1-D sample arrays and summarize them.

    Nothing is written; each item reports the tensor shape and value range.

    Returns:
        Dict with success, total, succeeded, failed, skipped, message, items, failures.
    """
    paths = _resolve_sample_files(sample_files, samples_dir)
    if not paths:
        return {
            "success": True,
            "total": 0,
            "succeeded": 0,
            "failed": 0,
            "skipped": 0,
            "message": "No sample files to process.",
            "items": [],
            "failures": [],
        }

    extractor = FeatureExtractor(resources_dir, n_fft=n_fft, hop_length=hop_length, n_mels=n_mels)

    succeeded = 0
    failed = 0
    items: list[dict] = []
    failures: list[dict] = []

    for path in paths:
        if not path.exists():
            failed += 1
            failures.append({"item": str(path), "reason": "File not found"})
            items.append({"file": str(path), "status": "failed", "detail": "File not found"})
            continue

        try:
            samples = np.load(path, allow_pickle=False)
            tensor = extractor.process_chunk(samples)
            succeeded += 1
            items.append({
                "file": path.name,
                "status": "success",
                "detail": (
                    f"shape={tensor.shape} dtype={tensor.dtype} "
                    f"min={float(tensor.min()):.3f} max={float(tensor.max()):.3f}"
                ),
            })
        except (LogmelError, OSError, ValueError) as e:
            failed += 1
            failures.append({"item": str(path), "reason": str(e)})
            items.append({"file": path.name, "status": "failed", "detail": str(e)})

    return {
        "success": failed == 0,
        "total": len(paths),
        "succeeded": succeeded,
        "failed": failed,
        "skipped": 0,
        "message": f"Processed {len(paths)} file(s). Succeeded: {succeeded}, failed: {failed}.",
        "items": items,
        "failures": failures,
    }
