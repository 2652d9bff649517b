"""Generation of the filterbank and window resource files.

The filterbank uses the Slaney mel scale (linear below 1 kHz, logarithmic
above) with Slaney area normalization, and the window is a periodic Hann
window. Both are written with ``np.save`` so that they round-trip through
``load_array``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import librosa
import numpy as np
from scipy.signal import get_window

from ..global_config import (
    FILTERBANK_FILENAME,
    FMAX,
    FMIN,
    N_FFT,
    N_MELS,
    SAMPLE_RATE,
    WINDOW_FILENAME,
)

logger = logging.getLogger(__name__)

RESOURCE_DTYPES: dict[str, type] = {
    "float32": np.float32,
    "float64": np.float64,
}


def build_filterbank(
    sample_rate=SAMPLE_RATE, n_fft=N_FFT, n_mels=N_MELS, fmin=FMIN, fmax=FMAX
):
    """Mel filterbank of shape ``(n_mels, n_fft // 2 + 1)``.

    Parameters
    ----------
    sample_rate : int
        Sampling rate in Hz (default 16000).
    n_fft : int
        FFT size (default 400).
    n_mels : int
        Number of mel bands (default 80).
    fmin : float
        Lowest band edge in Hz (default 0).
    fmax : float or None
        Highest band edge in Hz; None means ``sample_rate / 2``.
    """
    return librosa.filters.mel(
        sr=sample_rate,
        n_fft=n_fft,
        n_mels=n_mels,
        fmin=fmin,
        fmax=fmax,
        htk=False,
        norm="slaney",
        dtype=np.float64,
    )


def build_window(n_fft=N_FFT):
    """Periodic Hann window of length ``n_fft``."""
    return get_window("hann", n_fft, fftbins=True).astype(np.float64)


def write_resource(path: Path | str, array, dtype: str = "float32") -> Path:
    """Write ``array`` as a ``.npy`` resource file in the requested precision.

    Args:
        path: Destination file.
        array: Values to write; stored row-major.
        dtype: ``"float32"`` or ``"float64"``.

    Returns:
        The written path.

    Raises:
        ValueError: If ``dtype`` is not supported.
    """
    if dtype not in RESOURCE_DTYPES:
        raise ValueError(f"Unsupported resource dtype: {dtype}. Use one of: {sorted(RESOURCE_DTYPES)}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = np.ascontiguousarray(array, dtype=RESOURCE_DTYPES[dtype])
    np.save(path, data, allow_pickle=False)
    logger.debug("Wrote %s: shape=%s dtype=%s", path, data.shape, dtype)
    return path


def build_resources(
    directory: Path | str,
    *,
    sample_rate: int = SAMPLE_RATE,
    n_fft: int = N_FFT,
    n_mels: int = N_MELS,
    fmin: float = FMIN,
    fmax: float | None = FMAX,
    dtype: str = "float32",
) -> tuple[Path, Path]:
    """Build and write ``filterbank.npy`` and ``hann_window.npy`` into ``directory``.

    Returns:
        Paths of the filterbank and window files.
    """
    directory = Path(directory)
    filterbank = build_filterbank(sample_rate, n_fft, n_mels, fmin, fmax)
    window = build_window(n_fft)
    fb_path = write_resource(directory / FILTERBANK_FILENAME, filterbank, dtype)
    win_path = write_resource(directory / WINDOW_FILENAME, window, dtype)
    logger.info("Built resources in %s (filterbank %s, window %s)", directory, filterbank.shape, window.shape)
    return fb_path, win_path
