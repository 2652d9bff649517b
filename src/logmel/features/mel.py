"""Mel filterbank projection and log compression."""

import numpy as np

from ..errors import FilterbankError
from ..matrix import dot


def project_filterbank(filterbank, power):
    """Project a power spectrogram onto a mel filterbank.

    ``(n_mels, freq_bins) @ (freq_bins, n_frames) -> (n_mels, n_frames)``,
    computed in float64.

    Raises:
        FilterbankError: If the frequency dimensions disagree.
    """
    filterbank = np.asarray(filterbank)
    power = np.asarray(power)
    if filterbank.ndim != 2 or power.ndim != 2:
        raise FilterbankError(
            f"expected 2-D operands, got filterbank ndim={filterbank.ndim} and power ndim={power.ndim}"
        )
    if filterbank.shape[1] != power.shape[0]:
        raise FilterbankError(
            f"filterbank has {filterbank.shape[1]} frequency bins, power spectrum has {power.shape[0]}"
        )
    return dot(filterbank, power)


def log_compress(x, epsilon=2.0**-24):
    """Elementwise ``log(x + epsilon)``."""
    return np.log(np.asarray(x, dtype=np.float64) + epsilon)
