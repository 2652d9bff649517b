"""Pre-emphasis, reflect padding and framing."""

import numpy as np
from numba import jit


@jit(nopython=True)
def _preemphasis_kernel(x, coeff):
    # High-to-low so every step reads the unfiltered x[i - 1].
    for i in range(x.shape[0] - 1, 0, -1):
        x[i] -= coeff * x[i - 1]


def preemphasis(x, coeff=0.97):
    """First-order pre-emphasis filter ``x[i] -= coeff * x[i-1]``, in place.

    ``x[0]`` is left unchanged; sequences shorter than 2 are untouched.

    Parameters
    ----------
    x : np.ndarray
        1-D writable float64 array, modified in place.
    coeff : float
        Filter coefficient (default 0.97).
    """
    if x.shape[0] < 2:
        return x
    _preemphasis_kernel(x, float(coeff))
    return x


def reflect_pad(x, n_fft):
    """Mirror ``n_fft // 2`` samples onto each side, excluding the edge sample.

    Left pad is ``x[n_fft//2], ..., x[1]``, right pad is ``x[-2], x[-3], ...``.
    """
    x = np.asarray(x, dtype=np.float64)
    pad = n_fft // 2
    if x.shape[0] <= pad:
        raise ValueError(f"Signal of length {x.shape[0]} is too short to reflect-pad by {pad}")
    return np.pad(x, pad, mode="reflect")


def frame_count(num_samples, frame_length, hop_length):
    """Number of frames: ``ceil((num_samples - frame_length + 1) / hop_length)``."""
    span = num_samples - frame_length + 1
    if span <= 0:
        return 0
    return -(-span // hop_length)


def frame(x, frame_length=2048, hop_length=512):
    """Slice ``x`` into overlapping frames.

    Element ``(k, t)`` is ``x[(t * hop_length + k) % len(x)]``; the modulo wraps
    any index past the end back to the start of the signal.

    Returns
    -------
    np.ndarray, shape (frame_length, n_frames)
    """
    x = np.asarray(x, dtype=np.float64)
    n = x.shape[0]
    M = frame_count(n, frame_length, hop_length)
    starts = np.arange(M) * hop_length
    offsets = np.arange(frame_length)
    idx = (offsets[:, None] + starts[None, :]) % n if n else np.zeros((frame_length, 0), dtype=np.intp)
    return x[idx]
