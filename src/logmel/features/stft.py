"""Windowed short-time Fourier transform and power spectrum."""

import numpy as np
from scipy import fft as sp_fft

from ..matrix import multiply_rows
from .framing import frame, reflect_pad


def apply_window(frames, window):
    """Multiply every frame (column) by the window, row by row.

    Parameters
    ----------
    frames : np.ndarray, shape (n_fft, n_frames)
    window : np.ndarray, shape (n_fft,) or (n_fft, 1)
    """
    window = np.asarray(window, dtype=np.float64).reshape(-1, 1)
    if window.shape[0] != frames.shape[0]:
        raise ValueError(
            f"Window length {window.shape[0]} does not match frame length {frames.shape[0]}"
        )
    return multiply_rows(window, frames)


def rfft_frames(frames):
    """Real-input FFT of each column; keeps ``n_fft // 2 + 1`` non-negative bins.

    Unnormalized forward transform.
    """
    return sp_fft.rfft(frames, axis=0)


def stft(x, n_fft=400, hop_length=160, window=None):
    """Centered STFT with reflect padding.

    Parameters
    ----------
    x : array-like
        Input signal, at least ``n_fft // 2 + 1`` samples.
    n_fft : int
        FFT size and frame length (default 400).
    hop_length : int
        Hop size in samples (default 160).
    window : np.ndarray or None
        Analysis window of length ``n_fft``; None uses a rectangular window.

    Returns
    -------
    np.ndarray, complex, shape (n_fft // 2 + 1, n_frames)
    """
    padded = reflect_pad(x, n_fft)
    frames = frame(padded, frame_length=n_fft, hop_length=hop_length)
    if window is None:
        window = np.ones(n_fft)
    return rfft_frames(apply_window(frames, window))


def power_spectrum(X):
    """Magnitude squared ``real**2 + imag**2``, without normalization."""
    return X.real**2 + X.imag**2
