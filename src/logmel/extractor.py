"""Log-mel feature extractor.

``FeatureExtractor`` loads a mel filterbank and an analysis window once, then
turns chunks of mono PCM samples into ``(1, time, mel)`` float32 tensors:

    pre-emphasis -> reflect pad -> frame -> window -> rFFT -> |X|^2
    -> filterbank projection -> log(x + eps) -> tensor packing

The loaded matrices are read-only, and every call works on its own copy of
the input, so one instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .errors import ResourceError, UnexpectedChunkSize
from .features import (
    frame_count,
    log_compress,
    power_spectrum,
    preemphasis,
    project_filterbank,
    stft,
)
from .global_config import (
    FILTERBANK_FILENAME,
    HOP_LENGTH,
    LOG_EPSILON,
    N_FFT,
    N_MELS,
    PREEMPHASIS_COEFF,
    WINDOW_FILENAME,
)
from .resources import load_filterbank, load_window
from .tensor import expand_dims as _expand_dims
from .tensor import pack_tensor

logger = logging.getLogger(__name__)


class FeatureExtractor:
    """Log-mel spectrogram extractor bound to one resource directory."""

    def __init__(
        self,
        directory: Path | str,
        *,
        n_fft: int = N_FFT,
        hop_length: int = HOP_LENGTH,
        n_mels: int = N_MELS,
        preemphasis_coeff: float = PREEMPHASIS_COEFF,
        epsilon: float = LOG_EPSILON,
    ) -> None:
        """Load ``filterbank.npy`` and ``hann_window.npy`` from ``directory``.

        Args:
            directory: Directory holding both resource files.
            n_fft: FFT size, frame length and window length.
            hop_length: Hop size in samples.
            n_mels: Number of mel bands (filterbank rows).
            preemphasis_coeff: Pre-emphasis filter coefficient.
            epsilon: Floor added before the logarithm.

        Raises:
            ResourceError: If either file cannot be loaded or the loaded
                matrices do not fit the requested geometry.
        """
        if n_fft < 2 or hop_length < 1 or n_mels < 1:
            raise ValueError(
                f"Invalid geometry: n_fft={n_fft}, hop_length={hop_length}, n_mels={n_mels}"
            )
        self.directory = Path(directory)
        self._n_fft = n_fft
        self._hop_length = hop_length
        self._n_mels = n_mels
        self.preemphasis_coeff = preemphasis_coeff
        self.epsilon = epsilon

        self._filterbank = load_filterbank(
            self.directory / FILTERBANK_FILENAME, n_mels, self.freq_bins
        )
        logger.info("%s loaded %s", FILTERBANK_FILENAME, self._filterbank.shape)
        self._window = load_window(self.directory / WINDOW_FILENAME, n_fft)
        logger.info("%s loaded %s", WINDOW_FILENAME, self._window.shape)
        self._check_resources()

    def _check_resources(self) -> None:
        """Verify the loaded matrices hold only finite values."""
        # Shapes are fixed by load_array: (n_mels, n_fft // 2 + 1) and (n_fft, 1),
        # else it has already raised SizeMismatch.
        if not (np.all(np.isfinite(self._filterbank)) and np.all(np.isfinite(self._window))):
            raise ResourceError(f"Non-finite values in resources under {self.directory}")

    @property
    def n_fft(self) -> int:
        return self._n_fft

    @property
    def hop_length(self) -> int:
        return self._hop_length

    @property
    def n_mels(self) -> int:
        return self._n_mels

    @property
    def freq_bins(self) -> int:
        return self._n_fft // 2 + 1

    @property
    def filterbank(self) -> np.ndarray:
        return self._filterbank

    @property
    def window(self) -> np.ndarray:
        return self._window

    def frame_count(self, num_samples: int) -> int:
        """Number of time steps ``process_chunk`` yields for ``num_samples`` samples."""
        padded = num_samples + 2 * (self._n_fft // 2)
        return frame_count(padded, self._n_fft, self._hop_length)

    def process_chunk(self, samples) -> np.ndarray:
        """Compute the log-mel tensor of one chunk.

        Args:
            samples: 1-D sequence of at least ``n_fft`` samples. Not modified.

        Returns:
            Newly allocated float32 array of shape ``(1, time, n_mels)``.

        Raises:
            UnexpectedChunkSize: If ``samples`` is not 1-D or is too short.
            ConversionFailed: If the output tensor cannot be built.
        """
        x = np.array(samples, dtype=np.float64)
        if x.ndim != 1 or x.shape[0] < self._n_fft:
            size = x.shape[0] if x.ndim == 1 else int(x.size)
            raise UnexpectedChunkSize(size, self._n_fft, x.ndim)

        preemphasis(x, self.preemphasis_coeff)
        X = stft(x, n_fft=self._n_fft, hop_length=self._hop_length, window=self._window)
        power = power_spectrum(X)
        mel = project_filterbank(self._filterbank, power)
        log_mel = log_compress(mel, self.epsilon)
        tensor = pack_tensor(log_mel)
        logger.debug("Processed chunk of %d samples -> tensor %s", x.shape[0], tensor.shape)
        return tensor

    def expand_dims(self, tensor: np.ndarray) -> np.ndarray:
        """Prepend two singleton dimensions to ``tensor`` without copying."""
        return _expand_dims(tensor)
