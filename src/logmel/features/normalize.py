"""Decibel normalization utilities for power spectrograms.

Not used by ``FeatureExtractor.process_chunk``.
"""

import librosa
import numpy as np


def power_to_db(S, ref=1.0, amin=1e-10, top_db=80.0):
    """Convert power to dB, clipped to ``top_db`` below the peak."""
    return librosa.power_to_db(np.asarray(S, dtype=np.float64), ref=ref, amin=amin, top_db=top_db)


def normalize_audio_power(S):
    """Power -> dB -> shift to a zero minimum -> scale by ``max|dB| + 1``.

    Statistics are taken over the whole matrix; the result has the input's shape.
    """
    S = np.asarray(S, dtype=np.float64)
    if S.size == 0:
        return S.copy()
    db = power_to_db(S.ravel())
    db = db - np.min(db)
    db = db / (np.max(np.abs(db)) + 1.0)
    return db.reshape(S.shape)
