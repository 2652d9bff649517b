"""Log-mel feature computation package."""

from .framing import frame, frame_count, preemphasis, reflect_pad
from .mel import log_compress, project_filterbank
from .normalize import normalize_audio_power, power_to_db
from .stft import apply_window, power_spectrum, rfft_frames, stft

__all__ = [
    "preemphasis",
    "reflect_pad",
    "frame",
    "frame_count",
    "apply_window",
    "rfft_frames",
    "stft",
    "power_spectrum",
    "project_filterbank",
    "log_compress",
    "power_to_db",
    "normalize_audio_power",
]
