"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared filesystem anchors and the reference feature geometry that many
modules import as defaults.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
# PROJECT_ROOT is the repo root (where pyproject.toml and resources/ live)
# From src/logmel/global_config.py, go up two levels: src/logmel -> src -> repo root
PROJECT_ROOT: Path = PACKAGE_ROOT.parent.parent

# Resource directory and fixed file names
RESOURCES_DIR: Path = PROJECT_ROOT / "resources"
FILTERBANK_FILENAME = "filterbank.npy"
WINDOW_FILENAME = "hann_window.npy"

# Reference feature geometry (16 kHz, 25 ms window, 10 ms hop, 80 mel bins)
SAMPLE_RATE = 16000
N_FFT = 400
HOP_LENGTH = 160
N_MELS = 80
FMIN = 0.0
FMAX: float | None = None

# Signal conditioning
PREEMPHASIS_COEFF = 0.97
LOG_EPSILON = 2.0**-24
