"""
logmel core package.

Turns chunks of mono PCM audio into log-power mel-spectrogram tensors for a
downstream inference model:
- `logmel.extractor.FeatureExtractor` - resource loading and per-chunk pipeline
- `logmel.features` - pre-emphasis, framing, STFT, mel projection, log compression
- `logmel.resources` - reading and building `filterbank.npy` / `hann_window.npy`
- `logmel.matrix`, `logmel.tensor` - dense matrix kernel and tensor packing
- A minimal Typer-based CLI (`logmel.cli`)

Configuration:
- Shared constants and filesystem anchors live in `logmel.global_config`.
"""

from .errors import (
    ConversionFailed,
    FilterbankError,
    InvalidHeader,
    LogmelError,
    ProcessChunkError,
    ResourceError,
    ResourceLoadFailed,
    SizeMismatch,
    UnexpectedChunkSize,
    UnsupportedElementWidth,
)
from .extractor import FeatureExtractor
from .tensor import expand_dims

__all__ = [
    "FeatureExtractor",
    "expand_dims",
    "LogmelError",
    "ResourceError",
    "ResourceLoadFailed",
    "InvalidHeader",
    "UnsupportedElementWidth",
    "SizeMismatch",
    "ProcessChunkError",
    "ConversionFailed",
    "UnexpectedChunkSize",
    "FilterbankError",
]
