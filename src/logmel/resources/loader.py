"""Loading of fixed-layout binary array files.

A resource file is an opaque header terminated by the first ``0x0A`` byte,
followed by raw row-major little-endian floats. The element width (4 or 8
bytes) is inferred from the payload length and the expected element count,
so both ``float32`` and ``float64`` ``.npy`` files written by ``np.save`` load
without parsing the header.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np

from ..errors import InvalidHeader, ResourceLoadFailed, SizeMismatch, UnsupportedElementWidth
from ..matrix import chunk

logger = logging.getLogger(__name__)

HEADER_TERMINATOR = 0x0A

# Element width in bytes -> on-disk dtype
ELEMENT_DTYPES: dict[int, str] = {
    4: "<f4",
    8: "<f8",
}


def _read_payload(path: Path) -> bytes:
    """Return the bytes following the first header terminator."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ResourceLoadFailed(path) from exc
    header_end = data.find(HEADER_TERMINATOR)
    if header_end < 0:
        raise InvalidHeader(path)
    return data[header_end + 1 :]


def load_array(path: Path | str, shape: tuple[int, ...]) -> np.ndarray:
    """Load a resource file into a float64 matrix of the given shape.

    Args:
        path: Resource file path.
        shape: Logical shape, e.g. ``(80, 201)`` or ``(400, 1)``. The last
            dimension is the row width used to chunk the flat payload.

    Returns:
        Read-only float64 array of ``shape``.

    Raises:
        ResourceLoadFailed: If the file cannot be read.
        InvalidHeader: If no ``0x0A`` byte is present.
        UnsupportedElementWidth: If the inferred width is not 4 or 8.
        SizeMismatch: If the decoded element count differs from ``prod(shape)``.
    """
    path = Path(path)
    expected = math.prod(shape)
    payload = _read_payload(path)

    width = len(payload) // expected if expected else 0
    dtype = ELEMENT_DTYPES.get(width)
    if dtype is None:
        raise UnsupportedElementWidth(width)

    # Trailing bytes that do not form a whole element are ignored.
    usable = len(payload) - len(payload) % width
    flat = np.frombuffer(payload[:usable], dtype=dtype).astype(np.float64)
    if flat.size != expected:
        raise SizeMismatch(flat.size, expected)

    rows = chunk(flat, shape[-1])
    matrix = np.stack(rows).reshape(shape)
    matrix.flags.writeable = False
    logger.debug("Loaded %s: width=%d bytes, shape=%s", path.name, width, matrix.shape)
    return matrix


def load_filterbank(path: Path | str, n_mels: int, freq_bins: int) -> np.ndarray:
    """Load a ``(n_mels, freq_bins)`` mel filterbank."""
    return load_array(path, (n_mels, freq_bins))


def load_window(path: Path | str, n_fft: int) -> np.ndarray:
    """Load an ``n_fft``-long analysis window as a ``(n_fft, 1)`` column."""
    return load_array(path, (n_fft, 1))
