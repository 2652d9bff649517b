"""Packing of log-mel matrices into model input tensors."""

from __future__ import annotations

import numpy as np

from .errors import ConversionFailed
from .matrix import transpose

TENSOR_DTYPE = np.float32


def compute_strides(shape: tuple[int, ...] | list[int]) -> list[int]:
    """Contiguous row-major strides, in elements.

    ``stride[-1] == 1`` and ``stride[i] == stride[i + 1] * shape[i + 1]``.
    """
    strides = [0] * len(shape)
    if not strides:
        return strides
    strides[-1] = 1
    for i in range(len(shape) - 2, -1, -1):
        strides[i] = strides[i + 1] * shape[i + 1]
    return strides


def pack_tensor(mel_by_time) -> np.ndarray:
    """Turn a ``(n_mels, n_frames)`` matrix into a ``(1, n_frames, n_mels)`` float32 tensor.

    The tensor is newly allocated and C-contiguous.

    Raises:
        ConversionFailed: If the values cannot be materialized as a tensor.
    """
    try:
        time_by_mel = transpose(mel_by_time)
        tensor = np.empty((1, *time_by_mel.shape), dtype=TENSOR_DTYPE)
        tensor[0] = time_by_mel
    except (ValueError, TypeError, MemoryError) as exc:
        raise ConversionFailed(str(exc)) from exc
    return tensor


def expand_dims(tensor: np.ndarray) -> np.ndarray:
    """View of ``tensor`` with two leading singleton dimensions.

    Only shape and strides change; the returned array shares ``tensor``'s
    buffer.

    Raises:
        ConversionFailed: If ``tensor`` is not C-contiguous.
    """
    if not isinstance(tensor, np.ndarray) or not tensor.flags.c_contiguous:
        raise ConversionFailed("expand_dims requires a C-contiguous ndarray")
    shape = (1, 1, *tensor.shape)
    strides = tuple(s * tensor.itemsize for s in compute_strides(shape))
    return np.ndarray(shape=shape, dtype=tensor.dtype, buffer=tensor, strides=strides)
