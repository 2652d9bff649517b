"""Small dense-matrix kernel used by the feature pipeline.

All functions treat their inputs as read-only and return freshly allocated
arrays that never alias the caller's buffers. Matrices are row-major
(C-contiguous) float64 unless stated otherwise.
"""

from __future__ import annotations

import numpy as np


def transpose(m):
    """Return a contiguous copy of the transpose of a 2-D matrix."""
    m = np.asarray(m, dtype=np.float64)
    if m.ndim != 2:
        raise ValueError(f"transpose expects a 2-D matrix, got ndim={m.ndim}")
    return m.T.copy(order="C")


def dot(a, b):
    """True matrix product ``a @ b`` (BLAS gemm).

    Parameters
    ----------
    a : array-like, shape (m, k)
    b : array-like, shape (k, n)

    Returns
    -------
    np.ndarray, shape (m, n)
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError(f"dot expects 2-D matrices, got ndim={a.ndim} and ndim={b.ndim}")
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"dot shape mismatch: {a.shape} @ {b.shape}")
    return np.matmul(a, b)


def chunk(flat, size):
    """Split a flat sequence into consecutive rows of ``size`` elements.

    The last row is shorter when ``len(flat)`` is not a multiple of ``size``.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    flat = np.asarray(flat).ravel()
    return [flat[start : start + size].copy() for start in range(0, flat.size, size)]


def _row_broadcast(column, m):
    column = np.asarray(column, dtype=np.float64).reshape(-1)
    m = np.asarray(m, dtype=np.float64)
    if m.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got ndim={m.ndim}")
    # One scale factor per row; rows beyond the column are dropped.
    rows = min(column.size, m.shape[0])
    return column[:rows, None], m[:rows]


def multiply_rows(column, m):
    """Scale row ``i`` of ``m`` by ``column[i]``."""
    col, rows = _row_broadcast(column, m)
    return rows * col


def divide_rows(column, m):
    """Divide row ``i`` of ``m`` by ``column[i]``."""
    col, rows = _row_broadcast(column, m)
    return rows / col


def _truncated_pair(a, b):
    a = np.asarray(a, dtype=np.float64).ravel()
    b = np.asarray(b, dtype=np.float64).ravel()
    n = min(a.size, b.size)
    return a[:n], b[:n]


def multiply_elementwise(a, b):
    """Elementwise product over the first ``min(len(a), len(b))`` values."""
    a, b = _truncated_pair(a, b)
    return a * b


def divide_elementwise(a, b):
    """Elementwise quotient over the first ``min(len(a), len(b))`` values."""
    a, b = _truncated_pair(a, b)
    return a / b


def minimum_elementwise(a, b):
    """Elementwise minimum over the first ``min(len(a), len(b))`` values."""
    a, b = _truncated_pair(a, b)
    return np.minimum(a, b)
