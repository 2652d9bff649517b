"""Exception types for resource loading and chunk processing."""

from __future__ import annotations

from pathlib import Path


class LogmelError(Exception):
    """Base exception for all package errors."""


class ResourceError(LogmelError):
    """Base exception for resource files that cannot be turned into matrices.

    Raised at extractor construction time; the extractor is unusable until
    the resource files are fixed.
    """


class ResourceLoadFailed(ResourceError):
    """Raised when a resource file cannot be read."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not read resource file: {self.path}")


class InvalidHeader(ResourceError):
    """Raised when no header terminator byte (0x0A) is present."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"No header terminator found in resource file: {self.path}")


class UnsupportedElementWidth(ResourceError):
    """Raised when the inferred element width is neither 4 nor 8 bytes."""

    def __init__(self, width: int) -> None:
        self.width = width
        super().__init__(f"Unsupported element width: {width} bytes (expected 4 or 8)")


class SizeMismatch(ResourceError):
    """Raised when the decoded element count differs from the expected count."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Decoded {actual} elements, expected {expected}")


class ProcessChunkError(LogmelError):
    """Base exception for per-chunk failures.

    Local to a single call: the caller may skip or re-submit the chunk.
    """


class ConversionFailed(ProcessChunkError):
    """Raised when the output tensor cannot be materialized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Tensor conversion failed: {reason}")


class UnexpectedChunkSize(ProcessChunkError):
    """Raised when a chunk is not 1-D or too short for reflect padding."""

    def __init__(self, size: int, minimum: int, ndim: int = 1) -> None:
        self.size = size
        self.minimum = minimum
        self.ndim = ndim
        if ndim != 1:
            message = (
                f"Expected a 1-D chunk of at least {minimum} samples, "
                f"got a {ndim}-D array of {size} values"
            )
        else:
            message = f"Chunk of {size} samples is shorter than the minimum of {minimum}"
        super().__init__(message)


class FilterbankError(ProcessChunkError):
    """Raised when the filterbank does not conform to the power spectrum."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Filterbank projection failed: {reason}")
