"""Filterbank and window resource files: loading and generation."""

from .builder import build_filterbank, build_resources, build_window, write_resource
from .loader import load_array, load_filterbank, load_window

__all__ = [
    "load_array",
    "load_filterbank",
    "load_window",
    "build_filterbank",
    "build_window",
    "build_resources",
    "write_resource",
]
