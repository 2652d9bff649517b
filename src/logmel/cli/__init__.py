"""Command-line interface for logmel."""
