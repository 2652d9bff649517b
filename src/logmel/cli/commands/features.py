"""CLI command for computing log-mel tensors from sample arrays."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...global_config import HOP_LENGTH, N_FFT, N_MELS, RESOURCES_DIR
from ...pipeline.features import run_features
from ..base import BaseCLI


def features_command(
    files: Annotated[
        list[Path],
        typer.Argument(help="1-D float arrays saved with np.save."),
    ],
    resources: Annotated[
        Path,
        typer.Option("--resources", "-r", help="Directory with filterbank.npy and hann_window.npy."),
    ] = RESOURCES_DIR,
    n_fft: Annotated[
        int,
        typer.Option("--n-fft", "-N", help="FFT size (window length)."),
    ] = N_FFT,
    hop_length: Annotated[
        int,
        typer.Option("--hop-length", "-H", help="Hop size in samples."),
    ] = HOP_LENGTH,
    n_mels: Annotated[
        int,
        typer.Option("--n-mels", "-m", help="Number of mel bands."),
    ] = N_MELS,
) -> None:
    """Compute log-mel tensors and print their shape and value range.

    Each file is processed as one chunk; nothing is written to disk.
    """
    cli = BaseCLI()

    def _run() -> dict:
        return run_features(
            sample_files=list(files),
            resources_dir=resources,
            n_fft=n_fft,
            hop_length=hop_length,
            n_mels=n_mels,
        )

    cli.handle_cli_operation(
        operation="features",
        op_callable=_run,
        pre_message=f"Computing log-mel features for {len(files)} file(s)...",
    )
