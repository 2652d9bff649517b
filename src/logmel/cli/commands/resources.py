"""CLI commands for filterbank and window resource files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...global_config import FMIN, HOP_LENGTH, N_FFT, N_MELS, RESOURCES_DIR, SAMPLE_RATE
from ...pipeline.resources import run_build_resources, run_check_resources
from ..base import BaseCLI

app = typer.Typer(
    name="resources",
    help="Build or check filterbank.npy and hann_window.npy",
)


@app.command("build")
def build(
    directory: Annotated[
        Path,
        typer.Argument(help="Output directory. Default: resources/ under the project root."),
    ] = RESOURCES_DIR,
    sample_rate: Annotated[
        int,
        typer.Option("--sample-rate", "-s", help="Sampling rate in Hz."),
    ] = SAMPLE_RATE,
    n_fft: Annotated[
        int,
        typer.Option("--n-fft", "-N", help="FFT size (window length)."),
    ] = N_FFT,
    n_mels: Annotated[
        int,
        typer.Option("--n-mels", "-m", help="Number of mel bands."),
    ] = N_MELS,
    fmin: Annotated[
        float,
        typer.Option("--fmin", help="Lowest mel band edge in Hz."),
    ] = FMIN,
    fmax: Annotated[
        float | None,
        typer.Option("--fmax", help="Highest mel band edge in Hz. Default: sample_rate / 2."),
    ] = None,
    dtype: Annotated[
        str,
        typer.Option("--dtype", "-d", help="Element type on disk: float32 or float64."),
    ] = "float32",
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be written without writing files."),
    ] = False,
) -> None:
    """Write a Slaney mel filterbank and a periodic Hann window as .npy files."""
    cli = BaseCLI()

    def _run() -> dict:
        return run_build_resources(
            directory=directory,
            sample_rate=sample_rate,
            n_fft=n_fft,
            n_mels=n_mels,
            fmin=fmin,
            fmax=fmax,
            dtype=dtype.lower(),
            dry_run=dry_run,
        )

    cli.handle_cli_operation(
        operation="build",
        op_callable=_run,
        pre_message=f"Building resources in {directory}..." if not dry_run else None,
    )


@app.command("check")
def check(
    directory: Annotated[
        Path,
        typer.Argument(help="Resource directory. Default: resources/ under the project root."),
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
    """Load a resource directory the way the extractor does and report shapes."""
    cli = BaseCLI()

    def _run() -> dict:
        return run_check_resources(
            directory=directory,
            n_fft=n_fft,
            hop_length=hop_length,
            n_mels=n_mels,
        )

    cli.handle_cli_operation(operation="check", op_callable=_run)
