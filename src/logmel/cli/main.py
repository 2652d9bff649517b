from __future__ import annotations

import typer

from .base import configure_logging
from .commands.features import features_command
from .commands.resources import app as resources_app

configure_logging()
app = typer.Typer(
    help="Log-mel feature extraction CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(resources_app, name="resources")
app.command("features")(features_command)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.
    """
    app()


if __name__ == "__main__":
    main()
