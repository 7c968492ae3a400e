"""CLI entrypoint that wires subcommands into a Typer app."""

import logging

import typer

from ..config.settings import get_settings
from .commands.strategies import strategies
from .commands.upload import upload
from .commands.validate import validate

app = typer.Typer(add_completion=False, help="Upload build artifacts matched by a glob to Cloud Storage.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    s = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, s.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")


app.command()(upload)
app.command()(validate)
app.command()(strategies)
