"""CLI for configuration-time glob validation."""

from __future__ import annotations

import typer

from ...uploads.registry import default_registry


def validate(
    glob: str = typer.Argument(..., help="Glob to check, e.g. 'build-$BUILD_NUMBER/**/*.jar'"),
    strategy: str = typer.Option("classic", "--strategy", "-s", help="Upload strategy the glob belongs to"),
):
    """Check a glob the way a job configuration form would, without running a build."""
    try:
        descriptor = default_registry().get(strategy)
    except KeyError as e:
        raise typer.BadParameter(str(e.args[0])) from e

    result = descriptor.check("source_glob_with_vars", glob)
    if not result.ok:
        typer.secho(f"[error] {result.code}: {result.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"[ok] {glob}")
