"""CLI listing registered upload strategies."""

from __future__ import annotations

import typer

from ...uploads.registry import default_registry


def strategies():
    """Print each registered strategy name with its display name."""
    for d in default_registry().descriptors():
        typer.echo(f"{d.name}\t{d.display_name}")
