"""CLI for uploading build artifacts selected by a glob."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from ...config.settings import get_settings
from ...core.errors import UploadError
from ...core.listener import BuildListener, UploadModule
from ...core.models import BuildContext
from ...core.types import BuildResult
from ...uploads.registry import default_registry
from ...uploads.sink import GsutilSink


def parse_env(env_kvs: list[str]) -> dict[str, str]:
    env: dict[str, str] = {}
    for kv in env_kvs:
        if "=" not in kv:
            raise typer.BadParameter(f"--env expects KEY=VAL, got: {kv!r}")
        k, v = kv.split("=", 1)
        env[k] = v
    return env


def upload(
    glob: str = typer.Argument(..., help="Ant-style glob, may reference $VARS (e.g. 'out/$BUILD_NUMBER/**/*.log')"),
    bucket: str | None = typer.Option(None, "--bucket", "-b", help="Destination bucket, e.g. gs://my-bucket/prefix"),
    workspace: Path = typer.Option(Path("."), "--workspace", "-w", help="Build workspace the glob is relative to"),
    env: list[str] = typer.Option(None, "--env", help="Extra build variable KEY=VAL (repeatable)"),
    public: bool = typer.Option(False, "--public", help="Share uploaded objects publicly"),
    for_failed_jobs: bool = typer.Option(False, "--for-failed-jobs", help="Upload even when the build failed"),
    result: BuildResult = typer.Option(BuildResult.success, "--result", case_sensitive=False, help="Build result"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print gsutil commands without executing"),
):
    """Resolve GLOB against the build environment and upload the matching files.

    Examples:
      gcsu upload 'target/*.jar' --bucket gs://artifacts/builds
      gcsu upload '/tmp/out/*.log' --bucket my-bucket --env BUILD_NUMBER=42
    """
    s = get_settings()
    _bucket = bucket or s.default_bucket
    if not _bucket:
        raise typer.BadParameter("Provide --bucket, or set GCSU_DEFAULT_BUCKET.")

    environment = dict(os.environ)
    environment.update(parse_env(env or []))

    step = default_registry().create(
        "classic",
        bucket_name_with_vars=_bucket,
        shared_publicly=public,
        for_failed_jobs=for_failed_jobs,
        source_glob_with_vars=glob,
    )
    build = BuildContext(workspace=workspace.absolute(), environment=environment, result=result)
    listener = BuildListener(module=UploadModule(s.module_prefix))
    sink = GsutilSink(gsutil_bin=s.gsutil_bin, dry_run=dry_run or s.dry_run)

    try:
        spec = step.perform(build, sink, listener)
    except UploadError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        typer.secho(f"[fail] {step.get_details()}: {e}{cause}", err=True)
        raise typer.Exit(code=1) from e

    count = len(spec.inclusions) if spec else 0
    typer.echo(f"Done. files={count}.")
