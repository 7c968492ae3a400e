from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from gcsu.core.errors import UploadError
from gcsu.core.models import UploadSpec
from gcsu.uploads import sink as sink_mod
from gcsu.uploads.sink import GsutilSink, UploadSink, bucket_uri

WS = Path("/ws")
SPEC = UploadSpec(workspace=WS, inclusions=[WS / "a.jar", WS / "lib" / "b.jar"])


@pytest.mark.parametrize(
    "bucket,expected",
    [("b", "gs://b"), ("gs://b", "gs://b"), ("gs://b/pre/", "gs://b/pre"), (" b/pre ", "gs://b/pre")],
)
def test_bucket_uri(bucket: str, expected: str) -> None:
    assert bucket_uri(bucket) == expected


def test_commands_use_workspace_relative_object_names() -> None:
    cmds = GsutilSink().build_commands(SPEC, "gs://b/pre", shared_publicly=False)
    assert cmds == [
        ["gsutil", "cp", "/ws/a.jar", "gs://b/pre/a.jar"],
        ["gsutil", "cp", "/ws/lib/b.jar", "gs://b/pre/lib/b.jar"],
    ]


def test_public_objects_get_acl() -> None:
    cmds = GsutilSink(gsutil_bin="/opt/gsutil").build_commands(SPEC, "b", shared_publicly=True)
    assert cmds[0] == ["/opt/gsutil", "cp", "-a", "public-read", "/ws/a.jar", "gs://b/a.jar"]


def test_dry_run_does_not_execute(monkeypatch, listener) -> None:
    def boom(*args, **kwargs):
        raise AssertionError("should not run")

    monkeypatch.setattr(sink_mod.subprocess, "check_call", boom)
    GsutilSink(dry_run=True).upload(SPEC, "b", False, listener)
    assert listener.infos[0] == "Uploading 2 file(s) to gs://b"
    assert listener.infos[1].startswith("[dry-run] gsutil cp /ws/a.jar")


def test_upload_runs_one_command_per_file(monkeypatch, listener) -> None:
    ran = []
    monkeypatch.setattr(sink_mod.shutil, "which", lambda name: "/usr/bin/gsutil")
    monkeypatch.setattr(sink_mod.subprocess, "check_call", lambda cmd: ran.append(cmd))
    GsutilSink().upload(SPEC, "b", False, listener)
    assert [c[-1] for c in ran] == ["gs://b/a.jar", "gs://b/lib/b.jar"]


def test_missing_gsutil(monkeypatch, listener) -> None:
    monkeypatch.setattr(sink_mod.shutil, "which", lambda name: None)
    with pytest.raises(UploadError, match="not found"):
        GsutilSink().upload(SPEC, "b", False, listener)


def test_failed_copy_raises(monkeypatch, listener) -> None:
    def fail(cmd):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(sink_mod.shutil, "which", lambda name: "/usr/bin/gsutil")
    monkeypatch.setattr(sink_mod.subprocess, "check_call", fail)
    with pytest.raises(UploadError, match="a.jar"):
        GsutilSink().upload(SPEC, "b", False, listener)


def test_gsutil_sink_satisfies_protocol() -> None:
    assert isinstance(GsutilSink(), UploadSink)
