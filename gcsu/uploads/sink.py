"""Upload sinks: ship a resolved UploadSpec to a storage bucket."""

from __future__ import annotations

import shutil
import subprocess
from typing import Protocol, runtime_checkable

from ..core.constants import GCS_SCHEME, GSUTIL_BIN, MSG_GSUTIL_MISSING, MSG_UPLOAD_FAILED, MSG_UPLOADING, PUBLIC_READ_ACL
from ..core.errors import UploadError
from ..core.listener import BuildListener
from ..core.models import UploadSpec


@runtime_checkable
class UploadSink(Protocol):
    def upload(self, spec: UploadSpec, bucket: str, shared_publicly: bool, listener: BuildListener) -> None: ...


def bucket_uri(bucket: str) -> str:
    """'gs://b/prefix/' or 'b/prefix' -> 'gs://b/prefix'"""
    name = bucket.strip()
    if name.startswith(GCS_SCHEME):
        name = name[len(GCS_SCHEME):]
    return GCS_SCHEME + name.strip("/")


class GsutilSink:
    """Copies every included file with one ``gsutil cp`` call per object."""

    def __init__(self, gsutil_bin: str = GSUTIL_BIN, dry_run: bool = False) -> None:
        self.gsutil_bin = gsutil_bin
        self.dry_run = dry_run

    # ---------- process helpers ----------
    def _ensure_gsutil_available(self) -> None:
        if not shutil.which(self.gsutil_bin):
            raise UploadError(MSG_GSUTIL_MISSING.format(binary=self.gsutil_bin))

    @staticmethod
    def _run(cmd: list[str]) -> tuple[bool, str | None]:
        try:
            subprocess.check_call(cmd)
            return True, None
        except subprocess.CalledProcessError as e:
            return False, f"{e}"

    # ---------- public API ----------
    def build_commands(self, spec: UploadSpec, bucket: str, shared_publicly: bool) -> list[list[str]]:
        dest = bucket_uri(bucket)
        cmds: list[list[str]] = []
        for path in spec.inclusions:
            cmd = [self.gsutil_bin, "cp"]
            if shared_publicly:
                cmd += ["-a", PUBLIC_READ_ACL]
            cmd += [str(path), f"{dest}/{spec.object_name(path)}"]
            cmds.append(cmd)
        return cmds

    def upload(self, spec: UploadSpec, bucket: str, shared_publicly: bool, listener: BuildListener) -> None:
        cmds = self.build_commands(spec, bucket, shared_publicly)
        listener.info(MSG_UPLOADING.format(count=len(cmds), destination=bucket_uri(bucket)))

        if self.dry_run:
            for c in cmds:
                listener.info(f"[dry-run] {' '.join(c)}")
            return

        self._ensure_gsutil_available()
        for path, cmd in zip(spec.inclusions, cmds):
            ok, err = self._run(cmd)
            if not ok:
                raise UploadError(MSG_UPLOAD_FAILED.format(path=path, reason=err))
