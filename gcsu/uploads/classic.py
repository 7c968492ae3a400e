"""Classic upload: an Ant-style glob (e.g. ``**/*.java``) relative to the
build workspace selects the files to upload."""

from __future__ import annotations

from pathlib import Path

from ..core.constants import MSG_CLASSIC_DISPLAY_NAME
from ..core.listener import BuildListener
from ..core.models import BuildContext, UploadRequest, UploadSpec, ValidationResult
from ..core.resolver import GlobResolver
from ..core.validator import GlobValidator
from .base import AbstractUpload
from .descriptor import UploadDescriptor


class ClassicUpload(AbstractUpload):
    def __init__(
        self,
        bucket_name_with_vars: str,
        shared_publicly: bool = False,
        for_failed_jobs: bool = False,
        *,
        source_glob_with_vars: str,
        resolver: GlobResolver | None = None,
    ) -> None:
        super().__init__(bucket_name_with_vars, shared_publicly, for_failed_jobs)
        if source_glob_with_vars is None:
            raise TypeError("source_glob_with_vars is required")
        # may contain unresolved symbols such as $JOB_NAME and $BUILD_NUMBER
        self.source_glob_with_vars = source_glob_with_vars
        self.resolver = resolver or GlobResolver()

    def get_details(self) -> str:
        return self.source_glob_with_vars

    def get_inclusions(self, build: BuildContext, workspace: Path, listener: BuildListener) -> UploadSpec | None:
        request = UploadRequest(
            glob_pattern=self.source_glob_with_vars,
            workspace_root=workspace,
            environment=build.environment,
        )
        matched = self.resolver.match(request, listener)
        if matched.is_empty:
            return None
        return UploadSpec(workspace=matched.root, inclusions=[matched.root / f for f in matched.files])


def check_source_glob_with_vars(source_glob_with_vars: str) -> ValidationResult:
    return GlobValidator().validate(source_glob_with_vars)


DESCRIPTOR = UploadDescriptor(
    name="classic",
    display_name=MSG_CLASSIC_DISPLAY_NAME,
    factory=ClassicUpload,
    validators={"source_glob_with_vars": check_source_glob_with_vars},
)
