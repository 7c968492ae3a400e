"""Shared fields and lifecycle of every upload strategy."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..core.constants import MSG_SKIP_ON_RESULT
from ..core.listener import BuildListener
from ..core.models import BuildContext, UploadSpec
from ..core.types import BuildResult
from .sink import UploadSink

logger = logging.getLogger(__name__)


class AbstractUpload(ABC):
    """One configured upload step: which files go to which bucket.

    Subclasses decide *which* files via :meth:`get_inclusions`; this class
    decides *whether* to upload for a given build result and hands the
    selection to a sink.
    """

    def __init__(
        self,
        bucket_name_with_vars: str,
        shared_publicly: bool = False,
        for_failed_jobs: bool = False,
    ) -> None:
        self.bucket_name_with_vars = bucket_name_with_vars
        self.shared_publicly = shared_publicly
        self.for_failed_jobs = for_failed_jobs

    def for_result(self, result: BuildResult) -> bool:
        if result is BuildResult.success:
            return True
        if result in (BuildResult.unstable, BuildResult.failure):
            return self.for_failed_jobs
        return False

    def perform(self, build: BuildContext, sink: UploadSink, listener: BuildListener) -> UploadSpec | None:
        """Run this upload step for ``build``; returns what was handed to the sink."""
        if not self.for_result(build.result):
            listener.info(MSG_SKIP_ON_RESULT.format(result=build.result.value))
            return None

        uploads = self.get_inclusions(build, build.workspace, listener)
        if uploads is None:
            return None

        logger.debug("%s: %d file(s) under %s", type(self).__name__, len(uploads.inclusions), uploads.workspace)
        sink.upload(uploads, self.bucket_name_with_vars, self.shared_publicly, listener)
        return uploads

    @abstractmethod
    def get_details(self) -> str:
        """One-line summary shown next to the step."""

    @abstractmethod
    def get_inclusions(self, build: BuildContext, workspace: Path, listener: BuildListener) -> UploadSpec | None:
        """Files to upload, or None when there is nothing to do."""
