"""Build listener: the per-build log that upload steps report into."""

from __future__ import annotations

import logging

from .constants import DEFAULT_MODULE_PREFIX


class UploadModule:
    """Carries the prefix every upload message is tagged with."""

    def __init__(self, prefix: str = DEFAULT_MODULE_PREFIX) -> None:
        self._prefix = prefix

    def prefix(self, message: str) -> str:
        return f"{self._prefix}{message}"


class BuildListener:
    def __init__(self, logger: logging.Logger | None = None, module: UploadModule | None = None) -> None:
        self.logger = logger or logging.getLogger("gcsu.build")
        self.module = module or UploadModule()

    def info(self, message: str) -> None:
        self.logger.info(self.module.prefix(message))

    def error(self, message: str) -> None:
        self.logger.error(self.module.prefix(message))
