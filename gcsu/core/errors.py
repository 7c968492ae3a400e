"""Exceptions raised while preparing or performing an upload."""

from __future__ import annotations

from .constants import MSG_UNRESOLVED_VARIABLE


class UploadError(RuntimeError):
    """Fatal to a single upload attempt, never to the whole build."""


class UnresolvedVariableError(UploadError):
    def __init__(self, pattern: str) -> None:
        super().__init__(MSG_UNRESOLVED_VARIABLE.format(pattern=pattern))
        self.pattern = pattern
