"""Resolve an upload glob against a build and match it to files on disk.

Absolute globs (``/gagent/metaOutput/std*.txt``) are supported by rebasing
the workspace to the filesystem root and making the glob root-relative,
since the directory lister only accepts relative patterns. This is
UNIX-oriented: drive-letter roots (``C:\\``) are not handled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from .constants import MSG_FOUND_FOR_PATTERN, MSG_INCLUDE_EXCEPTION, MSG_NO_ARTIFACTS
from .errors import UnresolvedVariableError, UploadError
from .lister import list_files
from .listener import BuildListener
from .macros import replace_macro
from .models import MatchResult, ResolvedGlob, UploadRequest

logger = logging.getLogger(__name__)

Lister = Callable[[Path, str], Sequence[Path]]


def get_root(path: Path) -> Path:
    """Top-most ancestor of ``path`` (``/`` on POSIX)."""
    root = path
    while root.parent != root:
        root = root.parent
    return root


class GlobResolver:
    def __init__(self, lister: Lister = list_files) -> None:
        self.lister = lister

    def resolve(self, request: UploadRequest) -> ResolvedGlob:
        pattern = replace_macro(request.glob_pattern, request.environment)
        if "$" in pattern:
            raise UnresolvedVariableError(pattern)

        root = request.workspace_root
        if pattern.startswith("/"):
            root = get_root(root.absolute())
            # Only one separator is dropped: "//foo" stays "/foo".
            pattern = pattern[1:]
        return ResolvedGlob(effective_root=root, relative_pattern=pattern)

    def match(self, request: UploadRequest, listener: BuildListener) -> MatchResult:
        resolved = self.resolve(request)
        try:
            found = self.lister(resolved.effective_root, resolved.relative_pattern)
        except (OSError, KeyboardInterrupt) as e:
            raise UploadError(MSG_INCLUDE_EXCEPTION) from e

        if not found:
            listener.error(MSG_NO_ARTIFACTS.format(pattern=resolved.relative_pattern))
            return MatchResult.no_matches(resolved.effective_root)

        listener.info(MSG_FOUND_FOR_PATTERN.format(count=len(found), pattern=request.glob_pattern))
        files = tuple(_relative_to(f, resolved.effective_root) for f in found)
        logger.debug("Resolved %r to %d file(s) under %s", request.glob_pattern, len(files), resolved.effective_root)
        return MatchResult(root=resolved.effective_root, files=files)


def _relative_to(path: Path, root: Path) -> Path:
    path = Path(path)
    return path.relative_to(root) if path.is_relative_to(root) else path
