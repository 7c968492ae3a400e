"""Ant-style glob matching of regular files under a root directory."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from .constants import DEFAULT_EXCLUDES

logger = logging.getLogger(__name__)

_WILDCARDS = set("*?")


def split_patterns(includes: str) -> list[str]:
    """'a/*.txt, b/**' -> ['a/*.txt', 'b/**']"""
    out: list[str] = []
    for p in includes.split(","):
        p = p.strip().replace("\\", "/")
        if not p:
            continue
        if p.endswith("/"):
            p += "**"
        out.append(p)
    return out


def _segment_regex(segment: str) -> str:
    out = []
    for ch in segment:
        if ch == "*":
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate one Ant pattern into a regex over '/'-separated relative paths.

    ``**`` spans zero or more directories, ``*`` and ``?`` stay inside a
    single path segment.
    """
    parts = pattern.split("/")
    regex = ""
    for i, part in enumerate(parts):
        last = i == len(parts) - 1
        if part == "**":
            regex += ".*" if last else "(?:[^/]+/)*"
        else:
            regex += _segment_regex(part) + ("" if last else "/")
    return re.compile(regex)


def matches_any(relpath: str, patterns: Sequence[str]) -> bool:
    return any(compile_pattern(p).fullmatch(relpath) for p in patterns)


def _static_base(pattern: str) -> tuple[str, bool]:
    """Return (leading wildcard-free directories, whether the rest can recurse)."""
    parts = pattern.split("/")
    base: list[str] = []
    for part in parts[:-1]:
        if part == "**" or _WILDCARDS & set(part):
            break
        base.append(part)
    rest = parts[len(base):]
    return "/".join(base), "**" in rest


def _skip_unreadable(err: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", err.filename, err)


def _dir_key(path: str) -> tuple[int, int] | None:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return st.st_dev, st.st_ino


def _is_loop(dirpath: str, start: str) -> bool:
    """True if ``dirpath`` is the same directory as one of its ancestors up to ``start``."""
    key = _dir_key(dirpath)
    if key is None:
        return False
    parent = dirpath
    while parent != start and parent != os.path.dirname(parent):
        parent = os.path.dirname(parent)
        if _dir_key(parent) == key:
            return True
    return False


def list_files(
    root: str | os.PathLike[str],
    includes: str,
    *,
    default_excludes: bool = True,
) -> list[Path]:
    """Return the regular files under ``root`` matching the comma-separated ``includes``.

    Results are absolute paths, sorted by their path relative to ``root``.
    Symlinked directories are followed; a link back to one of its own
    ancestors is not descended again. Directories below ``root`` that cannot
    be read are skipped. Patterns with a ``..`` segment match nothing.
    Raises OSError if ``root`` is missing, is not a directory, or cannot be read.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Scan root does not exist: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Scan root is not a directory: {root_path}")
    os.listdir(root_path)

    patterns = split_patterns(includes)
    excludes = DEFAULT_EXCLUDES if default_excludes else ()
    found: dict[str, Path] = {}

    for pattern in patterns:
        if ".." in pattern.split("/"):
            logger.debug("Skipping pattern %r: it leaves the scan root", pattern)
            continue
        base, recursive = _static_base(pattern)
        max_depth = len(pattern.split("/")) - len(base.split("/") if base else [])
        start = root_path / base if base else root_path
        if not start.is_dir():
            logger.debug("Skipping pattern %r: %s is not a directory", pattern, start)
            continue

        walk = os.walk(start, onerror=_skip_unreadable, followlinks=True)
        for dirpath, dirnames, filenames in walk:
            if _is_loop(dirpath, str(start)):
                logger.debug("Skipping symlink loop at %s", dirpath)
                dirnames[:] = []
                continue
            rel_dir = Path(dirpath).relative_to(root_path).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir
            depth = len(Path(dirpath).relative_to(start).parts) + 1

            # Prune excluded directories and anything deeper than the pattern can reach
            kept = []
            for d in dirnames:
                rel = f"{rel_dir}/{d}" if rel_dir else d
                if excludes and matches_any(rel, excludes):
                    continue
                if not recursive and depth >= max_depth:
                    continue
                kept.append(d)
            dirnames[:] = sorted(kept)

            for fn in filenames:
                rel = f"{rel_dir}/{fn}" if rel_dir else fn
                if rel in found:
                    continue
                if excludes and matches_any(rel, excludes):
                    continue
                full = Path(dirpath) / fn
                if not full.is_file():
                    continue
                if compile_pattern(pattern).fullmatch(rel):
                    found[rel] = full

    logger.debug("Matched %d file(s) under %s for %r", len(found), root_path, includes)
    return [found[k] for k in sorted(found)]
