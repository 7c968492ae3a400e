"""Value objects passed between the resolver, the upload strategies and the sinks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .types import BuildResult, ValidationKind


@dataclass(frozen=True)
class UploadRequest:
    glob_pattern: str  # may still contain $VAR placeholders
    workspace_root: Path
    environment: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedGlob:
    effective_root: Path
    relative_pattern: str  # placeholder-free, relative to effective_root


@dataclass(frozen=True)
class MatchResult:
    """Files matched for one upload attempt, relative to ``root``.

    An empty result is the explicit "no matches" outcome: reportable,
    never an error.
    """

    root: Path
    files: tuple[Path, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.files)

    def __len__(self) -> int:
        return len(self.files)

    @property
    def is_empty(self) -> bool:
        return not self.files

    @classmethod
    def no_matches(cls, root: Path) -> MatchResult:
        return cls(root=root)


@dataclass(frozen=True)
class UploadSpec:
    """What the upload sink consumes: a base directory and absolute file paths under it."""

    workspace: Path
    inclusions: list[Path]

    def object_name(self, path: Path) -> str:
        return path.relative_to(self.workspace).as_posix()


@dataclass(frozen=True)
class ValidationResult:
    kind: ValidationKind
    code: str | None = None  # stable short identifier (e.g. EMPTY_GLOB)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ValidationKind.ok

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ValidationKind.ok)

    @classmethod
    def error(cls, code: str, message: str) -> ValidationResult:
        return cls(ValidationKind.error, code, message)


@dataclass(frozen=True)
class BuildContext:
    workspace: Path
    environment: Mapping[str, str] = field(default_factory=dict)
    result: BuildResult = BuildResult.success
