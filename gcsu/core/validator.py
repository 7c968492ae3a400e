"""Configuration-time checks for an upload glob, run before any build exists."""

from __future__ import annotations

from collections.abc import Mapping

from .constants import MSG_BAD_GLOB_CHAR, MSG_DOLLAR_SUGGEST, MSG_EMPTY_GLOB
from .macros import resolve_builtin
from .models import ValidationResult


class GlobValidator:
    """Validate a raw glob with built-in variables replaced by sample values.

    Not checked here: Ant glob syntax and that the glob is relative to the
    workspace. Both need a live filesystem and are left to build time.
    """

    def __init__(self, custom_vars: Mapping[str, str] | None = None) -> None:
        self.custom_vars = dict(custom_vars or {})

    def validate(self, raw_pattern: str) -> ValidationResult:
        resolved = resolve_builtin(raw_pattern, self.custom_vars)
        if not resolved:
            return ValidationResult.error("EMPTY_GLOB", MSG_EMPTY_GLOB)

        if "$" in resolved:
            # resolved glob still contains a variable marker
            return ValidationResult.error(
                "BAD_GLOB_CHAR",
                MSG_BAD_GLOB_CHAR.format(char="$", suggest=MSG_DOLLAR_SUGGEST),
            )
        return ValidationResult.success()


def validate_glob(raw_pattern: str) -> ValidationResult:
    return GlobValidator().validate(raw_pattern)
