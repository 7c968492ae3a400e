"""Best-effort $VAR / ${VAR} substitution against a build environment."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .constants import BUILTIN_SAMPLE_VARS

# $NAME, ${NAME} or the $$ escape
_VARIABLE_RE = re.compile(r"\$([A-Za-z0-9_]+|\{[A-Za-z0-9_.]+\}|\$)")


def replace_macro(template: str, env: Mapping[str, str]) -> str:
    """Substitute every known variable in ``template``.

    Unknown variables are left verbatim so that a later validation pass can
    still see the ``$`` marker; ``$$`` collapses to a single ``$``.
    """

    def _sub(m: re.Match[str]) -> str:
        key = m.group(1)
        if key == "$":
            return "$"
        if key.startswith("{"):
            key = key[1:-1]
        value = env.get(key)
        return m.group(0) if value is None else value

    return _VARIABLE_RE.sub(_sub, template)


def resolve_builtin(template: str, custom: Mapping[str, str] | None = None) -> str:
    """Resolve built-in build variables with sample values (no build required)."""
    env = dict(BUILTIN_SAMPLE_VARS)
    if custom:
        env.update(custom)
    return replace_macro(template, env)
