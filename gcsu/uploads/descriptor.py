"""Describes an upload strategy to the registry and to configuration front-ends."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.models import ValidationResult
from .base import AbstractUpload


@dataclass(frozen=True)
class UploadDescriptor:
    name: str
    display_name: str
    factory: Callable[..., AbstractUpload]
    validators: Mapping[str, Callable[[str], ValidationResult]] = field(default_factory=dict)

    def check(self, field_name: str, value: str) -> ValidationResult:
        """Run the validator registered for ``field_name``; unknown fields are always ok."""
        validator = self.validators.get(field_name)
        if validator is None:
            return ValidationResult.success()
        return validator(value)

    def create(self, **fields: Any) -> AbstractUpload:
        return self.factory(**fields)
